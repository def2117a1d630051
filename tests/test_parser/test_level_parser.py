"""Tests for the single-level parser: root marker, shorthand, text()."""

import pytest

from markupsel.errors import SelectorSyntaxError
from markupsel.model.conditions import AttributeCondition, IndexCondition, IndexType, Operator
from markupsel.parser.level import build_level, parse_level
from markupsel.parser.transformer import RawLevel


def _level(text: str, case_sensitive: bool = True):
    return parse_level(case_sensitive, text, text)


# ---------------------------------------------------------------------------
# Root marker
# ---------------------------------------------------------------------------


class TestRootMarker:
    def test_single_slash_is_child(self):
        assert _level("/div").any_level is False

    def test_double_slash_is_any_level(self):
        assert _level("//div").any_level is True

    def test_triple_slash_raises(self):
        with pytest.raises(SelectorSyntaxError, match="'/' or '//'"):
            _level("///div")

    def test_missing_slash_raises(self):
        with pytest.raises(SelectorSyntaxError):
            _level("div")

    def test_nothing_after_slash_raises(self):
        with pytest.raises(SelectorSyntaxError, match="further selector specification"):
            _level("//")


# ---------------------------------------------------------------------------
# Element names
# ---------------------------------------------------------------------------


class TestElementName:
    def test_lowercased_when_case_insensitive(self):
        assert _level("/DIV", case_sensitive=False).element_name == "div"

    def test_kept_when_case_sensitive(self):
        assert _level("/myTag").element_name == "myTag"

    def test_empty_name_is_wildcard(self):
        level = _level("/[@a]")
        assert level.element_name is None
        assert level.is_wildcard

    def test_star_is_wildcard(self):
        assert _level("//*").element_name is None

    def test_case_sensitive_flag_recorded(self):
        assert _level("/a", case_sensitive=False).case_sensitive is False


# ---------------------------------------------------------------------------
# text()
# ---------------------------------------------------------------------------


class TestTextSelector:
    def test_text_selector(self):
        level = _level("/text()")
        assert level.is_text_selector is True
        assert level.element_name is None

    def test_text_with_reference(self):
        level = _level("/text()%body")
        assert level.is_text_selector is True
        assert level.reference_name == "body"

    def test_text_only_when_whole_name(self):
        level = _level("/text()x")
        assert level.is_text_selector is False
        assert level.element_name == "text()x"

    def test_uppercase_text_is_an_element_name(self):
        level = _level("/TEXT()", case_sensitive=False)
        assert level.is_text_selector is False
        assert level.element_name == "text()"


# ---------------------------------------------------------------------------
# Shorthand modifiers
# ---------------------------------------------------------------------------


class TestShorthand:
    def test_id(self):
        level = _level("/div#main")
        assert level.element_name == "div"
        assert level.attribute_conditions == (AttributeCondition("id", Operator.EQUALS, "main"),)

    def test_class(self):
        level = _level("/li.item")
        assert level.element_name == "li"
        assert level.attribute_conditions == (AttributeCondition("class", Operator.EQUALS, "item"),)

    def test_class_value_keeps_case(self):
        level = _level("/LI.Item", case_sensitive=False)
        assert level.element_name == "li"
        assert level.attribute_conditions[0].value == "Item"

    def test_class_value_runs_to_end_of_name(self):
        assert _level("/li.a.b").attribute_conditions[0].value == "a.b"

    def test_reference(self):
        level = _level("//section%intro")
        assert level.element_name == "section"
        assert level.reference_name == "intro"
        assert level.attribute_conditions == ()

    def test_id_without_element_is_wildcard(self):
        level = _level("//#main")
        assert level.element_name is None
        assert level.attribute_conditions[0].name == "id"

    def test_shorthand_precedes_bracket_conditions(self):
        level = _level("/div#main[@role='nav']")
        assert [c.name for c in level.attribute_conditions] == ["id", "role"]

    @pytest.mark.parametrize("text", ["/x#id.class", "/x.a%b", "/x%r#i"])
    def test_more_than_one_modifier_raises(self, text):
        with pytest.raises(SelectorSyntaxError, match="more than one modifier"):
            _level(text)

    @pytest.mark.parametrize("text, kind", [("/x#", "id"), ("/x.", "class"), ("/x%", "reference")])
    def test_empty_modifier_raises(self, text, kind):
        with pytest.raises(SelectorSyntaxError, match=f"empty {kind} modifier"):
            _level(text)

    @pytest.mark.parametrize("text, kind", [("/x#a'b\"c", "id"), ("/x.\"a'", "class")])
    def test_mixed_quotes_in_attribute_shorthand_raise(self, text, kind):
        with pytest.raises(SelectorSyntaxError, match=f"{kind} modifier .* mixes single and double quotes"):
            _level(text)

    def test_single_quote_kind_in_shorthand_kept(self):
        assert _level("/x.it's").attribute_conditions[0].value == "it's"

    def test_reference_may_mix_quotes(self):
        assert _level("/x%a'b\"c").reference_name == "a'b\"c"


# ---------------------------------------------------------------------------
# Modifier groups routed through
# ---------------------------------------------------------------------------


class TestModifierGroups:
    def test_index(self):
        assert _level("/span[2]").index == IndexCondition(IndexType.VALUE, 2)

    def test_index_not_last_raises(self):
        with pytest.raises(SelectorSyntaxError):
            _level("/x[3][@a='1']")

    def test_whitespace_in_name_raises(self):
        with pytest.raises(SelectorSyntaxError):
            _level("/my div")


class TestBuildLevel:
    def test_from_raw_parts(self):
        raw = RawLevel(root="//", name="DIV", groups=("@ID='X'", "odd()"))
        level = build_level(False, "//DIV[@ID='X'][odd()]", raw)
        assert level.element_name == "div"
        assert level.attribute_conditions == (AttributeCondition("id", Operator.EQUALS, "X"),)
        assert level.index.type is IndexType.ODD

    def test_error_names_given_selector(self):
        raw = RawLevel(root="/", name="x#a.b")
        with pytest.raises(SelectorSyntaxError) as excinfo:
            build_level(True, "//root/x#a.b", raw)
        assert excinfo.value.selector == "//root/x#a.b"
