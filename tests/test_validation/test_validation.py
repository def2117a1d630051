"""Tests for selector lint rules and the validator."""

import pytest

from markupsel import compile_selector
from markupsel.model.diagnostic import Diagnostic, Severity
from markupsel.validation import ValidationError, validate, validate_or_raise
from markupsel.validation.rules import (
    check_conflicting_conditions,
    check_duplicate_conditions,
    check_index_shaped_attribute,
    check_text_selector_attributes,
    check_text_selector_last,
)


def _levels(selector: str):
    return compile_selector(True, selector)


def _rules(diagnostics: list[Diagnostic]) -> list[str]:
    return [d.rule for d in diagnostics]


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestIndexShapedAttribute:
    @pytest.mark.parametrize("selector", ["/x[99999999999]", "/x[>99999999999]", "/a/x[-3000000000]"])
    def test_flags_out_of_range_index(self, selector):
        diags = check_index_shaped_attribute(_levels(selector))
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].level == len(_levels(selector)) - 1

    def test_real_index_not_flagged(self):
        assert check_index_shaped_attribute(_levels("/x[3]")) == []

    def test_named_attribute_not_flagged(self):
        assert check_index_shaped_attribute(_levels("/x[@data-3]")) == []


class TestTextSelectorRules:
    def test_text_not_last(self):
        diags = check_text_selector_last(_levels("/p/text()/b"))
        assert len(diags) == 1
        assert diags[0].level == 1

    def test_text_last_ok(self):
        assert check_text_selector_last(_levels("/p/text()")) == []

    def test_text_with_attributes(self):
        diags = check_text_selector_attributes(_levels("/p/text()[@a]"))
        assert _rules(diags) == ["check_text_selector_attributes"]

    def test_text_with_index_ok(self):
        assert check_text_selector_attributes(_levels("/p/text()[2]")) == []


class TestConflictingConditions:
    def test_exists_and_not_exists(self):
        diags = check_conflicting_conditions(_levels("/x[@a and !@a]"))
        assert len(diags) == 1
        assert "exist and not exist" in diags[0].message

    def test_value_and_not_exists(self):
        assert len(check_conflicting_conditions(_levels("/x[@a^='q'][!@a]"))) == 1

    def test_two_different_equals(self):
        diags = check_conflicting_conditions(_levels("/x#one[@id='two']"))
        assert len(diags) == 1
        assert "'one'" in diags[0].message and "'two'" in diags[0].message

    def test_compatible_conditions(self):
        assert check_conflicting_conditions(_levels("/x[@a!='1' and @a!='2' and @b]")) == []


class TestDuplicateConditions:
    def test_repeated_condition(self):
        diags = check_duplicate_conditions(_levels("/x[@a='1'][@a='1']"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO

    def test_shorthand_and_bracket_duplicate(self):
        assert len(check_duplicate_conditions(_levels("/x.c[@class='c']"))) == 1


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidate:
    def test_clean_selector(self):
        assert validate(_levels("//div[@id='x']/span[2]")) == []

    def test_collects_all_rules(self):
        diags = validate(_levels("/p/text()[@a and !@a]/b"))
        assert set(_rules(diags)) == {
            "check_text_selector_last",
            "check_text_selector_attributes",
            "check_conflicting_conditions",
        }

    def test_extra_rules(self):
        def no_wildcards(levels):
            return [
                Diagnostic(rule="no_wildcards", severity=Severity.ERROR, message="wildcard", level=i)
                for i, lv in enumerate(levels)
                if lv.is_wildcard
            ]

        diags = validate(_levels("//*/a"), extra_rules=[no_wildcards])
        assert _rules(diags) == ["no_wildcards"]

    def test_validate_or_raise(self):
        def always_error(levels):
            return [Diagnostic(rule="always", severity=Severity.ERROR, message="nope")]

        with pytest.raises(ValidationError, match="1 selector error") as excinfo:
            validate_or_raise(_levels("/a"), extra_rules=[always_error])
        assert [d.rule for d in excinfo.value.errors] == ["always"]

    def test_validate_or_raise_returns_warnings(self):
        diags = validate_or_raise(_levels("/p/text()/b"))
        assert _rules(diags) == ["check_text_selector_last"]

    def test_extra_rules_run_after_builtin_rules(self):
        def marker(levels):
            return [Diagnostic(rule="marker", severity=Severity.INFO, message="last")]

        diags = validate(_levels("/p/text()/b"), extra_rules=(marker,))
        assert _rules(diags) == ["check_text_selector_last", "marker"]


class TestDiagnosticStr:
    def test_with_level(self):
        diag = Diagnostic(rule="r", severity=Severity.WARNING, message="m", level=2)
        assert str(diag) == "WARNING level 2 (r): m"

    def test_without_level(self):
        assert str(Diagnostic(rule="r", severity=Severity.INFO, message="m")) == "INFO (r): m"
