"""Level parser: one ``/name[...]`` step into a SelectorLevel.

Name shorthand is desugared here: ``div#main`` becomes ``div[@id='main']``
and ``li.item`` becomes ``li[@class='item']``. ``frag%ref`` sets the level's
reference name instead of adding a condition.
"""

from __future__ import annotations

from markupsel.errors import SelectorSyntaxError
from markupsel.model.conditions import AttributeCondition, Operator
from markupsel.model.level import TEXT_SELECTOR, WILDCARD, SelectorLevel
from markupsel.parser.modifiers import build_modifiers
from markupsel.parser.transformer import RawLevel, tokenize

__all__ = ["build_level", "parse_level"]

ID_MODIFIER_SEPARATOR = "#"
CLASS_MODIFIER_SEPARATOR = "."
REFERENCE_MODIFIER_SEPARATOR = "%"

ID_ATTRIBUTE_NAME = "id"
CLASS_ATTRIBUTE_NAME = "class"

_SHORTHAND_KINDS = {
    ID_MODIFIER_SEPARATOR: "id",
    CLASS_MODIFIER_SEPARATOR: "class",
    REFERENCE_MODIFIER_SEPARATOR: "reference",
}


def _split_shorthand(selector: str, name: str) -> tuple[str, str | None, str | None]:
    """Return ``(path, separator, value)`` for a level name.

    At most one of ``#``, ``.`` and ``%`` may appear; the value runs from the
    separator to the end of the name.
    """
    found = [(name.find(sep), sep) for sep in _SHORTHAND_KINDS if sep in name]
    if not found:
        return name, None, None
    if len(found) > 1:
        raise SelectorSyntaxError(
            selector,
            "more than one modifier (id, class, reference) has been specified, "
            "which is forbidden",
        )
    pos, sep = found[0]
    value = name[pos + len(sep):]
    if not value.strip():
        raise SelectorSyntaxError(
            selector, f"empty {_SHORTHAND_KINDS[sep]} modifier in level {name!r}"
        )
    if sep != REFERENCE_MODIFIER_SEPARATOR and "'" in value and '"' in value:
        # The value becomes a quoted attribute value, which holds one quote kind.
        raise SelectorSyntaxError(
            selector,
            f"{_SHORTHAND_KINDS[sep]} modifier in level {name!r} mixes single and "
            "double quotes",
        )
    return name[:pos], sep, value


def build_level(case_sensitive: bool, selector: str, raw: RawLevel) -> SelectorLevel:
    """Build a SelectorLevel from the tokenized parts of one level."""
    if raw.root == "//":
        any_level = True
    elif raw.root == "/":
        any_level = False
    else:
        raise SelectorSyntaxError(
            selector, f"level must start with '/' or '//', not {raw.root!r}"
        )
    if not raw.name and not raw.groups:
        raise SelectorSyntaxError(
            selector, "'/' should be followed by further selector specification"
        )

    path, separator, value = _split_shorthand(selector, raw.name)

    attributes: list[AttributeCondition] = []
    reference_name = None
    if separator == ID_MODIFIER_SEPARATOR:
        attributes.append(AttributeCondition(ID_ATTRIBUTE_NAME, Operator.EQUALS, value))
    elif separator == CLASS_MODIFIER_SEPARATOR:
        attributes.append(AttributeCondition(CLASS_ATTRIBUTE_NAME, Operator.EQUALS, value))
    elif separator == REFERENCE_MODIFIER_SEPARATOR:
        reference_name = value

    is_text_selector = path == TEXT_SELECTOR
    if is_text_selector or not path.strip() or path == WILDCARD:
        element_name = None
    else:
        element_name = path if case_sensitive else path.lower()

    modifiers = build_modifiers(case_sensitive, selector, raw.groups)
    attributes.extend(modifiers.attributes)

    return SelectorLevel(
        case_sensitive=case_sensitive,
        any_level=any_level,
        is_text_selector=is_text_selector,
        element_name=element_name,
        reference_name=reference_name,
        index=modifiers.index,
        attribute_conditions=tuple(attributes),
    )


def parse_level(case_sensitive: bool, selector: str, text: str) -> SelectorLevel:
    """Parse the text of a single level, e.g. ``//div#main[2]``.

    *selector* is the full selector the level belongs to, used in errors.
    """
    raw = tokenize(selector, text.strip(), "level")
    return build_level(case_sensitive, selector, raw)  # type: ignore[arg-type]
