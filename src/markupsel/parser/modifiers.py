"""Modifier parser: bracket groups of a level into attribute and index conditions.

Each bracket group is tried as an index first (``[3]``, ``[<3]``, ``[>3]``,
``[odd()]``, ``[even()]``). A group that does not read as an index is parsed
as one or more attribute conditions joined by `` and ``::

    [@id='main' and @class^='nav'][!@hidden][2]

An index group must be the last group of its level.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from markupsel.errors import SelectorSyntaxError
from markupsel.model.conditions import (
    INDEX_EVEN,
    INDEX_ODD,
    AttributeCondition,
    IndexCondition,
    IndexType,
    Operator,
)
from markupsel.parser.transformer import tokenize

__all__ = [
    "Modifiers",
    "build_modifiers",
    "parse_attribute",
    "parse_attributes",
    "parse_group",
    "parse_index",
    "parse_modifiers",
]

ODD_SELECTOR = "odd()"
EVEN_SELECTOR = "even()"
AND_SEPARATOR = " and "

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Modifiers:
    """Conditions collected from all bracket groups of one level."""

    attributes: tuple[AttributeCondition, ...] = ()
    index: IndexCondition | None = None


# ---------------------------------------------------------------------------
# Index groups
# ---------------------------------------------------------------------------


def _parse_int(text: str) -> int | None:
    """Parse a signed 32-bit integer, or return None if *text* is not one."""
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def parse_index(body: str) -> IndexCondition | None:
    """Read a bracket body as an index condition.

    Returns None when the body is not an index; the caller then retries it as
    attribute conditions. Out-of-range or non-numeric bodies are never errors
    here.
    """
    lowered = body.lower()
    if lowered == ODD_SELECTOR:
        return INDEX_ODD
    if lowered == EVEN_SELECTOR:
        return INDEX_EVEN

    if body.startswith(">"):
        value = _parse_int(body[1:])
        return None if value is None else IndexCondition(IndexType.MORE_THAN, value)
    if body.startswith("<"):
        value = _parse_int(body[1:])
        return None if value is None else IndexCondition(IndexType.LESS_THAN, value)

    value = _parse_int(body)
    return None if value is None else IndexCondition(IndexType.VALUE, value)


# ---------------------------------------------------------------------------
# Attribute groups
# ---------------------------------------------------------------------------


def _split_conjunction(body: str) -> list[str]:
    """Split *body* on `` and `` separators that sit outside quoted values."""
    atoms: list[str] = []
    quote = ""
    start = 0
    i = 0
    while i < len(body):
        ch = body[i]
        if quote:
            if ch == quote:
                quote = ""
        elif ch in ("'", '"'):
            quote = ch
        elif body.startswith(AND_SEPARATOR, i):
            atoms.append(body[start:i])
            i += len(AND_SEPARATOR)
            start = i
            continue
        i += 1
    atoms.append(body[start:])
    return atoms


def parse_attribute(case_sensitive: bool, selector: str, atom: str) -> AttributeCondition:
    """Parse one attribute atom such as ``@id='x'``, ``@lang`` or ``!@hidden``."""
    atom = atom.strip()
    if not atom:
        raise SelectorSyntaxError(selector, "empty attribute condition")

    name, token, raw_value = Operator.extract(atom)
    if name.startswith("@"):
        name = name[1:]
    if not name:
        raise SelectorSyntaxError(
            selector, f"attribute condition {atom!r} has no attribute name"
        )
    if not case_sensitive:
        name = name.lower()

    # extract() only yields tokens that parse() accepts.
    operator = Operator.parse(token)

    if raw_value is None:
        return AttributeCondition(name, operator)

    if len(raw_value) < 2 or raw_value[0] not in ("'", '"') or raw_value[-1] != raw_value[0]:
        raise SelectorSyntaxError(
            selector,
            f"value in attribute condition {atom!r} must be enclosed in "
            "matching single or double quotes",
        )
    return AttributeCondition(name, operator, raw_value[1:-1])


def parse_attributes(
    case_sensitive: bool, selector: str, body: str
) -> list[AttributeCondition]:
    """Parse an ``and``-joined bracket body into conditions, left to right."""
    return [
        parse_attribute(case_sensitive, selector, atom)
        for atom in _split_conjunction(body)
    ]


# ---------------------------------------------------------------------------
# Whole modifier sequence
# ---------------------------------------------------------------------------


def parse_group(
    case_sensitive: bool, selector: str, body: str
) -> IndexCondition | list[AttributeCondition]:
    """Parse one bracket body: an IndexCondition, or else its attribute conditions."""
    index = parse_index(body)
    if index is not None:
        return index
    return parse_attributes(case_sensitive, selector, body)


def build_modifiers(
    case_sensitive: bool, selector: str, groups: Sequence[str]
) -> Modifiers:
    """Combine already-split bracket bodies into the conditions of one level."""
    attributes: list[AttributeCondition] = []
    index: IndexCondition | None = None
    last = len(groups) - 1
    for position, body in enumerate(groups):
        result = parse_group(case_sensitive, selector, body)
        if isinstance(result, IndexCondition):
            if position != last:
                raise SelectorSyntaxError(
                    selector,
                    f"index modifier [{body}] must be the last modifier of its level",
                )
            index = result
        else:
            attributes.extend(result)
    return Modifiers(attributes=tuple(attributes), index=index)


def parse_modifiers(case_sensitive: bool, selector: str, text: str) -> Modifiers:
    """Parse a raw modifier string such as ``[@id='x'][3]``.

    *selector* is the full selector the modifiers belong to, used in errors.
    """
    groups = tokenize(selector, text.strip(), "modifiers")
    return build_modifiers(case_sensitive, selector, groups)  # type: ignore[arg-type]
