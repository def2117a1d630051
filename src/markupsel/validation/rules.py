"""Lint rules for compiled selector chains.

Each rule is a function taking the levels of one compiled selector and
returning a list of Diagnostic objects describing any issues found. None of
them changes what a selector compiles to.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from markupsel.model.conditions import Operator
from markupsel.model.diagnostic import Diagnostic, Severity
from markupsel.model.level import SelectorLevel

Levels = Sequence[SelectorLevel]

# Bracket bodies like [12], [>3] or [99999999999] that failed to read as an
# index end up as attribute-existence conditions with this shape.
_INDEX_SHAPED_RE = re.compile(r"^[<>]?\s*[+-]?[0-9]+$")


# ---------------------------------------------------------------------------
# Rules that point at selectors which can never match (WARNING severity)
# ---------------------------------------------------------------------------


def check_index_shaped_attribute(levels: Levels) -> list[Diagnostic]:
    """An attribute-existence test whose name looks like an index."""
    diagnostics: list[Diagnostic] = []
    for pos, level in enumerate(levels):
        for cond in level.attribute_conditions:
            if cond.operator is Operator.EXISTS and _INDEX_SHAPED_RE.match(cond.name):
                diagnostics.append(
                    Diagnostic(
                        rule="check_index_shaped_attribute",
                        severity=Severity.WARNING,
                        message=(
                            f"Modifier [{cond.name}] is not a valid index and was "
                            f"read as a test for an attribute named '{cond.name}'."
                        ),
                        level=pos,
                        fix="Use an index between -2147483648 and 2147483647.",
                    )
                )
    return diagnostics


def check_text_selector_last(levels: Levels) -> list[Diagnostic]:
    """text() must be the last level: text nodes have no children."""
    diagnostics: list[Diagnostic] = []
    for pos, level in enumerate(levels[:-1]):
        if level.is_text_selector:
            diagnostics.append(
                Diagnostic(
                    rule="check_text_selector_last",
                    severity=Severity.WARNING,
                    message=f"Level {level} selects text nodes but is followed by further levels.",
                    level=pos,
                    fix="Move text() to the last level of the selector.",
                )
            )
    return diagnostics


def check_text_selector_attributes(levels: Levels) -> list[Diagnostic]:
    """text() levels cannot carry attribute conditions: text nodes have no attributes."""
    diagnostics: list[Diagnostic] = []
    for pos, level in enumerate(levels):
        if level.is_text_selector and level.attribute_conditions:
            diagnostics.append(
                Diagnostic(
                    rule="check_text_selector_attributes",
                    severity=Severity.WARNING,
                    message=f"Level {level} selects text nodes but has attribute conditions.",
                    level=pos,
                    fix="Put the attribute conditions on the enclosing element level.",
                )
            )
    return diagnostics


def check_conflicting_conditions(levels: Levels) -> list[Diagnostic]:
    """Conditions on one attribute that can never hold together."""
    diagnostics: list[Diagnostic] = []
    for pos, level in enumerate(levels):
        by_name: dict[str, list] = {}
        for cond in level.attribute_conditions:
            by_name.setdefault(cond.name, []).append(cond)
        for name, conds in by_name.items():
            operators = {c.operator for c in conds}
            equals = {c.value for c in conds if c.operator is Operator.EQUALS}
            if Operator.NOT_EXISTS in operators and any(
                op.requires_attribute for op in operators
            ):
                reason = "must both exist and not exist"
            elif len(equals) > 1:
                reason = "must equal " + " and ".join(repr(v) for v in sorted(equals))
            else:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_conflicting_conditions",
                    severity=Severity.WARNING,
                    message=f"Attribute '{name}' at level {level} {reason}.",
                    level=pos,
                    fix="Remove one of the conflicting conditions.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Informational rules (INFO severity)
# ---------------------------------------------------------------------------


def check_duplicate_conditions(levels: Levels) -> list[Diagnostic]:
    """The same attribute condition written twice on one level."""
    diagnostics: list[Diagnostic] = []
    for pos, level in enumerate(levels):
        seen = set()
        for cond in level.attribute_conditions:
            if cond in seen:
                diagnostics.append(
                    Diagnostic(
                        rule="check_duplicate_conditions",
                        severity=Severity.INFO,
                        message=f"Condition {cond} is repeated at level {level}.",
                        level=pos,
                        fix="Remove the repeated condition.",
                    )
                )
            seen.add(cond)
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_index_shaped_attribute,
    check_text_selector_last,
    check_text_selector_attributes,
    check_conflicting_conditions,
    check_duplicate_conditions,
]
