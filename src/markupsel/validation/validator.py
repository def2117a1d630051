"""Apply the lint rules to one compiled selector chain."""

from __future__ import annotations

from itertools import chain
from typing import Callable, Iterable

from markupsel.model.diagnostic import Diagnostic, Severity
from markupsel.validation.rules import ALL_RULES, Levels

Rule = Callable[[Levels], list[Diagnostic]]


class ValidationError(Exception):
    """A selector chain produced ERROR diagnostics."""

    def __init__(self, errors: list[Diagnostic]) -> None:
        self.errors = errors
        details = "; ".join(f"{d.rule}: {d.message}" for d in errors)
        super().__init__(f"{len(errors)} selector error(s): {details}")


def validate(levels: Levels, extra_rules: Iterable[Rule] = ()) -> list[Diagnostic]:
    """Every diagnostic the built-in rules, then *extra_rules*, report for *levels*."""
    return [diag for rule in chain(ALL_RULES, extra_rules) for diag in rule(levels)]


def validate_or_raise(levels: Levels, extra_rules: Iterable[Rule] = ()) -> list[Diagnostic]:
    """Like :func:`validate`, but raise :class:`ValidationError` on any ERROR."""
    diagnostics = validate(levels, extra_rules)
    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    if errors:
        raise ValidationError(errors)
    return diagnostics
