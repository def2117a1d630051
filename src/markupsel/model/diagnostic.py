"""Lint findings reported for compiled selector chains."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class Diagnostic:
    """One finding from a lint rule, optionally pinned to a level of the chain.

    ``level`` is the zero-based position in the compiled tuple; ``fix`` is a
    short hint shown next to the message.
    """

    rule: str
    severity: Severity
    message: str
    level: int | None = None
    fix: str | None = None

    def __str__(self) -> str:
        where = "" if self.level is None else f" level {self.level}"
        return f"{self.severity.label}{where} ({self.rule}): {self.message}"
