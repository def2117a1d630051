"""Condition model: attribute and index conditions attached to a selector level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Operator",
    "UnknownOperatorError",
    "AttributeCondition",
    "IndexType",
    "IndexCondition",
    "INDEX_ODD",
    "INDEX_EVEN",
]


class UnknownOperatorError(ValueError):
    """Raised by :meth:`Operator.parse` for a token outside the operator set."""


class Operator(Enum):
    """Attribute comparison operators, valued by their selector token."""

    EQUALS = "="
    NOT_EQUALS = "!="
    STARTS_WITH = "^="
    ENDS_WITH = "$="
    CONTAINS = "*="
    EXISTS = ""
    NOT_EXISTS = "!"

    @classmethod
    def parse(cls, token: str) -> Operator:
        """Map an operator token to its Operator. The empty token means EXISTS."""
        try:
            return cls(token)
        except ValueError:
            raise UnknownOperatorError(f"Unknown operator: {token!r}") from None

    @staticmethod
    def extract(fragment: str) -> tuple[str, str, str | None]:
        """Split an attribute fragment into ``(name, operator_token, value)``.

        Only the first ``=`` counts. The character right before it picks the
        two-character operator; without any ``=`` the fragment is a bare name
        (EXISTS) or a ``!name`` (NOT_EXISTS). Value is the raw text, quotes
        included, or None when there is no ``=``.
        """
        pos = fragment.find("=")
        if pos == -1:
            if fragment.startswith("!"):
                return fragment[1:].strip(), "!", None
            return fragment.strip(), "", None
        prefix = fragment[pos - 1] if pos > 0 else ""
        if prefix in ("!", "^", "$", "*"):
            return fragment[: pos - 1].strip(), prefix + "=", fragment[pos + 1:].strip()
        return fragment[:pos].strip(), "=", fragment[pos + 1:].strip()

    @property
    def requires_attribute(self) -> bool:
        """True when an element without attributes can never satisfy this operator."""
        return self not in (Operator.NOT_EQUALS, Operator.NOT_EXISTS)


def _quote(value: str) -> str:
    if "'" in value:
        return f'"{value}"'
    return f"'{value}'"


@dataclass(frozen=True)
class AttributeCondition:
    """A single ``name operator value`` test on an element's attributes."""

    name: str  # never carries the leading "@"
    operator: Operator
    value: str | None = None  # quotes stripped; None for EXISTS / NOT_EXISTS

    def __str__(self) -> str:
        if self.operator is Operator.NOT_EXISTS:
            return f"!@{self.name}"
        if self.value is None:
            return f"@{self.name}"
        return f"@{self.name}{self.operator.value}{_quote(self.value)}"


class IndexType(Enum):
    """Kinds of positional filters."""

    VALUE = "value"
    LESS_THAN = "less_than"
    MORE_THAN = "more_than"
    EVEN = "even"
    ODD = "odd"


@dataclass(frozen=True)
class IndexCondition:
    """Positional filter among the sibling matches of a level.

    ``value`` is only meaningful for VALUE, LESS_THAN and MORE_THAN.
    """

    type: IndexType
    value: int = -1

    def __str__(self) -> str:
        if self.type is IndexType.VALUE:
            return f"[{self.value}]"
        if self.type is IndexType.LESS_THAN:
            return f"[<{self.value}]"
        if self.type is IndexType.MORE_THAN:
            return f"[>{self.value}]"
        if self.type is IndexType.EVEN:
            return "[even()]"
        return "[odd()]"


# Parity conditions carry no parameter, so a single shared instance of each is
# handed out by every parse. Matchers may compare them by identity.
INDEX_ODD = IndexCondition(IndexType.ODD)
INDEX_EVEN = IndexCondition(IndexType.EVEN)
