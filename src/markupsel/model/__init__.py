from markupsel.model.conditions import (
    INDEX_EVEN,
    INDEX_ODD,
    AttributeCondition,
    IndexCondition,
    IndexType,
    Operator,
    UnknownOperatorError,
)
from markupsel.model.diagnostic import Diagnostic, Severity
from markupsel.model.level import SelectorLevel

__all__ = [
    "AttributeCondition",
    "Diagnostic",
    "IndexCondition",
    "IndexType",
    "INDEX_EVEN",
    "INDEX_ODD",
    "Operator",
    "SelectorLevel",
    "Severity",
    "UnknownOperatorError",
]
