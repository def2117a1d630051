"""markupsel: compiler for path selectors over markup trees."""

__version__ = "0.1.0"

from markupsel.compiler import compile_selector, format_selector  # noqa: E402
from markupsel.config import MarkupMode, SelectorConfig  # noqa: E402
from markupsel.errors import SelectorSyntaxError  # noqa: E402
from markupsel.model import (  # noqa: E402
    INDEX_EVEN,
    INDEX_ODD,
    AttributeCondition,
    IndexCondition,
    IndexType,
    Operator,
    SelectorLevel,
)

__all__ = [
    "AttributeCondition",
    "IndexCondition",
    "IndexType",
    "INDEX_EVEN",
    "INDEX_ODD",
    "MarkupMode",
    "Operator",
    "SelectorConfig",
    "SelectorLevel",
    "SelectorSyntaxError",
    "compile_selector",
    "format_selector",
]
