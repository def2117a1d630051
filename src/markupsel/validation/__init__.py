from markupsel.validation.rules import ALL_RULES
from markupsel.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ALL_RULES", "ValidationError", "validate", "validate_or_raise"]
