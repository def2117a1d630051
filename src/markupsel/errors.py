"""Selector error types."""


class SelectorSyntaxError(ValueError):
    """Raised when a selector string cannot be compiled.

    ``selector`` is always the original string handed to the compiler, even
    when the failure was detected while parsing a single level of it.
    """

    def __init__(self, selector: str, reason: str, column: int | None = None):
        self.selector = selector
        self.reason = reason
        self.column = column
        super().__init__(f'Invalid syntax in selector "{selector}": {reason}')
