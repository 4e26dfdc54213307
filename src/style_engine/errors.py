"""Exception types raised by the style engine."""


class StyleEngineError(Exception):
    """Base class for style engine errors."""


class SchemaError(StyleEngineError):
    """Raised when a style definition or schema table is malformed."""


class DeclarationError(StyleEngineError):
    """Raised when a CSS declaration cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
