"""Parser error types."""


class ParseError(Exception):
    """Raised when CSS source cannot be parsed in strict mode."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"{message} (line {self.line}, column {self.column})"
