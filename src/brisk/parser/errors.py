"""Parser error types."""


class ParseError(Exception):
    """Raised when a token cannot be handled by the single-token parser."""

    def __init__(
        self, message: str, token: str | None = None, position: int | None = None
    ):
        self.token = token
        self.position = position
        super().__init__(message)
