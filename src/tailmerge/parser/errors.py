"""Parser error types."""


class ParseError(Exception):
    """Raised when stylesheet text cannot be parsed or rewritten."""
