"""Custom exceptions for line parsers."""
from typing import Optional


class ParserError(Exception):
    """Raised when input cannot be turned into a dataset."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.reason = message
        self.line_number = line_number
        if line_number is not None:
            message = f"Error while parsing line {line_number}: {message}"
        super().__init__(message)


class FormatError(ParserError):
    """Raised when the token after a dimension index is not a number."""
    pass


class ParseIOError(ParserError):
    """Raised when the line source cannot be read any further."""
    pass


class UnknownLineFormatError(ParserError):
    """Raised when no line format is registered under the requested name."""
    pass
