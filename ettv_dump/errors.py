"""
Errors raised while fetching and parsing ETTV dumps.

Every failure derives from EttvError, so callers that do not care why a
dump could not be loaded can catch that alone.
"""

from typing import Optional


class EttvError(Exception):
    """Base error for dump retrieval and parsing."""
    pass


class NetworkError(EttvError):
    """The dump could not be retrieved from the host."""
    pass


class DecompressionError(EttvError):
    """The response body was not a complete gzip stream."""
    pass


class ParseError(EttvError):
    """A dump line did not carry the expected fields (strict mode only)."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line
