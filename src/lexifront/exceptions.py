"""Custom exceptions for lexifront."""

from typing import Optional


class LexiFrontError(Exception):
    """Base exception for lexifront."""
    pass


class ConfigError(LexiFrontError):
    """Invalid configuration value (e.g. unknown language)."""
    pass


class TokenFormatError(LexiFrontError):
    """Malformed line in a token vocabulary."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = ""):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class StreamDecodeError(LexiFrontError):
    """A line of a token or lexicon stream is not valid UTF-8."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class MissingSymbolError(LexiFrontError):
    """A symbol required at query time is not in the token table."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} is not in the token table")


class AssetNotFoundError(LexiFrontError):
    """An asset source has nothing under the requested name."""
    pass


class ValidationError(LexiFrontError):
    """Invalid input parameters."""
    pass
