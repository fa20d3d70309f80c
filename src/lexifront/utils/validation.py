"""Validation utilities."""

from pathlib import Path
from typing import Mapping, Union

from ..config import RESERVED_SYMBOLS, Language
from ..exceptions import MissingSymbolError, ValidationError


def validate_input_file(path: Union[str, Path]) -> Path:
    """Validate that a tokens or lexicon path points at a readable file."""
    if not path:
        raise ValidationError("Path cannot be empty")

    file_path = Path(path)
    if not file_path.exists():
        raise ValidationError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise ValidationError(f"Not a file: {file_path}")
    return file_path


def validate_text(text) -> str:
    """Validate text passed for conversion."""
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError(f"Text is not valid UTF-8: {e}")
    if not isinstance(text, str):
        raise ValidationError(f"Text must be str, got {type(text).__name__}")
    return text


def validate_reserved_symbols(
    token2id: Mapping[str, int], language: Union[str, Language]
) -> None:
    """Check that the token table has every reserved symbol the language needs.

    Raises:
        MissingSymbolError: For the first reserved symbol that is missing
    """
    for symbol in RESERVED_SYMBOLS[Language.parse(language)]:
        if symbol not in token2id:
            raise MissingSymbolError(symbol)
