"""lexifront - text to token ids for speech model front ends."""

__version__ = "0.1.0"

from .config import Language
from .core import Lexicon, as_int64_array
from .exceptions import (
    AssetNotFoundError,
    ConfigError,
    LexiFrontError,
    MissingSymbolError,
    StreamDecodeError,
    TokenFormatError,
    ValidationError,
)

__all__ = [
    "__version__",
    "Language",
    "Lexicon",
    "as_int64_array",
    "LexiFrontError",
    "ConfigError",
    "TokenFormatError",
    "StreamDecodeError",
    "MissingSymbolError",
    "AssetNotFoundError",
    "ValidationError",
]
