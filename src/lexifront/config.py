"""Configuration settings for lexifront."""

import os
from enum import Enum

from .exceptions import ConfigError

# Reserved symbols looked up in the token table at query time
SIL_SYMBOL = "sil"
EOS_SYMBOL = "eos"
BLANK_SYMBOL = " "

# Defaults (can be overridden via environment variables)
DEFAULT_LANGUAGE = os.getenv("LEXIFRONT_LANGUAGE", "english")
DEFAULT_PUNCTUATIONS = os.getenv("LEXIFRONT_PUNCTUATIONS", ", . ! ? ; : ' \"")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


DEBUG = _env_flag("LEXIFRONT_DEBUG")


class Language(str, Enum):
    """Language mode that selects the text-to-token algorithm."""

    ENGLISH = "english"
    CHINESE = "chinese"

    @classmethod
    def parse(cls, value) -> "Language":
        """Parse a case-insensitive language name.

        Raises:
            ConfigError: If the name is not a supported language
        """
        if isinstance(value, cls):
            return value
        from .core.text_utils import ascii_lower

        name = ascii_lower(str(value))
        for lang in cls:
            if lang.value == name:
                return lang
        raise ConfigError(
            f"Unknown language: {value}. "
            f"Use one of: {', '.join(lang.value for lang in cls)}"
        )


# Reserved symbols each language path needs in the token table
RESERVED_SYMBOLS = {
    Language.ENGLISH: (BLANK_SYMBOL,),
    Language.CHINESE: (SIL_SYMBOL, EOS_SYMBOL),
}


def validate_config() -> None:
    """Validate configuration values."""
    Language.parse(DEFAULT_LANGUAGE)
    if not DEFAULT_PUNCTUATIONS.strip():
        raise ConfigError("Default punctuation set is empty")
