"""Lexicon: text -> token ids for an acoustic model front end."""

from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, List, Mapping, Tuple, Union

from ..config import DEFAULT_PUNCTUATIONS, RESERVED_SYMBOLS, Language
from ..exceptions import ConfigError
from ..utils.assets import AssetSource, Stream
from ..utils.logging import get_diagnostics_logger, get_logger
from ..utils.validation import validate_text
from .convert import convert_chinese, convert_english
from .pronunciation import read_lexicon
from .punctuation import parse_punctuations
from .text_utils import ascii_lower, split_words
from .tokens import read_tokens

logger = get_logger(__name__)
diagnostics = get_diagnostics_logger()

DEFAULT_TOKENS_NAME = "tokens.txt"
DEFAULT_LEXICON_NAME = "lexicon.txt"


class Lexicon:
    """Converts text to token ids using a token table and a pronunciation lexicon.

    The tables are built once in the constructor and never modified after,
    so one instance can serve read-only queries from several threads.

    Args:
        tokens: Readable stream (text or bytes) of ``<symbol> <id>`` lines
        lexicon: Readable stream of ``<word> <symbol>...`` lines
        punctuations: Space-separated punctuation symbols
        language: ``"english"`` or ``"chinese"`` (case-insensitive)
        debug: Log the input text, its bytes and its units on every query

    Raises:
        ConfigError: If the language is not supported
        TokenFormatError: If the token stream has a malformed line
    """

    def __init__(
        self,
        tokens: Stream,
        lexicon: Stream,
        punctuations: str = DEFAULT_PUNCTUATIONS,
        language: Union[str, Language] = Language.ENGLISH,
        debug: bool = False,
    ):
        self._language = Language.parse(language)
        self._debug = debug

        self._token2id = MappingProxyType(read_tokens(tokens))
        self._word2ids = MappingProxyType(read_lexicon(lexicon, self._token2id))
        self._punctuations = parse_punctuations(punctuations)

        self._converters: Dict[Language, Callable[[str], List[int]]] = {
            Language.ENGLISH: self._convert_english,
            Language.CHINESE: self._convert_chinese,
        }

        logger.debug(
            f"Loaded {self._language.value} lexicon: {len(self._token2id)} tokens, "
            f"{len(self._word2ids)} words, {len(self._punctuations)} punctuations"
        )

    @classmethod
    def from_files(
        cls,
        tokens_path: Union[str, Path],
        lexicon_path: Union[str, Path],
        punctuations: str = DEFAULT_PUNCTUATIONS,
        language: Union[str, Language] = Language.ENGLISH,
        debug: bool = False,
    ) -> "Lexicon":
        """Build a lexicon from a token file and a lexicon file on disk."""
        # Validate before touching the files
        language = Language.parse(language)
        with open(tokens_path, "rb") as tokens, open(lexicon_path, "rb") as lexicon:
            return cls(tokens, lexicon, punctuations, language, debug)

    @classmethod
    def from_assets(
        cls,
        source: AssetSource,
        tokens_name: str = DEFAULT_TOKENS_NAME,
        lexicon_name: str = DEFAULT_LEXICON_NAME,
        punctuations: str = DEFAULT_PUNCTUATIONS,
        language: Union[str, Language] = Language.ENGLISH,
        debug: bool = False,
    ) -> "Lexicon":
        """Build a lexicon from named assets of an ``AssetSource``."""
        language = Language.parse(language)
        with source.open(tokens_name) as tokens, source.open(lexicon_name) as lexicon:
            return cls(tokens, lexicon, punctuations, language, debug)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def token2id(self) -> Mapping[str, int]:
        return self._token2id

    @property
    def word2ids(self) -> Mapping[str, Tuple[int, ...]]:
        return self._word2ids

    @property
    def punctuations(self) -> FrozenSet[str]:
        return self._punctuations

    def __contains__(self, word: str) -> bool:
        return word in self._word2ids

    def __len__(self) -> int:
        return len(self._word2ids)

    def __repr__(self) -> str:
        return (
            f"Lexicon(language={self._language.value!r}, "
            f"tokens={len(self._token2id)}, words={len(self._word2ids)})"
        )

    def missing_reserved_symbols(self) -> List[str]:
        """List reserved symbols the configured language needs but the token table lacks."""
        return [s for s in RESERVED_SYMBOLS[self._language] if s not in self._token2id]

    def convert_text_to_token_ids(self, text: str) -> List[int]:
        """Convert text to a fresh list of token ids.

        UTF-8 encoded bytes are accepted as well as str.

        Raises:
            ValidationError: If text is neither str nor valid UTF-8 bytes
            MissingSymbolError: If a reserved or punctuation symbol is not in
                the token table
        """
        text = validate_text(text)
        converter = self._converters.get(self._language)
        if converter is None:
            raise ConfigError(f"Unknown language: {self._language!r}")
        return converter(text)

    def _log_debug_info(self, label: str, text: str, words: List[str]) -> None:
        if not self._debug:
            return
        diagnostics.info(f"{label}: {text}")
        diagnostics.info("Input text in bytes: %s", " ".join(f"{b:02x}" for b in text.encode("utf-8")))
        diagnostics.info("After splitting to words: %s", " ".join(words))

    def _convert_chinese(self, text: str) -> List[int]:
        words = split_words(text, Language.CHINESE)
        self._log_debug_info("Input text in string", text, words)
        return convert_chinese(words, self._token2id, self._word2ids, self._punctuations)

    def _convert_english(self, text: str) -> List[int]:
        words = split_words(text, Language.ENGLISH)
        self._log_debug_info("Input text (lowercase) in string", ascii_lower(text), words)
        return convert_english(words, self._token2id, self._word2ids, self._punctuations)

