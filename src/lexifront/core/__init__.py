"""Core functionality modules."""

from .convert import as_int64_array, convert_chinese, convert_english
from .lexicon import Lexicon
from .pronunciation import read_lexicon
from .punctuation import parse_punctuations
from .text_utils import ascii_lower, split_utf8, split_words
from .tokens import read_tokens

__all__ = [
    "Lexicon",
    "read_tokens",
    "read_lexicon",
    "parse_punctuations",
    "ascii_lower",
    "split_utf8",
    "split_words",
    "convert_chinese",
    "convert_english",
    "as_int64_array",
]
