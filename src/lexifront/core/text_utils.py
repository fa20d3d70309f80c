"""
Text normalization and segmentation.

Splits raw text into units before they are looked up in the lexicon:
runs of alphabetic letters (with inner apostrophes) become one unit,
every logographic character, digit, punctuation mark or symbol becomes a
unit of its own, and whitespace only separates units.
"""

from typing import List

from ..config import Language

# ----------------------
# Unicode ranges for logographic scripts (one unit per codepoint)
# ----------------------
CJK_RANGES = [
    (0x2E80, 0x2FDF),  # CJK radicals, Kangxi radicals
    (0x3000, 0x303F),  # CJK symbols and punctuation
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x3100, 0x312F),  # Bopomofo
    (0x3130, 0x318F),  # Hangul compatibility jamo
    (0x31F0, 0x31FF),  # Katakana phonetic extensions
    (0x3400, 0x4DBF),  # CJK extension A
    (0x4E00, 0x9FFF),  # CJK unified ideographs
    (0xAC00, 0xD7AF),  # Hangul syllables
    (0xF900, 0xFAFF),  # CJK compatibility ideographs
    (0xFF00, 0xFFEF),  # Half-width and full-width forms
    (0x20000, 0x2FA1F),  # CJK extensions B-F, compatibility supplement
]

APOSTROPHE = "'"


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only.

    Non-ASCII characters pass through unchanged, so e.g. "Ä" stays "Ä".
    """
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def is_cjk(char: str) -> bool:
    """Return True if the character belongs to a logographic block."""
    code = ord(char)
    return any(start <= code <= end for start, end in CJK_RANGES)


def _is_word_char(char: str) -> bool:
    return char.isalpha() and not is_cjk(char)


def split_utf8(text: str) -> List[str]:
    """Split text into lexicon lookup units.

    An apostrophe between two letters stays inside the word, so
    contractions such as "don't" reach their lexicon entry.

    >>> split_utf8("Hi there.")
    ['Hi', 'there', '.']
    >>> split_utf8("你好,世界")
    ['你', '好', ',', '世', '界']
    >>> split_utf8("Don't 'go'")
    ["Don't", "'", 'go', "'"]
    """
    units: List[str] = []
    run: List[str] = []

    for i, char in enumerate(text):
        if _is_word_char(char):
            run.append(char)
            continue
        if (char == APOSTROPHE and run
                and i + 1 < len(text) and _is_word_char(text[i + 1])):
            run.append(char)
            continue
        if run:
            units.append("".join(run))
            run = []
        if not char.isspace():
            units.append(char)

    if run:
        units.append("".join(run))

    return units


def split_words(text: str, language: Language) -> List[str]:
    """Normalize text for the given language and split it into units."""
    if Language.parse(language) == Language.ENGLISH:
        text = ascii_lower(text)
    return split_utf8(text)
