"""Per-language text -> token id conversion."""

from typing import AbstractSet, List, Mapping, Sequence

import numpy as np

from ..config import BLANK_SYMBOL, EOS_SYMBOL, SIL_SYMBOL
from ..exceptions import MissingSymbolError
from ..utils.logging import get_logger

logger = get_logger(__name__)


def lookup_symbol(token2id: Mapping[str, int], symbol: str) -> int:
    """Look up a symbol that must be present in the token table."""
    try:
        return token2id[symbol]
    except KeyError:
        raise MissingSymbolError(symbol) from None


def convert_chinese(
    words: Sequence[str],
    token2id: Mapping[str, int],
    word2ids: Mapping[str, Sequence[int]],
    punctuations: AbstractSet[str],
) -> List[int]:
    """Convert segmented Chinese units to token ids.

    The output is framed by ``sil`` at the start and ``sil eos`` at the end.
    Punctuation maps to ``sil``; unknown units are dropped with a warning.
    """
    sil = lookup_symbol(token2id, SIL_SYMBOL)
    eos = lookup_symbol(token2id, EOS_SYMBOL)

    ans = [sil]
    for w in words:
        if w in punctuations:
            ans.append(sil)
            continue

        if w not in word2ids:
            logger.warning(f"OOV {w}. Ignore it!")
            continue

        ans.extend(word2ids[w])

    ans.append(sil)
    ans.append(eos)
    return ans


def convert_english(
    words: Sequence[str],
    token2id: Mapping[str, int],
    word2ids: Mapping[str, Sequence[int]],
    punctuations: AbstractSet[str],
) -> List[int]:
    """Convert segmented (already lowercased) English units to token ids.

    Every known word is followed by the blank id; punctuation is emitted as
    its own token id with no blank after it. Unknown words are dropped with
    a warning. The last element of a non-empty result is always removed,
    which drops the trailing blank after a final word, but also drops the
    punctuation id when the text ends with punctuation.
    """
    blank = lookup_symbol(token2id, BLANK_SYMBOL)

    ans: List[int] = []
    for w in words:
        if w in punctuations:
            ans.append(lookup_symbol(token2id, w))
            continue

        if w not in word2ids:
            logger.warning(f"OOV {w}. Ignore it!")
            continue

        ans.extend(word2ids[w])
        ans.append(blank)

    if ans:
        ans.pop()

    return ans


def as_int64_array(token_ids: Sequence[int]) -> np.ndarray:
    """Pack token ids into a 1-D int64 array for model input."""
    return np.asarray(token_ids, dtype=np.int64)
