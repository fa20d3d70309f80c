"""Pronunciation lexicon parsing.

Each line is ``<word> <symbol> <symbol> ...``. Words are lowercased (ASCII
only) and every symbol is resolved against the token table.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..utils.assets import Stream, iter_lines
from ..utils.logging import get_logger
from .text_utils import ascii_lower

logger = get_logger(__name__)


def convert_tokens_to_ids(
    token2id: Mapping[str, int], tokens: Sequence[str]
) -> Optional[Tuple[int, ...]]:
    """Resolve symbols to ids, or return None if any symbol is unknown."""
    ids: List[int] = []
    for sym in tokens:
        if sym not in token2id:
            return None
        ids.append(token2id[sym])
    return tuple(ids)


def read_lexicon(
    stream: Stream, token2id: Mapping[str, int]
) -> Dict[str, Tuple[int, ...]]:
    """Read a pronunciation lexicon into a word -> ids mapping.

    Lines containing a symbol missing from ``token2id`` are skipped. A word
    that is already in the table stops loading: the duplicate line and
    everything after it are ignored, and the entries read so far are
    returned.
    """
    word2ids: Dict[str, Tuple[int, ...]] = {}
    skipped = 0

    for line_number, line in iter_lines(stream):
        fields = line.split()
        if not fields:
            continue

        word = ascii_lower(fields[0])
        if word in word2ids:
            logger.error(
                f"Duplicated word: {word} (line {line_number}). "
                f"Ignoring the rest of the lexicon"
            )
            break

        ids = convert_tokens_to_ids(token2id, fields[1:])
        if ids is None:
            skipped += 1
            logger.debug(f"Skip lexicon line {line_number} with unknown symbols: {line}")
            continue

        word2ids[word] = ids

    logger.debug(f"Read {len(word2ids)} lexicon entries, skipped {skipped}")
    return word2ids
