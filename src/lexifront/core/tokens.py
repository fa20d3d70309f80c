"""Token vocabulary parsing.

Each line of a token file is either ``<symbol> <id>`` or just ``<id>``. The
second form stands for the blank symbol, which is a single space and so
disappears when the line is split on whitespace.
"""

from typing import Dict

from ..config import BLANK_SYMBOL
from ..exceptions import TokenFormatError
from ..utils.assets import Stream, iter_lines
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _parse_id(field: str, line_number: int, line: str) -> int:
    try:
        token_id = int(field, 10)
    except ValueError:
        raise TokenFormatError(
            f"Invalid token id {field!r} on line {line_number}: {line!r}",
            line_number=line_number,
            line=line,
        )
    if token_id < 0:
        raise TokenFormatError(
            f"Negative token id on line {line_number}: {line!r}",
            line_number=line_number,
            line=line,
        )
    return token_id


def read_tokens(stream: Stream) -> Dict[str, int]:
    """Read a token vocabulary into a symbol -> id mapping.

    Duplicate symbols are not an error; the last id seen wins.

    Raises:
        TokenFormatError: If a line has more than two fields or a bad id
    """
    token2id: Dict[str, int] = {}

    for line_number, line in iter_lines(stream):
        fields = line.split()
        if not fields:
            continue

        if len(fields) == 1:
            sym = BLANK_SYMBOL
            token_id = _parse_id(fields[0], line_number, line)
        elif len(fields) == 2:
            sym = fields[0]
            token_id = _parse_id(fields[1], line_number, line)
        else:
            logger.error(f"Malformed token line {line_number}: {line}")
            raise TokenFormatError(
                f"Expected '<symbol> <id>' or '<id>' on line {line_number}, got: {line!r}",
                line_number=line_number,
                line=line,
            )

        if sym in token2id and token2id[sym] != token_id:
            logger.debug(
                "Duplicate token %r on line %d: %d replaces %d",
                sym,
                line_number,
                token_id,
                token2id[sym],
            )
        token2id[sym] = token_id

    logger.debug(f"Read {len(token2id)} tokens")
    return token2id
