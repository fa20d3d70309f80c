"""Test configuration and fixtures.

Provides reusable fixtures for:
- Temporary directories
- In-memory token tables and lexicons for both language modes
- Ready-made Lexicon instances
"""

import io
import logging
import tempfile
from pathlib import Path

import pytest

from lexifront import Lexicon


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_lexifront_logger():
    """Drop handlers installed by setup_logging so they don't outlive a test."""
    yield
    logger = logging.getLogger("lexifront")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logging.getLogger("lexifront.diagnostics").setLevel(logging.NOTSET)


def make_stream(text: str, binary: bool = False):
    """Wrap text in a readable stream, as an open file would be."""
    if binary:
        return io.BytesIO(text.encode("utf-8"))
    return io.StringIO(text)


@pytest.fixture
def stream():
    """Factory fixture: stream(text, binary=False) -> readable stream."""
    return make_stream


# =============================================================================
# English Fixtures
# =============================================================================

# The first line is the blank symbol: a single space followed by its id
ENGLISH_TOKENS = """\
  9
h 1
ay 2
dh 3
eh 4
r 5
w 6
. 7
, 8
ow 10
"""

ENGLISH_LEXICON = """\
HI h ay
there dh eh r
oh ow
we w ay
"""


@pytest.fixture
def english_tokens():
    return ENGLISH_TOKENS


@pytest.fixture
def english_lexicon_text():
    return ENGLISH_LEXICON


@pytest.fixture
def english_lexicon():
    return Lexicon(
        make_stream(ENGLISH_TOKENS),
        make_stream(ENGLISH_LEXICON),
        punctuations=". ,",
        language="english",
    )


# =============================================================================
# Chinese Fixtures
# =============================================================================

CHINESE_TOKENS = """\
sil 0
eos 1
a1 10
b1 11
c1 12
d1 13
e1 14
"""

CHINESE_LEXICON = """\
你 a1
好 b1
世 c1
界 d1
中 e1 a1
"""


@pytest.fixture
def chinese_tokens():
    return CHINESE_TOKENS


@pytest.fixture
def chinese_lexicon_text():
    return CHINESE_LEXICON


@pytest.fixture
def chinese_lexicon():
    return Lexicon(
        make_stream(CHINESE_TOKENS),
        make_stream(CHINESE_LEXICON),
        punctuations=", 。 ，",
        language="chinese",
    )


@pytest.fixture
def english_files(temp_dir):
    """Write the English token table and lexicon to disk."""
    tokens_path = temp_dir / "tokens.txt"
    lexicon_path = temp_dir / "lexicon.txt"
    tokens_path.write_text(ENGLISH_TOKENS, encoding="utf-8")
    lexicon_path.write_text(ENGLISH_LEXICON, encoding="utf-8")
    return tokens_path, lexicon_path


@pytest.fixture
def chinese_files(temp_dir):
    """Write the Chinese token table and lexicon to disk."""
    tokens_path = temp_dir / "tokens.txt"
    lexicon_path = temp_dir / "lexicon.txt"
    tokens_path.write_text(CHINESE_TOKENS, encoding="utf-8")
    lexicon_path.write_text(CHINESE_LEXICON, encoding="utf-8")
    return tokens_path, lexicon_path
