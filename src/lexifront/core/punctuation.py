"""Punctuation set parsing."""

from typing import FrozenSet


def parse_punctuations(punctuations: str) -> FrozenSet[str]:
    """Split a space-separated punctuation string into a set.

    Empty fields are dropped and no case folding is applied.

    >>> sorted(parse_punctuations(", .  !"))
    ['!', ',', '.']
    """
    return frozenset(p for p in punctuations.split(" ") if p)
