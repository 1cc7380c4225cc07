"""
Key Ranker
==========
Turns a key into the order in which grid columns are read.

Column indices are sorted by (key character, index). The index is part of
the sort key, so repeated letters resolve left to right regardless of the
sort algorithm:

    ZEBRA  ->  order [4, 2, 1, 3, 0]   (A, B, E, R, Z)
           ->  ranks [5, 3, 2, 4, 1]   (1-based, per original column)
"""

from typing import List, Optional, Sequence

from .alphabet import Alphabet


def rank_key(key: Sequence[str], alphabet: Optional[Alphabet] = None) -> List[int]:
    """
    Return the column visiting order for `key`.

    Characters compare by code point, or by position in `alphabet`
    when one is given.
    """
    if alphabet is None:
        return sorted(range(len(key)), key=lambda i: (key[i], i))
    return sorted(range(len(key)), key=lambda i: (alphabet.index(key[i]), i))


def column_ranks(order: Sequence[int]) -> List[int]:
    """1-based rank of each original column. Display only."""
    ranks = [0] * len(order)
    for pos, col in enumerate(order):
        ranks[col] = pos + 1
    if 0 in ranks:
        raise ValueError(f"Not a permutation of range({len(order)}): {list(order)}")
    return ranks
