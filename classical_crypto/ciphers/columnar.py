"""
Columnar Transposition Cipher
=============================
Write the text row by row into a grid as wide as the key, then read the
columns out in the order given by ranking the key letters.

    key  K E Y        order [1, 0, 2]
         H E L
         L O W        HELLOWORLD  ->  EOR + HLOD + LWL
         O R L
         D

Trailing cells of the last row stay empty; no padding letters are added.
On decryption the first (len % cols) columns, by original index, are one
cell taller than the rest.

Alphabet: Latin, 26 letters. Text and key are filtered before use.
"""

import logging
from typing import List, NamedTuple, Optional

from ..alphabet import LATIN
from ..errors import EmptyKeyError
from ..ranking import column_ranks, rank_key

logger = logging.getLogger(__name__)


def column_lengths(total: int, cols: int) -> List[int]:
    """Cells per original column for `total` characters over `cols` columns."""
    base_rows, remainder = divmod(total, cols)
    return [base_rows + 1 if c < remainder else base_rows for c in range(cols)]


class ColumnarGrid:
    """
    Intermediate matrix of one encryption or decryption.

    cells is row-major; None marks an empty cell.
    """

    def __init__(self, mode: str, key: str, order: List[int], cells: list):
        self.mode  = mode
        self.key   = key
        self.order = order
        self.cells = cells

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.key)

    @property
    def ranks(self) -> List[int]:
        return column_ranks(self.order)

    @property
    def column_lengths(self) -> List[int]:
        return [sum(1 for row in self.cells if row[c] is not None)
                for c in range(self.cols)]

    @property
    def columns(self) -> List[List[str]]:
        return [[row[c] for row in self.cells if row[c] is not None]
                for c in range(self.cols)]

    def __eq__(self, other):
        if not isinstance(other, ColumnarGrid):
            return NotImplemented
        return (self.mode, self.key, self.order, self.cells) == \
               (other.mode, other.key, other.order, other.cells)

    def __repr__(self):
        return f"ColumnarGrid({self.mode}, key={self.key!r}, {self.rows}x{self.cols})"


class ColumnarResult(NamedTuple):
    text: str
    grid: Optional[ColumnarGrid]


class ColumnarCipher:
    """Columnar transposition keyed by letter rank."""

    ALPHABET = LATIN

    def __init__(self, key: str):
        clean = self.ALPHABET.filter(key)
        if not clean:
            raise EmptyKeyError("Key contains no Latin letters.")
        self._key   = clean
        self._order = rank_key(clean)

    @property
    def key(self) -> str:
        return self._key

    @property
    def order(self) -> List[int]:
        return list(self._order)

    def encrypt(self, plaintext: str) -> ColumnarResult:
        """Transpose plaintext. Characters outside A-Z are dropped."""
        clean = self.ALPHABET.filter(plaintext)
        if not clean:
            return ColumnarResult("", None)

        cols = len(self._key)
        rows = -(-len(clean) // cols)
        cells = []
        for r in range(rows):
            row = []
            for c in range(cols):
                i = r * cols + c
                row.append(clean[i] if i < len(clean) else None)
            cells.append(row)
        logger.debug(f"Columnar encrypt: {len(clean)} chars, grid {rows}x{cols}")

        out = []
        for c in self._order:
            for r in range(rows):
                if cells[r][c] is not None:
                    out.append(cells[r][c])
        grid = ColumnarGrid("encrypt", self._key, self.order, cells)
        return ColumnarResult("".join(out), grid)

    def decrypt(self, ciphertext: str) -> ColumnarResult:
        """Undo encrypt(). Characters outside A-Z are dropped."""
        clean = self.ALPHABET.filter(ciphertext)
        if not clean:
            return ColumnarResult("", None)

        cols = len(self._key)
        lengths = column_lengths(len(clean), cols)
        columns: List[List[str]] = [[] for _ in range(cols)]
        pos = 0
        for c in self._order:
            columns[c] = list(clean[pos:pos + lengths[c]])
            pos += lengths[c]

        rows = max(lengths)
        logger.debug(f"Columnar decrypt: {len(clean)} chars, column lengths {lengths}")
        cells = [[columns[c][r] if r < lengths[c] else None for c in range(cols)]
                 for r in range(rows)]
        plain = "".join(ch for row in cells for ch in row if ch is not None)
        grid = ColumnarGrid("decrypt", self._key, self.order, cells)
        return ColumnarResult(plain, grid)


def columnar_encrypt(plaintext: str, key: str) -> ColumnarResult:
    return ColumnarCipher(key).encrypt(plaintext)


def columnar_decrypt(ciphertext: str, key: str) -> ColumnarResult:
    return ColumnarCipher(key).decrypt(ciphertext)
