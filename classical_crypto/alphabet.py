"""
Alphabet Filter
===============
Fixed, ordered alphabets and the filter that projects arbitrary text onto
them: uppercase first, then keep only members, in their original order.

    LATIN     A..Z                       (26)  columnar transposition
    CYRILLIC  А..Я with Ё after Е        (33)  progressive Vigenère

Filtering is lossy and silent. FilterReport keeps both the raw and the
cleaned text so a caller can decide between warning and rejecting.
"""

from typing import NamedTuple


class FilterReport(NamedTuple):
    """Raw input next to its filtered projection."""

    original: str
    clean: str
    rejected: str

    @property
    def original_length(self) -> int:
        return len(self.original)

    @property
    def clean_length(self) -> int:
        return len(self.clean)

    @property
    def dropped(self) -> bool:
        return len(self.original) != len(self.clean)


class Alphabet:
    """An ordered sequence of distinct letters."""

    def __init__(self, name: str, letters: str):
        if len(set(letters)) != len(letters):
            raise ValueError(f"Alphabet {name!r} has repeated letters.")
        self.name = name
        self.letters = letters
        self._index = {ch: i for i, ch in enumerate(letters)}

    def __len__(self) -> int:
        return len(self.letters)

    def __contains__(self, ch) -> bool:
        return ch in self._index

    def __repr__(self):
        return f"Alphabet({self.name!r}, {len(self)} letters)"

    def index(self, ch: str) -> int:
        """Position of `ch`; KeyError when it is not a member."""
        return self._index[ch]

    def letter(self, i: int) -> str:
        return self.letters[i % len(self.letters)]

    def filter(self, text: str) -> str:
        return "".join(ch for ch in text.upper() if ch in self._index)

    def inspect(self, text: str) -> FilterReport:
        upper = text.upper()
        clean = "".join(ch for ch in upper if ch in self._index)
        rejected = "".join(sorted({ch for ch in upper if ch not in self._index}))
        return FilterReport(text, clean, rejected)


LATIN    = Alphabet("Latin", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
CYRILLIC = Alphabet("Cyrillic", "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ")


def filter_text(alphabet: Alphabet, text: str) -> str:
    """Uppercase `text` and keep only characters of `alphabet`."""
    return alphabet.filter(text)
