"""
Error types
===========
All errors derive from ValueError: a bad key or bad text is a bad value.

    CipherError
     ├── EmptyKeyError           key has no letters of the cipher's alphabet
     ├── EmptyTextError          nothing to transform (processing layer only)
     └── InvalidCharactersError  strict policy found characters outside the alphabet
"""


class CipherError(ValueError):
    """Base class for every error raised by classical_crypto."""


class EmptyKeyError(CipherError):
    """The filtered key contains no alphabet characters."""


class EmptyTextError(CipherError):
    """The input text is empty or contains no alphabet characters."""


class InvalidCharactersError(CipherError):
    """Raised by the strict policy when input contains foreign characters."""

    def __init__(self, field: str, characters):
        self.field = field
        self.characters = "".join(characters)
        super().__init__(
            f"Invalid characters in {field}: {self.characters!r}"
        )
