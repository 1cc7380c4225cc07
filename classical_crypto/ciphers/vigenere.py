"""
Progressive Vigenère Cipher
===========================
Vigenère over the 33-letter Cyrillic alphabet, with a key that advances
one letter every time it is used up.

For position i with a key of length n:

    shift     = i // n
    effective = (index(key[i % n]) + shift) mod 33
    encrypt   : c = (p + effective) mod 33
    decrypt   : p = (c - effective) mod 33

Key КЛЮЧ therefore runs К Л Ю Ч, then Л М Я Ш, then М Н А Щ ...
so the effective key never repeats literally after the first cycle.
A one-letter key degrades to a Caesar shift that grows by one per letter.

Alphabet: Cyrillic, 33 letters including Ё. Text and key are filtered.
"""

import logging
from typing import List, NamedTuple

from ..alphabet import CYRILLIC
from ..errors import EmptyKeyError

logger = logging.getLogger(__name__)


class VigenereResult(NamedTuple):
    text: str
    key_stream: List[str]


class ProgressiveVigenereCipher:
    """Vigenère cipher with a per-cycle key increment."""

    ALPHABET = CYRILLIC

    def __init__(self, key: str):
        clean = self.ALPHABET.filter(key)
        if not clean:
            raise EmptyKeyError("Key contains no Cyrillic letters.")
        self._key = clean

    @property
    def key(self) -> str:
        return self._key

    def key_stream(self, length: int) -> List[int]:
        """Effective key index for each of the first `length` positions."""
        size = len(self.ALPHABET)
        n = len(self._key)
        return [(self.ALPHABET.index(self._key[i % n]) + i // n) % size
                for i in range(length)]

    def encrypt(self, plaintext: str) -> VigenereResult:
        return self._apply(plaintext, +1)

    def decrypt(self, ciphertext: str) -> VigenereResult:
        return self._apply(ciphertext, -1)

    def _apply(self, text: str, sign: int) -> VigenereResult:
        alpha = self.ALPHABET
        clean = alpha.filter(text)
        stream = self.key_stream(len(clean))
        logger.debug(f"Vigenère {'encrypt' if sign > 0 else 'decrypt'}: "
                     f"{len(clean)} chars, key length {len(self._key)}")
        out = [alpha.letter(alpha.index(ch) + sign * k) for ch, k in zip(clean, stream)]
        return VigenereResult("".join(out), [alpha.letter(k) for k in stream])


def vigenere_encrypt(plaintext: str, key: str) -> VigenereResult:
    """
    Encrypt `plaintext` with `key`.

    The key is checked before the text: an empty filtered key raises
    EmptyKeyError even when the text is empty too.
    """
    return ProgressiveVigenereCipher(key).encrypt(plaintext)


def vigenere_decrypt(ciphertext: str, key: str) -> VigenereResult:
    """Inverse of vigenere_encrypt(); the key is checked first as well."""
    return ProgressiveVigenereCipher(key).decrypt(ciphertext)
