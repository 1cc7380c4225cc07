"""
classical_crypto — Classical Text Ciphers
=========================================
Two reversible, educational ciphers with their intermediate tables.

Ciphers:
    COLUMNAR   Columnar transposition over A..Z, columns read by key-letter rank
    VIGENERE   Progressive-key Vigenère over the 33-letter Cyrillic alphabet

Neither cipher is secure; they exist to be studied.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet                import Alphabet, FilterReport, LATIN, CYRILLIC, filter_text
from .ranking                 import rank_key, column_ranks
from .errors                  import (CipherError, EmptyKeyError, EmptyTextError,
                                      InvalidCharactersError)
from .ciphers.columnar        import (ColumnarCipher, ColumnarGrid, ColumnarResult,
                                      columnar_encrypt, columnar_decrypt)
from .ciphers.vigenere        import (ProgressiveVigenereCipher, VigenereResult,
                                      vigenere_encrypt, vigenere_decrypt)
from .session                 import Outcome, process

__all__ = [
    "Alphabet",
    "FilterReport",
    "LATIN",
    "CYRILLIC",
    "filter_text",
    "rank_key",
    "column_ranks",
    "CipherError",
    "EmptyKeyError",
    "EmptyTextError",
    "InvalidCharactersError",
    "ColumnarCipher",
    "ColumnarGrid",
    "ColumnarResult",
    "columnar_encrypt",
    "columnar_decrypt",
    "ProgressiveVigenereCipher",
    "VigenereResult",
    "vigenere_encrypt",
    "vigenere_decrypt",
    "Outcome",
    "process",
]
