from .columnar import (ColumnarCipher, ColumnarGrid, ColumnarResult,
                       column_lengths, columnar_encrypt, columnar_decrypt)
from .vigenere import (ProgressiveVigenereCipher, VigenereResult,
                       vigenere_encrypt, vigenere_decrypt)
