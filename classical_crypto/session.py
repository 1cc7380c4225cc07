"""
Processing Layer
================
One request in, one Outcome out: pick the cipher, clean key and text,
apply the validation policy, run the transformation.

Policies for characters outside the cipher's alphabet:

    filter   drop them and report a warning   (default)
    strict   reject the input with InvalidCharactersError

Also holds the UTF-8 file helpers used by the command line.
"""

import logging
from typing import List, NamedTuple, Optional

from .alphabet import CYRILLIC, LATIN, FilterReport
from .ciphers.columnar import ColumnarCipher, ColumnarGrid
from .ciphers.vigenere import ProgressiveVigenereCipher
from .errors import EmptyKeyError, EmptyTextError, InvalidCharactersError

logger = logging.getLogger(__name__)

COLUMNAR = "columnar"
VIGENERE = "vigenere"
ALGORITHMS = (COLUMNAR, VIGENERE)
MODES      = ("encrypt", "decrypt")
POLICIES   = ("filter", "strict")

DEFAULT_OUTPUT = "result.txt"

_CIPHERS = {
    COLUMNAR: (LATIN, ColumnarCipher),
    VIGENERE: (CYRILLIC, ProgressiveVigenereCipher),
}


class Outcome(NamedTuple):
    text: str
    level: str
    message: str
    source: str
    grid: Optional[ColumnarGrid]
    key_stream: List[str]
    key_report: FilterReport
    text_report: FilterReport


def process(algorithm: str, mode: str, key: str, text: str,
            policy: str = "filter") -> Outcome:
    """
    Run one encryption or decryption.

    Raises:
        EmptyKeyError          : key blank or without alphabet letters
        EmptyTextError         : text empty or without alphabet letters
        InvalidCharactersError : strict policy and foreign characters present
        ValueError             : unknown algorithm, mode or policy
    """
    if algorithm not in _CIPHERS:
        raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {ALGORITHMS}.")
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}; expected one of {MODES}.")
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy {policy!r}; expected one of {POLICIES}.")

    alphabet, cipher_cls = _CIPHERS[algorithm]
    key = key.strip()
    if not key:
        raise EmptyKeyError("Key must not be empty.")
    if not text:
        raise EmptyTextError("Enter text or load a file.")

    key_report  = alphabet.inspect(key)
    text_report = alphabet.inspect(text)
    if not key_report.clean:
        raise EmptyKeyError(f"Key contains no {alphabet.name} letters.")
    if not text_report.clean:
        raise EmptyTextError(f"Text contains no {alphabet.name} letters.")

    filtered = [name for name, report in (("key", key_report), ("text", text_report))
                if report.dropped]
    if policy == "strict":
        for name, report in (("key", key_report), ("text", text_report)):
            if report.rejected:
                raise InvalidCharactersError(name, report.rejected)

    if filtered:
        level = "warning"
        message = (f"Invalid characters in {' and '.join(filtered)} "
                   f"(spaces, digits, punctuation, ...) were ignored.")
        logger.info(message)
    else:
        level = "info"
        message = "Operation completed successfully."

    cipher = cipher_cls(key_report.clean)
    result = getattr(cipher, mode)(text_report.clean)
    logger.info(f"{algorithm} {mode}: {text_report.clean_length} -> {len(result.text)} chars")

    if algorithm == COLUMNAR:
        grid, key_stream = result.grid, []
    else:
        grid, key_stream = None, result.key_stream
    return Outcome(result.text, level, message, text_report.clean,
                   grid, key_stream, key_report, text_report)


# ── file helpers ─────────────────────────────────────────────────────────────

def load_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.info(f"Loaded {len(text)} chars from {path}")
    return text


def save_result(path: str, text: str) -> None:
    if not text:
        raise ValueError("No result to save.")
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info(f"Saved {len(text)} chars to {path}")
