"""
classical_crypto — Live Demo: Both Ciphers
==========================================
Run:  python examples/demo_ciphers.py

Encrypts and decrypts a message with each cipher and prints the
intermediate tables the way the command line shows them.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_crypto.ciphers.columnar import ColumnarCipher
from classical_crypto.ciphers.vigenere import ProgressiveVigenereCipher
from classical_crypto.render           import format_columnar_grid, format_vigenere_table
from classical_crypto.session          import process

LINE   = "═" * 70
MSG_EN = "We are discovered, flee at once."
MSG_RU = "Шифр Виженера с прогрессивным ключом"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ── COLUMNAR ─────────────────────────────────────────────────────────────────
header("COLUMNAR TRANSPOSITION — key ZEBRAS")
c   = ColumnarCipher("ZEBRAS")
enc = c.encrypt(MSG_EN)
dec = c.decrypt(enc.text)
ok("Column order", str(c.order))
ok("Encrypted",    enc.text)
ok("Decrypted",    dec.text)
print()
print(format_columnar_grid(enc.grid))

# ── VIGENÈRE ─────────────────────────────────────────────────────────────────
header("PROGRESSIVE VIGENÈRE — key КЛЮЧ")
v   = ProgressiveVigenereCipher("КЛЮЧ")
enc = v.encrypt(MSG_RU)
dec = v.decrypt(enc.text)
ok("Key stream", "".join(enc.key_stream))
ok("Encrypted",  enc.text)
ok("Decrypted",  dec.text)
print()
print(format_vigenere_table(dec.text, enc.key_stream, enc.text))

# ── POLICIES ─────────────────────────────────────────────────────────────────
header("VALIDATION POLICIES")
out = process("columnar", "encrypt", "KEY", "Hello, World!")
ok(f"filter [{out.level}]", out.message)
try:
    process("columnar", "encrypt", "KEY", "Hello, World!", policy="strict")
except ValueError as e:
    ok("strict [error]", str(e))

print(f"\n{LINE}\n")
