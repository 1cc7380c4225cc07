"""
classical_crypto — Processing Layer and CLI Tests
=================================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest

from classical_crypto         import render
from classical_crypto.errors  import EmptyKeyError, EmptyTextError, InvalidCharactersError
from classical_crypto.session import process, load_text, save_result
from classical_crypto.cli     import main

# ── process() ─────────────────────────────────────────────────────────────────
def test_process_columnar_clean_input():
    out = process("columnar", "encrypt", "KEY", "HELLOWORLD")
    assert out.text == "EORHLODLWL"
    assert out.level == "info"
    assert out.message == "Operation completed successfully."
    assert out.grid is not None
    assert out.key_stream == []

def test_process_filter_policy_warns():
    out = process("columnar", "encrypt", "  KEY  ", "Hello, World!")
    assert out.text == "EORHLODLWL"
    assert out.level == "warning"
    assert "text" in out.message and "key" not in out.message
    assert out.text_report.original_length == 13
    assert out.text_report.clean_length == 10

def test_process_filter_warning_not_logged_as_warning(caplog):
    caplog.set_level(logging.DEBUG, logger="classical_crypto")
    out = process("columnar", "encrypt", "KEY", "Hello, World!")
    assert out.level == "warning"
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert out.message in caplog.messages

def test_process_filter_policy_names_key_and_text():
    out = process("vigenere", "encrypt", "КЛ ЮЧ", "привет мир")
    assert out.level == "warning"
    assert "key and text" in out.message

def test_process_strict_policy_rejects():
    with pytest.raises(InvalidCharactersError) as exc:
        process("columnar", "encrypt", "KEY", "HELLO WORLD!", policy="strict")
    assert exc.value.field == "text"
    assert exc.value.characters == " !"

def test_process_strict_policy_accepts_lowercase():
    out = process("columnar", "encrypt", "key", "helloworld", policy="strict")
    assert out.text == "EORHLODLWL"
    assert out.level == "info"

def test_process_vigenere_roundtrip():
    enc = process("vigenere", "encrypt", "КЛЮЧ", "Шифр Виженера")
    dec = process("vigenere", "decrypt", "КЛЮЧ", enc.text)
    assert dec.text == "ШИФРВИЖЕНЕРА"
    assert enc.grid is None
    assert len(enc.key_stream) == len(enc.text) == 12
    assert enc.source == "ШИФРВИЖЕНЕРА"

@pytest.mark.parametrize("key, text, error", [
    ("",      "HELLO", EmptyKeyError),
    ("   ",   "HELLO", EmptyKeyError),
    ("123",   "HELLO", EmptyKeyError),
    ("KEY",   "",      EmptyTextError),
    ("KEY",   "12345", EmptyTextError),
])
def test_process_empty_inputs(key, text, error):
    with pytest.raises(error):
        process("columnar", "encrypt", key, text)

def test_process_rejects_unknown_options():
    with pytest.raises(ValueError):
        process("playfair", "encrypt", "KEY", "HELLO")
    with pytest.raises(ValueError):
        process("columnar", "scramble", "KEY", "HELLO")
    with pytest.raises(ValueError):
        process("columnar", "encrypt", "KEY", "HELLO", policy="lenient")

# ── files ────────────────────────────────────────────────────────────────────
def test_save_and_load(tmp_path):
    path = str(tmp_path / "result.txt")
    save_result(path, "ЯАБ")
    assert load_text(path) == "ЯАБ"

def test_save_nothing(tmp_path):
    with pytest.raises(ValueError):
        save_result(str(tmp_path / "result.txt"), "")

# ── CLI ──────────────────────────────────────────────────────────────────────
def test_cli_encrypt_text(capsys):
    assert main(["encrypt", "-k", "KEY", "-t", "HELLOWORLD"]) == 0
    assert capsys.readouterr().out.strip() == "EORHLODLWL"

def test_cli_show_table(capsys):
    assert main(["encrypt", "-k", "KEY", "-t", "HELLOWORLD", "--show-table"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "EORHLODLWL"
    assert "K | E | Y" in captured.err

def test_cli_files(tmp_path, capsys):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("Съешь ещё", encoding="utf-8")
    assert main(["encrypt", "-a", "vigenere", "-k", "КЛЮЧ",
                 "-i", str(src), "-o", str(dst)]) == 0
    ct = dst.read_text(encoding="utf-8")
    assert main(["decrypt", "-a", "vigenere", "-k", "КЛЮЧ", "-t", ct]) == 0
    assert capsys.readouterr().out.strip() == "СЪЕШЬЕЩЁ"

def test_cli_warning_on_filtered_input(capsys):
    assert main(["encrypt", "-k", "KEY", "-t", "HELLO WORLD"]) == 0
    assert "Warning" in capsys.readouterr().err

def test_cli_strict_error(capsys):
    assert main(["encrypt", "-k", "KEY", "-t", "HELLO WORLD", "--strict"]) == 1
    assert "Invalid characters" in capsys.readouterr().err

def test_cli_missing_file(tmp_path, capsys):
    assert main(["encrypt", "-k", "KEY", "-i", str(tmp_path / "missing.txt")]) == 1
    assert "Error" in capsys.readouterr().err

def test_cli_table_png(tmp_path):
    png = tmp_path / "grid.png"
    assert main(["encrypt", "-k", "KEY", "-t", "HELLOWORLD", "--table-png", str(png)]) == 0
    assert png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

def test_cli_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["encrypt", "-t", "HELLO"])
    assert exc.value.code == 2

def test_cli_rejects_negative_max_rows(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["encrypt", "-k", "KEY", "-t", "HELLOWORLD", "--show-table", "--max-rows", "-1"])
    assert exc.value.code == 2
    assert "--max-rows" in capsys.readouterr().err

def test_cli_cyrillic_table_png_needs_font(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(render, "FALLBACK_FONTS", ("no-such-font.ttf",))
    png = tmp_path / "table.png"
    assert main(["encrypt", "-a", "vigenere", "-k", "КЛЮЧ", "-t", "ПРИВЕТ",
                 "--table-png", str(png)]) == 1
    assert "--font" in capsys.readouterr().err
    assert not png.exists()
