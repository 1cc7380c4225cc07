"""
Command line front end.

    classical-crypto encrypt -a columnar -k KEY -t "HELLO WORLD" --show-table
    classical-crypto decrypt -a vigenere -k КЛЮЧ -i cipher.txt -o result.txt
"""

import argparse
import logging
import sys

from . import __version__
from .errors import CipherError
from .render import (MAX_DISPLAY_ROWS, columnar_grid_rows, format_columnar_grid,
                     format_vigenere_table, render_png, vigenere_table_rows)
from .session import ALGORITHMS, COLUMNAR, MODES, load_text, process, save_result


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classical-crypto",
        description="Columnar transposition (Latin) and progressive Vigenère (Cyrillic) ciphers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("mode", choices=MODES, help="Encrypt or decrypt")
    parser.add_argument("-a", "--algorithm", choices=ALGORITHMS, default=COLUMNAR,
                        help="Cipher to use (default: columnar)")
    parser.add_argument("-k", "--key", required=True, help="Cipher key")

    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path (UTF-8)")
    parser.add_argument("-o", "--output", help="Output file path (UTF-8)")

    parser.add_argument("--strict", action="store_true",
                        help="Reject input with characters outside the alphabet instead of dropping them")
    parser.add_argument("--show-table", action="store_true",
                        help="Print the intermediate matrix or key-stream table")
    parser.add_argument("--max-rows", type=_non_negative, default=MAX_DISPLAY_ROWS, metavar="N",
                        help=f"Grid rows shown with --show-table (default: {MAX_DISPLAY_ROWS})")
    parser.add_argument("--table-png", metavar="PATH", help="Write the table as a PNG image")
    parser.add_argument("--font", metavar="PATH", help="TrueType font for --table-png")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.text is not None:
            text = args.text
        elif args.input:
            text = load_text(args.input)
        else:
            text = sys.stdin.read()

        outcome = process(args.algorithm, args.mode, args.key, text,
                          policy="strict" if args.strict else "filter")

        if args.show_table or args.table_png:
            if outcome.grid is not None:
                table  = format_columnar_grid(outcome.grid, args.max_rows)
                rows   = columnar_grid_rows(outcome.grid, args.max_rows)
                header = 2
            else:
                table  = format_vigenere_table(outcome.source, outcome.key_stream, outcome.text)
                rows   = vigenere_table_rows(outcome.source, outcome.key_stream, outcome.text)
                header = 0
            if args.show_table:
                print(table, file=sys.stderr)
            if args.table_png:
                png = render_png(rows, header_rows=header, font_path=args.font)
                with open(args.table_png, "wb") as f:
                    f.write(png)

        if args.output:
            save_result(args.output, outcome.text)
        else:
            print(outcome.text)
    except (CipherError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if outcome.level == "warning":
        print(f"Warning: {outcome.message}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
