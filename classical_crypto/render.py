"""
Diagnostic Tables
=================
Text and PNG renderings of the intermediate data the ciphers return.
Display only: nothing here feeds back into a transformation.

    Columnar   key letters / column ranks / grid rows (first MAX_DISPLAY_ROWS)
    Vigenère   source text / progressive key / result

Image output: PNG via Pillow, one square cell per character.

Dependencies: Pillow >= 10.1
"""

import io
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from .ciphers.columnar import ColumnarGrid
from .errors import CipherError

MAX_DISPLAY_ROWS = 10
CELL_SIZE        = 28

HEADER_FILL = (224, 224, 224)
CELL_FILL   = (255, 255, 255)
LINE_COLOR  = (128, 128, 128)
TEXT_COLOR  = (0, 0, 0)

# System fonts tried, in order, for tables with non-ASCII letters
FALLBACK_FONTS = ("DejaVuSans.ttf", "LiberationSans-Regular.ttf", "FreeSans.ttf", "Arial.ttf")


# ── row builders ─────────────────────────────────────────────────────────────

def columnar_grid_rows(grid: ColumnarGrid, max_rows: int = MAX_DISPLAY_ROWS) -> List[List[str]]:
    """Key row, rank row, then up to `max_rows` grid rows. Empty cells are ''."""
    max_rows = max(0, max_rows)
    rows = [list(grid.key), [str(r) for r in grid.ranks]]
    for row in grid.cells[:max_rows]:
        rows.append([ch if ch is not None else "" for ch in row])
    return rows


def vigenere_table_rows(source: str, key_stream: Sequence[str], result: str) -> List[List[str]]:
    return [list(source), list(key_stream), list(result)]


# ── text ─────────────────────────────────────────────────────────────────────

def format_table(rows: List[List[str]], header_rows: int = 0) -> str:
    if not rows:
        return ""
    width = max((len(cell) for row in rows for cell in row), default=1) or 1
    lines = []
    for i, row in enumerate(rows):
        lines.append(" | ".join(cell.center(width) for cell in row).rstrip())
        if header_rows and i == header_rows - 1:
            lines.append("-+-".join("-" * width for _ in row))
    return "\n".join(lines)


def format_columnar_grid(grid: ColumnarGrid, max_rows: int = MAX_DISPLAY_ROWS) -> str:
    """Plain-text rendering of a columnar grid, truncated to `max_rows`."""
    max_rows = max(0, max_rows)
    lines = [format_table(columnar_grid_rows(grid, max_rows), header_rows=2)]
    if grid.rows > max_rows:
        lines.append(f"... and {grid.rows - max_rows} more rows")
    if grid.mode == "encrypt":
        lines.append("Columns are read in rank order.")
    else:
        lines.append("Reading row by row, left to right, restores the text.")
    return "\n".join(lines)


def format_vigenere_table(source: str, key_stream: Sequence[str], result: str) -> str:
    table = format_table(vigenere_table_rows(source, key_stream, result))
    return table + "\nTop: source text, middle: progressive key, bottom: result."


# ── image ────────────────────────────────────────────────────────────────────

def _load_font(font_path: Optional[str], size: int, text: str):
    if font_path:
        return ImageFont.truetype(font_path, size)
    if text.isascii():
        return ImageFont.load_default(size)
    # the bundled default font has no Cyrillic glyphs
    for name in FALLBACK_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    raise CipherError("No system font with Cyrillic glyphs found; pass a TrueType font (--font).")


def render_png(rows: List[List[str]],
               cell_size: int = CELL_SIZE,
               header_rows: int = 0,
               font_path: Optional[str] = None) -> bytes:
    """
    Draw a table of single-character cells and return PNG bytes.

    Args:
        rows        : table rows; shorter rows are padded with empty cells
        cell_size   : edge of one square cell in pixels
        header_rows : leading rows drawn on a grey background
        font_path   : TrueType font; without one, non-ASCII tables use a
                      system font from FALLBACK_FONTS

    Raises:
        CipherError : non-ASCII cells, no font_path and no fallback font found

    Returns:
        PNG bytes of a (cols * cell_size) x (rows * cell_size) image
    """
    if not rows or not any(rows):
        raise ValueError("Nothing to render.")
    if cell_size < 8:
        raise ValueError("cell_size must be at least 8 pixels.")

    n_cols = max(len(row) for row in rows)
    img  = Image.new("RGB", (n_cols * cell_size, len(rows) * cell_size), CELL_FILL)
    draw = ImageDraw.Draw(img)
    chars = "".join(cell for row in rows for cell in row)
    font  = _load_font(font_path, int(cell_size * 0.6), chars)

    for r, row in enumerate(rows):
        for c in range(n_cols):
            x0, y0 = c * cell_size, r * cell_size
            fill = HEADER_FILL if r < header_rows else CELL_FILL
            draw.rectangle([x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                           fill=fill, outline=LINE_COLOR)
            text = row[c] if c < len(row) else ""
            if text:
                left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
                x = x0 + (cell_size - (right - left)) / 2 - left
                y = y0 + (cell_size - (bottom - top)) / 2 - top
                draw.text((x, y), text, fill=TEXT_COLOR, font=font)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
