"""
Tabula Recta: the 26×26 Vigenère Table
======================================
Row r is the key letter, column c the plaintext letter, and each entry
the ciphertext letter. The reference table is always built with offset 0
(the classical table); the A=1 mode only changes how positions are
labelled, not which letter sits in which cell.

Also provides the three-row correspondence layout used to display a
trace, and a PNG rendering of the table.

Dependencies: Pillow >= 10.0
"""

import io
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .cipher import ALPHABET, ALPHABET_SIZE, AlignmentStep, encrypt_letter, letter_index

Cell = Tuple[str, str]   # (plain letter, key letter)


def tabula_recta() -> Tuple[str, ...]:
    """All 26 rows; `tabula_recta()[row][col]` is the cipher letter."""
    return tuple(
        "".join(encrypt_letter(plain, key, 0) for plain in ALPHABET)
        for key in ALPHABET
    )


def cell_position(plain: str, key: str) -> Tuple[int, int]:
    """(row, col) of the cell holding encrypt(plain, key)."""
    return letter_index(key), letter_index(plain)


def cell_label(plain: str, key: str) -> str:
    """Tooltip text for a table cell, e.g. 'R←shift(H, K)'."""
    return f"{encrypt_letter(plain, key, 0)}←shift({plain}, {key})"


def trace_rows(trace: Sequence[AlignmentStep], mode: str = "encrypt") -> List[Tuple[str, str]]:
    """
    Three labelled rows for the correspondence display.

    Encrypt shows Plain / Key / Output, decrypt shows Cipher / Key / Output,
    so the input always comes first and the computed letters last.
    """
    plain  = "".join(s.plain for s in trace)
    key    = "".join(s.key for s in trace)
    cipher = "".join(s.cipher for s in trace)
    if mode == "decrypt":
        return [("Cipher", cipher), ("Key", key), ("Output", plain)]
    return [("Plain", plain), ("Key", key), ("Output", cipher)]


# ── rendering ────────────────────────────────────────────────────────────────

HEADER_BG    = (220, 226, 235)
CELL_BG      = (255, 255, 255)
GRID_COLOR   = (180, 186, 196)
TEXT_COLOR   = (30, 30, 30)
HIGHLIGHT_BG = (255, 214, 102)
HEADER_HL_BG = (255, 236, 179)


def render_tabula_png(highlight: Optional[Cell] = None, cell_size: int = 24) -> bytes:
    """
    Draw the tabula recta as a PNG.

    Args:
        highlight : optional (plain, key) pair; its cell and both of its
                    headers are filled with the highlight colour
        cell_size : edge length of one square cell in pixels

    Returns:
        PNG bytes, (27 * cell_size) pixels square
    """
    if cell_size < 8:
        raise ValueError("cell_size must be at least 8 pixels.")

    hl_row = hl_col = None
    if highlight is not None:
        hl_row, hl_col = cell_position(*highlight)

    side = (ALPHABET_SIZE + 1) * cell_size
    img  = Image.new("RGB", (side, side), CELL_BG)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    rows = tabula_recta()

    def box(grid_row: int, grid_col: int, text: str, fill) -> None:
        x0, y0 = grid_col * cell_size, grid_row * cell_size
        draw.rectangle([x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                       fill=fill, outline=GRID_COLOR)
        if text:
            l, t, r, b = draw.textbbox((0, 0), text, font=font)
            draw.text((x0 + (cell_size - (r - l)) / 2 - l,
                       y0 + (cell_size - (b - t)) / 2 - t),
                      text, fill=TEXT_COLOR, font=font)

    box(0, 0, "", HEADER_BG)
    for i, letter in enumerate(ALPHABET):
        box(0, i + 1, letter, HEADER_HL_BG if i == hl_col else HEADER_BG)
        box(i + 1, 0, letter, HEADER_HL_BG if i == hl_row else HEADER_BG)

    for r, row in enumerate(rows):
        for c, letter in enumerate(row):
            fill = HIGHLIGHT_BG if (r, c) == (hl_row, hl_col) else CELL_BG
            box(r + 1, c + 1, letter, fill)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
