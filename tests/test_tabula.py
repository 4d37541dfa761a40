"""
vigenere_lab - Tabula Recta Tests
"""

import sys
import os
import io
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from PIL import Image
from vigenere_lab.cipher import ALPHABET, run
from vigenere_lab.tabula import (
    HIGHLIGHT_BG,
    cell_label,
    cell_position,
    render_tabula_png,
    tabula_recta,
    trace_rows,
)


def test_table_shape_and_corners():
    rows = tabula_recta()
    assert len(rows) == 26
    assert all(len(r) == 26 for r in rows)
    assert rows[0] == ALPHABET
    assert rows[1] == ALPHABET[1:] + "A"
    assert rows[25][25] == "Y"

def test_table_matches_cipher():
    rows = tabula_recta()
    for step in run("HELLOWORLD", "KEY").trace:
        r, c = cell_position(step.plain, step.key)
        assert rows[r][c] == step.cipher

def test_each_row_and_column_is_a_permutation():
    rows = tabula_recta()
    for i in range(26):
        assert sorted(rows[i]) == list(ALPHABET)
        assert sorted(r[i] for r in rows) == list(ALPHABET)

def test_cell_position_and_label():
    assert cell_position("H", "K") == (10, 7)
    assert cell_label("H", "K") == "R←shift(H, K)"

def test_trace_rows_by_mode():
    enc = run("HELLO", "KEY", "encrypt").trace
    assert trace_rows(enc) == [("Plain", "HELLO"), ("Key", "KEYKE"), ("Output", "RIJVS")]
    dec = run("RIJVS", "KEY", "decrypt").trace
    assert trace_rows(dec, "decrypt") == [("Cipher", "RIJVS"), ("Key", "KEYKE"), ("Output", "HELLO")]

def test_trace_rows_empty():
    assert trace_rows(()) == [("Plain", ""), ("Key", ""), ("Output", "")]

# ── PNG ──────────────────────────────────────────────────────────────────────
def test_render_png_size():
    img = Image.open(io.BytesIO(render_tabula_png(cell_size=20)))
    assert img.format == "PNG"
    assert img.size == (27 * 20, 27 * 20)

def test_render_png_highlight():
    size = 20
    img = Image.open(io.BytesIO(render_tabula_png(highlight=("H", "K"), cell_size=size))).convert("RGB")
    row, col = cell_position("H", "K")
    # top-left interior pixel of the highlighted cell, clear of the glyph
    x = (col + 1) * size + 1
    y = (row + 1) * size + 1
    assert img.getpixel((x, y)) == HIGHLIGHT_BG

def test_render_png_rejects_tiny_cells():
    with pytest.raises(ValueError):
        render_tabula_png(cell_size=4)
