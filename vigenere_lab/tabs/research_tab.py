"""
Research Tab: Reading the Tabula Recta
======================================
Forward lookup (plain + key -> cipher) and its reverse, recovering a key
letter from a known plaintext/ciphertext pair. Both report the arithmetic
in the currently selected indexing mode and the table cell to highlight.

The table is always the classical (A=0) one, so under A=1 the highlighted
cell holds the letter one place before the A=1 ciphertext letter.
"""

from typing import NamedTuple, Tuple

from ..cipher import encrypt_letter, find_key_letter, letter_index
from ..indexing import IndexingModeState
from ..tabula import cell_position


class ResearchResult(NamedTuple):
    letter:       str            # cipher letter (forward) or key letter (reverse)
    formula:      str
    workings:     str
    highlight:    Tuple[int, int]  # (plain, key) cell of the offset-0 reference table
    table_letter: str            # letter printed in that cell


def _require(letter: str, what: str) -> str:
    if not letter:
        raise ValueError(f"Please choose a {what} letter.")
    return letter.strip().upper()


def research_tabula(plain: str, key: str, state: IndexingModeState) -> ResearchResult:
    plain  = _require(plain, "plaintext")
    key    = _require(key, "key")
    offset = state.get_offset()
    cipher = encrypt_letter(plain, key, offset)

    # In either mode the displayed numbers satisfy C = P + K (mod 26).
    p, k, c = (letter_index(x) + offset for x in (plain, key, cipher))
    return ResearchResult(
        letter=cipher,
        formula=f"{cipher}←shift({plain}, {key})",
        workings=f"{plain}({p}) + {key}({k}) = {c} (mod 26) → {cipher}",
        highlight=cell_position(plain, key),
        table_letter=encrypt_letter(plain, key, 0),
    )


def research_reverse_tabula(plain: str, cipher: str, state: IndexingModeState) -> ResearchResult:
    plain  = _require(plain, "plaintext")
    cipher = _require(cipher, "ciphertext")
    offset = state.get_offset()
    key    = find_key_letter(plain, cipher, offset)

    p, c, k = (letter_index(x) + offset for x in (plain, cipher, key))
    return ResearchResult(
        letter=key,
        formula=f"{key}←findKey({plain}, {cipher})",
        workings=f"{cipher}({c}) - {plain}({p}) = {k} (mod 26) → {key}",
        highlight=cell_position(plain, key),
        table_letter=encrypt_letter(plain, key, 0),
    )
