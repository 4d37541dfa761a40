"""
Lab Tab: Caesar and One-Time-Pad Experiments
============================================
Two parameterisations of the same Vigenère engine:

  Caesar         key of one letter, so every letter moves by the same
                 amount (key index + indexing offset).
  One-time pad   random key as long as the text, used once. Shown as a
                 teaching point about information-theoretic secrecy,
                 not as a secure implementation.
"""

import secrets
from typing import List, NamedTuple, Tuple

from ..cipher import ALPHABET, extend_key, letter_index, run, sanitize
from ..indexing import IndexingModeState
from ..tabula import trace_rows
from ..validation import validate_caesar_key, validate_lab_text


class CaesarExperiment(NamedTuple):
    sanitized_text: str
    key:            str
    repeated_key:   str
    ciphertext:     str
    shift:          int
    mode_label:     str


class OneTimePadExperiment(NamedTuple):
    sanitized_text: str
    key:            str
    ciphertext:     str
    rows:           List[Tuple[str, str]]
    key_covers_text: bool


def caesar_experiment(text: str, key: str, state: IndexingModeState) -> CaesarExperiment:
    """Encrypt `text` with a single-letter key."""
    check = validate_lab_text(text)
    if not check.is_valid:
        raise ValueError(check.message or "Please enter plaintext.")
    letter = sanitize(key or "")
    check  = validate_caesar_key(letter)
    if not check.is_valid:
        raise ValueError(check.message or "Please enter a key letter.")

    clean  = sanitize(text)
    offset = state.get_offset()
    result = run(clean, letter, "encrypt", offset)
    return CaesarExperiment(
        sanitized_text=clean,
        key=letter,
        repeated_key=extend_key(letter, len(clean)),
        ciphertext=result.text,
        shift=letter_index(letter) + offset,
        mode_label="A=1" if offset else "A=0",
    )


def generate_random_key(length: int) -> str:
    """Uniformly random A-Z string from the OS CSPRNG."""
    if length < 0:
        raise ValueError("Key length must not be negative.")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def one_time_pad_experiment(text: str, key: str, state: IndexingModeState) -> OneTimePadExperiment:
    """
    Encrypt `text` with a pad. A pad shorter than the text still runs
    (it repeats, Vigenère-style) but `key_covers_text` is then False.
    """
    check = validate_lab_text(text)
    if not check.is_valid:
        raise ValueError(check.message or "Please enter plaintext.")
    clean_key = sanitize(key or "")
    if not clean_key:
        raise ValueError("Please generate a random key first.")

    clean  = sanitize(text)
    result = run(clean, clean_key, "encrypt", state.get_offset())
    return OneTimePadExperiment(
        sanitized_text=clean,
        key=clean_key,
        ciphertext=result.text,
        rows=trace_rows(result.trace, "encrypt"),
        key_covers_text=len(clean_key) >= len(clean),
    )
