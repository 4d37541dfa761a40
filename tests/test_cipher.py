"""
vigenere_lab - Cipher Engine Test Suite
=======================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_cipher.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from vigenere_lab.cipher import (
    ALPHABET,
    AlignmentStep,
    CipherResult,
    VigenereCipher,
    decrypt_letter,
    encrypt_letter,
    extend_key,
    find_key_letter,
    letter_index,
    run,
    sanitize,
)

PAIRS = [(p, k) for p in ALPHABET for k in ALPHABET]

# ── sanitize ─────────────────────────────────────────────────────────────────
def test_sanitize_strips_non_letters():
    assert sanitize("He11o, World!") == "HEOWORLD"

def test_sanitize_empty():
    assert sanitize("") == ""
    assert sanitize("123 !?") == ""

@pytest.mark.parametrize("raw", ["", "abc", "Attack at dawn!", "ÀÉÎ õü", "x\ty\nz", "ẞtraße"])
def test_sanitize_idempotent(raw):
    once = sanitize(raw)
    assert sanitize(once) == once
    assert all("A" <= ch <= "Z" for ch in once)

# ── letter_index ─────────────────────────────────────────────────────────────
def test_letter_index_bounds():
    assert letter_index("A") == 0
    assert letter_index("Z") == 25

@pytest.mark.parametrize("bad", ["a", "", "AB", "1", "É", None])
def test_letter_index_rejects_non_letters(bad):
    with pytest.raises(ValueError):
        letter_index(bad)

# ── extend_key ───────────────────────────────────────────────────────────────
def test_extend_key_tiles_and_truncates():
    assert extend_key("KEY", 7) == "KEYKEYK"
    assert extend_key("KEY", 2) == "KE"
    assert extend_key("KEY", 3) == "KEY"

@pytest.mark.parametrize("n", [0, 1, 5, 26, 101])
def test_extend_key_exact_length(n):
    key = "LEMON"
    ext = extend_key(key, n)
    assert len(ext) == n
    assert all(ext[i] == key[i % len(key)] for i in range(n))

def test_extend_key_zero_length():
    assert extend_key("A", 0) == ""

def test_extend_key_empty_key_raises():
    with pytest.raises(ValueError):
        extend_key("", 4)

# ── letter arithmetic ────────────────────────────────────────────────────────
@pytest.mark.parametrize("offset", [0, 1])
def test_letter_roundtrip_all_pairs(offset):
    for p, k in PAIRS:
        assert decrypt_letter(encrypt_letter(p, k, offset), k, offset) == p

@pytest.mark.parametrize("offset", [0, 1])
def test_key_recovery_all_pairs(offset):
    for p, k in PAIRS:
        assert find_key_letter(p, encrypt_letter(p, k, offset), offset) == k

def test_offset_shifts_one_letter():
    for p, k in PAIRS:
        base = letter_index(encrypt_letter(p, k, 0))
        assert encrypt_letter(p, k, 1) == ALPHABET[(base + 1) % 26]

def test_offset_example_h_k():
    assert encrypt_letter("H", "K", 0) == "R"
    assert encrypt_letter("H", "K", 1) == "S"

def test_wraparound():
    assert encrypt_letter("Z", "B", 0) == "A"
    assert encrypt_letter("Z", "A", 1) == "A"
    assert decrypt_letter("A", "B", 0) == "Z"

def test_letter_functions_reject_bad_input():
    with pytest.raises(ValueError):
        encrypt_letter("h", "K")
    with pytest.raises(ValueError):
        decrypt_letter("H", "!")
    with pytest.raises(ValueError):
        find_key_letter("H", "R", 2)

# ── run ──────────────────────────────────────────────────────────────────────
def test_run_classic_example():
    res = run("HELLO", "KEY", "encrypt", 0)
    assert res.text == "RIJVS"
    assert res.trace[0] == AlignmentStep("H", "K", "R")
    assert [s.key for s in res.trace] == list("KEYKE")

def test_run_sanitizes_text_and_key():
    assert run("hello, world", "k e y!", "encrypt", 0).text == run("HELLOWORLD", "KEY").text

@pytest.mark.parametrize("text,key", [("", "KEY"), ("hello!!!", ""), ("123", "KEY"), ("HELLO", "42")])
def test_run_empty_policy(text, key):
    res = run(text, key, "encrypt", 0)
    assert res == CipherResult("", ())
    assert res.trace == ()

@pytest.mark.parametrize("offset", [0, 1])
def test_run_roundtrip(offset):
    plain = sanitize("Attack at dawn, hold the eastern ridge until relieved")
    ct = run(plain, "LEMON", "encrypt", offset).text
    assert run(ct, "LEMON", "decrypt", offset).text == plain

def test_run_decrypt_trace_labels_by_role():
    res = run("RIJVS", "KEY", "decrypt", 0)
    assert res.text == "HELLO"
    assert res.trace[0] == AlignmentStep(plain="H", key="K", cipher="R")
    assert "".join(s.cipher for s in res.trace) == "RIJVS"
    assert "".join(s.plain for s in res.trace) == "HELLO"

@pytest.mark.parametrize("offset", [0, 1])
def test_single_letter_key_is_caesar(offset):
    plain = "THEQUICKBROWNFOX"
    ct = run(plain, "D", "encrypt", offset).text
    shifts = {(letter_index(c) - letter_index(p)) % 26 for p, c in zip(plain, ct)}
    assert shifts == {(letter_index("D") + offset) % 26}

def test_run_rejects_bad_mode_and_offset():
    with pytest.raises(ValueError):
        run("HELLO", "KEY", "scramble")
    with pytest.raises(ValueError):
        run("HELLO", "KEY", "encrypt", 3)

# ── VigenereCipher ───────────────────────────────────────────────────────────
def test_cipher_class_roundtrip():
    v = VigenereCipher("lemon", offset=1)
    assert v.key == "LEMON"
    ct = v.encrypt("Attack at dawn")
    assert v.decrypt(ct) == "ATTACKATDAWN"

def test_cipher_class_rejects_empty_key():
    with pytest.raises(ValueError):
        VigenereCipher("1234")

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
