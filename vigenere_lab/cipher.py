"""
Cipher Engine: Vigenère Polyalphabetic Substitution
====================================================
Pure, stateless letter arithmetic over the 26-letter English alphabet.

Every function takes the indexing offset (0 for A=0, 1 for A=1) as an
explicit argument. The offset adds a constant shift to each combination:

    encrypt:  C = (P + K + offset) mod 26
    decrypt:  P = (C - K - offset) mod 26
    key:      K = (C - P - offset) mod 26

With offset 0 this is the textbook Vigenère cipher. With offset 1 every
result moves one letter further along; the structure of the cipher is
unchanged, only the labelling of the alphabet differs.

Input gate: `sanitize` uppercases and strips everything outside A-Z.
The letter-level functions assume sanitized input and raise ValueError
on anything else.
"""

import logging
from typing import List, NamedTuple, Tuple

logger = logging.getLogger(__name__)

ALPHABET      = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = 26
OFFSETS       = (0, 1)
MODES         = ("encrypt", "decrypt")


class AlignmentStep(NamedTuple):
    """One position of a run, labelled by cryptographic role."""
    plain:  str
    key:    str
    cipher: str


class CipherResult(NamedTuple):
    text:  str
    trace: Tuple[AlignmentStep, ...]


EMPTY_RESULT = CipherResult("", ())


def sanitize(text: str) -> str:
    """Uppercase `text` and drop every character outside A-Z."""
    return "".join(ch for ch in text.upper() if "A" <= ch <= "Z")


def letter_index(letter: str) -> int:
    """Zero-based alphabet position of a single uppercase letter."""
    if not isinstance(letter, str) or len(letter) != 1 or not "A" <= letter <= "Z":
        raise ValueError(f"Expected a single letter A-Z, got {letter!r}.")
    return ord(letter) - ord("A")


def _check_offset(offset: int) -> int:
    if offset not in OFFSETS:
        raise ValueError(f"Indexing offset must be 0 or 1, got {offset!r}.")
    return offset


def extend_key(key: str, length: int) -> str:
    """
    Tile `key` end-to-end and cut it to exactly `length` letters.

    extend_key("KEY", 7) -> "KEYKEYK"
    """
    if not key:
        raise ValueError("Key must contain at least one letter.")
    if length < 0:
        raise ValueError("Target length must not be negative.")
    if length == 0:
        return ""
    repeats = -(-length // len(key))
    return (key * repeats)[:length]


def encrypt_letter(plain: str, key: str, offset: int = 0) -> str:
    shift = letter_index(key) + _check_offset(offset)
    return ALPHABET[(letter_index(plain) + shift) % ALPHABET_SIZE]


def decrypt_letter(cipher: str, key: str, offset: int = 0) -> str:
    shift = letter_index(key) + _check_offset(offset)
    return ALPHABET[(letter_index(cipher) - shift + ALPHABET_SIZE) % ALPHABET_SIZE]


def find_key_letter(plain: str, cipher: str, offset: int = 0) -> str:
    """Recover the key letter that turns `plain` into `cipher`."""
    diff = letter_index(cipher) - letter_index(plain) - _check_offset(offset)
    return ALPHABET[(diff + ALPHABET_SIZE) % ALPHABET_SIZE]


def run(text: str, key: str, mode: str = "encrypt", offset: int = 0) -> CipherResult:
    """
    Encrypt or decrypt a whole text and record the per-letter alignment.

    Both `text` and `key` are sanitized first. If either has no letters
    left the result is empty: that is a normal state (the user is still
    typing), not an error.

    The trace always reports (plain, key, cipher). In decrypt mode the
    `plain` field holds the computed letter and `cipher` the input.
    """
    if mode not in MODES:
        raise ValueError(f"Mode must be 'encrypt' or 'decrypt', got {mode!r}.")
    _check_offset(offset)

    clean_text = sanitize(text)
    clean_key  = sanitize(key)
    if not clean_text or not clean_key:
        return EMPTY_RESULT

    full_key = extend_key(clean_key, len(clean_text))
    out: List[str] = []
    trace: List[AlignmentStep] = []

    for ch, k in zip(clean_text, full_key):
        if mode == "encrypt":
            res = encrypt_letter(ch, k, offset)
            trace.append(AlignmentStep(ch, k, res))
        else:
            res = decrypt_letter(ch, k, offset)
            trace.append(AlignmentStep(res, k, ch))
        out.append(res)

    logger.debug(f"run: mode={mode} offset={offset} letters={len(clean_text)} key={len(clean_key)}")
    return CipherResult("".join(out), tuple(trace))


class VigenereCipher:
    """
    Vigenère cipher bound to one key and one indexing offset.

    Non-letters are dropped from the input; output is uppercase A-Z only.
    """

    def __init__(self, key: str, offset: int = 0):
        clean = sanitize(key)
        if not clean:
            raise ValueError("Vigenère key must contain at least one letter.")
        self._key    = clean
        self._offset = _check_offset(offset)

    @property
    def key(self) -> str:
        return self._key

    @property
    def offset(self) -> int:
        return self._offset

    def run(self, text: str, mode: str = "encrypt") -> CipherResult:
        return run(text, self._key, mode, self._offset)

    def encrypt(self, plaintext: str) -> str:
        return self.run(plaintext, "encrypt").text

    def decrypt(self, ciphertext: str) -> str:
        return self.run(ciphertext, "decrypt").text

    def __repr__(self):
        return f"VigenereCipher(key={self._key!r}, offset={self._offset})"
