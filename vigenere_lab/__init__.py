"""
vigenere_lab
============
Teaching toolkit for the Vigenère polyalphabetic cipher.

Modules:
    cipher      Engine: sanitize, key extension, letter arithmetic, traced runs
    indexing    Persisted A=0 / A=1 indexing mode with change notification
    storage     Key-value persistence for the indexing mode
    validation  Input, key and file checks; cleaning of external text
    tabula      26×26 tabula recta, trace layout, PNG rendering
    tabs        Main, lab (Caesar / one-time pad) and research surfaces

Not a security tool: the one-time pad appears only as a teaching point.
"""

__version__ = "1.0.0"

from .cipher     import (
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
from .indexing   import IndexingModeState
from .storage    import JsonFileStore, MemoryStore
from .validation import ValidationResult
from .tabula     import render_tabula_png, tabula_recta

__all__ = [
    "ALPHABET",
    "AlignmentStep",
    "CipherResult",
    "VigenereCipher",
    "decrypt_letter",
    "encrypt_letter",
    "extend_key",
    "find_key_letter",
    "letter_index",
    "run",
    "sanitize",
    "IndexingModeState",
    "JsonFileStore",
    "MemoryStore",
    "ValidationResult",
    "render_tabula_png",
    "tabula_recta",
]
