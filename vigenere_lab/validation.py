"""
Input validation for text, keys and loaded files.

Each check returns a ValidationResult rather than raising: a field with
no usable letters is an ordinary state while the user is typing.

Result types:
    none     nothing to show
    warning  input accepted, some characters will be ignored
    error    input cannot be processed as it stands
"""

import logging
import re
from typing import NamedTuple

from .cipher import sanitize

logger = logging.getLogger(__name__)

MAX_INPUT_LENGTH = 10_000
MAX_FILE_SIZE    = 10 * 1024 * 1024   # 10 MiB
TEXT_EXTENSIONS  = (".txt", ".text")

MSG_FULL_WIDTH   = "Full-width characters are not allowed (use half-width ASCII only)."
MSG_NO_LETTERS   = "Please enter text containing at least one letter (A-Z)."
MSG_IGNORED      = "Symbols, digits and spaces will be ignored (letters only are used)."
MSG_LAB_IGNORED  = "Characters other than A-Z will be ignored."
MSG_CAESAR_KEY   = "Please enter exactly one letter."
MSG_FILE_TOO_BIG = "File is too large (maximum: 10MB)."
MSG_FILE_TYPE    = "Only text files (.txt) are supported."

_NON_ASCII       = re.compile(r"[^\x00-\x7F]")
_CONTROL_CHARS   = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x9F]")
_UNSAFE_SCHEME   = re.compile(r"^(javascript|data|vbscript|file|about|blob):", re.IGNORECASE)
_HTML_ESCAPES    = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
    "`": "&#x60;",
    "=": "&#x3D;",
}
_HTML_SPECIAL    = re.compile("[" + re.escape("".join(_HTML_ESCAPES)) + "]")


class ValidationResult(NamedTuple):
    is_valid: bool
    type:     str = "none"
    message:  str = ""


OK = ValidationResult(True)


def has_usable_letters(text: str) -> bool:
    return bool(text) and bool(sanitize(text))


def validate_input_text(text: str) -> ValidationResult:
    """Main encrypt/decrypt input field."""
    if not text:
        return OK
    if _NON_ASCII.search(text):
        return ValidationResult(False, "error", MSG_FULL_WIDTH)
    clean = sanitize(text)
    if not clean:
        return ValidationResult(False, "error", MSG_NO_LETTERS)
    if len(clean) < len(text):
        return ValidationResult(True, "warning", MSG_IGNORED)
    return OK


def validate_key(key: str) -> ValidationResult:
    if not has_usable_letters(key):
        return ValidationResult(False)
    return OK


def validate_lab_text(text: str) -> ValidationResult:
    """
    Lab experiment input. Spaces and punctuation pass silently; only
    letters that the cipher cannot use (accented, non-Latin) warn.
    """
    if not text or not text.strip():
        return ValidationResult(False)
    clean = sanitize(text)
    if not clean:
        return ValidationResult(False, "error", MSG_NO_LETTERS)
    ascii_letters = re.sub(r"[^a-zA-Z]", "", text)
    letters = [ch for ch in text if ch.isalpha()]
    if len(letters) != len(ascii_letters):
        return ValidationResult(True, "warning", MSG_LAB_IGNORED)
    return OK


def validate_caesar_key(key: str) -> ValidationResult:
    trimmed = (key or "").strip().upper()
    if not trimmed:
        return ValidationResult(False)
    if not re.fullmatch(r"[A-Z]", trimmed):
        return ValidationResult(False, "error", MSG_CAESAR_KEY)
    return OK


def validate_file(name: str, size: int, mime_type: str = "") -> ValidationResult:
    if size > MAX_FILE_SIZE:
        return ValidationResult(False, "error", MSG_FILE_TOO_BIG)
    lower = name.lower()
    is_text = lower.endswith(TEXT_EXTENSIONS) or mime_type in ("text/plain", "")
    if not is_text:
        return ValidationResult(False, "error", MSG_FILE_TYPE)
    return OK


def escape_html(text: str) -> str:
    """Entity-escape markup characters for display in an HTML page."""
    return _HTML_SPECIAL.sub(lambda m: _HTML_ESCAPES[m.group(0)], text or "")


def clean_external_text(text: str) -> str:
    """
    Clean text arriving from a URL parameter or a loaded file before it is
    put in an input field.

    Truncates to MAX_INPUT_LENGTH, drops control characters (tab and
    newlines survive) and strips a leading script-capable URL scheme.
    The result is still plain text; use escape_html before embedding it
    in markup.
    """
    if not text:
        return ""
    if len(text) > MAX_INPUT_LENGTH:
        logger.warning(f"Input text truncated from {len(text)} to {MAX_INPUT_LENGTH} characters")
        text = text[:MAX_INPUT_LENGTH]
    text = _CONTROL_CHARS.sub("", text)
    return _UNSAFE_SCHEME.sub("", text)
