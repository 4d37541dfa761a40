"""
Main Tab: Encrypt / Decrypt
===========================
Full-text Vigenère with the correspondence trace, plus the two ways text
enters the tool from outside: a `?text=` URL parameter and a dropped or
selected text file.
"""

import logging
import mimetypes
import os
from typing import List, NamedTuple, Optional, Tuple
from urllib.parse import parse_qs, urlsplit

from ..cipher import AlignmentStep, run, sanitize
from ..indexing import IndexingModeState
from ..tabula import cell_position, trace_rows
from ..validation import (
    MSG_FILE_TYPE,
    ValidationResult,
    clean_external_text,
    validate_file,
    validate_input_text,
)

logger = logging.getLogger(__name__)


class MainTabResult(NamedTuple):
    sanitized_input: str
    output:          str
    trace:           Tuple[AlignmentStep, ...]
    rows:            List[Tuple[str, str]]
    validation:      ValidationResult
    offset:          int

    def highlight(self, index: int) -> Tuple[int, int]:
        """Tabula recta cell for trace position `index`."""
        step = self.trace[index]
        return cell_position(step.plain, step.key)


def process_text(text: str, key: str, mode: str, state: IndexingModeState) -> MainTabResult:
    """
    Run the cipher for the main tab.

    Raises ValueError with a message for the user when the text or key
    is blank, or when the text has no letters at all.
    """
    if not text or not text.strip():
        raise ValueError("Please enter some text.")
    if not key or not key.strip():
        raise ValueError("Please enter a key.")

    clean = sanitize(text)
    if not clean:
        raise ValueError("Please enter text containing letters.")

    offset = state.get_offset()
    result = run(text, key, mode, offset)
    return MainTabResult(
        sanitized_input=clean,
        output=result.text,
        trace=result.trace,
        rows=trace_rows(result.trace, mode),
        validation=validate_input_text(text),
        offset=offset,
    )


def load_text_from_query(query: str) -> Optional[str]:
    """
    Read the `text` parameter from a URL or bare query string.

    Returns the cleaned text, or None when the parameter is absent or
    cleans down to nothing.
    """
    if "?" in query or "://" in query:
        query = urlsplit(query).query
    values = parse_qs(query.lstrip("?")).get("text")
    if not values:
        return None
    cleaned = clean_external_text(values[0])
    if not cleaned:
        return None
    logger.info("Text loaded from URL parameter")
    return cleaned


def load_text_file(path: str, mime_type: Optional[str] = None) -> str:
    """
    Validate, read and clean a text file for the input field.

    Without an explicit `mime_type` the type is guessed from the file name;
    an unrecognised extension counts as an unknown type.

    Raises ValueError if the file is rejected or empty.
    """
    if mime_type is None:
        mime_type = mimetypes.guess_type(path)[0] or ""
    validation = validate_file(os.path.basename(path), os.path.getsize(path), mime_type)
    if not validation.is_valid:
        raise ValueError(validation.message)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            content = fh.read()
    except UnicodeDecodeError as e:
        raise ValueError(MSG_FILE_TYPE) from e
    content = clean_external_text(content)
    if not content.strip():
        raise ValueError("The file is empty.")
    logger.info(f"File loaded: {os.path.basename(path)} ({len(content)} chars)")
    return content
