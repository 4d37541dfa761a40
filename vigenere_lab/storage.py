"""
Persistence for the indexing-mode flag.

A tiny key-value interface with two backends:
    MemoryStore    in-process dict (tests, embedding)
    JsonFileStore  one JSON object on disk

Location of the default state file:
    $VIGENERE_LAB_STATE            if set
    ~/.vigenere_lab/state.json     otherwise
"""

import json
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)

STATE_ENV_VAR  = "VIGENERE_LAB_STATE"
STATE_DIR_NAME = ".vigenere_lab"
STATE_FILE     = "state.json"


def default_state_path() -> str:
    override = os.environ.get(STATE_ENV_VAR)
    if override:
        return os.path.expanduser(override)
    return os.path.join(os.path.expanduser("~"), STATE_DIR_NAME, STATE_FILE)


class KeyValueStore:
    """String key -> string value. Absent keys read as None."""

    def get(self, name: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, name: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):

    def __init__(self, initial: Dict[str, str] = None):
        self._data = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self._data.get(name)

    def set(self, name: str, value: str) -> None:
        self._data[name] = str(value)


class JsonFileStore(KeyValueStore):
    """
    Key-value pairs kept in a single JSON file.

    A missing file reads as empty. A corrupt or unreadable file is logged
    and also read as empty; the next write replaces it. Writes go to a
    temporary file first and are moved into place with os.replace.
    """

    def __init__(self, path: str = None):
        self._path = path or default_state_path()

    @property
    def path(self) -> str:
        return self._path

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self._path):
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable state file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self._path}: not a JSON object")
            return {}
        return data

    def get(self, name: str) -> Optional[str]:
        value = self._load().get(name)
        return None if value is None else str(value)

    def set(self, name: str, value: str) -> None:
        data = self._load()
        data[name] = str(value)
        parent = os.path.dirname(self._path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        tmp = self._path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, sort_keys=True)
        os.replace(tmp, self._path)

    def __repr__(self):
        return f"JsonFileStore({self._path!r})"
