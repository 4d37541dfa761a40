"""
Indexing Mode State
===================
Owns the one persisted setting of the tool: whether the alphabet is
labelled from A=0 or from A=1.

The cipher functions never read this state themselves. Callers read
`get_offset()` once per operation and pass the value down.

Changes are broadcast to subscribers, which relabel tables and redo
any displayed computation.
"""

import logging
from typing import Callable, List

from .cipher import letter_index
from .storage import JsonFileStore, KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY    = "indexingMode"
DEFAULT_OFFSET = 0

Listener = Callable[[int], None]


class IndexingModeState:
    """
    Persisted A=0 / A=1 toggle with change notification.

    Not thread-safe: the store write and the notification are two
    separate steps. Callers sharing one instance across threads must
    serialise `set_offset` / `toggle_offset` themselves.
    """

    def __init__(self, store: KeyValueStore = None):
        self._store = store if store is not None else JsonFileStore()
        self._listeners: List[Listener] = []

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def get_offset(self) -> int:
        return 1 if self._store.get(STORAGE_KEY) == "1" else DEFAULT_OFFSET

    def label(self) -> str:
        return "A=1" if self.get_offset() == 1 else "A=0"

    def set_offset(self, value) -> int:
        """
        Store the offset and notify subscribers.

        Anything other than 1 is stored as 0. Subscribers are notified
        even when the value did not change.
        """
        offset = 1 if value == 1 else 0
        self._store.set(STORAGE_KEY, str(offset))
        logger.info(f"Indexing mode set to {'A=1' if offset else 'A=0'}")
        for listener in list(self._listeners):
            listener(offset)
        return offset

    def toggle_offset(self) -> int:
        return self.set_offset(0 if self.get_offset() == 1 else 1)

    def display_value(self, letter: str) -> int:
        """Alphabet position as shown to the user: A is 0 or 1, Z is 25 or 26."""
        return letter_index(letter) + self.get_offset()

    # ── notification ─────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def __repr__(self):
        return f"IndexingModeState({self.label()}, store={self._store!r})"
