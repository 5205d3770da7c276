"""Per-key mutual exclusion for read-modify-write on the record store. Thread-safe; no global state."""

import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator


class _KeyEntry:
    __slots__ = ("lock", "holders")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        # Threads holding or waiting on lock.
        self.holders = 0


class KeyedLock:
    """
    One lock per key while anyone holds or waits on it. Mutations on different
    keys run concurrently; mutations on the same key are serialized. Entries are
    dropped when the last holder leaves, so the registry stays bounded by the
    number of keys in use.
    """

    def __init__(self) -> None:
        self._registry_lock = threading.Lock()
        self._entries: Dict[Hashable, _KeyEntry] = {}

    def _acquire_entry(self, key: Hashable) -> _KeyEntry:
        with self._registry_lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = _KeyEntry()
                self._entries[key] = entry
            entry.holders += 1
            return entry

    def _release_entry(self, key: Hashable, entry: _KeyEntry) -> None:
        with self._registry_lock:
            entry.holders -= 1
            if entry.holders == 0:
                del self._entries[key]

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        """Hold the lock for key for the duration of the block."""
        entry = self._acquire_entry(key)
        try:
            with entry.lock:
                yield
        finally:
            self._release_entry(key, entry)

    def is_held(self, key: Hashable) -> bool:
        with self._registry_lock:
            entry = self._entries.get(key)
        return entry is not None and entry.lock.locked()

    @property
    def key_count(self) -> int:
        with self._registry_lock:
            return len(self._entries)
