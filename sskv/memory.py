"""A key-value backend held entirely in memory."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from .backend import KvBackend
from .keys import Key


class MemoryBackend(KvBackend):
    """Stores entries in a dictionary; contents last as long as the object."""

    def __init__(self) -> None:
        self._entries: Dict[Key, bytes] = {}

    def set(self, key: Key, value: bytes) -> None:
        self._entries[key] = bytes(value)

    def get(self, key: Key) -> Optional[bytes]:
        return self._entries.get(key)

    def delete(self, key: Key) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def get_many(self, keys: Iterable[Key]) -> Iterator[bytes]:
        wanted = set(keys)
        found = [value for key, value in self._entries.items() if key in wanted]
        return iter(found)

    def keys(self) -> Iterator[Key]:
        return iter(list(self._entries))