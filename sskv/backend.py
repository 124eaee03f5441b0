"""The interface every key-value storage backend provides."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

from .keys import Key


class KvBackend(ABC):
    """A pluggable store of raw byte values under binary keys."""

    @abstractmethod
    def set(self, key: Key, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def get(self, key: Key) -> Optional[bytes]:
        """Return the value under ``key``, or None if there is none."""

    @abstractmethod
    def delete(self, key: Key) -> None:
        """Remove ``key``; removing a missing key is not an error."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""

    @abstractmethod
    def get_many(self, keys: Iterable[Key]) -> Iterator[bytes]:
        """Yield the values stored under those of ``keys`` that exist."""

    @abstractmethod
    def keys(self) -> Iterator[Key]:
        """Yield every stored key."""