"""The key-value store front end over a pluggable backend."""

from __future__ import annotations

from typing import Any, Iterator

from .backend import KvBackend
from .codec import CodecError, decode_value, encode_value
from .keys import Key, into_key
from .listing import KvListBuilder


class Kv:
    """Stores Python values under typed composite keys in a backend."""

    def __init__(self, backend: KvBackend) -> None:
        self.backend = backend

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``."""
        self.backend.set(into_key(key), encode_value(value))

    def get(self, key: Any) -> Any:
        """Return the value under ``key``, or None if it is missing or
        cannot be decoded."""
        raw = self.backend.get(into_key(key))
        if raw is None:
            return None
        try:
            return decode_value(raw)
        except CodecError:
            return None

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        self.backend.delete(into_key(key))

    def clear(self) -> None:
        """Remove all data."""
        self.backend.clear()

    def keys(self) -> Iterator[Key]:
        """Iterate over all stored keys."""
        return self.backend.keys()

    def list(self) -> KvListBuilder:
        """Start a filtered, ordered listing of entries."""
        return KvListBuilder(self.backend)