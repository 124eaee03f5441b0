"""Filtered, ordered iteration over the entries of a backend."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from .backend import KvBackend
from .codec import CodecError, decode_value
from .keys import Key, into_key


class KvListBuilder:
    """Collects prefix and inclusive start/end bounds, then iterates the
    matching ``(key, value)`` pairs in key order.

    Entries whose value cannot be decoded are skipped.
    """

    def __init__(self, backend: KvBackend) -> None:
        self._backend = backend
        self._start: Optional[Key] = None
        self._end: Optional[Key] = None
        self._prefix: Optional[Key] = None

    def start(self, key: Any) -> "KvListBuilder":
        """Only include keys greater than or equal to ``key``."""
        self._start = into_key(key)
        return self

    def end(self, key: Any) -> "KvListBuilder":
        """Only include keys less than or equal to ``key``."""
        self._end = into_key(key)
        return self

    def prefix(self, prefix: Any) -> "KvListBuilder":
        """Only include keys whose bytes begin with those of ``prefix``."""
        self._prefix = into_key(prefix)
        return self

    def _matches(self, key: Key) -> bool:
        if self._prefix is not None and not key.starts_with(self._prefix):
            return False
        if self._start is not None and key < self._start:
            return False
        if self._end is not None and key > self._end:
            return False
        return True

    def __iter__(self) -> Iterator[Tuple[Key, Any]]:
        selected = sorted(key for key in self._backend.keys() if self._matches(key))
        for key in selected:
            raw = self._backend.get(key)
            if raw is None:
                continue
            try:
                value = decode_value(raw)
            except CodecError:
                continue
            yield key, value