"""A key-value backend stored in an SQLite database."""

from __future__ import annotations

import sqlite3
from typing import Iterable, Iterator, Optional, Union

from .backend import KvBackend
from .keys import Key

_SCHEMA = "CREATE TABLE IF NOT EXISTS kv (key BLOB PRIMARY KEY, value BLOB NOT NULL);"


class SqliteBackend(KvBackend):
    """Stores entries in a single ``kv`` table of an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection
        with self._conn:
            self._conn.execute(_SCHEMA)

    @classmethod
    def in_memory(cls) -> "SqliteBackend":
        """Open a backend on a fresh in-memory database."""
        return cls(sqlite3.connect(":memory:"))

    @classmethod
    def file(cls, path: Union[str, "os.PathLike[str]"]) -> "SqliteBackend":  # noqa: F821
        """Open a backend on the database file at ``path``, creating it if needed."""
        return cls(sqlite3.connect(path))

    def set(self, key: Key, value: bytes) -> None:
        with self._conn:
            self._conn.execute(
                "REPLACE INTO kv (key, value) VALUES (?, ?)",
                (key.data, bytes(value)),
            )

    def get(self, key: Key) -> Optional[bytes]:
        row = self._conn.execute(
            "SELECT value FROM kv WHERE key = ?", (key.data,)
        ).fetchone()
        return None if row is None else bytes(row[0])

    def delete(self, key: Key) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM kv WHERE key = ?", (key.data,))

    def clear(self) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM kv")

    def get_many(self, keys: Iterable[Key]) -> Iterator[bytes]:
        found = [value for value in map(self.get, keys) if value is not None]
        return iter(found)

    def keys(self) -> Iterator[Key]:
        rows = self._conn.execute("SELECT key FROM kv ORDER BY key").fetchall()
        return iter([Key(bytes(row[0])) for row in rows])

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> "SqliteBackend":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()