# sskv

`sskv` is a small key-value store library. Keys are tuples of strings,
integers and booleans, encoded into bytes that sort in a sensible order:
numeric segments sort by value rather than as text. Values are ordinary Python
objects, stored in a compact binary encoding. Storage is pluggable: an
in-memory backend and an SQLite backend are included.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from sskv.store import Kv
from sskv.memory import MemoryBackend

kv = Kv(MemoryBackend())
kv.set(("user", 2), "alice")
kv.set(("user", 10), "bob")
kv.set(("group", 1), "admins")

kv.get(("user", 2))        # "alice"
kv.get(("missing",))       # None

for key, value in kv.list().prefix(("user",)):
    print(key, value)      # ("user", 2) comes before ("user", 10)

kv.delete(("user", 2))
kv.clear()
```

`Kv` offers `set`, `get`, `delete`, `clear`, `keys` and `list`. Its `backend`
attribute is the backend it was built with.

## Keys

`sskv.keys.into_key` turns its argument into a `sskv.keys.Key`. It accepts a
`Key` (returned unchanged), a non-empty tuple of segments, a single segment, or
any object with an `into_key()` method that returns a `Key`. Each segment is
tagged with its type and written in big-endian form
(`sskv.keys.encode_segment` encodes one):

- `str`: the tag, a 4-byte length, then the UTF-8 bytes
- non-negative `int` up to 2**64 - 1: an unsigned 64-bit segment
- negative `int` down to -2**63: a signed 64-bit segment
- `bool`: a single byte, 0 or 1
- a `Key` inside a tuple: its raw bytes, unchanged

An integer outside those ranges or an empty tuple raises `ValueError`; any
other segment type raises `TypeError`.

`Key` is immutable, hashable, and compares and sorts by its raw bytes
(`key.data`). `Key.starts_with` checks for a byte prefix.

`sskv.keys.from_key(key, types)` reads segments back, given the type of each:
`str`, `int` or `bool`, or a tuple of these.

```python
from sskv.keys import into_key, from_key

key = into_key(("global", "item", 101))
from_key(key, (str, str, int))   # ("global", "item", 101)
```

A key that does not hold what was asked for raises `sskv.keys.DecodeError`
(a `ValueError`). For lower-level reading, `sskv.keys.KeyDecoder` offers
`next_str`, `next_u64`, `next_i64` and `next_bool`, each returning `None` and
consuming nothing when the next segment does not match.

## Values

Values go through `sskv.codec.encode_value` and `sskv.codec.decode_value`.
Supported are `None`, `bool`, `int`, `float`, `str`, `bytes`, and lists,
tuples and dicts of these. Encoding any other type raises `TypeError`.
Decoding malformed bytes raises `sskv.codec.CodecError`.

`Kv.get` returns `None` both for a missing key and for a stored value that
cannot be decoded, so a stored `None` cannot be told apart from a missing one.

## Listing

`Kv.list()` returns a `sskv.listing.KvListBuilder`. Narrow it with `prefix`,
`start` and `end` (both bounds inclusive, compared on raw key bytes), then
iterate to get `(key, value)` pairs in key order:

```python
for key, value in kv.list().start(("k2",)).end(("k7",)):
    ...
```

Entries whose value cannot be decoded are skipped.

## Backends

- `sskv.memory.MemoryBackend` keeps everything in a dictionary; its `keys()`
  come in insertion order.
- `sskv.sqlite.SqliteBackend` stores data in a `kv` table of an SQLite
  database; its `keys()` come sorted. Build it with
  `SqliteBackend.in_memory()`, `SqliteBackend.file(path)`, or from an open
  `sqlite3.Connection`. Call `close()` when done, or use it as a context
  manager.

```python
from sskv.store import Kv
from sskv.sqlite import SqliteBackend

with SqliteBackend.file("data.db") as backend:
    kv = Kv(backend)
    kv.set(("num",), 42)
```

To write a backend of your own, subclass `sskv.backend.KvBackend` and implement
`set`, `get`, `delete`, `clear`, `get_many` and `keys`.

## What it does not do

`sskv` is a library only. It has no command-line program and no network
server; it stores data in the calling process, either in memory or in a local
SQLite file.