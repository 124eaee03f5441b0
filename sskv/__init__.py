"""A pluggable key-value store with binary-sorted, tuple-structured keys and
in-memory and SQLite backends."""

__version__ = "0.1.0"