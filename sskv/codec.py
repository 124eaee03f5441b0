"""Compact self-describing binary encoding for stored values."""

from __future__ import annotations

import struct
from typing import Any

_NONE = 0x00
_FALSE = 0x01
_TRUE = 0x02
_INT = 0x03
_FLOAT = 0x04
_STR = 0x05
_BYTES = 0x06
_LIST = 0x07
_TUPLE = 0x08
_DICT = 0x09

_DOUBLE = struct.Struct(">d")


class CodecError(ValueError):
    """Raised when bytes do not hold a well-formed encoded value."""


def _write_uvarint(number: int, out: bytearray) -> None:
    while True:
        low = number & 0x7F
        number >>= 7
        if number:
            out.append(low | 0x80)
        else:
            out.append(low)
            return


def _encode(value: Any, out: bytearray) -> None:
    if value is None:
        out.append(_NONE)
    elif isinstance(value, bool):
        out.append(_TRUE if value else _FALSE)
    elif isinstance(value, int):
        out.append(_INT)
        _write_uvarint(value * 2 if value >= 0 else -value * 2 - 1, out)
    elif isinstance(value, float):
        out.append(_FLOAT)
        out += _DOUBLE.pack(value)
    elif isinstance(value, str):
        raw = value.encode("utf-8")
        out.append(_STR)
        _write_uvarint(len(raw), out)
        out += raw
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        out.append(_BYTES)
        _write_uvarint(len(raw), out)
        out += raw
    elif isinstance(value, (list, tuple)):
        out.append(_LIST if isinstance(value, list) else _TUPLE)
        _write_uvarint(len(value), out)
        for item in value:
            _encode(item, out)
    elif isinstance(value, dict):
        out.append(_DICT)
        _write_uvarint(len(value), out)
        for key, item in value.items():
            _encode(key, out)
            _encode(item, out)
    else:
        raise TypeError(f"cannot encode a value of type {type(value).__name__}")


def encode_value(value: Any) -> bytes:
    """Encode ``value``: None, bool, int, float, str, bytes, and lists,
    tuples and dicts of these."""
    out = bytearray()
    _encode(value, out)
    return bytes(out)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def take(self, count: int) -> bytes:
        end = self.pos + count
        if end > len(self.data):
            raise CodecError("unexpected end of data")
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk

    def byte(self) -> int:
        return self.take(1)[0]

    def uvarint(self) -> int:
        number = 0
        shift = 0
        while True:
            current = self.byte()
            number |= (current & 0x7F) << shift
            if not current & 0x80:
                return number
            shift += 7


def _decode(reader: _Reader) -> Any:
    tag = reader.byte()
    if tag == _NONE:
        return None
    if tag == _FALSE:
        return False
    if tag == _TRUE:
        return True
    if tag == _INT:
        raw = reader.uvarint()
        return raw >> 1 if raw % 2 == 0 else -((raw + 1) >> 1)
    if tag == _FLOAT:
        return _DOUBLE.unpack(reader.take(_DOUBLE.size))[0]
    if tag == _STR:
        try:
            return reader.take(reader.uvarint()).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CodecError("string is not valid UTF-8") from exc
    if tag == _BYTES:
        return reader.take(reader.uvarint())
    if tag in (_LIST, _TUPLE):
        items = [_decode(reader) for _ in range(reader.uvarint())]
        return items if tag == _LIST else tuple(items)
    if tag == _DICT:
        result = {}
        for _ in range(reader.uvarint()):
            key = _decode(reader)
            try:
                result[key] = _decode(reader)
            except TypeError as exc:
                raise CodecError("dictionary key is not hashable") from exc
        return result
    raise CodecError(f"unknown type tag {tag:#04x}")


def decode_value(data: bytes) -> Any:
    """Decode bytes written by ``encode_value``; raise ``CodecError`` if malformed."""
    reader = _Reader(bytes(data))
    value = _decode(reader)
    if reader.pos != len(reader.data):
        raise CodecError("trailing bytes after value")
    return value