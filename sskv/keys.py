"""Binary keys: encoding of typed segments, decoding back, and ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

_TAG_STR = 0x01
_TAG_U64 = 0x02
_TAG_I64 = 0x03
_TAG_BOOL = 0x05

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_U32_MAX = 2**32 - 1


class DecodeError(ValueError):
    """Raised when a key cannot be decoded into the requested segment types."""


@dataclass(frozen=True, order=True)
class Key:
    """An immutable binary key; keys compare and sort by their raw bytes."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def starts_with(self, prefix: Union["Key", bytes]) -> bool:
        """Return True if this key begins with the bytes of ``prefix``."""
        raw = prefix.data if isinstance(prefix, Key) else bytes(prefix)
        return self.data.startswith(raw)

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


class KeyDecoder:
    """Reads typed segments one after another from the bytes of a key.

    Each ``next_*`` method returns ``None`` and consumes nothing when the
    next segment is missing, truncated or of another type.
    """

    def __init__(self, data: Union[Key, bytes]) -> None:
        self._data = data.data if isinstance(data, Key) else bytes(data)
        self._pos = 0

    @property
    def remaining(self) -> bytes:
        """The bytes not yet consumed."""
        return self._data[self._pos:]

    def _available(self) -> int:
        return len(self._data) - self._pos

    def _tag_is(self, tag: int, minimum: int) -> bool:
        return self._available() >= minimum and self._data[self._pos] == tag

    def next_str(self) -> Optional[str]:
        if not self._tag_is(_TAG_STR, 5):
            return None
        start = self._pos + 5
        length = int.from_bytes(self._data[self._pos + 1:start], "big")
        if self._available() < 5 + length:
            return None
        try:
            text = self._data[start:start + length].decode("utf-8")
        except UnicodeDecodeError:
            return None
        self._pos = start + length
        return text

    def next_u64(self) -> Optional[int]:
        if not self._tag_is(_TAG_U64, 9):
            return None
        value = int.from_bytes(self._data[self._pos + 1:self._pos + 9], "big")
        self._pos += 9
        return value

    def next_i64(self) -> Optional[int]:
        if not self._tag_is(_TAG_I64, 9):
            return None
        value = int.from_bytes(
            self._data[self._pos + 1:self._pos + 9], "big", signed=True
        )
        self._pos += 9
        return value

    def next_bool(self) -> Optional[bool]:
        if not self._tag_is(_TAG_BOOL, 2):
            return None
        flag = self._data[self._pos + 1]
        if flag not in (0, 1):
            return None
        self._pos += 2
        return flag == 1


def encode_segment(value: Any) -> bytes:
    """Encode one key segment.

    Strings are length-prefixed UTF-8, non-negative integers are unsigned
    64-bit, negative integers signed 64-bit, booleans a single flag byte,
    and a ``Key`` contributes its raw bytes unchanged.
    """
    if isinstance(value, Key):
        return value.data
    if isinstance(value, bool):
        return bytes((_TAG_BOOL, 1 if value else 0))
    if isinstance(value, int):
        if 0 <= value <= _U64_MAX:
            return bytes((_TAG_U64,)) + value.to_bytes(8, "big")
        if _I64_MIN <= value < 0:
            return bytes((_TAG_I64,)) + value.to_bytes(8, "big", signed=True)
        raise ValueError(f"integer {value} does not fit in a 64-bit key segment")
    if isinstance(value, str):
        raw = value.encode("utf-8")
        if len(raw) > _U32_MAX:
            raise ValueError("string segment is too long for a key")
        return bytes((_TAG_STR,)) + len(raw).to_bytes(4, "big") + raw
    raise TypeError(f"cannot use {type(value).__name__} as a key segment")


def into_key(value: Any) -> Key:
    """Build a ``Key`` from a key, a tuple of segments, a single segment,
    or an object providing an ``into_key()`` method."""
    if isinstance(value, Key):
        return value
    if isinstance(value, tuple):
        if not value:
            raise ValueError("a key needs at least one segment")
        return Key(b"".join(encode_segment(part) for part in value))
    convert = getattr(value, "into_key", None)
    if callable(convert):
        result = convert()
        if not isinstance(result, Key):
            raise TypeError("into_key() must return a Key")
        return result
    return Key(encode_segment(value))


def _decode_one(decoder: KeyDecoder, kind: type) -> Any:
    if kind is bool:
        value = decoder.next_bool()
    elif kind is str:
        value = decoder.next_str()
    elif kind is int:
        value = decoder.next_u64()
        if value is None:
            value = decoder.next_i64()
    else:
        raise TypeError(f"cannot decode a key segment as {kind.__name__}")
    if value is None:
        raise DecodeError(f"expected a {kind.__name__} segment, found none")
    return value


def from_key(key: Union[Key, bytes], types: Union[type, tuple]) -> Any:
    """Decode ``key`` into one value of type ``types``, or into a tuple of
    values when ``types`` is a tuple of ``str``, ``int`` and ``bool``."""
    decoder = KeyDecoder(key)
    if isinstance(types, tuple):
        return tuple(_decode_one(decoder, kind) for kind in types)
    return _decode_one(decoder, types)