"""
Fixed-width binary serializer (BCS-style).

Goals
-----
- Deterministic byte-for-byte output for the primitive shapes records are
  built from: fixed byte strings, little-endian unsigned integers, bools,
  length-prefixed byte strings and UTF-8 strings.
- Length prefixes are ULEB128 and capped at u32, as in BCS.
- No framing beyond that: a fixed-width value is written as-is, so a 32-byte
  account address occupies exactly 32 bytes on the wire.

API
---
- Serializer().serialize_*(...); .to_bytes()
- Deserializer(data).deserialize_*(...); .remaining()
- to_bcs_bytes(value) / from_bcs_bytes(cls, data)
- SerializationError / DeserializationError (from account_address.errors)
"""

from __future__ import annotations

from typing import Protocol, Type, TypeVar

from .errors import DeserializationError, SerializationError
from .hexutil import BytesLike

MAX_U8 = (1 << 8) - 1
MAX_U16 = (1 << 16) - 1
MAX_U32 = (1 << 32) - 1
MAX_U64 = (1 << 64) - 1
MAX_U128 = (1 << 128) - 1
MAX_U256 = (1 << 256) - 1

T = TypeVar("T")


class Serializable(Protocol):
    def serialize(self, serializer: "Serializer") -> None: ...


# -----------------------------------------------------------------------------
# Writer
# -----------------------------------------------------------------------------


class Serializer:
    __slots__ = ("_buf",)

    def __init__(self) -> None:
        self._buf = bytearray()

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def serialize(self, value: Serializable) -> None:
        value.serialize(self)

    def serialize_fixed_bytes(self, value: BytesLike) -> None:
        """Write raw bytes with no length prefix."""
        self._buf += bytes(value)

    def serialize_bytes(self, value: BytesLike) -> None:
        data = bytes(value)
        self.serialize_uleb128_as_u32(len(data))
        self._buf += data

    def serialize_str(self, value: str) -> None:
        self.serialize_bytes(value.encode("utf-8"))

    def serialize_bool(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise SerializationError(f"expected bool, got {type(value).__name__}")
        self._buf.append(1 if value else 0)

    def serialize_u8(self, value: int) -> None:
        self._write_uint(value, 1, MAX_U8)

    def serialize_u16(self, value: int) -> None:
        self._write_uint(value, 2, MAX_U16)

    def serialize_u32(self, value: int) -> None:
        self._write_uint(value, 4, MAX_U32)

    def serialize_u64(self, value: int) -> None:
        self._write_uint(value, 8, MAX_U64)

    def serialize_u128(self, value: int) -> None:
        self._write_uint(value, 16, MAX_U128)

    def serialize_u256(self, value: int) -> None:
        self._write_uint(value, 32, MAX_U256)

    def serialize_uleb128_as_u32(self, value: int) -> None:
        """
        Encode an unsigned integer (≤ u32) as ULEB128: 7 bits per byte,
        little-endian groups, MSB continuation bit.

            0x00 -> b'\\x00'
            0x7f -> b'\\x7f'
            0x80 -> b'\\x80\\x01'
        """
        if not isinstance(value, int) or value < 0 or value > MAX_U32:
            raise SerializationError(f"uleb128 value out of u32 range: {value!r}")
        while value >= 0x80:
            self._buf.append((value & 0x7F) | 0x80)
            value >>= 7
        self._buf.append(value)

    def _write_uint(self, value: int, width: int, maximum: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SerializationError(f"expected int, got {type(value).__name__}")
        if value < 0 or value > maximum:
            raise SerializationError(
                f"value {value} out of range for u{width * 8}", width=width
            )
        self._buf += value.to_bytes(width, "little")


# -----------------------------------------------------------------------------
# Reader
# -----------------------------------------------------------------------------


class Deserializer:
    __slots__ = ("_b", "_i", "_n")

    def __init__(self, data: BytesLike) -> None:
        self._b = bytes(data)
        self._i = 0
        self._n = len(self._b)

    def remaining(self) -> int:
        return self._n - self._i

    def deserialize(self, cls: Type[T]) -> T:
        return cls.deserialize(self)  # type: ignore[attr-defined]

    def _read(self, n: int) -> bytes:
        if n < 0:
            raise DeserializationError(
                f"cannot read a negative number of bytes: {n}", offset=self._i, wanted=n
            )
        if self._i + n > self._n:
            raise DeserializationError(
                f"reached end of input: wanted {n} bytes, {self.remaining()} left",
                offset=self._i,
                wanted=n,
                remaining=self.remaining(),
            )
        s = self._b[self._i : self._i + n]
        self._i += n
        return s

    def deserialize_fixed_bytes(self, n: int) -> bytes:
        return self._read(n)

    def deserialize_bytes(self) -> bytes:
        return self._read(self.deserialize_uleb128_as_u32())

    def deserialize_str(self) -> str:
        raw = self.deserialize_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError("invalid UTF-8 string") from e

    def deserialize_bool(self) -> bool:
        v = self._read(1)[0]
        if v == 0:
            return False
        if v == 1:
            return True
        raise DeserializationError(f"invalid bool byte: {v}", offset=self._i - 1)

    def deserialize_u8(self) -> int:
        return self._read_uint(1)

    def deserialize_u16(self) -> int:
        return self._read_uint(2)

    def deserialize_u32(self) -> int:
        return self._read_uint(4)

    def deserialize_u64(self) -> int:
        return self._read_uint(8)

    def deserialize_u128(self) -> int:
        return self._read_uint(16)

    def deserialize_u256(self) -> int:
        return self._read_uint(32)

    def deserialize_uleb128_as_u32(self) -> int:
        value = 0
        shift = 0
        while True:
            byte = self._read(1)[0]
            value |= (byte & 0x7F) << shift
            if value > MAX_U32:
                raise DeserializationError("uleb128 value overflows u32")
            if (byte & 0x80) == 0:
                return value
            shift += 7

    def _read_uint(self, width: int) -> int:
        return int.from_bytes(self._read(width), "little")


def to_bcs_bytes(value: Serializable) -> bytes:
    """Convenience: serialize a single value and return its bytes."""
    ser = Serializer()
    value.serialize(ser)
    return ser.to_bytes()


def from_bcs_bytes(cls: Type[T], data: BytesLike) -> T:
    """Decode exactly one `cls` from `data`; trailing bytes are an error."""
    des = Deserializer(data)
    out = cls.deserialize(des)  # type: ignore[attr-defined]
    if des.remaining():
        raise DeserializationError(
            f"{des.remaining()} trailing bytes after {cls.__name__}",
            remaining=des.remaining(),
        )
    return out


__all__ = [
    "Serializable",
    "Serializer",
    "Deserializer",
    "to_bcs_bytes",
    "from_bcs_bytes",
    "MAX_U8",
    "MAX_U16",
    "MAX_U32",
    "MAX_U64",
    "MAX_U128",
    "MAX_U256",
]
