from __future__ import annotations

import binascii
from typing import Union

from .errors import HexDecodeError

BytesLike = Union[bytes, bytearray, memoryview]

HEX_PREFIX = "0x"


def is_byteslike(x: object) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview))


def strip0x(s: str) -> str:
    """
    Drop a leading lowercase '0x'. The prefix match is case-sensitive: '0X' is
    left in place and later rejected by the decoder.
    """
    return s[len(HEX_PREFIX):] if s.startswith(HEX_PREFIX) else s


def to_hex(b: BytesLike, prefix: bool = True) -> str:
    """
    Bytes -> hex string (lowercase). Prefix with '0x' by default.
    """
    s = bytes(b).hex()
    return f"{HEX_PREFIX}{s}" if prefix else s


def decode_hex(s: str) -> bytes:
    """
    Hex string (no prefix) -> bytes.

    Upper and lower case digits are both accepted. Anything else, including
    whitespace and odd lengths, raises HexDecodeError.
    """
    if not isinstance(s, str):
        raise TypeError("decode_hex expects a string")
    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError) as e:
        raise HexDecodeError(f"invalid hex string: {e}", length=len(s)) from e


def from_hex(s: str) -> bytes:
    """
    Hex string with an optional '0x' prefix -> bytes. Even length is required.
    """
    return decode_hex(strip0x(s))


__all__ = [
    "BytesLike",
    "HEX_PREFIX",
    "is_byteslike",
    "strip0x",
    "to_hex",
    "decode_hex",
    "from_hex",
]
