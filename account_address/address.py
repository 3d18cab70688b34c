"""
account_address.address
=======================

The 32-byte account address value type and its AIP-40 renderings.

Format
------
- LONG:  '0x' + 64 lowercase hex characters, always unambiguous.
- SHORT: the canonical `to_string()` form. Special addresses (0x0..0xf, every
  byte zero except a final byte below 16) collapse to a single hex digit;
  every other address is printed in full with no zero trimming.

Wire format
-----------
Exactly 32 raw bytes, no length prefix, written through a
`account_address.bcs.Serializer` and read back through a `Deserializer`.

Examples
--------
>>> AccountAddress.from_str("0x0000000000000000000000000000000000000000000000000000000000000001")
AccountAddress('0x1')
>>> AccountAddress.from_str("0x10").to_string_long()[-4:]
'0010'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional

from .errors import AddressInvalidError, AddressInvalidReason
from .hexutil import HEX_PREFIX, is_byteslike, to_hex

if TYPE_CHECKING:  # pragma: no cover
    from .bcs import Deserializer, Serializer
    from .options import ValidityOptions


@dataclass(frozen=True)
class AccountAddress:
    # Number of bytes in an account address.
    LENGTH: ClassVar[int] = 32
    # Length of the long string form, excluding the leading 0x.
    LONG_STRING_LENGTH: ClassVar[int] = 64

    ONE: ClassVar["AccountAddress"]
    TWO: ClassVar["AccountAddress"]
    THREE: ClassVar["AccountAddress"]
    FOUR: ClassVar["AccountAddress"]

    data: bytes

    def __post_init__(self) -> None:
        if not is_byteslike(self.data):
            raise TypeError(
                f"AccountAddress expects bytes-like data, got {type(self.data).__name__}"
            )
        raw = bytes(self.data)
        if len(raw) != self.LENGTH:
            raise AddressInvalidError(
                AddressInvalidReason.INCORRECT_NUMBER_OF_BYTES, length=len(raw)
            )
        object.__setattr__(self, "data", raw)

    # ---- Parsing ------------------------------------------------------------

    @classmethod
    def from_str(
        cls, s: str, options: Optional["ValidityOptions"] = None
    ) -> "AccountAddress":
        """
        Parse a long or short hex string, with or without a leading 0x.
        See `account_address.parser.from_str`.
        """
        from .parser import from_str

        return from_str(s, options)

    from_hex = from_str

    @staticmethod
    def is_valid(s: str, options: Optional["ValidityOptions"] = None) -> bool:
        from .parser import is_valid

        return is_valid(s, options)

    # ---- Predicates ---------------------------------------------------------

    def is_special(self) -> bool:
        """
        Special addresses are 0x0 to 0xf inclusive: every byte but the last is
        zero and the last byte is below 0b10000.
        """
        return not any(self.data[:-1]) and self.data[-1] < 0b10000

    # ---- Formatting ---------------------------------------------------------

    def to_string(self) -> str:
        """AIP-40 canonical form: one digit for special addresses, 64 otherwise."""
        h = to_hex(self.data, prefix=False)
        if self.is_special():
            h = h[-1]
        return HEX_PREFIX + h

    def to_string_long(self) -> str:
        """Always the full 64 hex characters, leading zeros included."""
        return to_hex(self.data)

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"AccountAddress({self.to_string()!r})"

    # ---- Wire codec ---------------------------------------------------------

    def serialize(self, serializer: "Serializer") -> None:
        serializer.serialize_fixed_bytes(self.data)

    @classmethod
    def deserialize(cls, deserializer: "Deserializer") -> "AccountAddress":
        return cls(deserializer.deserialize_fixed_bytes(cls.LENGTH))


# Well-known framework addresses, built once at import.
ADDRESS_ONE = AccountAddress.from_str("0x1")
ADDRESS_TWO = AccountAddress.from_str("0x2")
ADDRESS_THREE = AccountAddress.from_str("0x3")
ADDRESS_FOUR = AccountAddress.from_str("0x4")

AccountAddress.ONE = ADDRESS_ONE
AccountAddress.TWO = ADDRESS_TWO
AccountAddress.THREE = ADDRESS_THREE
AccountAddress.FOUR = ADDRESS_FOUR


__all__ = [
    "AccountAddress",
    "ADDRESS_ONE",
    "ADDRESS_TWO",
    "ADDRESS_THREE",
    "ADDRESS_FOUR",
]
