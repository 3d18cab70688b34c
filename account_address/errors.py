"""
account_address.errors
----------------------

Typed errors for the address codec.

- One root `CodecError` with a machine-friendly `code`, human `message` and
  optional JSON-safe `data`.
- `AddressInvalidError` carries an `AddressInvalidReason`; every reason embeds
  its fixed message so callers can match on the enum instead of strings.
- Lower-level failures (hex decoding, binary reader/writer) have their own
  classes and are never reclassified as address reasons.

Every concrete class is also a `ValueError` so generic callers keep working.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

__all__ = [
    "AddressInvalidReason",
    "CodecError",
    "AddressInvalidError",
    "HexDecodeError",
    "SerializationError",
    "DeserializationError",
    "ConfigError",
]


class AddressInvalidReason(str, Enum):
    """Closed set of reasons an address string or buffer is rejected."""

    INCORRECT_NUMBER_OF_BYTES = "incorrect_number_of_bytes"
    ADDRESS_TOO_SHORT = "address_too_short"
    ADDRESS_TOO_LONG = "address_too_long"
    LEADING_ZERO_X_REQUIRED = "leading_zero_x_required"
    LONG_FORM_REQUIRED = "long_form_required"
    LONG_FORM_REQUIRED_UNLESS_SPECIAL = "long_form_required_unless_special"

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES: Mapping[AddressInvalidReason, str] = {
    AddressInvalidReason.INCORRECT_NUMBER_OF_BYTES: "Expected address of length 32",
    AddressInvalidReason.ADDRESS_TOO_SHORT: (
        "Hex string is too short, must be 1 to 64 chars long, excluding the leading 0x."
    ),
    AddressInvalidReason.ADDRESS_TOO_LONG: (
        "Hex string is too long, must be 1 to 64 chars long, excluding the leading 0x."
    ),
    AddressInvalidReason.LEADING_ZERO_X_REQUIRED: (
        "requireLeadingZeroX is true but the address string did not start with 0x."
    ),
    AddressInvalidReason.LONG_FORM_REQUIRED: (
        "requireLongForm is true but the address string was not in long form "
        "(an optional 0x prefix + 64 chars)."
    ),
    AddressInvalidReason.LONG_FORM_REQUIRED_UNLESS_SPECIAL: (
        "requireLongFormUnlessSpecial is true but the address was not special "
        "and still not in long form."
    ),
}


@dataclass(eq=False)
class CodecError(Exception):
    """
    Root error for the codec.

    Attributes
    ----------
    code: str
        Machine-stable error code.
    message: str
        Human hint suitable for logs and UI.
    data: dict
        Optional machine data (lengths, offsets). Must be JSON-serializable.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs and API bridges."""
        return {"code": self.code, "message": self.message, "data": dict(self.data)}

    def __str__(self) -> str:
        return self.message


class AddressInvalidError(CodecError, ValueError):
    """Raised when an address string or byte buffer violates the address rules."""

    def __init__(self, reason: AddressInvalidReason, **data: Any) -> None:
        self.reason = AddressInvalidReason(reason)
        super().__init__(code=self.reason.value, message=self.reason.message, data=data)

    def __reduce__(self):
        # args only holds the message; rebuild from the reason instead.
        return (type(self), (self.reason,), {"data": dict(self.data)})


class HexDecodeError(CodecError, ValueError):
    """Raised by the hex decoder when the input holds non-hexadecimal characters."""

    def __init__(self, message: str = "invalid hex string", **data: Any) -> None:
        super().__init__(code="hex_decode", message=message, data=data)


class SerializationError(CodecError, ValueError):
    def __init__(self, message: str = "serialization failed", **data: Any) -> None:
        super().__init__(code="serialization", message=message, data=data)


class DeserializationError(CodecError, ValueError):
    def __init__(self, message: str = "deserialization failed", **data: Any) -> None:
        super().__init__(code="deserialization", message=message, data=data)


class ConfigError(CodecError, ValueError):
    def __init__(self, message: str = "invalid configuration", **data: Any) -> None:
        super().__init__(code="config", message=message, data=data)
