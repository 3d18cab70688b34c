"""
account_address — AIP-40 account address codec.

Parses human-typed hex strings into canonical 32-byte account addresses,
renders them back in short or long form, and reads/writes them in the
fixed-width binary wire format.

Only the value type and the parser entry points are re-exported here.
"""

from __future__ import annotations

from .version import __version__  # noqa: F401

# The address module must load before the parser: it builds the well-known
# constants through the parser at import.
from .address import (  # noqa: F401
    ADDRESS_FOUR,
    ADDRESS_ONE,
    ADDRESS_THREE,
    ADDRESS_TWO,
    AccountAddress,
)
from .errors import (  # noqa: F401
    AddressInvalidError,
    AddressInvalidReason,
    CodecError,
    DeserializationError,
    HexDecodeError,
    SerializationError,
)
from .options import DEFAULT_VALIDITY_OPTIONS, ValidityOptions  # noqa: F401
from .parser import (  # noqa: F401
    ValidityReport,
    from_str,
    is_valid,
    is_valid_with_reason,
)
from .bcs import Deserializer, Serializer  # noqa: F401

__all__ = [
    "__version__",
    # Address
    "AccountAddress",
    "ADDRESS_ONE", "ADDRESS_TWO", "ADDRESS_THREE", "ADDRESS_FOUR",
    # Parsing / validation
    "ValidityOptions", "DEFAULT_VALIDITY_OPTIONS", "ValidityReport",
    "from_str", "is_valid", "is_valid_with_reason",
    # Wire
    "Serializer", "Deserializer",
    # Errors
    "CodecError", "AddressInvalidError", "AddressInvalidReason",
    "HexDecodeError", "SerializationError", "DeserializationError",
]
