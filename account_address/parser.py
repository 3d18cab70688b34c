"""
account_address.parser
======================

String -> AccountAddress parsing (AIP-40) and non-raising validity checks.

Accepted by default:

- LONG:  64 hex characters, with or without a leading 0x.
- SHORT: 1 to 63 hex characters, with or without a leading 0x, implicitly
  left-padded with zeros to 32 bytes.

`ValidityOptions` make parsing stricter. The checks run in a fixed order and
the first failing one decides the error:

1. missing 0x when `require_leading_zero_x`        -> LEADING_ZERO_X_REQUIRED
2. empty after the prefix                          -> ADDRESS_TOO_SHORT
3. longer than 64 characters                       -> ADDRESS_TOO_LONG
4. non-hex characters                              -> HexDecodeError
5. short form when `require_long_form`             -> LONG_FORM_REQUIRED
6. short, non-special, `require_long_form_unless_special`
                                                   -> LONG_FORM_REQUIRED_UNLESS_SPECIAL

`parse` returns a `ParseOk` / `ParseErr` value; `from_str` raises the
carried error; `is_valid` and `is_valid_with_reason` only inspect the variant
and report non-str input as invalid instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .address import AccountAddress
from .errors import AddressInvalidError, AddressInvalidReason, CodecError
from .hexutil import HEX_PREFIX, decode_hex
from .logging import get_logger
from .options import ValidityOptions, resolve

log = get_logger(__name__)

__all__ = [
    "ParseOk",
    "ParseErr",
    "ParseResult",
    "ValidityReport",
    "parse",
    "from_str",
    "is_valid",
    "is_valid_with_reason",
]


@dataclass(frozen=True)
class ParseOk:
    address: AccountAddress
    ok = True


@dataclass(frozen=True)
class ParseErr:
    error: CodecError
    ok = False


ParseResult = Union[ParseOk, ParseErr]


@dataclass(frozen=True)
class ValidityReport:
    """Outcome of `is_valid_with_reason`."""

    valid: bool
    invalid_reason: Optional[str] = None
    # None on success, and for hex-decode failures (outside the closed reason set).
    invalid_reason_code: Optional[AddressInvalidReason] = None

    def to_dict(self) -> Dict[str, Any]:
        code = self.invalid_reason_code
        return {
            "valid": self.valid,
            "invalid_reason": self.invalid_reason,
            "invalid_reason_code": code.value if code is not None else None,
        }


def _fail(reason: AddressInvalidReason, **data: Any) -> ParseErr:
    return ParseErr(AddressInvalidError(reason, **data))


def parse(s: str, options: Optional[ValidityOptions] = None) -> ParseResult:
    if not isinstance(s, str):
        raise TypeError(f"address must be a str, got {type(s).__name__}")
    opts = resolve(options)

    if s.startswith(HEX_PREFIX):
        rest = s[len(HEX_PREFIX):]
    elif opts.require_leading_zero_x:
        return _fail(AddressInvalidReason.LEADING_ZERO_X_REQUIRED)
    else:
        rest = s

    n = len(rest)
    if n == 0:
        return _fail(AddressInvalidReason.ADDRESS_TOO_SHORT, length=n)
    if n > AccountAddress.LONG_STRING_LENGTH:
        return _fail(AddressInvalidReason.ADDRESS_TOO_LONG, length=n)

    # Every two hex characters make one byte, so 64 padded chars are 32 bytes.
    try:
        raw = decode_hex(rest.rjust(AccountAddress.LONG_STRING_LENGTH, "0"))
    except CodecError as e:
        return ParseErr(e)

    address = AccountAddress(raw)

    if n != AccountAddress.LONG_STRING_LENGTH:
        if opts.require_long_form:
            return _fail(AddressInvalidReason.LONG_FORM_REQUIRED, length=n)
        if opts.require_long_form_unless_special and not address.is_special():
            return _fail(
                AddressInvalidReason.LONG_FORM_REQUIRED_UNLESS_SPECIAL, length=n
            )

    return ParseOk(address)


def from_str(s: str, options: Optional[ValidityOptions] = None) -> AccountAddress:
    """
    Parse `s` into an AccountAddress or raise.

    Raises
    ------
    AddressInvalidError
        For any rule in the closed reason set.
    HexDecodeError
        When the string holds non-hexadecimal characters.
    """
    result = parse(s, options)
    if isinstance(result, ParseErr):
        raise result.error
    return result.address


def _rejection(s: Any, options: Optional[ValidityOptions]) -> Optional[ValidityReport]:
    """None when `s` parses, otherwise the report explaining why it does not."""
    if not isinstance(s, str):
        log.debug("address rejected", extra={"reason": "not_a_str"})
        return ValidityReport(
            valid=False, invalid_reason=f"address must be a str, got {type(s).__name__}"
        )
    result = parse(s, options)
    if isinstance(result, ParseOk):
        return None
    err = result.error
    code = err.reason if isinstance(err, AddressInvalidError) else None
    log.debug("address rejected", extra={"reason": err.code})
    return ValidityReport(valid=False, invalid_reason=err.message, invalid_reason_code=code)


def is_valid(s: str, options: Optional[ValidityOptions] = None) -> bool:
    return _rejection(s, options) is None


def is_valid_with_reason(
    s: str, options: Optional[ValidityOptions] = None
) -> ValidityReport:
    """
    Like `is_valid`, but explains the rejection with the error's message and,
    for address rule failures, its AddressInvalidReason. Non-str input is
    reported as invalid with no reason code.
    """
    report = _rejection(s, options)
    return ValidityReport(valid=True) if report is None else report
