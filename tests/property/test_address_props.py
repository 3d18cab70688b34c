# -*- coding: utf-8 -*-
"""
Property tests for the account address codec.

- wire round trip: any 32 bytes survive serialize -> deserialize
- text round trips: long form for every address, short form for special ones
- canonical rendering: long form is always 66 chars, short form only ever
  collapses special addresses
- boundary lengths and the special-address predicate
"""
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from account_address import AccountAddress, ValidityOptions, from_str
from account_address.bcs import Deserializer, Serializer
from account_address.errors import AddressInvalidError, AddressInvalidReason

HEX = "0123456789abcdefABCDEF"

addr_bytes = st.binary(min_size=32, max_size=32)
hex_strings = st.text(alphabet=HEX, min_size=1, max_size=64)


@given(addr_bytes)
def test_wire_roundtrip(raw: bytes):
    addr = AccountAddress(raw)
    ser = Serializer()
    addr.serialize(ser)
    assert ser.to_bytes() == raw
    assert AccountAddress.deserialize(Deserializer(ser.to_bytes())) == addr


@given(st.integers(min_value=0, max_value=15))
def test_special_text_roundtrip(v: int):
    addr = AccountAddress(bytes(31) + bytes([v]))
    text = addr.to_string()
    assert text == f"0x{v:x}"
    assert len(text) == 3
    assert from_str(text) == addr


@given(addr_bytes)
def test_long_form_is_stable(raw: bytes):
    addr = AccountAddress(raw)
    long = addr.to_string_long()
    assert len(long) == 66
    assert long == "0x" + raw.hex()
    assert from_str(long) == addr
    assert from_str(long, ValidityOptions(require_long_form=True)) == addr


@given(addr_bytes)
def test_canonical_form_roundtrips(raw: bytes):
    addr = AccountAddress(raw)
    text = addr.to_string()
    assert from_str(text) == addr
    if addr.is_special():
        assert len(text) == 3
    else:
        assert text == addr.to_string_long()


@given(st.integers(min_value=0, max_value=(1 << 256) - 1))
def test_short_form_is_left_padded(value: int):
    assert from_str(hex(value)).data == value.to_bytes(32, "big")


@given(hex_strings)
def test_any_hex_up_to_64_chars_parses(text: str):
    addr = from_str(text)
    assert int.from_bytes(addr.data, "big") == int(text, 16)


@given(st.text(alphabet=HEX, min_size=65, max_size=200))
def test_over_64_chars_is_too_long(text: str):
    with pytest.raises(AddressInvalidError) as ei:
        from_str("0x" + text)
    assert ei.value.reason is AddressInvalidReason.ADDRESS_TOO_LONG


@given(st.text(alphabet=HEX, min_size=64, max_size=64))
def test_64_chars_never_trip_long_form_checks(text: str):
    opts = ValidityOptions(require_long_form=True, require_long_form_unless_special=True)
    assert from_str(text, opts) == from_str(text)


@given(addr_bytes)
def test_special_predicate(raw: bytes):
    expected = raw[:31] == bytes(31) and raw[31] < 16
    assert AccountAddress(raw).is_special() is expected


@given(st.integers(min_value=16, max_value=255))
def test_last_byte_16_or_more_is_not_special(v: int):
    assert not AccountAddress(bytes(31) + bytes([v])).is_special()
