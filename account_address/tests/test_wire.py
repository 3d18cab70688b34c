from __future__ import annotations

import pytest

from account_address.address import ADDRESS_ONE, AccountAddress
from account_address.bcs import Deserializer, Serializer, from_bcs_bytes, to_bcs_bytes
from account_address.errors import AddressInvalidError, DeserializationError
from account_address.tests import FULL_WIDTH


def test_address_serializes_to_32_raw_bytes():
    assert to_bcs_bytes(ADDRESS_ONE) == bytes(31) + b"\x01"
    full = AccountAddress.from_str(FULL_WIDTH)
    assert to_bcs_bytes(full) == bytes.fromhex(FULL_WIDTH)


def test_address_deserializes_from_32_bytes():
    raw = bytes.fromhex(FULL_WIDTH)
    assert AccountAddress.deserialize(Deserializer(raw)) == AccountAddress(raw)
    assert from_bcs_bytes(AccountAddress, raw).to_string() == "0x" + FULL_WIDTH


def test_address_inside_a_record():
    ser = Serializer()
    ser.serialize_u8(7)
    ser.serialize(ADDRESS_ONE)
    ser.serialize_u64(42)
    raw = ser.to_bytes()
    assert len(raw) == 1 + 32 + 8

    des = Deserializer(raw)
    assert des.deserialize_u8() == 7
    assert des.deserialize(AccountAddress) == ADDRESS_ONE
    assert des.deserialize_u64() == 42
    assert des.remaining() == 0


@pytest.mark.parametrize("n", [0, 1, 31])
def test_short_input_raises_reader_error_unchanged(n: int):
    with pytest.raises(DeserializationError) as ei:
        AccountAddress.deserialize(Deserializer(b"\x01" * n))
    assert not isinstance(ei.value, AddressInvalidError)
    assert ei.value.data["wanted"] == 32


def test_only_32_bytes_are_consumed():
    des = Deserializer(bytes(33))
    AccountAddress.deserialize(des)
    assert des.remaining() == 1


def test_from_bcs_bytes_rejects_trailing_bytes():
    with pytest.raises(DeserializationError):
        from_bcs_bytes(AccountAddress, bytes(33))
