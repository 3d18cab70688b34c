"""
account_address test package.

Shared vectors for the unit tests:

    from account_address.tests import SPECIAL_LONG, NON_SPECIAL_SHORT, long_of
"""

from __future__ import annotations

SPECIAL_LONG = "0x0000000000000000000000000000000000000000000000000000000000000001"
SPECIAL_SHORT = "0x1"
NON_SPECIAL_LONG = "0x000000000000000000000000000000000000000000000000000000000a550c18"
NON_SPECIAL_SHORT = "0xa550c18"
FULL_WIDTH = "ca843279e3427144cead5e4d5999a3d0ca843279e3427144cead5e4d5999a3d0"


def long_of(last_byte: int) -> str:
    """Long-form string for the address whose only non-zero byte is the last one."""
    return "0x" + "00" * 31 + f"{last_byte:02x}"
