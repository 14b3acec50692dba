"""
counter_py.codec — Bech32 primitives and the 32-byte address codec.

    from counter_py.codec import encode_address, decode_address, Address
"""

from __future__ import annotations

from . import bech32 as bech32
from .address import (ADDRESS_LEN, Address, decode_address, encode_address,
                      is_valid_address)

__all__ = [
    "bech32",
    "ADDRESS_LEN",
    "Address",
    "encode_address",
    "decode_address",
    "is_valid_address",
]
