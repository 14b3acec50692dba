"""
address.py — fixed-size 32-byte addresses and their Bech32 form

Format
------
Address string = bech32( HRP=tag, data = convertbits(payload, 8->5) )
payload = exactly 32 raw bytes (52 five-bit groups, last one zero padded)

Unlike a lenient decoder, ``decode_address`` never truncates or zero-pads: a
string whose data part does not regroup to exactly 32 bytes is rejected with
``InvalidLength``.

Examples
--------
>>> payload = bytes(range(32))
>>> s = encode_address("juno", payload)
>>> decode_address(s) == ("juno", Address(payload))
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from counter_py.codec import bech32 as _b32
from counter_py.errors import DecodingError, EncodingError, InvalidLength

log = logging.getLogger(__name__)

ADDRESS_LEN = 32

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Address:
    """Exactly 32 raw bytes. Immutable."""

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise EncodingError(
                "address payload must be bytes-like",
                context={"type": type(self.raw).__name__},
            )
        raw = bytes(self.raw)
        if len(raw) != ADDRESS_LEN:
            raise EncodingError(
                f"address payload must be {ADDRESS_LEN} bytes, got {len(raw)}",
                context={"length": len(raw)},
            )
        object.__setattr__(self, "raw", raw)

    # ---- constructors ---- #

    @classmethod
    def from_ints(cls, values: Iterable[int]) -> "Address":
        """Build from a sequence of ints 0..255 (the JSON wire shape)."""
        vals = list(values)
        if any(not isinstance(v, int) or isinstance(v, bool) or not 0 <= v <= 255 for v in vals):
            raise EncodingError("address bytes must be ints in 0..255")
        return cls(bytes(vals))

    @classmethod
    def from_hex(cls, value: str) -> "Address":
        h = value[2:] if value.startswith(("0x", "0X")) else value
        try:
            return cls(bytes.fromhex(h))
        except ValueError as e:
            raise EncodingError(f"invalid hex payload: {value!r}") from e

    # ---- views ---- #

    def to_ints(self) -> list[int]:
        return list(self.raw)

    def hex(self) -> str:
        return self.raw.hex()

    def to_bech32(self, tag: str) -> str:
        return encode_address(tag, self.raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return ADDRESS_LEN


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_address(tag: str, payload: Union[Address, BytesLike]) -> str:
    """
    Encode a 32-byte payload under `tag` as a Bech32 string.

    Raises EncodingError for an empty tag, a tag outside a-z, a payload that
    is not 32 bytes, or an output longer than 90 characters.
    """
    addr = payload if isinstance(payload, Address) else Address(payload)
    data5 = _b32.convertbits(addr.raw, 8, 5, pad=True)
    return _b32.bech32_encode(tag, data5)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_address(value: str) -> Tuple[str, Address]:
    """
    Parse a Bech32 address back into (tag, Address).

    Raises a DecodingError subclass on failure; see
    :func:`counter_py.codec.bech32.bech32_decode` for the structural checks.
    """
    hrp, data5 = _b32.bech32_decode(value)
    try:
        payload = _b32.convertbits(data5, 5, 8, pad=False)
    except ValueError as e:
        raise InvalidLength(
            f"5-bit to 8-bit conversion failed: {e}",
            context={"groups": len(data5)},
        ) from e

    if len(payload) != ADDRESS_LEN:
        log.debug("rejecting %s: payload is %d bytes", hrp, len(payload))
        raise InvalidLength(
            f"payload length invalid: {len(payload)} != {ADDRESS_LEN}",
            context={"length": len(payload)},
        )
    return hrp, Address(bytes(payload))


def is_valid_address(value: str, *, expect_tag: str | None = None) -> bool:
    """Lightweight validator: True if `value` decodes (and matches `expect_tag`)."""
    try:
        tag, _ = decode_address(value)
    except DecodingError:
        return False
    return expect_tag is None or tag == expect_tag


__all__ = [
    "ADDRESS_LEN",
    "Address",
    "encode_address",
    "decode_address",
    "is_valid_address",
]
