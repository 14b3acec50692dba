"""
Bech32 encoder/decoder primitives (BIP-0173)
============================================

Generic building blocks used by :mod:`counter_py.codec.address`:

- CHARSET: the 32-character data alphabet (no "1", "b", "i", "o").
- polymod / hrp_expand: the BCH checksum over GF(32) and the tag expansion
  that binds the human-readable part into the checksum.
- create_checksum / verify_checksum: 6-group (30-bit) checksum helpers.
- bech32_encode / bech32_decode: string assembly and parsing.
- convertbits: 8↔5 bit regrouping.

Only the original Bech32 constant (1) is supported; Bech32m strings fail the
checksum. The tag ("HRP") is restricted to lowercase ASCII letters, and no
case folding is performed on decode: an upper-case character anywhere is an
invalid character.

Usage
-----
    data5 = convertbits(payload, 8, 5, pad=True)
    s = bech32_encode("juno", data5)             # "juno1..."
    hrp, data5 = bech32_decode(s)
    payload = bytes(convertbits(data5, 5, 8, pad=False))

References
----------
BIP-0173: https://github.com/bitcoin/bips/blob/master/bip-0173.mediawiki
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from counter_py.errors import (ChecksumMismatch, EncodingError,
                               InvalidCharacter, InvalidLength,
                               MissingSeparator, TagEmpty, TagTooLong)

log = logging.getLogger(__name__)

# 32-character alphabet per BIP-0173.
CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
CHARSET_REV = {c: i for i, c in enumerate(CHARSET)}

SEPARATOR = "1"
CHECKSUM_LEN = 6
MAX_HRP_LEN = 83
MAX_LEN = 90

HRP_CHARSET = frozenset("abcdefghijklmnopqrstuvwxyz")

_BECH32_CONST = 1
_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


# ---------------------------------------------------------------------------
# Checksum
# ---------------------------------------------------------------------------


def polymod(values: Sequence[int]) -> int:
    """Compute the Bech32 checksum polymod over a sequence of 5-bit values."""
    chk = 1
    for v in values:
        if v < 0 or v > 31:
            raise ValueError("polymod values must be 5-bit")
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ v
        for i in range(5):
            if (top >> i) & 1:
                chk ^= _GENERATORS[i]
    return chk


def hrp_expand(hrp: str) -> List[int]:
    """
    Expand the tag for checksum computation: the high 3 bits of every
    character, a zero group, then the low 5 bits of every character.
    """
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def create_checksum(hrp: str, data: Sequence[int]) -> List[int]:
    values = hrp_expand(hrp) + list(data)
    pm = polymod(values + [0] * CHECKSUM_LEN) ^ _BECH32_CONST
    return [(pm >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LEN)]


def verify_checksum(hrp: str, data: Sequence[int]) -> bool:
    """Return True if `data` (payload groups + checksum groups) is valid for `hrp`."""
    return polymod(hrp_expand(hrp) + list(data)) == _BECH32_CONST


# ---------------------------------------------------------------------------
# Tag validation
# ---------------------------------------------------------------------------


def _hrp_problem(hrp: str) -> str:
    """Return a description of what is wrong with `hrp`, or "" if it is valid."""
    if not hrp:
        return "tag must be non-empty"
    if len(hrp) > MAX_HRP_LEN:
        return f"tag too long ({len(hrp)} > {MAX_HRP_LEN})"
    bad = sorted({c for c in hrp if c not in HRP_CHARSET})
    if bad:
        return f"tag contains characters outside a-z: {''.join(bad)!r}"
    return ""


# ---------------------------------------------------------------------------
# Encode / decode
# ---------------------------------------------------------------------------


def bech32_encode(hrp: str, data: Sequence[int]) -> str:
    """Encode a tag plus 5-bit data groups into a checksummed Bech32 string."""
    if not isinstance(hrp, str):
        raise EncodingError("tag must be str", context={"type": type(hrp).__name__})
    problem = _hrp_problem(hrp)
    if problem:
        raise EncodingError(problem, context={"tag": hrp})
    if any(d < 0 or d > 31 for d in data):
        raise EncodingError("data values must be 5-bit (0..31)")

    total = len(hrp) + 1 + len(data) + CHECKSUM_LEN
    if total > MAX_LEN:
        raise EncodingError(
            f"encoded string would be {total} characters (max {MAX_LEN})",
            context={"tag": hrp, "length": total},
        )

    combined = list(data) + create_checksum(hrp, data)
    return hrp + SEPARATOR + "".join(CHARSET[d] for d in combined)


def bech32_decode(bech: str) -> Tuple[str, List[int]]:
    """
    Decode a Bech32 string into (hrp, data groups without checksum).

    Raises a DecodingError subclass describing the first problem found.
    """
    if not isinstance(bech, str):
        raise InvalidCharacter("address must be str", context={"type": type(bech).__name__})

    pos = bech.rfind(SEPARATOR)
    if pos < 0:
        raise MissingSeparator("no separator '1' found in address")
    if pos == 0:
        raise TagEmpty("address has an empty tag")

    hrp = bech[:pos]
    body = bech[pos + 1 :]

    if len(hrp) > MAX_HRP_LEN:
        raise TagTooLong(
            f"tag too long ({len(hrp)} > {MAX_HRP_LEN})",
            context={"length": len(hrp)},
        )
    for i, c in enumerate(hrp):
        if c not in HRP_CHARSET:
            raise InvalidCharacter(
                f"invalid tag character {c!r}",
                context={"position": i, "char": c},
            )

    data: List[int] = []
    for i, c in enumerate(body):
        v = CHARSET_REV.get(c)
        if v is None:
            raise InvalidCharacter(
                f"invalid data character {c!r}",
                context={"position": pos + 1 + i, "char": c},
            )
        data.append(v)

    if len(data) < CHECKSUM_LEN:
        raise InvalidLength(
            "address body shorter than the checksum",
            context={"body_length": len(data)},
        )
    if len(bech) > MAX_LEN:
        raise InvalidLength(
            f"address too long ({len(bech)} > {MAX_LEN})",
            context={"length": len(bech)},
        )

    if not verify_checksum(hrp, data):
        log.debug("checksum mismatch for tag=%s body_len=%d", hrp, len(data))
        raise ChecksumMismatch("checksum mismatch", context={"tag": hrp})

    return hrp, data[:-CHECKSUM_LEN]


# ---------------------------------------------------------------------------
# 8↔5 bit conversion (BIP-0173 "convertbits")
# ---------------------------------------------------------------------------


def convertbits(
    data: Iterable[int], from_bits: int, to_bits: int, pad: bool = True
) -> List[int]:
    """
    General power-of-2 base conversion.
    E.g. convertbits(payload, 8, 5) to make Bech32 data groups.

    If pad=False, leftover bits must be fewer than `from_bits` and all zero.
    Raises ValueError otherwise; callers translate it to their own error type.
    """
    acc = 0
    bits = 0
    ret: List[int] = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1

    for value in data:
        if value < 0 or (value >> from_bits):
            raise ValueError(f"invalid value for convertbits: {value}")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)

    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    else:
        if bits >= from_bits:
            raise ValueError("illegal zero-padding")
        if ((acc << (to_bits - bits)) & maxv) != 0:
            raise ValueError("non-zero padding")

    return ret


__all__ = [
    "CHARSET",
    "SEPARATOR",
    "CHECKSUM_LEN",
    "MAX_HRP_LEN",
    "MAX_LEN",
    "polymod",
    "hrp_expand",
    "create_checksum",
    "verify_checksum",
    "bech32_encode",
    "bech32_decode",
    "convertbits",
]
