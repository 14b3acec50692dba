from __future__ import annotations

import pytest

from counter_py.codec import bech32 as b32
from counter_py.errors import (ChecksumMismatch, DecodingError, EncodingError,
                               InvalidCharacter, InvalidLength,
                               MissingSeparator, TagEmpty, TagTooLong)

# Lower-case valid Bech32 strings from BIP-0173 whose HRP is letters only.
BIP173_VALID = [
    "a12uel5l",
    "abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw",
    "split1checkupstagehandshakeupstreamerranterredcaperred2y9e3w",
]


def test_hrp_expand_splits_high_and_low_bits() -> None:
    # 'j' = 0x6a -> high 3 bits 3, low 5 bits 10
    assert b32.hrp_expand("j") == [3, 0, 10]
    assert b32.hrp_expand("ab") == [3, 3, 0, 1, 2]


def test_polymod_rejects_non_5bit_values() -> None:
    with pytest.raises(ValueError):
        b32.polymod([32])


@pytest.mark.parametrize("s", BIP173_VALID)
def test_bip173_vectors_decode_and_reencode(s: str) -> None:
    hrp, data = b32.bech32_decode(s)
    assert b32.bech32_encode(hrp, data) == s


def test_all_alphabet_values_decode_in_order() -> None:
    hrp, data = b32.bech32_decode("abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw")
    assert hrp == "abcdef"
    assert data == list(range(32))


def test_checksum_is_six_groups() -> None:
    cs = b32.create_checksum("juno", [0, 1, 2])
    assert len(cs) == b32.CHECKSUM_LEN
    assert b32.verify_checksum("juno", [0, 1, 2] + cs)


def test_bech32m_string_fails_checksum() -> None:
    # Valid under BIP-0350 (bech32m) only.
    with pytest.raises(ChecksumMismatch):
        b32.bech32_decode("a1lqfn3a")


@pytest.mark.parametrize(
    "s, exc",
    [
        ("pzry9x0s0muk", MissingSeparator),
        ("1pzry9x0s0muk", TagEmpty),
        ("x1b4n0q5v", InvalidCharacter),
        ("li1dgmt3", InvalidLength),
        ("A12UEL5L", InvalidCharacter),
        ("a12uEl5l", InvalidCharacter),
        ("?1ezyfcl", InvalidCharacter),
        (
            "an84characterslonghumanreadablepartthatcontainsthenumber1andtheexcludedcharactersbio1569pvx",
            TagTooLong,
        ),
        ("a1" + "q" * 100, InvalidLength),
        ("a12uel5m", ChecksumMismatch),
    ],
)
def test_structural_decode_errors(s: str, exc: type) -> None:
    with pytest.raises(exc) as excinfo:
        b32.bech32_decode(s)
    assert isinstance(excinfo.value, DecodingError)
    assert excinfo.value.code.startswith("decoding_error.")


@pytest.mark.parametrize("hrp", ["", "Juno", "ju-no", "juno2", "jüno"])
def test_encode_rejects_bad_tags(hrp: str) -> None:
    with pytest.raises(EncodingError):
        b32.bech32_encode(hrp, [0, 1, 2])


def test_encode_rejects_non_5bit_data() -> None:
    with pytest.raises(EncodingError):
        b32.bech32_encode("juno", [0, 32])


def test_encode_enforces_total_length() -> None:
    # 1 + 1 + 82 + 6 == 90: fits exactly
    s = b32.bech32_encode("a", [0] * 82)
    assert len(s) == b32.MAX_LEN
    with pytest.raises(EncodingError):
        b32.bech32_encode("a", [0] * 83)


def test_convertbits_strict_mode() -> None:
    assert b32.convertbits(b"\xff", 8, 5) == [31, 28]
    assert b32.convertbits([31, 28], 5, 8, pad=False) == [255]
    with pytest.raises(ValueError):
        b32.convertbits([31, 29], 5, 8, pad=False)  # non-zero padding
    with pytest.raises(ValueError):
        b32.convertbits([256], 8, 5)
