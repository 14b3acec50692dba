"""
Bech32 address tests (32-byte payload <-> checksummed string)

Covers the fixed vector, property round-trips over random tags/payloads,
tamper detection, strict length handling and tag validation.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from counter_py.codec import bech32 as b32
from counter_py.codec.address import (ADDRESS_LEN, Address, decode_address,
                                      encode_address, is_valid_address)
from counter_py.errors import (ChecksumMismatch, EncodingError,
                               InvalidCharacter, InvalidLength,
                               MissingSeparator)

JUNO_ADDR = "juno1lqgdq9u8zhcvwwwz3xjswactrtq6qzptmlzlh6xspl34dxq32uhqhlphat"
JUNO_BYTES = bytes(
    [
        248, 16, 208, 23, 135, 21, 240, 199, 57, 194, 137, 165, 7, 119, 11, 26,
        193, 160, 8, 43, 223, 197, 251, 232, 208, 15, 227, 86, 152, 17, 87, 46,
    ]
)

# Longest tag that still fits 90 characters with a 32-byte payload:
# tag + "1" + 52 data groups + 6 checksum groups.
MAX_TAG_FOR_32_BYTES = b32.MAX_LEN - 1 - 52 - b32.CHECKSUM_LEN


# -- Deterministic examples ---------------------------------------------------


def test_known_vector_encodes() -> None:
    assert encode_address("juno", JUNO_BYTES) == JUNO_ADDR


def test_known_vector_decodes() -> None:
    tag, addr = decode_address(JUNO_ADDR)
    assert tag == "juno"
    assert addr.raw == JUNO_BYTES
    assert addr.to_ints() == list(JUNO_BYTES)


def test_address_value_type() -> None:
    addr = Address(JUNO_BYTES)
    assert bytes(addr) == JUNO_BYTES
    assert len(addr) == ADDRESS_LEN
    assert Address.from_hex("0x" + JUNO_BYTES.hex()) == addr
    assert Address.from_ints(list(JUNO_BYTES)) == addr
    assert addr.to_bech32("juno") == JUNO_ADDR
    with pytest.raises(Exception):
        addr.raw = b""  # type: ignore[misc]


@pytest.mark.parametrize("n", [0, 20, 31, 33])
def test_address_requires_exactly_32_bytes(n: int) -> None:
    with pytest.raises(EncodingError):
        Address(b"\x00" * n)
    with pytest.raises(EncodingError):
        encode_address("juno", b"\x00" * n)


def test_from_ints_rejects_out_of_range_values() -> None:
    with pytest.raises(EncodingError):
        Address.from_ints([256] + [0] * 31)
    with pytest.raises(EncodingError):
        Address.from_hex("zz" * 32)


# -- Tag validation -----------------------------------------------------------


@pytest.mark.parametrize("tag", ["", "Juno", "ju no", "juno1", "cosmos-hub", "é"])
def test_encode_rejects_invalid_tags(tag: str) -> None:
    with pytest.raises(EncodingError):
        encode_address(tag, JUNO_BYTES)


def test_encode_rejects_tags_that_overflow_max_length() -> None:
    ok = encode_address("a" * MAX_TAG_FOR_32_BYTES, JUNO_BYTES)
    assert len(ok) == b32.MAX_LEN
    with pytest.raises(EncodingError):
        encode_address("a" * (MAX_TAG_FOR_32_BYTES + 1), JUNO_BYTES)
    with pytest.raises(EncodingError):
        encode_address("a" * 84, JUNO_BYTES)


# -- Tamper detection ---------------------------------------------------------


def test_every_single_character_substitution_is_detected() -> None:
    body_start = JUNO_ADDR.rfind("1") + 1
    for pos in range(body_start, len(JUNO_ADDR)):
        orig = JUNO_ADDR[pos]
        repl = next(c for c in b32.CHARSET if c != orig)
        bad = JUNO_ADDR[:pos] + repl + JUNO_ADDR[pos + 1 :]
        with pytest.raises(ChecksumMismatch):
            decode_address(bad)


def test_changing_the_tag_breaks_the_checksum() -> None:
    with pytest.raises(ChecksumMismatch):
        decode_address("juna" + JUNO_ADDR[4:])


def test_removing_separator_is_missing_separator() -> None:
    with pytest.raises(MissingSeparator):
        decode_address(JUNO_ADDR.replace("1", "", 1))


def test_upper_case_input_is_not_normalised() -> None:
    with pytest.raises(InvalidCharacter):
        decode_address(JUNO_ADDR.upper())
    mixed = JUNO_ADDR[:6] + JUNO_ADDR[6].upper() + JUNO_ADDR[7:]
    with pytest.raises(InvalidCharacter):
        decode_address(mixed)


def test_is_valid_address() -> None:
    assert is_valid_address(JUNO_ADDR)
    assert is_valid_address(JUNO_ADDR, expect_tag="juno")
    assert not is_valid_address(JUNO_ADDR, expect_tag="cosmos")
    assert not is_valid_address(JUNO_ADDR[:-1] + "q")


# -- Length enforcement -------------------------------------------------------


@pytest.mark.parametrize("n", [20, 31, 33, 40])
def test_checksummed_wrong_length_payload_is_rejected(n: int) -> None:
    # Build a string with a valid checksum but the wrong payload size.
    s = b32.bech32_encode("juno", b32.convertbits(bytes(range(n)), 8, 5))
    with pytest.raises(InvalidLength):
        decode_address(s)


def test_non_zero_padding_is_rejected() -> None:
    data5 = b32.convertbits(JUNO_BYTES, 8, 5)
    assert len(data5) == 52
    data5[-1] |= 1  # the last group carries 4 padding bits
    s = b32.bech32_encode("juno", data5)
    with pytest.raises(InvalidLength):
        decode_address(s)


# -- Property tests -----------------------------------------------------------

tag_strategy = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz",
    min_size=1,
    max_size=MAX_TAG_FOR_32_BYTES,
)


@given(tag=tag_strategy, payload=st.binary(min_size=32, max_size=32))
def test_roundtrip_property(tag: str, payload: bytes) -> None:
    s = encode_address(tag, payload)
    assert s == s.lower()
    assert s.startswith(tag + "1")
    tag2, addr = decode_address(s)
    assert tag2 == tag
    assert addr.raw == payload


@given(payload=st.binary(min_size=32, max_size=32), pos=st.integers(min_value=0, max_value=57))
def test_single_substitution_property(payload: bytes, pos: int) -> None:
    s = encode_address("juno", payload)
    i = len("juno1") + pos
    repl = b32.CHARSET[(b32.CHARSET.index(s[i]) + 1) % 32]
    with pytest.raises(ChecksumMismatch):
        decode_address(s[:i] + repl + s[i + 1 :])
