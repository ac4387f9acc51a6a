import hashlib

import pytest

from socrypt.sha256_block import (
    hashblocks,
    load_bigendian_32,
    load_bigendian_64,
    store_bigendian_32,
    store_bigendian_64,
)

IV_256 = bytes.fromhex(
    "6a09e667bb67ae853c6ef372a54ff53a510e527f9b05688c1f83d9ab5be0cd19"
)


def _pad(message: bytes) -> bytes:
    length_bits = (len(message) * 8).to_bytes(8, "big")
    padded = message + b"\x80"
    padded += b"\x00" * ((56 - len(padded)) % 64)
    return padded + length_bits


def test_store_bigendian_32_byte_order():
    assert store_bigendian_32(0x01020304) == b"\x01\x02\x03\x04"


def test_store_bigendian_32_truncates():
    assert store_bigendian_32((1 << 32) | 5) == store_bigendian_32(5)


def test_store_bigendian_64_truncates():
    assert store_bigendian_64((1 << 64) | 9) == store_bigendian_64(9)


@pytest.mark.parametrize("value", [0, 1, 0x7FFFFFFF, 0xDEADBEEF, 0xFFFFFFFF])
def test_round_trip_32(value):
    assert load_bigendian_32(store_bigendian_32(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0x0123456789ABCDEF, (1 << 64) - 1])
def test_round_trip_64(value):
    assert load_bigendian_64(store_bigendian_64(value)) == value


def test_load_wrong_length_raises():
    with pytest.raises(ValueError):
        load_bigendian_32(b"\x00\x01\x02")
    with pytest.raises(ValueError):
        load_bigendian_64(b"\x00" * 4)


def test_empty_message_digest():
    state, rest = hashblocks(IV_256, _pad(b""))
    assert rest == b""
    assert state.hex().upper() == (
        "E3B0C44298FC1C149AFBF4C8996FB92427AE41E4649B934CA495991B7852B855"
    )


def test_single_block_matches_hashlib():
    state, _ = hashblocks(IV_256, _pad(b"abc"))
    assert state == hashlib.sha256(b"abc").digest()


def test_multi_block_matches_hashlib():
    message = bytes(range(200))
    state, rest = hashblocks(IV_256, _pad(message))
    assert rest == b""
    assert state == hashlib.sha256(message).digest()


def test_split_calls_equal_single_call():
    padded = _pad(bytes(range(100)))
    first, rest = hashblocks(IV_256, padded[:64])
    assert rest == b""
    split, _ = hashblocks(first, padded[64:])
    whole, _ = hashblocks(IV_256, padded)
    assert split == whole


def test_leftover_bytes_returned():
    data = bytes(range(70))
    state, rest = hashblocks(IV_256, data)
    assert rest == data[64:]
    again, _ = hashblocks(IV_256, data[:64])
    assert state == again


def test_short_input_leaves_state_unchanged():
    state, rest = hashblocks(IV_256, b"short")
    assert state == IV_256
    assert rest == b"short"


def test_bad_state_length_raises():
    with pytest.raises(ValueError):
        hashblocks(b"\x00" * 31, b"")