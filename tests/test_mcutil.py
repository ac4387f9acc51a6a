import random

import pytest

from socrypt.mcutil import (
    GFMASK,
    bitrev,
    load4,
    load8,
    load_gf,
    store8,
    store_gf,
)


def test_store_gf_little_endian():
    assert store_gf(0x0ABC) == b"\xbc\x0a"


@pytest.mark.parametrize("value", [0, 1, 0x123, 0x800, GFMASK])
def test_gf_round_trip(value):
    assert load_gf(store_gf(value)) == value


def test_load_gf_masks_high_bits():
    assert store_gf(0xFFFF) == b"\xff\xff"
    assert load_gf(b"\xff\xff") == GFMASK


def test_load4_is_little_endian():
    data = bytes([0x11, 0x22, 0x33, 0x44])
    assert load4(data) == int.from_bytes(data, "little")


@pytest.mark.parametrize("value", [0, 1, 0x0123456789ABCDEF, (1 << 64) - 1])
def test_store8_load8_round_trip(value):
    assert load8(store8(value)) == value


def test_store8_truncates_to_64_bits():
    assert store8((1 << 64) + 7) == store8(7)


def test_store8_little_endian_low_byte_first():
    encoded = store8(0xFFFFFFFF)
    assert encoded[:4] == b"\xff" * 4
    assert encoded[4:] == b"\x00" * 4


def test_bitrev_single_bit():
    assert bitrev(1) == 0x800
    assert bitrev(0) == 0


def test_bitrev_all_ones():
    assert bitrev(GFMASK) == GFMASK


def test_bitrev_is_involution_on_field():
    rng = random.Random(1234)
    for value in rng.sample(range(GFMASK + 1), 200):
        assert bitrev(bitrev(value)) == value


def test_bitrev_is_permutation_of_field():
    images = {bitrev(value) for value in range(GFMASK + 1)}
    assert images == set(range(GFMASK + 1))


@pytest.mark.parametrize(
    "func,data",
    [(load_gf, b"\x00"), (load4, b"\x00\x00\x00"), (load8, b"\x00" * 7)],
)
def test_wrong_length_raises(func, data):
    with pytest.raises(ValueError):
        func(data)