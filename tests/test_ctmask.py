import random

import pytest

from socrypt.ctmask import (
    equal_mask,
    maximum,
    minimum,
    minmax,
    nonzero_mask,
    signed_negative_mask,
    smaller_mask,
    unequal_mask,
    zero_mask,
)

WIDTHS = (16, 32, 64)


def _samples(bits, count=200):
    rng = random.Random(bits)
    full = (1 << bits) - 1
    edge = [0, 1, full, full - 1, 1 << (bits - 1), (1 << (bits - 1)) - 1]
    values = edge + [rng.randrange(1 << bits) for _ in range(count)]
    return values


@pytest.mark.parametrize("bits", WIDTHS)
def test_signed_negative_mask(bits):
    assert signed_negative_mask(-1, bits) == -1
    assert signed_negative_mask(1 << (bits - 1), bits) == -1
    assert signed_negative_mask((1 << (bits - 1)) - 1, bits) == 0
    assert signed_negative_mask(0, bits) == 0


@pytest.mark.parametrize("bits", WIDTHS)
def test_zero_and_nonzero_masks(bits):
    full = (1 << bits) - 1
    for x in _samples(bits):
        expected = full if x else 0
        assert nonzero_mask(x, bits) == expected
        assert zero_mask(x, bits) == full ^ expected


@pytest.mark.parametrize("bits", WIDTHS)
def test_equality_masks(bits):
    full = (1 << bits) - 1
    values = _samples(bits, 50)
    for x in values:
        assert equal_mask(x, x, bits) == full
        assert unequal_mask(x, x, bits) == 0
    for x, y in zip(values, values[1:]):
        if x != y:
            assert equal_mask(x, y, bits) == 0
            assert unequal_mask(x, y, bits) == full


@pytest.mark.parametrize("bits", WIDTHS)
def test_smaller_mask_matches_ordering(bits):
    full = (1 << bits) - 1
    values = _samples(bits, 60)
    for x in values:
        for y in values[:20]:
            assert smaller_mask(x, y, bits) == (full if x < y else 0)


@pytest.mark.parametrize("bits", WIDTHS)
def test_min_max_minmax(bits):
    values = _samples(bits, 60)
    for x in values:
        for y in values[:20]:
            assert minimum(x, y, bits) == min(x, y)
            assert maximum(x, y, bits) == max(x, y)
            assert minmax(x, y, bits) == (min(x, y), max(x, y))


def test_inputs_reduced_to_width():
    assert equal_mask(1 << 16, 0, 16) == 0xFFFF
    assert minimum(-1, 5, 16) == 5


@pytest.mark.parametrize("func", [nonzero_mask, zero_mask, signed_negative_mask])
def test_bad_width_rejected(func):
    with pytest.raises(ValueError):
        func(1, 8)


def test_bad_width_rejected_binary():
    with pytest.raises(ValueError):
        minmax(1, 2, 24)