import random

import pytest

from socrypt.sorting import int32_sort, uint64_sort


@pytest.mark.parametrize("size", [0, 1, 2, 3, 5, 8, 17, 64, 100, 257])
def test_uint64_sort_matches_sorted(size):
    rng = random.Random(size)
    values = [rng.randrange(1 << 62) for _ in range(size)]
    assert uint64_sort(values) == sorted(values)


@pytest.mark.parametrize("size", [0, 1, 2, 3, 7, 16, 33, 129, 300])
def test_int32_sort_matches_sorted(size):
    rng = random.Random(1000 + size)
    values = [rng.randrange(-(1 << 31), 1 << 31) for _ in range(size)]
    assert int32_sort(values) == sorted(values)


def test_int32_sort_extremes():
    values = [2**31 - 1, -(2**31), 0, -1, 1, 2**31 - 1, -(2**31)]
    assert int32_sort(values) == sorted(values)


def test_uint64_sort_duplicates():
    values = [5, 3, 5, 1, 3, 3, 0, 5]
    assert uint64_sort(values) == sorted(values)


def test_uint64_sort_large_values_close_together():
    base = (1 << 63) + 10
    values = [base + k for k in (7, 1, 4, 0, 3)]
    assert uint64_sort(values) == sorted(values)


def test_sort_does_not_modify_input():
    values = [9, 2, 7, 1]
    snapshot = list(values)
    result = uint64_sort(values)
    assert values == snapshot
    assert result == [1, 2, 7, 9]


def test_sort_accepts_iterables():
    assert int32_sort(iter([3, -2, 1])) == [-2, 1, 3]


def test_sort_is_permutation():
    rng = random.Random(42)
    values = [rng.randrange(1000) for _ in range(500)]
    result = uint64_sort(values)
    assert sorted(result) == sorted(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_uint64_out_of_range_raises():
    with pytest.raises(ValueError):
        uint64_sort([1, -1])
    with pytest.raises(ValueError):
        uint64_sort([1 << 64])


def test_int32_out_of_range_raises():
    with pytest.raises(ValueError):
        int32_sort([1 << 31])
    with pytest.raises(ValueError):
        int32_sort([-(1 << 31) - 1])