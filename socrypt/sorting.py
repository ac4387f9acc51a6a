"""Data-independent sorting networks for 64-bit unsigned and 32-bit signed integers."""

from __future__ import annotations

from typing import Callable, Iterable

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _uint64_minmax(a: int, b: int) -> tuple[int, int]:
    c = ((b - a) & _MASK64) >> 63
    c = (-c) & _MASK64
    c &= a ^ b
    return a ^ c, b ^ c


def _to_int32(x: int) -> int:
    return x - (1 << 32) if x & 0x80000000 else x


def _int32_minmax(a: int, b: int) -> tuple[int, int]:
    ua, ub = a & _MASK32, b & _MASK32
    ab = ua ^ ub
    c = (ub - ua) & _MASK32
    c ^= ab & (c ^ ub)
    c = _MASK32 if c >> 31 else 0
    c &= ab
    return _to_int32(ua ^ c), _to_int32(ub ^ c)


def _network_sort(
    values: list[int], minmax: Callable[[int, int], tuple[int, int]]
) -> list[int]:
    x = values
    n = len(x)
    if n < 2:
        return x
    top = 1
    while top < n - top:
        top += top

    p = top
    while p > 0:
        for i in range(n - p):
            if not i & p:
                x[i], x[i + p] = minmax(x[i], x[i + p])
        i = 0
        q = top
        while q > p:
            while i < n - q:
                if not i & p:
                    a = x[i + p]
                    r = q
                    while r > p:
                        a, x[i + r] = minmax(a, x[i + r])
                        r >>= 1
                    x[i + p] = a
                i += 1
            q >>= 1
        p >>= 1
    return x


def uint64_sort(values: Iterable[int]) -> list[int]:
    """Sort unsigned 64-bit integers in ascending order with a fixed network.

    As with the underlying compare-exchange, ordering is exact when any two
    values differ by less than 2**63.
    """
    items = list(values)
    for value in items:
        if not 0 <= value <= _MASK64:
            raise ValueError(f"value out of uint64 range: {value}")
    return _network_sort(items, _uint64_minmax)


def int32_sort(values: Iterable[int]) -> list[int]:
    """Sort signed 32-bit integers in ascending order with a fixed network."""
    items = list(values)
    for value in items:
        if not -(1 << 31) <= value < (1 << 31):
            raise ValueError(f"value out of int32 range: {value}")
    return _network_sort(items, _int32_minmax)