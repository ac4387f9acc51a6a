"""Transposition of a 64x64 bit matrix stored as 64 row words."""

from __future__ import annotations

from typing import Sequence

_MASK64 = 0xFFFFFFFFFFFFFFFF

_MASKS = (
    (0x5555555555555555, 0xAAAAAAAAAAAAAAAA),
    (0x3333333333333333, 0xCCCCCCCCCCCCCCCC),
    (0x0F0F0F0F0F0F0F0F, 0xF0F0F0F0F0F0F0F0),
    (0x00FF00FF00FF00FF, 0xFF00FF00FF00FF00),
    (0x0000FFFF0000FFFF, 0xFFFF0000FFFF0000),
    (0x00000000FFFFFFFF, 0xFFFFFFFF00000000),
)


def transpose_64x64(rows: Sequence[int]) -> list[int]:
    """Return the transpose: bit ``c`` of result row ``r`` is bit ``r`` of input row ``c``."""
    out = list(rows)
    if len(out) != 64:
        raise ValueError(f"expected 64 rows, got {len(out)}")
    for row in out:
        if not 0 <= row <= _MASK64:
            raise ValueError(f"row out of uint64 range: {row}")

    for d in range(5, -1, -1):
        low, high = _MASKS[d]
        s = 1 << d
        for i in range(0, 64, 2 * s):
            for j in range(i, i + s):
                x = (out[j] & low) | (((out[j + s] & low) << s) & _MASK64)
                y = ((out[j] & high) >> s) | (out[j + s] & high)
                out[j], out[j + s] = x, y
    return out