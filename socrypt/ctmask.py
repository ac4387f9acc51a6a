"""Constant-time style comparison masks for 16, 32 and 64-bit unsigned integers.

Every mask is either 0 or all ones at the chosen width. Inputs are reduced to
that width first, the same way a value converts to a fixed-width unsigned type.
"""

from __future__ import annotations

_WIDTHS = (16, 32, 64)


def _full(bits: int) -> int:
    if bits not in _WIDTHS:
        raise ValueError(f"bits must be one of {_WIDTHS}, got {bits}")
    return (1 << bits) - 1


def _unsigned_negative_mask(x: int, bits: int) -> int:
    full = _full(bits)
    return full if (x & full) >> (bits - 1) else 0


def signed_negative_mask(x: int, bits: int) -> int:
    """Return -1 if ``x`` is negative when read as a signed ``bits`` integer, else 0."""
    return -1 if _unsigned_negative_mask(x, bits) else 0


def nonzero_mask(x: int, bits: int) -> int:
    """All ones if ``x`` is non-zero, else 0."""
    full = _full(bits)
    x &= full
    return _unsigned_negative_mask(x, bits) | _unsigned_negative_mask(-x & full, bits)


def zero_mask(x: int, bits: int) -> int:
    """All ones if ``x`` is zero, else 0."""
    return ~nonzero_mask(x, bits) & _full(bits)


def unequal_mask(x: int, y: int, bits: int) -> int:
    """All ones if ``x`` differs from ``y``, else 0."""
    full = _full(bits)
    return nonzero_mask((x ^ y) & full, bits)


def equal_mask(x: int, y: int, bits: int) -> int:
    """All ones if ``x`` equals ``y``, else 0."""
    return ~unequal_mask(x, y, bits) & _full(bits)


def smaller_mask(x: int, y: int, bits: int) -> int:
    """All ones if ``x < y`` as unsigned ``bits`` integers, else 0."""
    full = _full(bits)
    x &= full
    y &= full
    top = 1 << (bits - 1)
    xy = x ^ y
    z = (x - y) & full
    z ^= xy & (z ^ x ^ top)
    return _unsigned_negative_mask(z, bits)


def _swap_mask(x: int, y: int, bits: int) -> int:
    full = _full(bits)
    top = 1 << (bits - 1)
    xy = y ^ x
    z = (y - x) & full
    z ^= xy & (z ^ y ^ top)
    return _unsigned_negative_mask(z, bits) & xy


def minimum(x: int, y: int, bits: int) -> int:
    """The smaller of ``x`` and ``y`` as unsigned ``bits`` integers."""
    full = _full(bits)
    x &= full
    y &= full
    return x ^ _swap_mask(x, y, bits)


def maximum(x: int, y: int, bits: int) -> int:
    """The larger of ``x`` and ``y`` as unsigned ``bits`` integers."""
    full = _full(bits)
    x &= full
    y &= full
    return y ^ _swap_mask(x, y, bits)


def minmax(a: int, b: int, bits: int) -> tuple[int, int]:
    """Return ``(min(a, b), max(a, b))`` as unsigned ``bits`` integers."""
    full = _full(bits)
    a &= full
    b &= full
    z = _swap_mask(a, b, bits)
    return a ^ z, b ^ z