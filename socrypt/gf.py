"""Arithmetic in GF(2^12) and in the extension GF((2^12)^64) used by McEliece."""

from __future__ import annotations

from typing import Sequence

from socrypt.mcutil import GFBITS, GFMASK, SYS_T

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF


def _reduce(x: int) -> int:
    t = x & 0x7FC000
    x ^= t >> 9
    x ^= t >> 12
    t = x & 0x3000
    x ^= t >> 9
    x ^= t >> 12
    return x & GFMASK


def gf_iszero(a: int) -> int:
    """Return 0x1FFF if ``a`` is zero, else 0 (a mask whose low GFBITS are set)."""
    t = ((a & _MASK16) - 1) & _MASK32
    return (t >> 19) & _MASK16


def gf_add(a: int, b: int) -> int:
    """Field addition (XOR)."""
    return (a ^ b) & _MASK16


def gf_mul(a: int, b: int) -> int:
    """Field multiplication modulo x^12 + x^3 + 1."""
    t0 = a & _MASK16
    t1 = b & _MASK16
    tmp = t0 * (t1 & 1)
    for i in range(1, GFBITS):
        tmp ^= t0 * (t1 & (1 << i))
    return _reduce(tmp & _MASK32)


def gf_sq(a: int) -> int:
    """Field squaring."""
    x = a & _MASK16
    x = (x | (x << 8)) & 0x00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F
    x = (x | (x << 2)) & 0x33333333
    x = (x | (x << 1)) & 0x55555555
    return _reduce(x)


def gf_inv(a: int) -> int:
    """Multiplicative inverse via a^(2^12 - 2); the inverse of 0 is 0."""
    out = gf_sq(a)
    tmp_11 = gf_mul(out, a)

    out = gf_sq(gf_sq(tmp_11))
    tmp_1111 = gf_mul(out, tmp_11)

    out = tmp_1111
    for _ in range(4):
        out = gf_sq(out)
    out = gf_mul(out, tmp_1111)

    out = gf_sq(gf_sq(out))
    out = gf_mul(out, tmp_11)

    out = gf_mul(gf_sq(out), a)
    return gf_sq(out)


def gf_frac(den: int, num: int) -> int:
    """Return ``num / den``."""
    return gf_mul(gf_inv(den), num)


def poly_mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply two elements of GF((2^12)^64), each given as SYS_T coefficients.

    The product is reduced modulo y^64 + y^3 + y + 2.
    """
    if len(a) != SYS_T or len(b) != SYS_T:
        raise ValueError(
            f"operands need {SYS_T} coefficients, got {len(a)} and {len(b)}"
        )
    prod = [0] * (2 * SYS_T - 1)
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            prod[i + j] ^= gf_mul(ai, bj)

    for i in range((SYS_T - 1) * 2, SYS_T - 1, -1):
        prod[i - SYS_T + 3] ^= prod[i]
        prod[i - SYS_T + 1] ^= prod[i]
        prod[i - SYS_T] ^= gf_mul(prod[i], 2)

    return prod[:SYS_T]