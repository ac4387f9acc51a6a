"""Goppa polynomial evaluation, syndromes and minimal-polynomial generation."""

from __future__ import annotations

from typing import Iterable, Sequence

from socrypt.gf import gf_mul, poly_mul
from socrypt.mcutil import GFBITS, GFMASK, SYS_T

_ORDER = (1 << GFBITS) - 1


class GenerationError(Exception):
    """A key-generation step hit a non-systematic matrix; retry with fresh randomness."""


def _build_tables() -> tuple[list[int], list[int]]:
    for generator in range(2, 1 << GFBITS):
        exp = [1]
        x = generator
        while x != 1:
            exp.append(x)
            x = gf_mul(x, generator)
        if len(exp) == _ORDER:
            log = [0] * (1 << GFBITS)
            for power, value in enumerate(exp):
                log[value] = power
            return exp + exp, log
    raise RuntimeError("GF(2^12) has no multiplicative generator")


_EXP, _LOG = _build_tables()


def _mul(a: int, b: int) -> int:
    """Multiply two reduced field elements (same result as ``gf_mul``)."""
    if not a or not b:
        return 0
    return _EXP[_LOG[a] + _LOG[b]]


def _inv(a: int) -> int:
    """Inverse of a reduced field element; the inverse of 0 is 0."""
    if not a:
        return 0
    return _EXP[_ORDER - _LOG[a]]


def _check_elements(values: Iterable[int], what: str) -> None:
    for value in values:
        if not 0 <= value <= GFMASK:
            raise ValueError(f"{what} holds a value outside GF(2^{GFBITS}): {value}")


def _eval(f: Sequence[int], a: int) -> int:
    r = f[-1]
    for coefficient in reversed(f[:-1]):
        r = _mul(r, a) ^ coefficient
    return r


def eval_poly(f: Sequence[int], a: int) -> int:
    """Evaluate the polynomial with coefficients ``f`` (lowest first) at ``a``."""
    f = list(f)
    if not f:
        raise ValueError("polynomial needs at least one coefficient")
    _check_elements(f, "polynomial")
    _check_elements((a,), "point")
    return _eval(f, a)


def root(f: Sequence[int], support: Sequence[int]) -> list[int]:
    """Return ``[f(a) for a in support]``."""
    f = list(f)
    if not f:
        raise ValueError("polynomial needs at least one coefficient")
    _check_elements(f, "polynomial")
    _check_elements(support, "support")
    return [_eval(f, a) for a in support]


def synd(f: Sequence[int], support: Sequence[int], r: bytes) -> list[int]:
    """Syndrome of length 2*SYS_T of the received word ``r`` for Goppa polynomial ``f``.

    Bit ``i`` of ``r`` (little-endian within each byte) belongs to ``support[i]``.
    """
    f = list(f)
    if not f:
        raise ValueError("polynomial needs at least one coefficient")
    _check_elements(f, "polynomial")
    _check_elements(support, "support")
    r = bytes(r)
    if len(r) < (len(support) + 7) // 8:
        raise ValueError(
            f"received word needs {(len(support) + 7) // 8} bytes, got {len(r)}"
        )

    out = [0] * (2 * SYS_T)
    for i, a in enumerate(support):
        if not (r[i >> 3] >> (i & 7)) & 1:
            continue
        e = _eval(f, a)
        e_inv = _inv(_mul(e, e))
        for j in range(2 * SYS_T):
            out[j] ^= e_inv
            e_inv = _mul(e_inv, a)
    return out


def genpoly_gen(f: Sequence[int]) -> list[int]:
    """Minimal polynomial of ``f`` in GF((2^12)^64), without its leading 1.

    Raises ``GenerationError`` when the minimal polynomial has degree below SYS_T.
    """
    f = list(f)
    if len(f) != SYS_T:
        raise ValueError(f"expected {SYS_T} coefficients, got {len(f)}")
    _check_elements(f, "element")

    mat = [[1] + [0] * (SYS_T - 1), list(f)]
    for _ in range(2, SYS_T + 1):
        mat.append(poly_mul(mat[-1], f))

    for j in range(SYS_T):
        for k in range(j + 1, SYS_T):
            if mat[j][j] == 0:
                for c in range(j, SYS_T + 1):
                    mat[c][j] ^= mat[c][k]

        if mat[j][j] == 0:
            raise GenerationError("minimal polynomial is not of full degree")

        inv = _inv(mat[j][j])
        for c in range(j, SYS_T + 1):
            mat[c][j] = _mul(mat[c][j], inv)

        for k in range(SYS_T):
            if k == j:
                continue
            t = mat[j][k]
            for c in range(j, SYS_T + 1):
                mat[c][k] ^= _mul(mat[c][j], t)

    return list(mat[SYS_T])