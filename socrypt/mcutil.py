"""Parameters of the McEliece 348864 set and little-endian load/store helpers."""

from __future__ import annotations

GFBITS = 12
SYS_N = 3488
SYS_T = 64

COND_BYTES = (1 << (GFBITS - 4)) * (2 * GFBITS - 1)
IRR_BYTES = SYS_T * 2

PK_NROWS = SYS_T * GFBITS
PK_NCOLS = SYS_N - PK_NROWS
PK_ROW_BYTES = (PK_NCOLS + 7) // 8

SYND_BYTES = (PK_NROWS + 7) // 8

GFMASK = (1 << GFBITS) - 1

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _exact(src: bytes, size: int, what: str) -> bytes:
    src = bytes(src)
    if len(src) != size:
        raise ValueError(f"{what} needs exactly {size} bytes, got {len(src)}")
    return src


def store_gf(a: int) -> bytes:
    """Encode a 16-bit field element as 2 little-endian bytes."""
    return (a & 0xFFFF).to_bytes(2, "little")


def load_gf(src: bytes) -> int:
    """Decode 2 little-endian bytes into a field element (masked to GFBITS)."""
    return int.from_bytes(_exact(src, 2, "load_gf"), "little") & GFMASK


def load4(src: bytes) -> int:
    """Decode 4 little-endian bytes into an unsigned 32-bit integer."""
    return int.from_bytes(_exact(src, 4, "load4"), "little")


def store8(value: int) -> bytes:
    """Encode the low 64 bits of ``value`` as 8 little-endian bytes."""
    return (value & _MASK64).to_bytes(8, "little")


def load8(src: bytes) -> int:
    """Decode 8 little-endian bytes into an unsigned 64-bit integer."""
    return int.from_bytes(_exact(src, 8, "load8"), "little")


def bitrev(a: int) -> int:
    """Reverse the 16 bits of ``a`` and drop the low 4, giving a GFBITS reversal."""
    a &= 0xFFFF
    a = ((a & 0x00FF) << 8) | ((a & 0xFF00) >> 8)
    a = ((a & 0x0F0F) << 4) | ((a & 0xF0F0) >> 4)
    a = ((a & 0x3333) << 2) | ((a & 0xCCCC) >> 2)
    a = ((a & 0x5555) << 1) | ((a & 0xAAAA) >> 1)
    return a >> 4