"""Big-endian word helpers and the SHA-256 block compression function."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

STATE_BYTES = 32
BLOCK_BYTES = 64

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _require_length(data: bytes, size: int, what: str) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{what} needs exactly {size} bytes, got {len(data)}")
    return data


def load_bigendian_32(data: bytes) -> int:
    """Read a 4-byte big-endian unsigned integer."""
    return int.from_bytes(_require_length(data, 4, "load_bigendian_32"), "big")


def store_bigendian_32(value: int) -> bytes:
    """Write the low 32 bits of ``value`` as 4 big-endian bytes."""
    return (value & _MASK32).to_bytes(4, "big")


def load_bigendian_64(data: bytes) -> int:
    """Read an 8-byte big-endian unsigned integer."""
    return int.from_bytes(_require_length(data, 8, "load_bigendian_64"), "big")


def store_bigendian_64(value: int) -> bytes:
    """Write the low 64 bits of ``value`` as 8 big-endian bytes."""
    return (value & _MASK64).to_bytes(8, "big")


def _rotr(x: int, c: int) -> int:
    return ((x >> c) | (x << (32 - c))) & _MASK32


def _compress(state: list[int], block: bytes) -> list[int]:
    w = [int.from_bytes(block[i:i + 4], "big") for i in range(0, BLOCK_BYTES, 4)]
    for t in range(16, 64):
        s0 = _rotr(w[t - 15], 7) ^ _rotr(w[t - 15], 18) ^ (w[t - 15] >> 3)
        s1 = _rotr(w[t - 2], 17) ^ _rotr(w[t - 2], 19) ^ (w[t - 2] >> 10)
        w.append((s1 + w[t - 7] + s0 + w[t - 16]) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, wt in zip(_K, w):
        sigma1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        choose = (e & f) ^ (~e & g)
        t1 = (h + sigma1 + choose + k + wt) & _MASK32
        sigma0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        majority = (a & b) ^ (a & c) ^ (b & c)
        t2 = (sigma0 + majority) & _MASK32
        h, g, f, e = g, f, e, (d + t1) & _MASK32
        d, c, b, a = c, b, a, (t1 + t2) & _MASK32

    return [(s + v) & _MASK32 for s, v in zip(state, (a, b, c, d, e, f, g, h))]


def hashblocks(state: bytes, data: bytes) -> tuple[bytes, bytes]:
    """Run the compression function over every whole 64-byte block of ``data``.

    ``state`` is the 32-byte big-endian chaining value. Returns the updated
    chaining value and the trailing bytes that did not fill a whole block.
    """
    state = _require_length(state, STATE_BYTES, "SHA-256 state")
    data = bytes(data)
    words = [int.from_bytes(state[i:i + 4], "big") for i in range(0, STATE_BYTES, 4)]
    whole = len(data) - len(data) % BLOCK_BYTES
    for start in range(0, whole, BLOCK_BYTES):
        words = _compress(words, data[start:start + BLOCK_BYTES])
    new_state = b"".join(store_bigendian_32(word) for word in words)
    return new_state, data[whole:]