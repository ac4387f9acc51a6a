"""AES block cipher with ECB, CBC and CTR modes of operation."""

from __future__ import annotations

BLOCK_SIZE = 16
_KEY_ROUNDS = {16: 10, 24: 12, 32: 14}

SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

RSBOX = bytes(SBOX.index(value) for value in range(256))

RCON = (0x8D, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)


def _xtime(x: int) -> int:
    return ((x << 1) ^ (0x1B if x & 0x80 else 0)) & 0xFF


def _multiply(x: int, y: int) -> int:
    result = 0
    while y:
        if y & 1:
            result ^= x
        x = _xtime(x)
        y >>= 1
    return result


def _expand_key(key: bytes) -> list[bytes]:
    """Produce the round keys, one 16-byte block per round."""
    nk = len(key) // 4
    nr = _KEY_ROUNDS[len(key)]
    words = [list(key[4 * i:4 * i + 4]) for i in range(nk)]
    for i in range(nk, 4 * (nr + 1)):
        temp = list(words[i - 1])
        if i % nk == 0:
            temp = temp[1:] + temp[:1]
            temp = [SBOX[b] for b in temp]
            temp[0] ^= RCON[i // nk]
        elif nk > 6 and i % nk == 4:
            temp = [SBOX[b] for b in temp]
        words.append([a ^ b for a, b in zip(words[i - nk], temp)])
    flat = bytes(b for word in words for b in word)
    return [flat[r * BLOCK_SIZE:(r + 1) * BLOCK_SIZE] for r in range(nr + 1)]


def _add_round_key(state: list[int], round_key: bytes) -> list[int]:
    return [s ^ k for s, k in zip(state, round_key)]


def _shift_rows(state: list[int]) -> list[int]:
    # state[4 * column + row]; row r rotates left by r
    return [state[4 * ((c + r) % 4) + r] for c in range(4) for r in range(4)]


def _inv_shift_rows(state: list[int]) -> list[int]:
    return [state[4 * ((c - r) % 4) + r] for c in range(4) for r in range(4)]


def _mix_columns(state: list[int]) -> list[int]:
    out: list[int] = []
    for c in range(4):
        a0, a1, a2, a3 = state[4 * c:4 * c + 4]
        total = a0 ^ a1 ^ a2 ^ a3
        out += [
            a0 ^ total ^ _xtime(a0 ^ a1),
            a1 ^ total ^ _xtime(a1 ^ a2),
            a2 ^ total ^ _xtime(a2 ^ a3),
            a3 ^ total ^ _xtime(a3 ^ a0),
        ]
    return out


def _inv_mix_columns(state: list[int]) -> list[int]:
    out: list[int] = []
    for c in range(4):
        a, b, cc, d = state[4 * c:4 * c + 4]
        m = _multiply
        out += [
            m(a, 0x0E) ^ m(b, 0x0B) ^ m(cc, 0x0D) ^ m(d, 0x09),
            m(a, 0x09) ^ m(b, 0x0E) ^ m(cc, 0x0B) ^ m(d, 0x0D),
            m(a, 0x0D) ^ m(b, 0x09) ^ m(cc, 0x0E) ^ m(d, 0x0B),
            m(a, 0x0B) ^ m(b, 0x0D) ^ m(cc, 0x09) ^ m(d, 0x0E),
        ]
    return out


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


class AES:
    """AES context holding the expanded key and the chaining/counter IV.

    The key length selects AES-128, AES-192 or AES-256.
    """

    def __init__(self, key: bytes, iv: bytes | None = None) -> None:
        key = bytes(key)
        if len(key) not in _KEY_ROUNDS:
            raise ValueError(
                f"AES key must be 16, 24 or 32 bytes long, got {len(key)}"
            )
        self._round_keys = _expand_key(key)
        self._rounds = len(self._round_keys) - 1
        self.iv = bytes(BLOCK_SIZE)
        if iv is not None:
            self.set_iv(iv)

    def set_iv(self, iv: bytes) -> None:
        """Replace the initialisation vector (or counter) of the context."""
        iv = bytes(iv)
        if len(iv) != BLOCK_SIZE:
            raise ValueError(f"IV must be {BLOCK_SIZE} bytes long, got {len(iv)}")
        self.iv = iv

    def _cipher(self, block: bytes) -> bytes:
        keys = self._round_keys
        state = _add_round_key(list(block), keys[0])
        for rnd in range(1, self._rounds + 1):
            state = _shift_rows([SBOX[b] for b in state])
            if rnd == self._rounds:
                break
            state = _add_round_key(_mix_columns(state), keys[rnd])
        return bytes(_add_round_key(state, keys[self._rounds]))

    def _inv_cipher(self, block: bytes) -> bytes:
        keys = self._round_keys
        state = _add_round_key(list(block), keys[self._rounds])
        for rnd in range(self._rounds - 1, -1, -1):
            state = [RSBOX[b] for b in _inv_shift_rows(state)]
            state = _add_round_key(state, keys[rnd])
            if rnd == 0:
                break
            state = _inv_mix_columns(state)
        return bytes(state)

    @staticmethod
    def _blocks(data: bytes) -> list[bytes]:
        if len(data) % BLOCK_SIZE:
            raise ValueError(
                f"data length must be a multiple of {BLOCK_SIZE}, got {len(data)}"
            )
        return [data[i:i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE)]

    @staticmethod
    def _single_block(block: bytes) -> bytes:
        block = bytes(block)
        if len(block) != BLOCK_SIZE:
            raise ValueError(
                f"ECB block must be {BLOCK_SIZE} bytes long, got {len(block)}"
            )
        return block

    def ecb_encrypt(self, block: bytes) -> bytes:
        """Encrypt exactly one 16-byte block."""
        return self._cipher(self._single_block(block))

    def ecb_decrypt(self, block: bytes) -> bytes:
        """Decrypt exactly one 16-byte block."""
        return self._inv_cipher(self._single_block(block))

    def cbc_encrypt(self, data: bytes) -> bytes:
        """CBC-encrypt whole blocks; the IV is left at the last ciphertext block."""
        out = bytearray()
        chain = self.iv
        for block in self._blocks(bytes(data)):
            chain = self._cipher(_xor(block, chain))
            out += chain
        self.iv = chain
        return bytes(out)

    def cbc_decrypt(self, data: bytes) -> bytes:
        """CBC-decrypt whole blocks; the IV is left at the last ciphertext block."""
        out = bytearray()
        for block in self._blocks(bytes(data)):
            out += _xor(self._inv_cipher(block), self.iv)
            self.iv = block
        return bytes(out)

    def ctr_xcrypt(self, data: bytes) -> bytes:
        """Encrypt or decrypt in counter mode.

        Each call starts a fresh keystream block from the current counter; the
        counter is incremented (big-endian, wrapping) once per block generated.
        """
        data = bytes(data)
        out = bytearray()
        for start in range(0, len(data), BLOCK_SIZE):
            keystream = self._cipher(self.iv)
            counter = (int.from_bytes(self.iv, "big") + 1) % (1 << 128)
            self.iv = counter.to_bytes(BLOCK_SIZE, "big")
            out += _xor(data[start:start + BLOCK_SIZE], keystream)
        return bytes(out)