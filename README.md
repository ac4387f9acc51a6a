# socrypt

Pure-Python cryptographic building blocks with no third-party dependencies,
plus a few helpers for a SoC bootloader's configuration files.

## Modules

- `socrypt.aes`: the `AES` class. The key length (16, 24 or 32 bytes) selects
  AES-128, AES-192 or AES-256. It offers `ecb_encrypt` / `ecb_decrypt` on a
  single 16-byte block, `cbc_encrypt` / `cbc_decrypt` on whole blocks, and
  `ctr_xcrypt` for counter mode. `set_iv` replaces the IV or counter. CBC and
  CTR update the context's `iv` as they go.
- `socrypt.sha256_block`: the SHA-256 compression function `hashblocks(state, data)`.
  It runs over every whole 64-byte block and returns the new 32-byte state and the
  leftover bytes. The module also has the big-endian helpers `load_bigendian_32`,
  `store_bigendian_32`, `load_bigendian_64` and `store_bigendian_64`.
- `socrypt.mcutil`: the Classic McEliece 348864 parameters (`GFBITS`, `SYS_N`,
  `SYS_T`, `PK_NROWS`, `PK_ROW_BYTES`, `SYND_BYTES`, ...). It also has the
  little-endian helpers `store_gf`, `load_gf`, `load4`, `store8` and `load8`,
  and `bitrev`.
- `socrypt.gf`: arithmetic in GF(2^12), namely `gf_iszero`, `gf_add`, `gf_mul`,
  `gf_sq`, `gf_inv` and `gf_frac`. It also has `poly_mul`, which multiplies in
  GF((2^12)^64) modulo y^64 + y^3 + y + 2.
- `socrypt.goppa`: `eval_poly`, `root`, `synd` (a syndrome of length 2·SYS_T) and
  `genpoly_gen`. `genpoly_gen` gives a minimal polynomial. It raises
  `GenerationError` when that polynomial is not of full degree.
- `socrypt.ctmask`: comparison masks for 16, 32 and 64-bit unsigned values,
  namely `nonzero_mask`, `zero_mask`, `equal_mask`, `unequal_mask`,
  `smaller_mask`, `signed_negative_mask`, `minimum`, `maximum` and `minmax`.
- `socrypt.sorting`: sorting networks `uint64_sort` and `int32_sort`.
- `socrypt.transpose`: `transpose_64x64` for a 64×64 bit matrix given as 64 row words.
- `socrypt.boot`: bootloader configuration helpers.
  - `parse_mem_config` reads `name hexoffset` lines into `MemoryEntry` items.
  - `boot_flow_from_text` turns the contents of `boot.flow` into a `BootFlow`.
  - `decode_file_size` reads the 4-byte little-endian size sent by the console.
  - `runs_linux` tells whether the entries include `rootfs.cpio.gz`.

## Installation

```
pip install .
```

## Examples

```python
from socrypt.aes import AES

key = bytes(range(32))
cipher = AES(key, bytes(16))
block = cipher.ecb_encrypt(bytes(16))
assert cipher.ecb_decrypt(block) == bytes(16)

encrypted = AES(key, bytes(16)).cbc_encrypt(bytes(32))
assert AES(key, bytes(16)).cbc_decrypt(encrypted) == bytes(32)
```

```python
from socrypt.gf import gf_inv, gf_mul
from socrypt.ctmask import minmax
from socrypt.sorting import uint64_sort

assert gf_mul(0x123, gf_inv(0x123)) == 1
assert minmax(5, 3, 32) == (3, 5)
assert uint64_sort([3, 1, 2]) == [1, 2, 3]
```

```python
from socrypt.boot import BootFlow, boot_flow_from_text, parse_mem_config, runs_linux

entries = parse_mem_config("fw_jump.bin 0\nImage 400000\nrootfs.cpio.gz 1000000\n")
print(runs_linux(entries))                            # True
print(boot_flow_from_text("FLASH_TO_EXTMEM"))         # BootFlow.FLASH_TO_EXTMEM
```

## What this package does not do

- It does not produce complete SHA-256 or SHA-224 digests. `hashblocks` only
  compresses whole 64-byte blocks. Message padding and the length encoding are
  left to the caller.
- It has the field arithmetic, Goppa-polynomial and support routines of Classic
  McEliece. It does not have public-key generation, error-vector generation,
  encryption, or key encapsulation and decapsulation.
- It has no helpers for RISC-V interrupt codes or for CLINT/PLIC register addresses.
- The boot helpers only parse and decide. They do not talk to a UART, Ethernet
  or SPI flash, and they provide no command-line program.

## Running the tests

```
pip install .[test]
pytest
```