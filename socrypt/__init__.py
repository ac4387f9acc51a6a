"""AES, the SHA-256 compression step, Classic McEliece arithmetic and bootloader config helpers."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "boot",
    "ctmask",
    "gf",
    "goppa",
    "mcutil",
    "sha256_block",
    "sorting",
    "transpose",
]