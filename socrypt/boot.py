"""Bootloader helpers: memory-load configuration, boot flow selection and framing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

PROGNAME = "IOb-Bootloader"

DC1 = 17
EXT_MEM = 0x80000000

FLASH_FILE_SIZE_OFFSET = 0x0
FLASH_FIRMWARE_OFFSET = 0x1000

MAX_FILES = 4
MAX_NAME_LENGTH = 49
MAX_BOOT_FLOW_SIZE = 20

LINUX_ROOTFS_NAME = "rootfs.cpio.gz"

_HEX_DIGITS = "0123456789abcdefABCDEF"


class BootFlow(enum.Enum):
    """Where the bootloader takes the firmware from and where it puts it."""

    CONSOLE_TO_EXTMEM = "CONSOLE_TO_EXTMEM"
    CONSOLE_TO_FLASH = "CONSOLE_TO_FLASH"
    FLASH_TO_EXTMEM = "FLASH_TO_EXTMEM"


@dataclass(frozen=True)
class MemoryEntry:
    """One file to load and its offset from the start of external memory."""

    name: str
    address: int


def _as_text(data: str | bytes) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("latin-1")
    return data


def parse_mem_config(text: str | bytes) -> list[MemoryEntry]:
    """Parse lines of ``<name> <hex offset>`` into memory entries.

    A name runs up to the first space; the offset is hexadecimal and ends at a
    newline. A trailing name with no offset is ignored. Raises ``ValueError``
    on a non-hexadecimal offset character, an over-long name or more than
    ``MAX_FILES`` entries.
    """
    text = _as_text(text)
    entries: list[MemoryEntry] = []
    name: list[str] = []
    address = 0
    reading_name = True

    for char in text:
        if reading_name:
            if char == " ":
                if len(entries) >= MAX_FILES:
                    raise ValueError(f"at most {MAX_FILES} files can be loaded")
                entries.append(MemoryEntry("".join(name), 0))
                name = []
                address = 0
                reading_name = False
            else:
                if len(name) >= MAX_NAME_LENGTH:
                    raise ValueError(
                        f"file name longer than {MAX_NAME_LENGTH} characters"
                    )
                name.append(char)
        elif char == "\n":
            reading_name = True
        else:
            if char not in _HEX_DIGITS:
                raise ValueError(f"{PROGNAME}: invalid hexadecimal character {char!r}")
            address = address * 16 + int(char, 16)
            entries[-1] = MemoryEntry(entries[-1].name, address)

    return entries


def decode_file_size(data: bytes) -> int:
    """Decode the 4-byte little-endian file size sent by the console."""
    data = bytes(data)
    if len(data) != 4:
        raise ValueError(f"file size needs exactly 4 bytes, got {len(data)}")
    return int.from_bytes(data, "little")


def boot_flow_from_text(text: str | bytes) -> BootFlow:
    """Select the boot flow named by the contents of ``boot.flow``.

    Anything other than a known flash flow falls back to CONSOLE_TO_EXTMEM.
    Raises ``ValueError`` if the file is larger than the bootloader accepts.
    """
    text = _as_text(text)
    if len(text) > MAX_BOOT_FLOW_SIZE:
        raise ValueError("boot.flow file size is too large")
    name = text.split("\0", 1)[0]
    if name == BootFlow.CONSOLE_TO_FLASH.value:
        return BootFlow.CONSOLE_TO_FLASH
    if name == BootFlow.FLASH_TO_EXTMEM.value:
        return BootFlow.FLASH_TO_EXTMEM
    return BootFlow.CONSOLE_TO_EXTMEM


def runs_linux(entries: Iterable[MemoryEntry]) -> bool:
    """True when the files to load include the Linux root filesystem."""
    return any(entry.name == LINUX_ROOTFS_NAME for entry in entries)