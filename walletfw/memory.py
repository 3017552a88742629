"""Flash memory layout and the checks built on it.

Flash map (512 KiB device, 128 KiB sectors from sector 5 on):

* sectors 0-1: bootloader code
* sectors 2-3: metadata area (descriptor followed by persistent storage)
* sectors 4-7: application code

The metadata descriptor holds the magic ``TRZR``, the code length, three
signature indexes, a flags byte and three 64-byte signatures.
"""

from __future__ import annotations

import hashlib

FLASH_ORIGIN = 0x08000000
FLASH_TOTAL_SIZE = 512 * 1024

FLASH_BOOT_START = FLASH_ORIGIN
FLASH_BOOT_LEN = 0x8000

FLASH_META_START = FLASH_BOOT_START + FLASH_BOOT_LEN
FLASH_META_LEN = 0x8000

FLASH_APP_START = FLASH_META_START + FLASH_META_LEN

FLASH_META_MAGIC = FLASH_META_START
FLASH_META_CODELEN = FLASH_META_START + 0x0004
FLASH_META_SIGINDEX1 = FLASH_META_START + 0x0008
FLASH_META_SIGINDEX2 = FLASH_META_START + 0x0009
FLASH_META_SIGINDEX3 = FLASH_META_START + 0x000A
FLASH_META_FLAGS = FLASH_META_START + 0x000B
FLASH_META_SIG1 = FLASH_META_START + 0x0040
FLASH_META_SIG2 = FLASH_META_START + 0x0080
FLASH_META_SIG3 = FLASH_META_START + 0x00C0

FLASH_META_DESC_LEN = 0x100

FLASH_STORAGE_START = FLASH_META_START + FLASH_META_DESC_LEN
FLASH_STORAGE_LEN = FLASH_APP_START - FLASH_STORAGE_START

FLASH_BOOT_SECTOR_FIRST = 0
FLASH_BOOT_SECTOR_LAST = 1
FLASH_META_SECTOR_FIRST = 2
FLASH_META_SECTOR_LAST = 3
FLASH_CODE_SECTOR_FIRST = 4
FLASH_CODE_SECTOR_LAST = 7

META_MAGIC = b"TRZR"

# Read protection level 2 and write protection of sectors 0 and 1.
RDP_LEVEL2 = 0xCCFF
WRP_BOOT_SECTORS = 0xFFFC
PROTECTED_OPTION_BYTES = (WRP_BOOT_SECTORS << 16) + RDP_LEVEL2


def needs_protection(option_bytes_1: int, option_bytes_2: int) -> bool:
    """Return whether the option bytes still have to be programmed.

    Only the low 16 bits of each option word are compared; protection is in
    place when they carry RDP level 2 and write protection of the bootloader.
    """
    return not (
        (option_bytes_1 & 0xFFFF) == RDP_LEVEL2
        and (option_bytes_2 & 0xFFFF) == WRP_BOOT_SECTORS
    )


def bootloader_hash(flash_image: bytes) -> bytes:
    """Return the double SHA-256 of the bootloader region of ``flash_image``.

    ``flash_image`` is the flash contents starting at ``FLASH_ORIGIN``.
    """
    image = bytes(flash_image)
    if len(image) < FLASH_BOOT_LEN:
        raise ValueError(
            f"flash image must hold at least {FLASH_BOOT_LEN} bytes, got {len(image)}"
        )
    first = hashlib.sha256(image[:FLASH_BOOT_LEN]).digest()
    return hashlib.sha256(first).digest()