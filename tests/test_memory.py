import hashlib

import pytest

from walletfw.memory import (
    FLASH_BOOT_LEN,
    PROTECTED_OPTION_BYTES,
    bootloader_hash,
    needs_protection,
)


def test_protected_option_bytes_need_nothing():
    assert needs_protection(0xCCFF, 0xFFFC) is False


def test_high_bits_are_ignored():
    assert needs_protection(0xABCDCCFF, 0x1234FFFC) is False


@pytest.mark.parametrize(
    "ob1, ob2",
    [(0xAAFF, 0xFFFC), (0xCCFF, 0xFFFF), (0, 0), (0xFFFC, 0xCCFF)],
)
def test_unprotected_option_bytes(ob1, ob2):
    assert needs_protection(ob1, ob2) is True


def test_programmed_value_is_considered_protected():
    assert needs_protection(PROTECTED_OPTION_BYTES, PROTECTED_OPTION_BYTES >> 16) is False


def test_bootloader_hash_ignores_metadata_area():
    boot = bytes(range(256)) * (FLASH_BOOT_LEN // 256)
    metadata = b"TRZR" + b"\xaa" * (FLASH_BOOT_LEN - 4)
    assert bootloader_hash(boot + metadata) == bootloader_hash(boot)


def test_bootloader_hash_is_double_sha256_of_boot_region():
    image = bytes(range(256)) * (FLASH_BOOT_LEN // 256)
    expected = hashlib.sha256(hashlib.sha256(image).digest()).digest()
    assert bootloader_hash(image) == expected


def test_bootloader_hash_ignores_bytes_past_boot_region():
    image = bytes(FLASH_BOOT_LEN)
    assert bootloader_hash(image) == bootloader_hash(image + b"\xff" * 100)


def test_bootloader_hash_depends_on_boot_region():
    image = bytearray(FLASH_BOOT_LEN)
    before = bootloader_hash(image)
    image[FLASH_BOOT_LEN - 1] = 1
    assert bootloader_hash(image) != before
    assert len(before) == 32


def test_short_image_is_rejected():
    with pytest.raises(ValueError):
        bootloader_hash(bytes(FLASH_BOOT_LEN - 1))