"""Device serial number derived from the chip's unique id."""

from __future__ import annotations

import hashlib

from walletfw.util import data_to_hex

UNIQUE_ID_LEN = 12
SERIAL_BYTES = 12


def serial_from_unique_id(unique_id: bytes) -> str:
    """Return the 24-digit hex serial for a 12-byte unique id.

    The serial is the first 12 bytes of the double SHA-256 of the id.
    """
    unique_id = bytes(unique_id)
    if len(unique_id) != UNIQUE_ID_LEN:
        raise ValueError(f"unique id must be {UNIQUE_ID_LEN} bytes, got {len(unique_id)}")
    digest = hashlib.sha256(hashlib.sha256(unique_id).digest()).digest()
    return data_to_hex(digest[:SERIAL_BYTES])