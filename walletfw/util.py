"""Hex formatting and varint decoding helpers."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF
_MAX_VARINT_BYTES = 5


def uint32_hex(num: int) -> str:
    """Format an unsigned 32-bit integer as exactly 8 uppercase hex digits."""
    if not 0 <= num <= _UINT32_MASK:
        raise ValueError(f"value does not fit in 32 bits: {num}")
    return f"{num:08X}"


def data_to_hex(data: bytes) -> str:
    """Return ``data`` as uppercase hex, two digits per byte."""
    return bytes(data).hex().upper()


def read_protobuf_int(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a protobuf varint of at most five bytes starting at ``offset``.

    Returns the decoded value, truncated to 32 bits, and the offset of the
    first byte after it. The continuation bit of a fifth byte is ignored.
    """
    result = 0
    pos = offset
    for index in range(_MAX_VARINT_BYTES):
        try:
            byte = data[pos]
        except IndexError:
            raise ValueError("truncated varint") from None
        pos += 1
        result += (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            break
    return result & _UINT32_MASK, pos