"""Random numbers drawn from a 32-bit entropy source."""

from __future__ import annotations

import secrets
from collections.abc import Callable, MutableSequence
from typing import Any

_UINT32_MASK = 0xFFFFFFFF


def _system_source() -> int:
    return secrets.randbits(32)


class RandomSource:
    """Random helpers on top of a callable yielding 32-bit words.

    Like a hardware generator guard, a word equal to the previously
    returned one is discarded and the source is read again.
    """

    def __init__(self, source: Callable[[], int] | None = None) -> None:
        self._source = source if source is not None else _system_source
        self._last = 0

    def random32(self) -> int:
        """Return the next 32-bit word that differs from the previous one."""
        while True:
            value = self._source() & _UINT32_MASK
            if value != self._last:
                self._last = value
                return value

    def uniform(self, n: int) -> int:
        """Return an unbiased integer in ``range(n)``."""
        if not 1 <= n <= _UINT32_MASK:
            raise ValueError(f"n must be between 1 and 2**32 - 1, got {n}")
        limit = _UINT32_MASK - (_UINT32_MASK % n)
        while True:
            x = self.random32()
            if x < limit:
                return x // (limit // n)

    def buffer(self, length: int) -> bytes:
        """Return ``length`` random bytes, each word used little-endian."""
        if length < 0:
            raise ValueError("length must not be negative")
        out = bytearray()
        while len(out) < length:
            out += self.random32().to_bytes(4, "little")
        return bytes(out[:length])

    def permute(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place (Fisher-Yates)."""
        for i in reversed(range(1, len(items))):
            j = self.uniform(i + 1)
            items[i], items[j] = items[j], items[i]