"""Frame buffer for the 128x64 monochrome OLED display.

The buffer follows the panel's memory layout: 8 pages of 128 column bytes,
stored back to front, so that pixel (x, y) lives in byte
``BUFSIZE - 1 - x - (y // 8) * WIDTH`` under mask ``1 << (7 - y % 8)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from walletfw.fonts import FONT_HEIGHT, char_data, char_width

WIDTH = 128
HEIGHT = 64
BUFSIZE = WIDTH * HEIGHT // 8

# Pixels toggled in the upper right corner while debug mode is on.
_DEBUG_TRIANGLE = tuple(
    (WIDTH - 1 - dx, row) for row in range(5) for dx in range(5 - row)
)

Text = str | bytes | None


@dataclass(frozen=True)
class Bitmap:
    """A 1-bit image stored row by row, most significant bit leftmost."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if not (0 <= self.width <= 0xFF and 0 <= self.height <= 0xFF):
            raise ValueError("bitmap dimensions must fit in a byte")
        object.__setattr__(self, "data", bytes(self.data))


def convert_char(byte: int) -> int | None:
    """Map a UTF-8 byte to a font code, or ``None`` if it is skipped.

    ASCII bytes map to themselves, the first byte of a multi-byte sequence
    becomes ``_`` and continuation bytes are dropped.
    """
    if byte < 0x80:
        return byte
    if byte >= 0xC0:
        return ord("_")
    return None


def _text_bytes(text: Text) -> bytes:
    if text is None:
        return b""
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _glyphs(text: Text) -> Iterator[int]:
    for byte in _text_bytes(text):
        code = convert_char(byte)
        if code is not None:
            yield code


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def _locate(x: int, y: int) -> tuple[int, int]:
    return BUFSIZE - 1 - x - (y // 8) * WIDTH, 1 << (7 - y % 8)


class Display:
    """In-memory display buffer with drawing primitives.

    ``on_refresh`` receives a copy of the buffer each time the display is
    refreshed; it stands in for pushing the buffer to the panel.
    """

    def __init__(self, on_refresh: Callable[[bytes], None] | None = None) -> None:
        self._on_refresh = on_refresh
        self._buffer = bytearray(BUFSIZE)
        self._debug = False

    def clear(self) -> None:
        """Blank the whole buffer."""
        self._buffer[:] = bytes(BUFSIZE)

    def _toggle(self, x: int, y: int) -> None:
        index, mask = _locate(x, y)
        self._buffer[index] ^= mask

    def _toggle_triangle(self) -> None:
        for x, y in _DEBUG_TRIANGLE:
            self._toggle(x, y)

    def refresh(self) -> None:
        """Send the buffer out, marked with a corner triangle in debug mode."""
        if self._debug:
            self._toggle_triangle()
        try:
            if self._on_refresh is not None:
                self._on_refresh(bytes(self._buffer))
        finally:
            if self._debug:
                self._toggle_triangle()

    def set_debug(self, enabled: bool) -> None:
        """Switch debug mode and refresh."""
        self._debug = bool(enabled)
        self.refresh()

    def set_buffer(self, data: bytes) -> None:
        """Replace the buffer with ``BUFSIZE`` bytes of raw panel data."""
        data = bytes(data)
        if len(data) != BUFSIZE:
            raise ValueError(f"buffer must be {BUFSIZE} bytes, got {len(data)}")
        self._buffer[:] = data

    def get_buffer(self) -> bytes:
        """Return a copy of the raw buffer."""
        return bytes(self._buffer)

    def draw_pixel(self, x: int, y: int) -> None:
        if not _in_bounds(x, y):
            return
        index, mask = _locate(x, y)
        self._buffer[index] |= mask

    def clear_pixel(self, x: int, y: int) -> None:
        if not _in_bounds(x, y):
            return
        index, mask = _locate(x, y)
        self._buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether pixel (x, y) is lit; pixels off screen are dark."""
        if not _in_bounds(x, y):
            return False
        index, mask = _locate(x, y)
        return bool(self._buffer[index] & mask)

    def draw_char(self, x: int, y: int, c: str | int) -> None:
        """Draw one glyph with its top left corner at (x, y)."""
        if x >= WIDTH or y >= HEIGHT:
            return
        columns = char_data(c)[: char_width(c)]
        for xoffset, column in enumerate(columns):
            for yoffset in range(FONT_HEIGHT):
                if column & (1 << (FONT_HEIGHT - 1 - yoffset)):
                    self.draw_pixel(x + xoffset, y + yoffset)

    def string_width(self, text: Text) -> int:
        """Return the width of ``text`` including one pixel after each glyph."""
        return sum(char_width(code) + 1 for code in _glyphs(text))

    def draw_string(self, x: int, y: int, text: Text) -> None:
        offset = 0
        for code in _glyphs(text):
            self.draw_char(x + offset, y, code)
            offset += char_width(code) + 1

    def draw_string_center(self, y: int, text: Text) -> None:
        x = int((WIDTH - self.string_width(text)) / 2)
        self.draw_string(x, y, text)

    def draw_string_right(self, x: int, y: int, text: Text) -> None:
        self.draw_string(x - self.string_width(text), y, text)

    def draw_bitmap(self, x: int, y: int, bitmap: Bitmap) -> None:
        """Copy ``bitmap`` to (x, y), both setting and clearing pixels."""
        for i in range(min(bitmap.width, WIDTH - x)):
            for j in range(min(bitmap.height, HEIGHT - y)):
                byte = bitmap.data[i // 8 + j * bitmap.width // 8]
                if byte & (1 << (7 - i % 8)):
                    self.draw_pixel(x + i, y + j)
                else:
                    self.clear_pixel(x + i, y + j)

    def invert(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Toggle every pixel of the inclusive rectangle."""
        if x1 >= WIDTH or y1 >= HEIGHT or x2 >= WIDTH or y2 >= HEIGHT:
            return
        for x in range(max(x1, 0), x2 + 1):
            for y in range(max(y1, 0), y2 + 1):
                self._toggle(x, y)

    def box(self, x1: int, y1: int, x2: int, y2: int, value: bool) -> None:
        """Set (``value`` true) or clear the inclusive rectangle."""
        paint = self.draw_pixel if value else self.clear_pixel
        for x in range(x1, x2 + 1):
            for y in range(y1, y2 + 1):
                paint(x, y)

    def hline(self, y: int) -> None:
        for x in range(WIDTH):
            self.draw_pixel(x, y)

    def frame(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw the outline of the inclusive rectangle."""
        for x in range(x1, x2 + 1):
            self.draw_pixel(x, y1)
            self.draw_pixel(x, y2)
        for y in range(y1 + 1, y2):
            self.draw_pixel(x1, y)
            self.draw_pixel(x2, y)

    def _swipe(self, shift: Callable[[bytes], bytes]) -> None:
        for _ in range(WIDTH // 4):
            for start in range(0, BUFSIZE, WIDTH):
                row = bytes(self._buffer[start : start + WIDTH])
                self._buffer[start : start + WIDTH] = shift(row)
            self.refresh()

    def swipe_left(self) -> None:
        """Slide the picture off to the left, four columns per refresh."""
        self._swipe(lambda row: bytes(4) + row[:-4])

    def swipe_right(self) -> None:
        """Slide the picture off to the right, four columns per refresh."""
        self._swipe(lambda row: row[4:] + bytes(4))