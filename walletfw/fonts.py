"""Bitmap font for the 128x64 monochrome display.

Each glyph is a sequence of column bytes. The most significant bit of a
column byte is the top row of the glyph, and every glyph is
``FONT_HEIGHT`` rows tall.
"""

from __future__ import annotations

FONT_HEIGHT = 8

_BLANK = b"\x00"

_GLYPHS: dict[str, str] = {
    "\x06": "18 1c 0e 18 30 40 80",
    "\x15": "44 ee 7c 38 7c ee 44",
    " ": "00",
    "!": "fa fa",
    '"': "c0 00 c0",
    "#": "6c fe 6c fe 6c",
    "$": "32 ff 5a ff 4c",
    "%": "c0 c6 1c 70 c6 06",
    "&": "5c fe b2 fe 4c 1e",
    "'": "c0",
    "(": "38 7c 82",
    ")": "82 7c 38",
    "*": "6c 38 fe 38 6c",
    "+": "10 10 7c 10 10",
    ",": "03 06",
    "-": "10 10 10 10",
    ".": "06 06",
    "/": "0e 38 e0",
    "0": "7c fe 82 fe 7c",
    "1": "40 fe fe",
    "2": "8e 9e 92 f2 62",
    "3": "82 92 92 fe 6c",
    "4": "18 28 48 fe fe",
    "5": "e2 a2 a2 be 1c",
    "6": "7c fe a2 be 1c",
    "7": "80 8e be f0 c0",
    "8": "6c fe 92 fe 6c",
    "9": "70 fa 8a fe 7c",
    ":": "36 36",
    ";": "33 36",
    "<": "10 38 6c c6",
    "=": "28 28 28 28",
    ">": "c6 6c 38 10",
    "?": "80 9a ba e0 40",
    "@": "7c fe aa ba fa 78",
    "A": "7e fe 88 fe 7e",
    "B": "fe fe a2 fe 5c",
    "C": "7c fe 82 82 82",
    "D": "fe fe 82 fe 7c",
    "E": "fe fe a2 a2 82",
    "F": "fe fe a0 a0 80",
    "G": "7c fe 82 9e 1e",
    "H": "fe fe 20 fe fe",
    "I": "fe fe",
    "J": "02 02 fe fc",
    "K": "fe fe 38 6c c6 82",
    "L": "fe fe 02 02",
    "M": "fe 7e 30 18 30 7e fe",
    "N": "fe 7e 30 18 fc fe",
    "O": "7c fe 82 82 fe 7c",
    "P": "fe fe 88 f8 70",
    "Q": "7c fe 82 86 ff 7d",
    "R": "fe fe 88 fe 72",
    "S": "62 f2 9e 8c",
    "T": "80 80 fe fe 80 80",
    "U": "fc fe 02 fe fc",
    "V": "e0 f8 1e 1e f8 e0",
    "W": "f0 fe 1e 3c 1e fe f0",
    "X": "c6 ee 38 38 ee c6",
    "Y": "c0 e0 3e 3e e0 c0",
    "Z": "8e 9e ba f2 e2",
    "[": "fe fe 82",
    "\\": "e0 38 0e",
    "]": "82 fe fe",
    "^": "60 c0 60",
    "_": "02 02 02 02 02 02",
    "`": "80 40",
    "a": "04 2e 2a 3e 1e",
    "b": "fe fe 22 3e 1c",
    "c": "1c 3e 22 36 14",
    "d": "1c 3e 22 fe fe",
    "e": "1c 3e 2a 3a 1a",
    "f": "7e fe a0",
    "g": "18 3d 25 3f 3e",
    "h": "fe fe 20 3e 1e",
    "i": "be be",
    "j": "01 bf be",
    "k": "fe fe 1c 36 22",
    "l": "fe fe",
    "m": "3e 3e 20 3e 3e 20 3e 1e",
    "n": "3e 3e 20 3e 1e",
    "o": "1c 3e 22 3e 1c",
    "p": "3f 3f 24 3c 18",
    "q": "18 3c 24 3f 3f",
    "r": "3e 3e 10 30",
    "s": "1a 3a 2e 2c",
    "t": "fc fe 22",
    "u": "3c 3e 02 3e 3e",
    "v": "30 3c 0e 3c 30",
    "w": "38 3e 06 1c 06 3e 38",
    "x": "36 3e 08 3e 36",
    "y": "38 3d 05 3f 3e",
    "z": "26 2e 3a 32 22",
    "{": "10 7c ee 82",
    "|": "ff ff",
    "}": "82 ee 7c 10",
    "~": "08 10 08 10",
}

_FONT: tuple[bytes, ...] = tuple(
    bytes.fromhex(_GLYPHS[chr(code)]) if chr(code) in _GLYPHS else _BLANK
    for code in range(256)
)


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if not 0 <= c <= 0xFF:
        raise ValueError(f"character code out of range: {c}")
    return c


def char_width(c: str | int) -> int:
    """Return the width in pixels of the glyph for character or byte ``c``."""
    return len(_FONT[_code(c)])


def char_data(c: str | int) -> bytes:
    """Return the column bytes of the glyph for character or byte ``c``."""
    return _FONT[_code(c)]