"""Standard screens: dialogs with buttons and a progress indicator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import IntEnum

from walletfw.fonts import char_width
from walletfw.oled import HEIGHT, WIDTH, Bitmap, Display, Text

_LINE_HEIGHT = 9
_ICON_INDENT = 20
_NO_GLYPH = "\x15"
_YES_GLYPH = "\x06"
_GEAR_COUNT = 4
_GEARS_X = 40


class DialogIcon(IntEnum):
    NONE = 0
    ERROR = 1
    INFO = 2
    QUESTION = 3
    WARNING = 4
    OK = 5


class Layout:
    """Draws screens on a ``Display``.

    ``icons`` maps dialog icons to their bitmaps; ``gears`` holds the four
    animation frames shown by the progress screen.
    """

    def __init__(
        self,
        display: Display,
        icons: Mapping[DialogIcon, Bitmap] | None = None,
        gears: Sequence[Bitmap] | None = None,
    ) -> None:
        if gears is not None and len(gears) != _GEAR_COUNT:
            raise ValueError(f"expected {_GEAR_COUNT} gear frames, got {len(gears)}")
        self.display = display
        self._icons = dict(icons or {})
        self._gears = tuple(gears) if gears is not None else None
        self._step = 0

    def dialog(
        self,
        icon: DialogIcon,
        btn_no: Text = None,
        btn_yes: Text = None,
        desc: Text = None,
        line1: Text = None,
        line2: Text = None,
        line3: Text = None,
        line4: Text = None,
        line5: Text = None,
        line6: Text = None,
    ) -> None:
        """Draw a dialog: optional icon, text lines, description and buttons."""
        d = self.display
        d.clear()
        left = 0
        icon = DialogIcon(icon)
        if icon is not DialogIcon.NONE:
            try:
                bitmap = self._icons[icon]
            except KeyError:
                raise ValueError(f"no bitmap for icon {icon.name}") from None
            d.draw_bitmap(0, 0, bitmap)
            left = _ICON_INDENT

        lines = [line1, line2, line3, line4]
        if desc is None:
            lines += [line5, line6]
        for row, line in enumerate(lines):
            if line is not None:
                d.draw_string(left, row * _LINE_HEIGHT, line)

        has_buttons = btn_yes is not None or btn_no is not None
        if desc is not None:
            d.draw_string_center(HEIGHT - 2 * _LINE_HEIGHT - 1, desc)
            if has_buttons:
                d.hline(HEIGHT - 21)
        elif has_buttons:
            d.hline(HEIGHT - 13)

        if btn_no is not None:
            glyph = char_width(_NO_GLYPH)
            d.draw_string(1, HEIGHT - 8, _NO_GLYPH)
            d.draw_string(glyph + 3, HEIGHT - 8, btn_no)
            d.invert(0, HEIGHT - 9, glyph + d.string_width(btn_no) + 2, HEIGHT - 1)
        if btn_yes is not None:
            glyph = char_width(_YES_GLYPH)
            text_width = d.string_width(btn_yes)
            d.draw_string(WIDTH - glyph - 1, HEIGHT - 8, _YES_GLYPH)
            d.draw_string(WIDTH - text_width - glyph - 3, HEIGHT - 8, btn_yes)
            d.invert(WIDTH - text_width - glyph - 4, HEIGHT - 9, WIDTH - 1, HEIGHT - 1)
        d.refresh()

    def progress_update(self, refresh: bool = False) -> None:
        """Advance the gear animation by one frame."""
        if self._gears is not None:
            self.display.draw_bitmap(_GEARS_X, 0, self._gears[self._step])
        self._step = (self._step + 1) % _GEAR_COUNT
        if refresh:
            self.display.refresh()

    def progress(self, desc: Text, permil: int) -> None:
        """Draw the progress screen with a bar filled to ``permil`` / 1000."""
        d = self.display
        d.clear()
        self.progress_update(False)
        d.frame(0, HEIGHT - 8, WIDTH - 1, HEIGHT - 1)
        d.box(1, HEIGHT - 7, WIDTH - 2, HEIGHT - 2, False)
        span = WIDTH - 4
        filled = min(max(permil * span // 1000, 0), span)
        d.box(2, HEIGHT - 6, 1 + filled, HEIGHT - 3, True)
        d.box(0, HEIGHT - 16, WIDTH - 1, HEIGHT - 16 + 7, False)
        if desc is not None:
            d.draw_string_center(HEIGHT - 16, desc)
        d.refresh()