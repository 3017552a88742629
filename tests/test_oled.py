import pytest
from hypothesis import given, strategies as st

from walletfw.fonts import char_width
from walletfw.oled import BUFSIZE, HEIGHT, WIDTH, Bitmap, Display, convert_char


def _decode(frame):
    display = Display()
    display.set_buffer(frame)
    return display


def _lit(display):
    return {(x, y) for x in range(WIDTH) for y in range(HEIGHT) if display.get_pixel(x, y)}


def test_new_display_is_blank():
    display = Display()
    assert display.get_buffer() == bytes(BUFSIZE)
    assert len(display.get_buffer()) == WIDTH * HEIGHT // 8


def test_pixel_layout_top_left():
    display = Display()
    display.draw_pixel(0, 0)
    assert display.get_buffer()[BUFSIZE - 1] == 0x80


def test_pixel_layout_bottom_right():
    display = Display()
    display.draw_pixel(WIDTH - 1, HEIGHT - 1)
    assert display.get_buffer()[0] == 0x01


@given(st.integers(0, WIDTH - 1), st.integers(0, HEIGHT - 1))
def test_draw_and_clear_pixel_round_trip(x, y):
    display = Display()
    display.draw_pixel(x, y)
    assert display.get_pixel(x, y)
    assert _lit(display) == {(x, y)}
    display.clear_pixel(x, y)
    assert display.get_buffer() == bytes(BUFSIZE)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT)])
def test_out_of_range_pixels_ignored(x, y):
    display = Display()
    display.draw_pixel(x, y)
    assert display.get_buffer() == bytes(BUFSIZE)
    assert display.get_pixel(x, y) is False


def test_clear_resets_buffer():
    display = Display()
    display.box(0, 0, WIDTH - 1, HEIGHT - 1, True)
    assert display.get_buffer() == b"\xff" * BUFSIZE
    display.clear()
    assert display.get_buffer() == bytes(BUFSIZE)


def test_set_buffer_round_trip():
    data = bytes(range(256)) * (BUFSIZE // 256)
    display = Display()
    display.set_buffer(data)
    assert display.get_buffer() == data


def test_set_buffer_wrong_length():
    with pytest.raises(ValueError):
        Display().set_buffer(bytes(10))


def test_convert_char():
    assert convert_char(0x41) == 0x41
    assert convert_char(0xC3) == ord("_")
    assert convert_char(0xE2) == ord("_")
    assert convert_char(0x80) is None
    assert convert_char(0xBF) is None


def test_string_width_empty_and_none():
    display = Display()
    assert display.string_width("") == 0
    assert display.string_width(None) == 0


def test_string_width_is_additive():
    display = Display()
    assert display.string_width("AB") == display.string_width("A") + display.string_width("B")
    assert display.string_width("A") == char_width("A") + 1


def test_multibyte_character_counts_as_underscore():
    display = Display()
    assert display.string_width("\u00e9") == display.string_width("_")
    assert display.string_width("\u00e9".encode()) == display.string_width(b"_")


def test_draw_char_glyph_columns():
    display = Display()
    display.draw_char(0, 0, "I")
    for x in range(2):
        for y in range(7):
            assert display.get_pixel(x, y)
        assert not display.get_pixel(x, 7)
    assert not display.get_pixel(2, 0)


def test_draw_char_off_screen_ignored():
    display = Display()
    display.draw_char(WIDTH, 0, "A")
    display.draw_char(0, HEIGHT, "A")
    assert display.get_buffer() == bytes(BUFSIZE)


def test_draw_string_stays_within_width():
    display = Display()
    display.draw_string(10, 5, "Hello")
    lit = _lit(display)
    assert lit
    width = display.string_width("Hello")
    assert all(10 <= x < 10 + width and 5 <= y < 13 for x, y in lit)


def test_draw_string_right_matches_left_aligned():
    right = Display()
    right.draw_string_right(100, 3, "abc")
    left = Display()
    left.draw_string(100 - left.string_width("abc"), 3, "abc")
    assert right.get_buffer() == left.get_buffer()


def test_draw_string_center_is_symmetric_for_symmetric_glyph():
    display = Display()
    display.draw_string_center(0, "H")
    xs = {x for x, _ in _lit(display)}
    margin_left = min(xs)
    margin_right = WIDTH - 1 - max(xs)
    assert abs(margin_left - margin_right) <= 2


def test_draw_bitmap_sets_and_clears():
    display = Display()
    display.box(0, 0, 7, 1, True)
    display.draw_bitmap(0, 0, Bitmap(8, 2, b"\xff\x00"))
    assert all(display.get_pixel(x, 0) for x in range(8))
    assert not any(display.get_pixel(x, 1) for x in range(8))


def test_draw_bitmap_clips_at_edge():
    display = Display()
    display.draw_bitmap(WIDTH - 4, HEIGHT - 1, Bitmap(8, 2, b"\xff\xff"))
    assert _lit(display) == {(x, HEIGHT - 1) for x in range(WIDTH - 4, WIDTH)}


@given(
    st.integers(0, WIDTH - 1),
    st.integers(0, HEIGHT - 1),
    st.integers(0, WIDTH - 1),
    st.integers(0, HEIGHT - 1),
)
def test_invert_twice_restores(x1, y1, x2, y2):
    display = Display()
    display.draw_string(0, 0, "pattern")
    before = display.get_buffer()
    display.invert(x1, y1, x2, y2)
    display.invert(x1, y1, x2, y2)
    assert display.get_buffer() == before


def test_invert_toggles_rectangle():
    display = Display()
    display.invert(2, 3, 4, 5)
    assert _lit(display) == {(x, y) for x in range(2, 5) for y in range(3, 6)}


def test_invert_out_of_range_is_noop():
    display = Display()
    display.invert(0, 0, WIDTH, 5)
    assert display.get_buffer() == bytes(BUFSIZE)


def test_box_clear():
    display = Display()
    display.box(0, 0, 9, 9, True)
    display.box(2, 2, 7, 7, False)
    lit = _lit(display)
    assert (0, 0) in lit and (9, 9) in lit
    assert (2, 2) not in lit and (7, 7) not in lit


def test_hline_fills_row():
    display = Display()
    display.hline(10)
    assert _lit(display) == {(x, 10) for x in range(WIDTH)}


def test_frame_outline_only():
    display = Display()
    display.frame(1, 1, 5, 4)
    lit = _lit(display)
    assert {(1, 1), (5, 1), (1, 4), (5, 4), (3, 1), (1, 2)} <= lit
    assert (3, 2) not in lit and (3, 3) not in lit


def test_refresh_passes_buffer():
    frames = []
    display = Display(on_refresh=frames.append)
    display.draw_pixel(3, 3)
    display.refresh()
    assert frames == [display.get_buffer()]


def test_debug_triangle_only_in_refreshed_frame():
    frames = []
    display = Display(on_refresh=frames.append)
    display.set_debug(True)
    assert len(frames) == 1
    shown = _decode(frames[0])
    assert shown.get_pixel(WIDTH - 1, 0)
    assert shown.get_pixel(WIDTH - 5, 0)
    assert shown.get_pixel(WIDTH - 1, 4)
    assert not shown.get_pixel(WIDTH - 6, 0)
    assert not shown.get_pixel(WIDTH - 1, 5)
    assert display.get_buffer() == bytes(BUFSIZE)


def test_debug_off_leaves_frame_untouched():
    frames = []
    display = Display(on_refresh=frames.append)
    display.set_debug(True)
    display.set_debug(False)
    assert frames[-1] == bytes(BUFSIZE)


def test_swipe_left_moves_left_and_empties():
    frames = []
    display = Display(on_refresh=frames.append)
    display.draw_pixel(60, 20)
    display.swipe_left()
    assert len(frames) == WIDTH // 4
    assert _lit(_decode(frames[0])) == {(56, 20)}
    assert display.get_buffer() == bytes(BUFSIZE)


def test_swipe_right_moves_right_and_empties():
    frames = []
    display = Display(on_refresh=frames.append)
    display.draw_pixel(60, 20)
    display.swipe_right()
    assert len(frames) == WIDTH // 4
    assert _lit(_decode(frames[0])) == {(64, 20)}
    assert display.get_buffer() == bytes(BUFSIZE)


def test_bitmap_rejects_oversized_dimensions():
    with pytest.raises(ValueError):
        Bitmap(300, 1, b"")