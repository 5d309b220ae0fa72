import pytest

from galtonboard.font import glyph
from galtonboard.ssd1306 import Command, RecordingBus, SSD1306


@pytest.fixture
def display():
    return SSD1306(RecordingBus(), 128, 64, 0x3C, False)


def lit(d):
    return {(x, y) for x in range(d.width) for y in range(d.height) if d.get_pixel(x, y)}


def test_initial_buffer(display):
    assert len(display.buffer) == display.pages * display.width + 1
    assert display.buffer[0] == 0x40
    assert not any(display.buffer[1:])


def test_rejects_height_not_multiple_of_eight():
    with pytest.raises(ValueError):
        SSD1306(RecordingBus(), 128, 60, 0x3C, False)


def test_command_write(display):
    display.command(Command.SET_CONTRAST)
    assert display.bus.writes == [(0x3C, bytes((0x80, 0x81)))]


def test_configure_sequence(display):
    display.configure()
    writes = display.bus.writes
    assert writes[0] == (0x3C, bytes((0x80, Command.SET_DISP)))
    assert writes[-1] == (0x3C, bytes((0x80, Command.SET_DISP | 0x01)))
    assert (0x3C, bytes((0x80, display.height - 1))) in writes
    assert all(data[0] == 0x80 and len(data) == 2 for _, data in writes)


def test_send_data(display):
    display.pixel(5, 5, True)
    display.send_data()
    writes = display.bus.writes
    commands = [data[1] for _, data in writes[:-1]]
    assert commands == [
        Command.SET_COL_ADDR, 0, display.width - 1,
        Command.SET_PAGE_ADDR, 0, display.pages - 1,
    ]
    assert writes[-1] == (0x3C, bytes(display.buffer))


def test_pixel_origin_is_first_data_bit(display):
    display.pixel(0, 0, True)
    assert display.buffer[1] == 1


def test_pixel_round_trip(display):
    points = [(0, 0), (127, 63), (10, 9), (64, 32)]
    for x, y in points:
        display.pixel(x, y, True)
    assert lit(display) == set(points)
    display.pixel(10, 9, False)
    assert lit(display) == set(points) - {(10, 9)}


def test_off_screen_pixel_ignored(display):
    display.pixel(200, 0, True)
    display.pixel(0, 64, True)
    assert not any(display.buffer[1:])
    assert display.get_pixel(200, 0) is False


def test_fill(display):
    display.fill(True)
    assert all(b == 0xFF for b in display.buffer[1:])
    assert display.buffer[0] == 0x40
    display.fill(False)
    assert lit(display) == set()


def test_rect_outline_and_fill(display):
    display.rect(3, 5, 6, 4, True, False)
    pixels = lit(display)
    assert {(5, 3), (10, 3), (5, 6), (10, 6)} <= pixels
    assert (7, 4) not in pixels
    display.rect(3, 5, 6, 4, True, True)
    assert lit(display) == {(x, y) for x in range(5, 11) for y in range(3, 7)}


def test_line_diagonal(display):
    display.line(0, 0, 10, 10, True)
    assert lit(display) == {(i, i) for i in range(11)}


def test_line_reversed_matches_horizontal(display):
    other = SSD1306(RecordingBus(), 128, 64, 0x3C, False)
    display.line(2, 7, 20, 7, True)
    other.line(20, 7, 2, 7, True)
    assert lit(display) == lit(other) == {(x, 7) for x in range(2, 21)}


def test_line_endpoints_present(display):
    display.line(3, 40, 50, 12, True)
    pixels = lit(display)
    assert (3, 40) in pixels and (50, 12) in pixels


def test_hline_and_vline(display):
    display.hline(4, 9, 2, True)
    display.vline(30, 5, 8, True)
    assert lit(display) == {(x, 2) for x in range(4, 10)} | {(30, y) for y in range(5, 9)}


def test_draw_char_matches_glyph(display):
    display.draw_char("I", 16, 8)
    expected = {
        (16 + i, 8 + j)
        for i, column in enumerate(glyph("I"))
        for j in range(8)
        if column >> j & 1
    }
    assert lit(display) == expected


def test_draw_char_clears_background(display):
    display.fill(True)
    display.draw_char(" ", 0, 0)
    assert not any(display.get_pixel(x, y) for x in range(8) for y in range(8))
    assert display.get_pixel(8, 0)


def test_draw_string_matches_chars(display):
    other = SSD1306(RecordingBus(), 128, 64, 0x3C, False)
    display.draw_string("AB", 0, 0)
    other.draw_char("A", 0, 0)
    other.draw_char("B", 8, 0)
    assert display.buffer == other.buffer


def test_draw_string_wraps(display):
    other = SSD1306(RecordingBus(), 128, 64, 0x3C, False)
    display.draw_string("E" * 16, 0, 0)
    for n in range(15):
        other.draw_char("E", 8 * n, 0)
    other.draw_char("E", 0, 8)
    assert display.buffer == other.buffer


def test_draw_string_stops_at_bottom(display):
    other = SSD1306(RecordingBus(), 128, 64, 0x3C, False)
    display.draw_string("HH", 0, 56)
    other.draw_char("H", 0, 56)
    assert display.buffer == other.buffer


def test_to_text_shape(display):
    display.pixel(1, 2, True)
    lines = display.to_text().splitlines()
    assert len(lines) == display.height
    assert all(len(line) == display.width for line in lines)
    assert lines[2][1] == "#"
    assert lines[0][0] == "."