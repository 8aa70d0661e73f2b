import pytest

from ohmimetro.font import glyph
from ohmimetro.ssd1306 import SSD1306, Command


class RecordingBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def display(bus):
    return SSD1306(bus)


def lit_pixels(display):
    return {
        (x, y)
        for x in range(display.width)
        for y in range(display.height)
        if display.get_pixel(x, y)
    }


def test_buffer_layout(display):
    assert len(display.buffer) == display.pages * display.width + 1
    assert display.buffer[0] == 0x40
    assert lit_pixels(display) == set()


def test_command_wire_format(display, bus):
    before = bytes(display.buffer)
    display.command(Command.SET_CONTRAST)
    assert display.address == 0x3C
    assert bus.writes == [(display.address, bytes((0x80, 0x81)))]
    assert bytes(display.buffer) == before


def test_config_sequence(display, bus):
    display.config()
    commands = [data[1] for _, data in bus.writes]
    assert all(data[0] == 0x80 for _, data in bus.writes)
    assert commands[0] == Command.SET_DISP
    assert commands[-1] == Command.SET_DISP | 0x01
    assert commands[commands.index(Command.SET_MUX_RATIO) + 1] == display.height - 1
    assert commands[commands.index(Command.SET_CHARGE_PUMP) + 1] == 0x14


def test_send_data(display, bus):
    display.pixel(3, 5, True)
    display.send_data()
    commands = [data[1] for _, data in bus.writes[:-1]]
    assert commands == [
        Command.SET_COL_ADDR, 0, display.width - 1,
        Command.SET_PAGE_ADDR, 0, display.pages - 1,
    ]
    address, payload = bus.writes[-1]
    assert address == display.address
    assert payload == bytes(display.buffer)
    assert payload[0] == 0x40


def test_pixel_round_trip(display):
    display.pixel(10, 20, True)
    assert display.get_pixel(10, 20)
    assert lit_pixels(display) == {(10, 20)}
    display.pixel(10, 20, False)
    assert not display.get_pixel(10, 20)


def test_pixel_outside_buffer_is_dropped(display):
    before = bytes(display.buffer)
    display.pixel(200, 200, True)
    assert bytes(display.buffer) == before


def test_fill(display):
    display.fill(True)
    assert len(lit_pixels(display)) == display.width * display.height
    assert display.buffer[0] == 0x40
    display.fill(False)
    assert lit_pixels(display) == set()


def test_rect_outline_and_fill(display):
    display.rect(2, 3, 5, 4, True, False)
    assert display.get_pixel(3, 2)
    assert display.get_pixel(7, 5)
    assert not display.get_pixel(5, 3)
    assert len(lit_pixels(display)) == 2 * 5 + 2 * 2
    display.rect(2, 3, 5, 4, True, True)
    assert lit_pixels(display) == {(x, y) for x in range(3, 8) for y in range(2, 6)}


def test_line_diagonal(display):
    display.line(0, 0, 9, 9, True)
    assert lit_pixels(display) == {(i, i) for i in range(10)}


def test_line_is_symmetric(bus):
    forward = SSD1306(bus)
    backward = SSD1306(bus)
    forward.line(0, 0, 20, 0, True)
    backward.line(20, 0, 0, 0, True)
    assert lit_pixels(forward) == lit_pixels(backward)


def test_hline_and_vline(display):
    display.hline(4, 8, 10, True)
    display.vline(30, 1, 3, True)
    assert lit_pixels(display) == {(x, 10) for x in range(4, 9)} | {(30, y) for y in range(1, 4)}


def test_draw_char_matches_glyph(display):
    display.draw_char("0", 16, 8)
    expected = {
        (16 + i, 8 + j)
        for i, column in enumerate(glyph("0"))
        for j in range(8)
        if column >> j & 1
    }
    assert lit_pixels(display) == expected


def test_draw_string_wraps_to_next_line(bus):
    text = SSD1306(bus)
    text.draw_string("A" * 16, 0, 0)
    single = SSD1306(bus)
    single.draw_char("A", 0, 8)
    assert (0, 8) not in lit_pixels(SSD1306(bus))
    assert lit_pixels(single) <= lit_pixels(text)


def test_draw_string_stops_at_bottom(bus):
    display = SSD1306(bus)
    display.draw_string("B" * 200, 0, 0)
    assert all(y < display.height - 8 for _, y in lit_pixels(display))


def test_draw_square_equals_filled_rect(bus):
    square = SSD1306(bus)
    square.draw_square(5, 7)
    rect = SSD1306(bus)
    rect.rect(7, 5, 8, 8, True, True)
    assert square.buffer == rect.buffer
    assert len(lit_pixels(square)) == 64


def test_draw_border_style_wraps_modulo_six(bus):
    first = SSD1306(bus)
    first.draw_border(0)
    wrapped = SSD1306(bus)
    wrapped.draw_border(6)
    outline = SSD1306(bus)
    outline.rect(0, 0, outline.width, outline.height, True, False)
    assert first.buffer == wrapped.buffer == outline.buffer


@pytest.mark.parametrize("style", range(6))
def test_draw_border_stays_near_edges(bus, style):
    display = SSD1306(bus)
    display.draw_border(style)
    lit = lit_pixels(display)
    assert lit
    assert all(
        min(x, y, display.width - 1 - x, display.height - 1 - y) <= 4 for x, y in lit
    )


def test_draw_border_rounded_corners(bus):
    display = SSD1306(bus)
    display.draw_border(4)
    assert display.get_pixel(1, 1)
    assert not display.get_pixel(0, 0)


def test_draw_bitmap_places_bytes(display):
    bitmap = bytes([1, 2, 3, 4])
    display.draw_bitmap(10, 8, bitmap, 2, 16)
    assert display.buffer[1 + 10 + 1 * display.width] == 1
    assert display.buffer[1 + 11 + 1 * display.width] == 2
    assert display.buffer[1 + 10 + 2 * display.width] == 3
    assert display.buffer[1 + 11 + 2 * display.width] == 4


def test_draw_bitmap_clips_pages(display):
    before = bytes(display.buffer)
    display.draw_bitmap(0, 56, bytes([0xFF] * 4), 2, 16)
    changed = [i for i, (a, b) in enumerate(zip(before, display.buffer)) if a != b]
    assert changed == [1 + 7 * display.width, 2 + 7 * display.width]