"""Frame buffer and I2C command driver for SSD1306 OLED displays."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from .font import GLYPH_HEIGHT, GLYPH_WIDTH, glyph

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64
DEFAULT_ADDRESS = 0x3C
SQUARE_SIZE = 8

_COMMAND_PREFIX = 0x80
_DATA_PREFIX = 0x40


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class I2CBus(Protocol):
    """Anything that can write a block of bytes to an I2C device."""

    def write(self, address: int, data: bytes) -> None:
        """Write ``data`` to the device at ``address``."""
        ...


def _u8(value: int) -> int:
    return value & 0xFF


class SSD1306:
    """An SSD1306 display with an in-memory frame buffer.

    The buffer uses vertical addressing: byte ``1 + x * pages + y // 8``
    holds eight vertical pixels. Byte 0 is the I2C data prefix.
    """

    def __init__(
        self,
        bus: I2CBus,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        address: int = DEFAULT_ADDRESS,
        external_vcc: bool = False,
    ) -> None:
        self.bus = bus
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.buffer = bytearray(self.pages * width + 1)
        self.buffer[0] = _DATA_PREFIX

    def config(self) -> None:
        """Send the power-up configuration sequence and switch the display on."""
        sequence = (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, self.height - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        )
        for value in sequence:
            self.command(value)

    def command(self, value: int) -> None:
        """Send a single command byte."""
        self.bus.write(self.address, bytes((_COMMAND_PREFIX, _u8(int(value)))))

    def send_data(self) -> None:
        """Transfer the whole frame buffer to the display."""
        for value in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(value)
        self.bus.write(self.address, bytes(self.buffer))

    def _locate(self, x: int, y: int) -> tuple[int, int] | None:
        x, y = _u8(x), _u8(y)
        index = (y >> 3) + x * self.pages + 1
        if index >= len(self.buffer):
            return None
        return index, y & 0b111

    def pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear one pixel; writes outside the buffer are dropped."""
        location = self._locate(x, y)
        if location is None:
            return
        index, bit = location
        if value:
            self.buffer[index] |= 1 << bit
        else:
            self.buffer[index] &= ~(1 << bit) & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether a pixel is lit in the frame buffer."""
        location = self._locate(x, y)
        if location is None:
            return False
        index, bit = location
        return bool(self.buffer[index] >> bit & 1)

    def fill(self, value: bool) -> None:
        """Light or clear every pixel."""
        byte = 0xFF if value else 0x00
        self.buffer[1:] = bytes((byte,)) * (len(self.buffer) - 1)

    def rect(self, top: int, left: int, width: int, height: int, value: bool, fill: bool) -> None:
        """Draw a rectangle outline, optionally filling its interior."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool) -> None:
        """Draw a line between two points with Bresenham's algorithm."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0: int, x1: int, y: int, value: bool) -> None:
        """Draw a horizontal line from ``x0`` to ``x1`` inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool) -> None:
        """Draw a vertical line from ``y0`` to ``y1`` inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char: str, x: int, y: int) -> None:
        """Draw one 8x8 character with its top-left corner at ``(x, y)``."""
        for i, column in enumerate(glyph(char)):
            for j in range(GLYPH_HEIGHT):
                self.pixel(x + i, y + j, bool(column >> j & 1))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping to the next line and stopping at the bottom edge."""
        for char in text:
            self.draw_char(char, x, y)
            x = _u8(x + GLYPH_WIDTH)
            if x + GLYPH_WIDTH >= self.width:
                x = 0
                y = _u8(y + GLYPH_HEIGHT)
            if y + GLYPH_HEIGHT >= self.height:
                break

    def draw_square(self, x: int, y: int) -> None:
        """Draw a filled square of ``SQUARE_SIZE`` pixels."""
        self.rect(y, x, SQUARE_SIZE, SQUARE_SIZE, True, True)

    def draw_border(self, style: int) -> None:
        """Draw one of six decorative borders; ``style`` is taken modulo 6."""
        w, h = self.width, self.height
        style %= 6
        if style == 0:
            self.rect(0, 0, w, h, True, False)
        elif style == 1:
            self.rect(0, 0, w, h, True, False)
            self.rect(3, 3, w - 6, h - 6, True, False)
        elif style == 2:
            self.rect(4, 4, w - 8, h - 8, True, False)
            self.line(0, 0, 7, 0, True)
            self.line(0, 0, 0, 7, True)
            self.line(w - 1, 0, w - 8, 0, True)
            self.line(w - 1, 0, w - 1, 7, True)
            self.line(0, h - 1, 7, h - 1, True)
            self.line(0, h - 8, 0, h - 1, True)
            self.line(w - 1, h - 1, w - 8, h - 1, True)
            self.line(w - 1, h - 8, w - 1, h - 1, True)
        elif style == 3:
            self.line(1, 1, w - 2, 1, True)
            self.line(1, 1, 1, h - 2, True)
            self.line(w - 1, 1, w - 1, h - 1, False)
            self.line(1, h - 1, w - 1, h - 1, False)
            self.rect(0, 0, w, h, True, False)
        elif style == 4:
            self.line(3, 0, w - 4, 0, True)
            self.line(0, 3, 0, h - 4, True)
            self.line(w - 1, 3, w - 1, h - 4, True)
            self.line(3, h - 1, w - 4, h - 1, True)
            corners = (
                (1, 1), (0, 2), (2, 0),
                (w - 2, 0), (w - 1, 1), (w - 3, 0),
                (w - 1, h - 2), (w - 2, h - 1), (w - 3, h - 1),
                (1, h - 1), (0, h - 2), (2, h - 1),
            )
            for cx, cy in corners:
                self.pixel(cx, cy, True)
        else:
            for i in range(3):
                self.rect(i * 2, i * 2, w - i * 4, h - i * 4, True, False)

    def draw_bitmap(self, x: int, y: int, bitmap: bytes, width: int, height: int) -> None:
        """Copy a page-organised bitmap (``width`` bytes per page) into the buffer."""
        start_page = _u8(y) // 8
        num_pages = height // 8
        if start_page + num_pages > self.pages:
            num_pages = max(0, self.pages - start_page)
        for x_offset in range(width):
            current_x = _u8(x + x_offset)
            if current_x >= self.width:
                break
            for page in range(num_pages):
                current_page = start_page + page
                if current_page >= self.pages:
                    break
                buffer_index = 1 + current_x + current_page * self.width
                if buffer_index < len(self.buffer):
                    self.buffer[buffer_index] = bitmap[x_offset + page * width]