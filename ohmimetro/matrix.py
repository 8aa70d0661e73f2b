"""5x5 addressable RGB LED matrix with serpentine wiring."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

ROWS = 5
COLS = 5
LED_COUNT = ROWS * COLS


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} is outside 0..255")

    def scaled(self, intensity: float) -> Color:
        """Return this colour with every component multiplied by ``intensity`` and truncated."""
        return Color(int(self.r * intensity), int(self.g * intensity), int(self.b * intensity))


BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
WHITE = Color(255, 255, 255)
YELLOW = Color(255, 170, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)
PURPLE = Color(128, 0, 128)
ORANGE = Color(255, 20, 0)
BROWN = Color(60, 40, 0)
VIOLET = Color(175, 0, 168)
GREY = Color(128, 128, 128)
GOLD = Color(255, 215, 0)
SILVER = Color(192, 192, 192)

PALETTE: tuple[Color, ...] = (
    RED, GREEN, BLUE, WHITE, BLACK,
    YELLOW, CYAN, MAGENTA, PURPLE, ORANGE,
    BROWN, VIOLET, GREY, GOLD, SILVER,
)


class PixelSink(Protocol):
    """Receives the LED data stream one byte-sized word at a time."""

    def put(self, value: int) -> None:
        """Push one 8-bit value to the LED chain."""
        ...


def led_index(x: int, y: int) -> int:
    """Return the position in the LED chain of the LED at column ``x``, row ``y``."""
    if y % 2 == 0:
        return 24 - (y * COLS + x)
    return 24 - (y * COLS + (COLS - 1 - x))


def is_position_valid(x: int, y: int) -> bool:
    """Return whether ``(x, y)`` lies on the matrix."""
    return 0 <= x < COLS and 0 <= y < ROWS


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def mix_colors(color1: Color, color2: Color, proportion: float) -> Color:
    """Blend two colours; ``proportion`` 0 gives ``color1``, 1 gives ``color2``."""
    p = _clamp_unit(proportion)
    return Color(
        int(color1.r * (1.0 - p) + color2.r * p),
        int(color1.g * (1.0 - p) + color2.g * p),
        int(color1.b * (1.0 - p) + color2.b * p),
    )


class LedMatrix:
    """Pixel buffer for the matrix; ``write`` streams it to the sink in GRB order."""

    def __init__(self, sink: PixelSink, sleep: Callable[[float], None] = time.sleep) -> None:
        self.sink = sink
        self.sleep = sleep
        self.leds: list[Color] = [BLACK] * LED_COUNT
        self.clear()

    def write(self) -> None:
        """Send the whole buffer to the LED chain."""
        for led in self.leds:
            self.sink.put(led.g)
            self.sink.put(led.r)
            self.sink.put(led.b)

    def clear(self) -> None:
        """Switch every LED off."""
        self.leds = [BLACK] * LED_COUNT
        self.write()

    def color_at(self, x: int, y: int) -> Color:
        """Return the buffered colour of the LED at ``(x, y)``."""
        if not is_position_valid(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the matrix")
        return self.leds[led_index(x, y)]

    def set_led(self, x: int, y: int, color: Color) -> None:
        """Set one LED in the buffer; positions off the matrix are ignored."""
        if is_position_valid(x, y):
            self.leds[led_index(x, y)] = color

    def set_led_intensity(self, x: int, y: int, color: Color, intensity: float) -> None:
        """Set one LED scaled by ``intensity`` clamped to 0..1."""
        if is_position_valid(x, y):
            self.leds[led_index(x, y)] = color.scaled(_clamp_unit(intensity))

    def set_row(self, row: int, color: Color) -> None:
        """Light a whole row and write the buffer."""
        if 0 <= row < ROWS:
            for x in range(COLS):
                self.set_led(x, row, color)
            self.write()

    def set_row_intensity(self, row: int, color: Color, intensity: float) -> None:
        """Light a whole row with the colour scaled by ``intensity``."""
        self.set_row(row, color.scaled(intensity))

    def set_column(self, col: int, color: Color) -> None:
        """Light a whole column and write the buffer."""
        if 0 <= col < COLS:
            for y in range(ROWS):
                self.set_led(col, y, color)
            self.write()

    def set_column_intensity(self, col: int, color: Color, intensity: float) -> None:
        """Light a whole column scaled by ``intensity`` clamped to 0..1."""
        if 0 <= col < COLS:
            for y in range(ROWS):
                self.set_led_intensity(col, y, color, intensity)
            self.write()

    def set_border(self, color: Color) -> None:
        """Light the outer ring of LEDs and write the buffer."""
        for x in range(COLS):
            self.set_led(x, 0, color)
            self.set_led(x, ROWS - 1, color)
        for y in range(1, ROWS - 1):
            self.set_led(0, y, color)
            self.set_led(COLS - 1, y, color)
        self.write()

    def set_diagonal(self, main_diagonal: bool, color: Color) -> None:
        """Light the main or the secondary diagonal and write the buffer."""
        for i in range(ROWS):
            if main_diagonal:
                self.set_led(i, i, color)
            else:
                self.set_led(COLS - 1 - i, i, color)
        self.write()

    def fill(self, color: Color) -> None:
        """Set every LED to ``color`` and write the buffer."""
        self.leds = [color] * LED_COUNT
        self.write()

    def fill_intensity(self, color: Color, intensity: float) -> None:
        """Set every LED to ``color`` scaled by ``intensity`` clamped to 0..1."""
        self.fill(color.scaled(_clamp_unit(intensity)))

    def set_matrix_with_intensity(self, matrix: Sequence[Sequence[Color]], intensity: float) -> None:
        """Show a 5x5 grid of colours indexed ``[row][column]``."""
        level = _clamp_unit(intensity)
        for y, row in enumerate(matrix[:ROWS]):
            for x, color in enumerate(row[:COLS]):
                self.leds[led_index(x, y)] = color.scaled(level)
        self.write()

    def set_rgb_matrix_with_intensity(
        self,
        matrix: Sequence[Sequence[Sequence[int]]],
        red: float,
        green: float,
        blue: float,
    ) -> None:
        """Show a 5x5 grid of ``[r, g, b]`` triples with per-channel intensities.

        An intensity outside 0..1 is replaced by full intensity.
        """
        levels = [1.0 if not 0.0 <= level <= 1.0 else level for level in (red, green, blue)]
        for y, row in enumerate(matrix[:ROWS]):
            for x, (r, g, b) in enumerate(row[:COLS]):
                self.leds[led_index(x, y)] = Color(
                    int(r * levels[0]), int(g * levels[1]), int(b * levels[2])
                )
        self.write()

    def animate_frames(
        self, period: int, frames: Iterable[Sequence[Sequence[Color]]], intensity: float
    ) -> None:
        """Show each frame in turn, pausing ``period`` milliseconds after each."""
        for frame in frames:
            self.set_matrix_with_intensity(frame, intensity)
            self.sleep(period / 1000)