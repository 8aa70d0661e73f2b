"""Resistance meter: voltage-divider measurement, E24 matching and colour-band display."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol

from . import matrix as m
from .matrix import Color, LedMatrix
from .ssd1306 import SSD1306

ADC_VREF = 3.31
ADC_RESOLUTION = 4095
NUM_SAMPLES = 50000
BUTTON_A = 5
BUTTON_B = 6
DEBOUNCE_MS = 200
DISPLAY_INTERVAL_MS = 700

KNOWN_RESISTORS: tuple[float, ...] = (10000.0, 14790.0, 32300.0, 68100.0)

# E24 series scaled to two significant digits.
E24_SERIES: tuple[int, ...] = (
    10, 11, 12, 13, 15, 16,
    18, 20, 22, 24, 27, 30,
    33, 36, 39, 43, 47, 51,
    56, 62, 68, 75, 82, 91,
)

BAND_COLORS: tuple[Color, ...] = (
    m.BLACK, m.BROWN, m.RED, m.ORANGE, m.YELLOW, m.GREEN,
    m.BLUE, m.VIOLET, m.GREY, m.WHITE, m.GOLD, m.SILVER,
)

COLOR_NAMES: tuple[str, ...] = (
    "PRETO", "MARROM", "VERMELHO", "LARANJA", "AMARELO",
    "VERDE", "AZUL", "VIOLETA", "CINZA", "BRANCO",
)


class BootselRequested(Exception):
    """Raised when the button that reboots the board into its bootloader is pressed."""


class AdcReader(Protocol):
    """A source of raw 12-bit ADC conversions."""

    def read(self) -> int:
        """Return one conversion result."""
        ...


@dataclass(frozen=True)
class ResistorReading:
    """A measured resistance matched to the nearest E24 value."""

    first_digit: int
    second_digit: int
    multiplier: int
    measured: float
    theoretical: float
    error_percent: float


def calculate_resistance(adc_value: float, known_resistance: float) -> float:
    """Return the unknown resistor of a divider whose lower leg gives ``adc_value``."""
    denominator = ADC_RESOLUTION - adc_value
    if denominator == 0:
        numerator = known_resistance * adc_value
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return (known_resistance * adc_value) / denominator


def detect_resistor_value(resistance: float) -> ResistorReading:
    """Match ``resistance`` to the nearest E24 value and its colour-band digits."""
    if not math.isfinite(resistance):
        raise ValueError(f"resistance must be finite, got {resistance}")

    normalized = resistance
    power = 0
    if resistance >= 100:
        while normalized >= 100:
            normalized /= 10
            power += 1
    elif 0 < resistance < 10:
        while normalized < 10:
            normalized *= 10
            power -= 1

    nearest = 0
    smallest = 100.0
    for value in E24_SERIES:
        difference = abs(normalized - value)
        if difference < smallest:
            smallest = difference
            nearest = value

    first, second = divmod(nearest, 10)
    theoretical = (first * 10 + second) * 10.0 ** power
    error = abs(resistance - theoretical) / theoretical * 100 if theoretical != 0 else 0.0
    return ResistorReading(first, second, power, resistance, theoretical, error)


def format_reading(reading: ResistorReading) -> tuple[str, str, str]:
    """Return the measured value, E24 value and error as display strings with decimal commas."""
    measured = "%1.0f" % reading.measured
    theoretical = "%1.0f" % reading.theoretical
    error = "%.2f%%" % reading.error_percent
    return tuple(text.replace(".", ",") for text in (measured, theoretical, error))


def _bands(reading: ResistorReading) -> Iterator[tuple[int, int, str, int]]:
    """Yield (matrix row, display y, label, colour index) for each drawable band."""
    for row, y, label, digit in (
        (0, 35, "FAIXA1:", reading.first_digit),
        (2, 45, "FAIXA2:", reading.second_digit),
        (4, 55, "FAIXA3:", reading.multiplier),
    ):
        if 0 <= digit < len(COLOR_NAMES):
            yield row, y, label, digit


class Ohmmeter:
    """Ties the ADC, OLED display and LED matrix together into a resistance meter."""

    def __init__(
        self,
        display: SSD1306,
        matrix: LedMatrix,
        adc: AdcReader,
        samples: int = NUM_SAMPLES,
    ) -> None:
        if samples <= 0:
            raise ValueError("samples must be positive")
        self.display = display
        self.matrix = matrix
        self.adc = adc
        self.samples = samples
        self.range_index = 0
        self.known_resistance = KNOWN_RESISTORS[0]
        self.resistance = 0.0
        self.last_button_ms = 0
        self.clock: Callable[[], float] = time.monotonic
        self.started_at = self.clock()

    def average_adc(self) -> float:
        """Return the mean of ``samples`` ADC conversions."""
        return sum(self.adc.read() for _ in range(self.samples)) / self.samples

    def handle_button(self, gpio: int, now_ms: int) -> None:
        """React to a debounced button press.

        Button A steps to the next reference resistor; button B raises
        :class:`BootselRequested`.
        """
        if (now_ms - self.last_button_ms) & 0xFFFFFFFF <= DEBOUNCE_MS:
            return
        self.last_button_ms = now_ms
        if gpio == BUTTON_B:
            raise BootselRequested("reboot into bootloader requested")
        if gpio == BUTTON_A:
            self.range_index = (self.range_index + 1) % len(KNOWN_RESISTORS)
            self.known_resistance = KNOWN_RESISTORS[self.range_index]
            print("Faixa de precisão muda para: %.2f Ohms" % self.known_resistance)

    def measure(self) -> ResistorReading:
        """Sample the ADC and return the matched resistor reading."""
        self.resistance = calculate_resistance(self.average_adc(), self.known_resistance)
        return detect_resistor_value(self.resistance)

    def render(self, reading: ResistorReading) -> None:
        """Show the reading on the display and its colour bands on the LED matrix."""
        measured, theoretical, error = format_reading(reading)
        d = self.display
        d.fill(False)
        d.draw_string("Medido:", 0, 0)
        d.draw_string(measured, 70, 0)
        d.draw_string("Teorico:", 0, 10)
        d.draw_string(theoretical, 70, 10)
        d.draw_string("Erro:", 0, 20)
        d.draw_string(error, 70, 20)
        for row, y, label, digit in _bands(reading):
            d.draw_string(label, 0, y)
            d.draw_string(COLOR_NAMES[digit], 60, y)
            self.matrix.set_row_intensity(row, BAND_COLORS[digit], 1)
        d.send_data()

    def step(self) -> ResistorReading:
        """Take one measurement and show it once the start-up delay has passed."""
        reading = self.measure()
        elapsed_ms = (self.clock() - self.started_at) * 1000
        if elapsed_ms >= DISPLAY_INTERVAL_MS:
            self.render(reading)
        return reading


def main(argv: Sequence[str] | None = None) -> int:
    """Print the resistor reading for each averaged ADC value given."""
    parser = argparse.ArgumentParser(
        description="Compute resistor readings from averaged ADC values."
    )
    parser.add_argument("adc", nargs="+", type=float, help="averaged ADC values (0..4095)")
    parser.add_argument(
        "--known-resistance",
        type=float,
        default=KNOWN_RESISTORS[0],
        help="reference resistor of the divider in ohms",
    )
    args = parser.parse_args(argv)

    for adc_value in args.adc:
        resistance = calculate_resistance(adc_value, args.known_resistance)
        try:
            reading = detect_resistor_value(resistance)
        except ValueError as exc:
            parser.error(str(exc))
        measured, theoretical, error = format_reading(reading)
        print(f"Medido: {measured}")
        print(f"Teorico: {theoretical}")
        print(f"Erro: {error}")
        for _, _, label, digit in _bands(reading):
            print(f"{label} {COLOR_NAMES[digit]}")
    return 0