"""PWM-driven RGB status LED."""

from __future__ import annotations

import random
from typing import Protocol

from .matrix import Color

PWM_WRAP = 4095
RED_PIN = 13
GREEN_PIN = 11
BLUE_PIN = 12


class PwmController(Protocol):
    """Sets PWM compare levels and counter wrap values per GPIO pin."""

    def set_level(self, pin: int, level: int) -> None:
        """Set the compare level of the PWM channel driving ``pin``."""
        ...

    def set_wrap(self, pin: int, wrap: int) -> None:
        """Set the counter wrap value of the PWM slice driving ``pin``."""
        ...


def duty_to_level(duty: float) -> int:
    """Convert a duty cycle in percent (clamped to 0..100) to a 12-bit PWM level."""
    duty = min(max(duty, 0.0), 100.0)
    return int((duty / 100.0) * PWM_WRAP)


class RgbLed:
    """A common RGB LED with one PWM channel per colour."""

    def __init__(
        self,
        pwm: PwmController,
        red_pin: int = RED_PIN,
        green_pin: int = GREEN_PIN,
        blue_pin: int = BLUE_PIN,
    ) -> None:
        self.pwm = pwm
        self.pins = (red_pin, green_pin, blue_pin)
        for pin in self.pins:
            self.pwm.set_wrap(pin, PWM_WRAP)
        self.off()

    def _apply(self, levels: tuple[int, int, int]) -> None:
        for pin, level in zip(self.pins, levels):
            self.pwm.set_level(pin, level)

    def set_duty(self, duty: float) -> None:
        """Drive all three channels with the same duty cycle in percent."""
        level = duty_to_level(duty)
        self._apply((level, level, level))

    def set_rgb(self, r: int, g: int, b: int) -> None:
        """Show an 8-bit RGB colour, scaled to the 12-bit PWM range."""
        self._apply(tuple(value * PWM_WRAP // 255 for value in (r, g, b)))

    def set_color(self, color: Color) -> None:
        """Show a :class:`Color`."""
        self.set_rgb(color.r, color.g, color.b)

    def set_random_color(self, rng: random.Random | None = None) -> None:
        """Show a random colour drawn from ``rng`` (the module generator by default)."""
        source = rng if rng is not None else random
        self.set_color(Color(source.randrange(256), source.randrange(256), source.randrange(256)))

    def off(self) -> None:
        """Switch all three channels off."""
        self._apply((0, 0, 0))