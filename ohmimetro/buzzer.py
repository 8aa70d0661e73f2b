"""Two passive buzzers driven by PWM."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .leds import PWM_WRAP, PwmController, duty_to_level

BUZZER_PIN_1 = 10
BUZZER_PIN_2 = 21
DEFAULT_CLOCK_HZ = 125_000_000
NOTE_GAP_MS = 30


@dataclass(frozen=True)
class Note:
    """A tone of ``frequency`` hertz held for ``duration_ms``; frequency 0 is a rest."""

    frequency: int
    duration_ms: int


MARIO_KART_THEME: tuple[Note, ...] = tuple(
    Note(frequency, duration)
    for frequency, duration in (
        (659, 150), (659, 150), (0, 100), (659, 150), (0, 100), (523, 150),
        (659, 150), (0, 150), (784, 150), (0, 300), (392, 150), (0, 150),
        (523, 150), (0, 150), (392, 150), (0, 150), (330, 150), (0, 150),
        (440, 150), (0, 150), (494, 150), (0, 150), (466, 150), (0, 150),
        (440, 150), (0, 150), (392, 150), (659, 150), (784, 150), (0, 150),
        (880, 150), (0, 300),
    )
)


class Buzzer:
    """Controls buzzer 1 and buzzer 2 wired to two PWM pins."""

    def __init__(
        self,
        pwm: PwmController,
        pins: tuple[int, int] = (BUZZER_PIN_1, BUZZER_PIN_2),
        clock_hz: int = DEFAULT_CLOCK_HZ,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.pwm = pwm
        self.pins = pins
        self.clock_hz = clock_hz
        self.sleep = sleep
        for pin in self.pins:
            self.pwm.set_wrap(pin, PWM_WRAP)
        self.off(1)
        self.off(2)

    def _pin(self, buzzer: int) -> int | None:
        if buzzer == 1:
            return self.pins[0]
        if buzzer == 2:
            return self.pins[1]
        return None

    def off(self, buzzer: int) -> None:
        """Silence buzzer 1 or 2; other numbers are ignored."""
        pin = self._pin(buzzer)
        if pin is not None:
            self.pwm.set_level(pin, 0)

    def set_power(self, buzzer: int, duty: float) -> None:
        """Drive buzzer 1 or 2 at a duty cycle in percent, clamped to 0..100."""
        pin = self._pin(buzzer)
        if pin is not None:
            self.pwm.set_level(pin, duty_to_level(duty))

    def play_note(self, buzzer: int, frequency: int, duration_ms: int) -> None:
        """Play one tone at 50% duty, then pause briefly; frequency 0 rests."""
        if frequency == 0:
            self.set_power(buzzer, 0)
            self.sleep(duration_ms / 1000)
            return
        pin = self.pins[0] if buzzer == 1 else self.pins[1]
        top = max(self.clock_hz // (frequency * 2), 1)
        self.pwm.set_wrap(pin, top)
        self.pwm.set_level(pin, top // 2)
        self.sleep(duration_ms / 1000)
        self.pwm.set_level(pin, 0)
        self.sleep(NOTE_GAP_MS / 1000)

    def play_melody(self, buzzer: int, melody: Iterable[Note]) -> None:
        """Play every note in order, then silence the buzzer."""
        for note in melody:
            self.play_note(buzzer, note.frequency, note.duration_ms)
        self.off(buzzer)

    def play_mario_kart_theme(self, buzzer: int) -> None:
        """Play the built-in theme tune."""
        self.play_melody(buzzer, MARIO_KART_THEME)