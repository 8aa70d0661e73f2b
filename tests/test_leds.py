import random

import pytest

from ohmimetro.leds import PWM_WRAP, RgbLed, duty_to_level
from ohmimetro.matrix import Color


class FakePwm:
    def __init__(self):
        self.levels = []
        self.wraps = []

    def set_level(self, pin, level):
        self.levels.append((pin, level))

    def set_wrap(self, pin, wrap):
        self.wraps.append((pin, wrap))

    def current(self):
        return dict(self.levels)


@pytest.mark.parametrize(
    "duty, level",
    [(0, 0), (100, 4095), (-10, 0), (250, 4095)],
)
def test_duty_to_level_clamps(duty, level):
    assert duty_to_level(duty) == level


def test_duty_to_level_is_monotonic():
    levels = [duty_to_level(d) for d in range(0, 101, 5)]
    assert levels == sorted(levels)


def test_init_sets_wrap_and_turns_off():
    pwm = FakePwm()
    RgbLed(pwm)
    assert pwm.wraps == [(13, PWM_WRAP), (11, PWM_WRAP), (12, PWM_WRAP)]
    assert pwm.levels == [(13, 0), (11, 0), (12, 0)]


def test_set_rgb_full_and_zero_channels():
    pwm = FakePwm()
    led = RgbLed(pwm)
    led.set_rgb(255, 0, 255)
    assert pwm.current() == {13: PWM_WRAP, 11: 0, 12: PWM_WRAP}


def test_set_color_matches_set_rgb():
    first, second = FakePwm(), FakePwm()
    RgbLed(first).set_color(Color(10, 100, 200))
    RgbLed(second).set_rgb(10, 100, 200)
    assert first.levels == second.levels


def test_set_duty_drives_all_channels_equally():
    pwm = FakePwm()
    led = RgbLed(pwm, red_pin=1, green_pin=2, blue_pin=3)
    led.set_duty(100)
    assert pwm.current() == {1: PWM_WRAP, 2: PWM_WRAP, 3: PWM_WRAP}


def test_off_after_colour():
    pwm = FakePwm()
    led = RgbLed(pwm)
    led.set_rgb(255, 255, 255)
    led.off()
    assert set(pwm.current().values()) == {0}


def test_random_colour_is_reproducible_and_in_range():
    first, second = FakePwm(), FakePwm()
    RgbLed(first).set_random_color(random.Random(42))
    RgbLed(second).set_random_color(random.Random(42))
    assert first.levels == second.levels
    assert all(0 <= level <= PWM_WRAP for _, level in first.levels)


def test_random_colour_uses_given_generator():
    class MaxRng:
        def randrange(self, stop):
            return stop - 1

    pwm = FakePwm()
    RgbLed(pwm).set_random_color(MaxRng())
    assert set(pwm.current().values()) == {PWM_WRAP}