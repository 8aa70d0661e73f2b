# ohmimetro

A resistance meter built around a voltage divider. From an averaged
12-bit ADC value and a known reference resistor it works out the unknown
resistance, matches it to the nearest E24 series value and gives the
colour-band digits, the theoretical value and the percentage error.

The package also models the peripherals the meter draws on: an SSD1306
monochrome display with its 8x8 font, a 5x5 serpentine RGB LED matrix, a
PWM-driven RGB LED and a pair of buzzers. Hardware access goes through
small interfaces that you supply (`I2CBus.write`, `PixelSink.put`,
`PwmController.set_level` / `set_wrap`, and an ADC object with `read()`),
so everything runs and can be tested on an ordinary computer.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Measuring

```python
from ohmimetro.ohmmeter import calculate_resistance, detect_resistor_value, format_reading

resistance = calculate_resistance(2047.5, 10000.0)   # 10000.0
reading = detect_resistor_value(resistance)
print(format_reading(reading))                        # ('10000', '10000', '0,00%')
```

- `calculate_resistance(adc_value, known_resistance)` applies
  `R * adc / (4095 - adc)`. At full scale it returns infinity (or NaN for
  a zero numerator) instead of dividing by zero.
- `detect_resistor_value(resistance)` returns a frozen `ResistorReading`
  with `first_digit`, `second_digit`, `multiplier` (power of ten),
  `measured`, `theoretical` and `error_percent`. A non-finite resistance
  raises `ValueError`.
- `format_reading(reading)` returns the measured value, the E24 value and
  the error as strings with decimal commas.

`Ohmmeter(display, matrix, adc, samples=50000)` ties an `SSD1306`, a
`LedMatrix` and an ADC source together:

- `average_adc()` averages `samples` conversions.
- `measure()` converts the average against the current reference resistor
  and returns a `ResistorReading`.
- `render(reading)` writes the values and band colour names to the display
  and lights matrix rows 0, 2 and 4 in the band colours.
- `step()` measures, and renders once 700 ms have passed since the meter
  was created.
- `handle_button(gpio, now_ms)` debounces presses (more than 200 ms apart).
  Button A (GPIO 5) steps through the reference resistors 10000, 14790,
  32300 and 68100 ohms; button B (GPIO 6) raises `BootselRequested`.

## Commands

```
ohmimetro 2047.5 1000 --known-resistance 10000
```

prints the measured value, E24 value, error and band colours for each
averaged ADC value given.

```
ohmimetro-argb frames.txt --rows 5 --cols 5
```

reads packed 32-bit pixel values (decimal or `0x` hex) from the files, or
from standard input when none are given, groups them into frames of
`rows * cols` values and prints each frame as a brace-delimited RGB
listing. The same steps are available as `argb_to_rgb`, `frames_to_rgb`
and `format_frames` in `ohmimetro.converter`; `argb_to_rgb` returns the
three low bytes lowest first and drops the top byte, and short frames are
padded with zero pixels.

## Other modules

- `ohmimetro.ssd1306`: `SSD1306` frame buffer with `config`, `command`,
  `send_data`, `pixel`, `get_pixel`, `fill`, `rect`, `line`, `hline`,
  `vline`, `draw_char`, `draw_string`, `draw_square`, `draw_border`
  (six styles) and `draw_bitmap`; `Command` holds the controller opcodes.
- `ohmimetro.font`: `glyph_index` and `glyph` for the 8x8 font (digits,
  letters and `! ? : ; , . %`; other characters draw blank).
- `ohmimetro.matrix`: `Color` (with `scaled`), named colours and
  `PALETTE`, `led_index`, `is_position_valid`, `mix_colors`, and
  `LedMatrix`, which buffers the 25 LEDs and streams them to a
  `PixelSink` in G, R, B order.
- `ohmimetro.leds`: `RgbLed` and `duty_to_level`.
- `ohmimetro.buzzer`: `Buzzer`, `Note` and the `MARIO_KART_THEME` melody.
- `ohmimetro.drawings`: `drawing(index)` returns one of ten 5x5 digit
  pictures.

## What it does not do

The package talks to no real hardware. It contains no I2C, PIO, PWM or
ADC drivers and no continuous measuring loop; you supply objects that
implement the small interfaces above. Pressing button B only raises
`BootselRequested`; nothing reboots.