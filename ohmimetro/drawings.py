"""Ten 5x5 RGB pictures of the digits 0 to 9 for the LED matrix."""

from __future__ import annotations

ROWS = 5
COLS = 5
COLORS = 3

Pixel = tuple[int, int, int]
Frame = tuple[tuple[Pixel, ...], ...]

_OFF: Pixel = (0, 0, 0)


def _frame(pattern: str, color: Pixel) -> Frame:
    return tuple(
        tuple(color if cell == "#" else _OFF for cell in row)
        for row in pattern.split("/")
    )


DRAWINGS: tuple[Frame, ...] = (
    _frame("#####/#..##/#.#.#/##..#/#####", (254, 0, 0)),
    _frame("..#../.##../..#../..#../.###.", (0, 255, 0)),
    _frame("####./....#/.###./#..../#####", (0, 0, 255)),
    _frame("#####/....#/.###./....#/#####", (133, 0, 255)),
    _frame("#..../#..#./#..#./#####/...#.", (122, 255, 135)),
    _frame("#####/#..../####./....#/####.", (255, 219, 0)),
    _frame("#####/#..../#####/#...#/#####", (255, 2, 253)),
    _frame("#####/....#/...#./..#../..#..", (0, 255, 255)),
    _frame(".###./#...#/.###./#...#/.###.", (211, 120, 8)),
    _frame("#####/#...#/#####/....#/#####", (255, 255, 255)),
)


def drawing(index: int) -> Frame:
    """Return the picture for digit ``index`` as ``[row][column] -> (r, g, b)``."""
    if not 0 <= index < len(DRAWINGS):
        raise IndexError(f"no drawing with index {index}")
    return DRAWINGS[index]