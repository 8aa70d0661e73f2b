"""Convert packed 32-bit pixel values into 5x5 RGB frame listings."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence

Pixel = tuple[int, int, int]

MATRIX_ROWS = 5
MATRIX_COLS = 5

_NUMBER = re.compile(r"\b(0[xX][0-9a-fA-F]+|\d+)[uUlL]*\b")


def argb_to_rgb(argb: int) -> Pixel:
    """Split a packed 32-bit pixel into three bytes, lowest byte first; the top byte is dropped."""
    return (argb & 0xFF, (argb >> 8) & 0xFF, (argb >> 16) & 0xFF)


def frames_to_rgb(
    frames: Iterable[Sequence[int]],
    rows: int = MATRIX_ROWS,
    cols: int = MATRIX_COLS,
) -> list[list[list[Pixel]]]:
    """Turn flat frames of packed pixels into ``[frame][row][column]`` triples.

    Short frames are padded with zero pixels.
    """
    size = rows * cols
    result = []
    for number, frame in enumerate(frames):
        values = list(frame)
        if len(values) > size:
            raise ValueError(f"frame {number} has {len(values)} pixels, expected at most {size}")
        values.extend([0] * (size - len(values)))
        pixels = [argb_to_rgb(value) for value in values]
        result.append([pixels[row * cols:(row + 1) * cols] for row in range(rows)])
    return result


def format_frames(frames: Iterable[Sequence[Sequence[Pixel]]]) -> str:
    """Render frames as brace-delimited initialiser listings."""
    parts = []
    for frame in frames:
        lines = []
        for row in frame:
            cells = ", ".join("{%d, %d, %d}" % tuple(pixel) for pixel in row)
            lines.append("    {" + cells + "}")
        parts.append("\n{\n" + ",\n".join(lines) + "\n},\n\n")
    return "".join(parts)


def _parse_values(text: str) -> list[int]:
    return [int(match.group(1), 0) for match in _NUMBER.finditer(text)]


def _chunks(values: list[int], size: int) -> list[list[int]]:
    return [values[start:start + size] for start in range(0, len(values), size)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read packed pixel values and print them as RGB frames."""
    parser = argparse.ArgumentParser(
        description="Convert packed 32-bit pixel values into RGB frame listings."
    )
    parser.add_argument("files", nargs="*", help="files holding the values (default: stdin)")
    parser.add_argument("--rows", type=int, default=MATRIX_ROWS)
    parser.add_argument("--cols", type=int, default=MATRIX_COLS)
    args = parser.parse_args(argv)
    if args.rows <= 0 or args.cols <= 0:
        parser.error("rows and columns must be positive")

    if args.files:
        texts = []
        for path in args.files:
            try:
                with open(path, encoding="utf-8") as handle:
                    texts.append(handle.read())
            except OSError as exc:
                parser.error(f"cannot read {path}: {exc}")
        text = "\n".join(texts)
    else:
        text = sys.stdin.read()

    values = _parse_values(text)
    frames = frames_to_rgb(_chunks(values, args.rows * args.cols), args.rows, args.cols)
    sys.stdout.write(format_frames(frames))
    return 0