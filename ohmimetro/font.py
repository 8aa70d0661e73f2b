"""8x8 bitmap font used by the OLED display.

Each glyph is eight column bytes; bit ``j`` of column ``i`` is the pixel at
``(x + i, y + j)``.
"""

from __future__ import annotations

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 8

_BLANK = 0
_DIGITS_START = 1
_UPPER_START = 11
_LOWER_START = 37
_PUNCTUATION = {"!": 63, "?": 64, ":": 65, ";": 66, ",": 67, ".": 68, "%": 69}

FONT: tuple[bytes, ...] = (
    bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00)),  # blank
    bytes((0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00)),  # 0
    bytes((0x00, 0x00, 0x42, 0x7F, 0x40, 0x00, 0x00, 0x00)),  # 1
    bytes((0x30, 0x49, 0x49, 0x49, 0x49, 0x46, 0x00, 0x00)),  # 2
    bytes((0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00)),  # 3
    bytes((0x3F, 0x20, 0x20, 0x78, 0x20, 0x20, 0x00, 0x00)),  # 4
    bytes((0x4F, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00)),  # 5
    bytes((0x3F, 0x48, 0x48, 0x48, 0x48, 0x48, 0x30, 0x00)),  # 6
    bytes((0x01, 0x01, 0x01, 0x61, 0x31, 0x0D, 0x03, 0x00)),  # 7
    bytes((0x36, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00)),  # 8
    bytes((0x06, 0x09, 0x09, 0x09, 0x09, 0x09, 0x7F, 0x00)),  # 9
    bytes((0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00)),  # A
    bytes((0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x7F, 0x00)),  # B
    bytes((0x7E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x41, 0x00)),  # C
    bytes((0x7F, 0x41, 0x41, 0x41, 0x41, 0x41, 0x7E, 0x00)),  # D
    bytes((0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x00)),  # E
    bytes((0x7F, 0x09, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00)),  # F
    bytes((0x7F, 0x41, 0x41, 0x41, 0x51, 0x51, 0x73, 0x00)),  # G
    bytes((0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00)),  # H
    bytes((0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00)),  # I
    bytes((0x21, 0x41, 0x41, 0x3F, 0x01, 0x01, 0x01, 0x00)),  # J
    bytes((0x00, 0x7F, 0x08, 0x08, 0x14, 0x22, 0x41, 0x00)),  # K
    bytes((0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00)),  # L
    bytes((0x7F, 0x02, 0x04, 0x08, 0x04, 0x02, 0x7F, 0x00)),  # M
    bytes((0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F, 0x00)),  # N
    bytes((0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E, 0x00)),  # O
    bytes((0x7F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E, 0x00)),  # P
    bytes((0x3E, 0x41, 0x41, 0x49, 0x51, 0x61, 0x7E, 0x00)),  # Q
    bytes((0x7F, 0x11, 0x11, 0x11, 0x31, 0x51, 0x0E, 0x00)),  # R
    bytes((0x46, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00)),  # S
    bytes((0x01, 0x01, 0x01, 0x7F, 0x01, 0x01, 0x01, 0x00)),  # T
    bytes((0x3F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x3F, 0x00)),  # U
    bytes((0x0F, 0x10, 0x20, 0x40, 0x20, 0x10, 0x0F, 0x00)),  # V
    bytes((0x7F, 0x20, 0x10, 0x08, 0x10, 0x20, 0x7F, 0x00)),  # W
    bytes((0x00, 0x41, 0x22, 0x14, 0x14, 0x22, 0x41, 0x00)),  # X
    bytes((0x01, 0x02, 0x04, 0x78, 0x04, 0x02, 0x01, 0x00)),  # Y
    bytes((0x41, 0x61, 0x59, 0x45, 0x43, 0x41, 0x00, 0x00)),  # Z
    bytes((0x7C, 0xFE, 0x81, 0x81, 0xC1, 0x7E, 0xFE, 0x80)),  # a
    bytes((0x7E, 0x7F, 0x88, 0x84, 0xC4, 0x78, 0x38, 0x00)),  # b
    bytes((0x7C, 0x7E, 0x83, 0x81, 0xC1, 0x62, 0x22, 0x00)),  # c
    bytes((0x00, 0x70, 0xC8, 0xC4, 0x84, 0x84, 0xFE, 0x7F)),  # d
    bytes((0x3C, 0x7E, 0x8B, 0x89, 0xCD, 0xE7, 0x30, 0x00)),  # e
    bytes((0x00, 0x04, 0x0C, 0xFE, 0xFF, 0x0D, 0x0D, 0x00)),  # f
    bytes((0x00, 0x8E, 0x9F, 0xD1, 0x79, 0x3F, 0x1E, 0x00)),  # g
    bytes((0x00, 0xFE, 0xFF, 0x10, 0x08, 0x08, 0xF8, 0xF0)),  # h
    bytes((0x00, 0x00, 0x00, 0xF6, 0xFB, 0x00, 0x00, 0x00)),  # i
    bytes((0x00, 0x80, 0xC0, 0xF6, 0x7B, 0x00, 0x00, 0x00)),  # j
    bytes((0xFE, 0xFF, 0x18, 0x24, 0xE6, 0xC2, 0x00, 0x00)),  # k
    bytes((0x00, 0x00, 0x00, 0xFE, 0xFF, 0x00, 0x00, 0x00)),  # l
    bytes((0xFC, 0x04, 0x06, 0xFE, 0xFC, 0x02, 0x06, 0xFC)),  # m
    bytes((0x00, 0xF8, 0xFC, 0x04, 0x02, 0x02, 0xFE, 0xFC)),  # n
    bytes((0x78, 0x7C, 0x86, 0x82, 0x42, 0x7E, 0x3C, 0x00)),  # o
    bytes((0x00, 0xFE, 0xFE, 0x21, 0x31, 0x1F, 0x1C, 0x00)),  # p
    bytes((0x00, 0x1E, 0x3F, 0x21, 0x21, 0xFE, 0xFE, 0x00)),  # q
    bytes((0x00, 0xF0, 0xF8, 0x0C, 0x0C, 0x08, 0x18, 0x00)),  # r
    bytes((0x00, 0x00, 0x8E, 0x8B, 0xD9, 0x71, 0x00, 0x00)),  # s
    bytes((0x00, 0x04, 0x04, 0xFE, 0xFF, 0x06, 0x02, 0x02)),  # t
    bytes((0x3F, 0x7E, 0xC0, 0x80, 0x80, 0xC0, 0x7E, 0x1F)),  # u
    bytes((0x3E, 0x63, 0xC0, 0xC0, 0x30, 0x1C, 0x07, 0x00)),  # v
    bytes((0x0E, 0xFF, 0xE0, 0xFC, 0x3E, 0xE0, 0xF8, 0x0F)),  # w
    bytes((0xC1, 0x63, 0x26, 0x3C, 0x38, 0x6C, 0xC6, 0x83)),  # x
    bytes((0x0F, 0x1F, 0x18, 0x98, 0xC8, 0x7E, 0x3F, 0x00)),  # y
    bytes((0xC3, 0xE3, 0xF3, 0xDB, 0xCF, 0xC7, 0xC0, 0xC0)),  # z
    bytes((0x00, 0x00, 0x00, 0xDF, 0xDF, 0x00, 0x00, 0x00)),  # !
    bytes((0x06, 0x03, 0x03, 0xD3, 0xDB, 0x1B, 0x0F, 0x06)),  # ?
    bytes((0x00, 0x00, 0xC3, 0xC3, 0x00, 0x00, 0x00, 0x00)),  # :
    bytes((0x00, 0x00, 0xC0, 0xF3, 0x33, 0x00, 0x00, 0x00)),  # ;
    bytes((0xC0, 0xF0, 0x30, 0x00, 0x00, 0x00, 0x00, 0x00)),  # ,
    bytes((0xC0, 0xC0, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00)),  # .
    bytes((0x02, 0x45, 0x22, 0x10, 0x08, 0x44, 0xA2, 0x40)),  # %
)


def glyph_index(char: str) -> int:
    """Return the font slot for ``char``; characters without a glyph map to the blank slot."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + _UPPER_START
    if "0" <= char <= "9":
        return ord(char) - ord("0") + _DIGITS_START
    if "a" <= char <= "z":
        return ord(char) - ord("a") + _LOWER_START
    return _PUNCTUATION.get(char, _BLANK)


def glyph(char: str) -> bytes:
    """Return the eight column bytes that draw ``char``."""
    return FONT[glyph_index(char)]