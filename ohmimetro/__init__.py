"""Resistance meter with E24 colour-band matching, plus display, LED matrix, LED and buzzer models."""

__version__ = "0.1.0"