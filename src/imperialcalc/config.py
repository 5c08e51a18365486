"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents unit glyphs and operator symbols from being
   hardcoded in every module that scans or builds an expression line.
2. Settings: It names the keys and the allowed values of the user settings
   persisted by the Qt layer.

Exports:
    FRACTION_RESOLUTIONS (tuple[int, ...]): Allowed fraction-of-an-inch grids.
    DEFAULT_FRACTION_RESOLUTION (int): Resolution used until the user picks one.
"""
from typing import Final

# Unit glyphs
FOOT_MARK: Final[str] = "′"
INCH_MARK: Final[str] = "″"
SLASH: Final[str] = "/"
AREA_TAG: Final[str] = "ft²"

# ASCII spellings normalized to the glyphs before a unit marker is appended
FOOT_ALIAS: Final[str] = " ft"
INCH_ALIAS: Final[str] = " in"

# Binary operators. The line always carries them surrounded by single spaces.
OPERATORS: Final[tuple[str, ...]] = ("+", "-", "x", "÷")
OPERATOR_SUBSTRINGS: Final[tuple[str, ...]] = tuple(f" {op} " for op in OPERATORS)

# Fraction resolution (denominator of the smallest displayed tick)
FRACTION_RESOLUTIONS: Final[tuple[int, ...]] = (64, 32, 16, 8, 4, 2)
DEFAULT_FRACTION_RESOLUTION: Final[int] = 64

# QSettings keys
SETTINGS_FRACTION_RESOLUTION: Final[str] = "format/fraction_resolution"
