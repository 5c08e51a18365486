"""
Measurement Formatter
=====================
Renders quantities back into feet / inches / fraction-of-an-inch text,
e.g. 41.5 -> "3′ 5 1/2″", and area results into "32 ft²".

Rounding happens exactly once, here: the inch remainder is scaled to the
fraction resolution and rounded half away from zero to a whole number of
ticks. Everything after that is integer arithmetic, so carries (e.g.
11.999″ -> one more foot) are exact.
"""
from __future__ import annotations

import math
from fractions import Fraction
from numbers import Rational

from imperialcalc.config import AREA_TAG, FOOT_MARK, INCH_MARK
from imperialcalc.model.fractions_util import format_fraction
from imperialcalc.utils import INCHES_PER_FOOT


ZERO_TEXT = f"0{INCH_MARK}"


def round_half_away_from_zero(value: Rational) -> int:
    """Round an exact value to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(Fraction(value)) + Fraction(1, 2))
    return -magnitude if value < 0 else magnitude


def format_feet_inches(inches: Rational | float, resolution: int) -> str:
    """
    Format a length in inches as feet, inches and a reduced fraction.

    Args:
        inches: Length in inches. Negative values are formatted as the
            magnitude with a leading '-'.
        resolution: Fraction grid, e.g. 16 for sixteenths.

    Returns:
        Text such as "2′ 3″", "5 1/2″", "1′" or "0″".
    """
    value = Fraction(inches)
    text = _format_magnitude(abs(value), resolution)
    if value < 0 and text != ZERO_TEXT:
        return f"-{text}"
    return text


def _format_magnitude(inches: Fraction, resolution: int) -> str:
    feet = math.floor(inches / INCHES_PER_FOOT)
    remainder = inches - feet * INCHES_PER_FOOT

    ticks = round_half_away_from_zero(remainder * resolution)

    if ticks == 0:
        return f"{feet}{FOOT_MARK}" if feet > 0 else ZERO_TEXT

    # Rounding pushed the remainder up to a full foot
    if ticks == resolution * INCHES_PER_FOOT:
        return f"{feet + 1}{FOOT_MARK}"

    whole_inches, fraction_ticks = divmod(ticks, resolution)
    fraction_text = format_fraction(fraction_ticks, resolution) if fraction_ticks else ""

    parts = []
    if feet > 0:
        parts.append(f"{feet}{FOOT_MARK}")

    has_inches = whole_inches > 0 or bool(fraction_text)
    if has_inches:
        parts.append(str(whole_inches))
    if fraction_text:
        parts.append(fraction_text)

    result = " ".join(parts)
    if has_inches:
        result += INCH_MARK

    return result or ZERO_TEXT


def format_area(square_feet: Rational | float) -> str:
    """Format an area as whole square feet when exact, else with two decimals."""
    value = Fraction(square_feet)
    if value.denominator == 1:
        return f"{value.numerator} {AREA_TAG}"
    return f"{float(value):.2f} {AREA_TAG}"
