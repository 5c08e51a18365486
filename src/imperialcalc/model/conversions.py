"""
Derived displays computed from the primary line: metric equivalent and
the number of 8' x 4' sheets needed to cover an area result.
"""
from __future__ import annotations

import math
from fractions import Fraction
from typing import Optional

from imperialcalc.config import AREA_TAG, OPERATOR_SUBSTRINGS
from imperialcalc.model.parser import contains_quantity, parse_measurement, parse_number
from imperialcalc.utils import (
    SHEET_AREA_SQUARE_FEET,
    inches_to_millimeters,
    square_feet_to_square_meters,
)


def parse_area(primary: str) -> Optional[Fraction]:
    """Return the square feet of an area result ("32 ft²"), or None if the line is not one."""
    if not primary.endswith(AREA_TAG):
        return None
    return parse_number(primary.replace(AREA_TAG, ""))


def millimeter_conversion(primary: str) -> str:
    """
    Metric equivalent of the primary line.

    Area results convert to square meters, single measurements to
    millimeters. Returns "" for an empty line, a pending expression, or
    a line with nothing numeric in it.
    """
    if not primary:
        return ""

    if primary.endswith(AREA_TAG):
        square_feet = parse_area(primary)
        if square_feet is None:
            return ""
        square_meters = square_feet_to_square_meters(square_feet)
        if square_meters.denominator == 1:
            return f"{square_meters.numerator} m²"
        return f"{float(square_meters):.2f} m²"

    if any(op in primary for op in OPERATOR_SUBSTRINGS):
        return ""

    if not contains_quantity(primary):
        return ""

    inches = parse_measurement(primary)
    if inches is None:
        return ""

    mm = inches_to_millimeters(inches)
    if mm.denominator == 1:
        return f"{mm.numerator} mm"
    return f"{float(mm):.1f} mm"


def sheets_count_display(primary: str) -> str:
    """Number of 8' x 4' sheets covering a positive area result, else ""."""
    square_feet = parse_area(primary)
    if square_feet is None or square_feet <= 0:
        return ""
    sheets = math.ceil(square_feet / SHEET_AREA_SQUARE_FEET)
    return f"8' x 4': {sheets}"
