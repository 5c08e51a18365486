"""
Measurement Parser
==================
Turns the text of one operand (e.g. "3′ 5 1/2″", "1/2″", "10") into a
quantity in inches.

The parser is lenient on purpose: garbled pieces of an operand count as
zero instead of failing the whole parse, so a half-typed expression still
evaluates to a best-effort value. Only a structurally empty operand has
no quantity at all.

Quantities are exact `Fraction` values, so decimal input such as "2.5"
does not pick up binary floating point error before formatting.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Optional

from imperialcalc.config import FOOT_MARK, INCH_MARK, SLASH
from imperialcalc.utils import INCHES_PER_FOOT


def parse_number(text: str) -> Optional[Fraction]:
    """Parse a plain real number ("12", "2.5", ".5", "-3"). Returns None if invalid."""
    text = text.strip()
    if not text or SLASH in text:
        return None
    try:
        return Fraction(text)
    except (ValueError, ZeroDivisionError):
        return None


def parse_fraction(text: str) -> Optional[Fraction]:
    """Parse 'N/D'. Returns None for non-numeric parts or a zero denominator."""
    parts = text.strip().split(SLASH)
    if len(parts) != 2:
        return None

    numerator = parse_number(parts[0])
    denominator = parse_number(parts[1])
    if numerator is None or denominator is None or denominator == 0:
        return None
    return numerator / denominator


def _parse_inches(text: str) -> Fraction:
    """
    Parse an inch expression: "W N/D", "N/D" or a bare number.

    Malformed input yields 0 instead of an error.
    """
    if SLASH in text:
        components = text.split()
        whole = Fraction(0)
        fraction_text = ""
        if len(components) == 2:
            whole = parse_number(components[0]) or Fraction(0)
            fraction_text = components[1]
        elif len(components) == 1:
            fraction_text = components[0]
        return whole + (parse_fraction(fraction_text) or Fraction(0))

    return parse_number(text.replace(" ", "")) or Fraction(0)


def parse_measurement(text: str) -> Optional[Fraction]:
    """
    Parse one operand into inches.

    Args:
        text: Operand text. May contain at most one foot mark, one inch mark
            and one fraction slash, in the order feet, inches, fraction.

    Returns:
        feet * 12 + inches as an exact Fraction, or None when the operand is
        empty (only whitespace).
    """
    if not text.strip():
        return None

    working = text
    feet = Fraction(0)

    foot_index = working.find(FOOT_MARK)
    if foot_index != -1:
        feet = parse_number(working[:foot_index].replace(" ", "")) or Fraction(0)
        working = working[foot_index + len(FOOT_MARK):]

    inch_index = working.find(INCH_MARK)
    if inch_index != -1:
        inches = _parse_inches(working[:inch_index])
    else:
        inches = _parse_inches(working)

    return feet * INCHES_PER_FOOT + inches


def contains_quantity(text: str) -> bool:
    """Return True if the text holds at least one digit, i.e. something was actually entered."""
    return any(ch.isdigit() for ch in text)
