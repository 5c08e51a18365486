from __future__ import annotations

from math import gcd


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Reduce numerator/denominator to lowest terms.

    Args:
        numerator: Number of ticks, must be positive. Callers handle the
            "no fractional part" case themselves.
        denominator: The tick grid (fraction resolution), must be positive.

    Returns:
        The reduced (numerator, denominator) pair, e.g. (8, 16) -> (1, 2).
    """
    if numerator <= 0 or denominator <= 0:
        raise ValueError(f"Cannot reduce {numerator}/{denominator}: both parts must be positive.")

    divisor = gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor


def format_fraction(numerator: int, denominator: int) -> str:
    """Return the reduced fraction as 'n/d' text."""
    n, d = reduce_fraction(numerator, denominator)
    return f"{n}/{d}"
