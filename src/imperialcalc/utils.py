from fractions import Fraction

MILLIMETERS_PER_INCH = Fraction("25.4")
SQUARE_METERS_PER_SQUARE_FOOT = Fraction("0.092903")
INCHES_PER_FOOT = 12

# One 8' x 4' sheet of plywood / drywall
SHEET_AREA_SQUARE_FEET = 32


def inches_to_millimeters(inches: Fraction) -> Fraction:
    """Convert inches to millimeters."""
    return inches * MILLIMETERS_PER_INCH


def square_feet_to_square_meters(square_feet: Fraction) -> Fraction:
    """Convert square feet to square meters."""
    return square_feet * SQUARE_METERS_PER_SQUARE_FOOT


def inches_to_feet(inches: Fraction) -> Fraction:
    """Convert inches to (fractional) feet."""
    return inches / INCHES_PER_FOOT
