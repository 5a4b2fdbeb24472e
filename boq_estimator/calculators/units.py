"""
Unit conversion helpers shared by every estimator.

Inputs are in inches unless the name says otherwise. Nothing here rounds
except round_two().
"""

import math


def inches_to_feet(inches: float) -> float:
    """Convert inches to feet. NaN in, NaN out."""
    return inches / 12


def sqft_from_inches(width_in: float, height_in: float) -> float:
    """Square footage from two dimensions in inches (each converted to feet first)."""
    width_ft = inches_to_feet(width_in)
    height_ft = inches_to_feet(height_in)
    return width_ft * height_ft


def perimeter_feet(width_in: float, height_in: float) -> float:
    """Rectangle perimeter in feet from dimensions in inches."""
    width_ft = inches_to_feet(width_in)
    height_ft = inches_to_feet(height_in)
    return 2 * (width_ft + height_ft)


def frame_length_feet(width_in: float, height_in: float) -> float:
    """Outer frame length in feet. Same number as perimeter_feet()."""
    return perimeter_feet(width_in, height_in)


def round_two(n: float) -> float:
    """Round to 2 decimals, halves going up (0.125 -> 0.13, -0.125 -> -0.12)."""
    if not math.isfinite(n):
        return n
    return math.floor(n * 100 + 0.5) / 100
