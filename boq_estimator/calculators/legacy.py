"""
Formulas carried over unchanged from the first generation of estimators.

These overlap with units.py but do NOT produce the same numbers, e.g.
door_frame_length_legacy_feet() counts the width once (no threshold) and
glass_area_legacy_sqft() divides square inches by 9. Estimators that trace
back to the old code paths call these so existing BOQs keep their numbers.
"""

import math


def door_frame_length_legacy_feet(height_ft: float, width_ft: float) -> float:
    """Door frame length in feet: two jambs plus the head. Inputs in feet."""
    return 2 * height_ft + width_ft


def glass_area_legacy_sqft(glass_height_in: float, glass_width_in: float) -> float:
    """Glass area as the old estimator computed it: (h * w) / 9. Inputs in inches."""
    return (glass_height_in * glass_width_in) / 9


def glass_perimeter_legacy_feet(glass_height_in: float, glass_width_in: float) -> float:
    """Glass perimeter in feet: 2 * (h + w) / 12. Inputs in inches."""
    return 2 * (glass_height_in + glass_width_in) / 12


def hinge_count(height_in: float) -> int:
    """At least 2 hinges, otherwise one per 30" of height, rounded up."""
    return max(2, math.ceil(height_in / 30))
