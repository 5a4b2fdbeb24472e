"""
Unit conversion and legacy formula tests.

Tests:
1-6.   units.py conversions
7-10.  round_two half-up rounding and idempotence
11-15. Legacy door / glass formulas and hinge count
"""

import math

from boq_estimator.calculators.legacy import (
    door_frame_length_legacy_feet,
    glass_area_legacy_sqft,
    glass_perimeter_legacy_feet,
    hinge_count,
)
from boq_estimator.calculators.units import (
    frame_length_feet,
    inches_to_feet,
    perimeter_feet,
    round_two,
    sqft_from_inches,
)


# ============================================================
# Conversions
# ============================================================

def test_inches_to_feet():
    assert inches_to_feet(24) == 2
    assert inches_to_feet(6) == 0.5


def test_inches_to_feet_nan_passes_through():
    assert math.isnan(inches_to_feet(float("nan")))


def test_sqft_from_inches():
    assert sqft_from_inches(24, 36) == 6    # 2 ft x 3 ft
    assert sqft_from_inches(12, 12) == 1


def test_perimeter_feet():
    assert perimeter_feet(24, 36) == 10     # 2 * (2 + 3)


def test_frame_length_matches_perimeter():
    for w, h in [(24, 36), (30, 84), (48, 60)]:
        assert frame_length_feet(w, h) == perimeter_feet(w, h)


def test_sqft_from_inches_converts_each_side_first():
    for w in range(1, 200, 7):
        for h in (0.5, 6, 11.75, 30, 84, 96.25, 144):
            assert sqft_from_inches(w, h) == (w / 12) * (h / 12)


# ============================================================
# round_two
# ============================================================

def test_round_two_halves_go_up():
    assert round_two(0.125) == 0.13
    assert round_two(2.5) == 2.5
    assert round_two(1.234) == 1.23


def test_round_two_negative_halves_go_toward_positive():
    assert round_two(-0.125) == -0.12


def test_round_two_non_finite_unchanged():
    assert round_two(float("inf")) == float("inf")
    assert math.isnan(round_two(float("nan")))


def test_round_two_is_idempotent():
    values = [i / 1000 for i in range(-20000, 20001, 3)]
    values += [i * 0.3337 for i in range(-3000, 3001)]
    values += [123456.789, -98765.4321, 1e6 + 0.005, 0.125, -0.125, 2.675]
    for x in values:
        once = round_two(x)
        assert round_two(once) == once, x


# ============================================================
# Legacy formulas
# ============================================================

def test_door_frame_length_legacy():
    assert door_frame_length_legacy_feet(7, 3) == 17    # 2*7 + 3


def test_glass_area_legacy():
    assert glass_area_legacy_sqft(36, 24) == 96     # 864 / 9


def test_glass_perimeter_legacy():
    assert glass_perimeter_legacy_feet(36, 24) == 10    # 2 * 60 / 12


def test_hinge_count():
    assert hinge_count(84) == 3     # 7 ft door: 84 / 30 = 2.8 -> 3
    assert hinge_count(30) == 2     # never fewer than 2
    assert hinge_count(10) == 2
    assert hinge_count(90) == 3
    assert hinge_count(91) == 4


def test_hinge_count_never_below_two_and_never_decreases():
    heights = [i / 2 for i in range(0, 601)]     # 0" to 300" in half inches
    counts = [hinge_count(h) for h in heights]
    assert min(counts) == 2
    for previous, current in zip(counts, counts[1:]):
        assert current >= previous
