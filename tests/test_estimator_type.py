"""
Product -> estimator domain classifier tests.

Tests:
1-3.   Keyword rules per domain
4.     Rule order (first match wins)
5-6.   Dynamic fallback and empty input
"""

from boq_estimator.estimator_type import get_estimator_type


def test_door_products():
    assert get_estimator_type({"subcategory": "Flush Door"}) == "doors"
    assert get_estimator_type({"subcategory_name": "Vision Panel"}) == "doors"
    assert get_estimator_type({"subcategory": "WPC", "name": "WPC Frame 4x2"}) == "doors"
    assert get_estimator_type({"category": "Doors & Windows", "name": "Mortise lock"}) == "doors"


def test_trade_keywords():
    assert get_estimator_type({"category": "Civil Works"}) == "civil_wall"
    assert get_estimator_type({"subcategory": "LED Panel"}) == "electrical"
    assert get_estimator_type({"subcategory": "Vitrified Tiles"}) == "flooring"
    assert get_estimator_type({"name": "Oak Flooring"}) == "flooring"
    assert get_estimator_type({"subcategory": "CPVC Pipes"}) == "plumbing"
    assert get_estimator_type({"subcategory": "Primer"}) == "painting"
    assert get_estimator_type({"subcategory": "Gypsum Board"}) == "false_ceiling"


def test_fire_and_blinds_keywords():
    assert get_estimator_type({"subcategory": "Sprinkler Heads"}) == "fire_fighting"
    assert get_estimator_type({"category": "Fire Safety"}) == "fire_fighting"
    assert get_estimator_type({"subcategory": "Roller Blinds"}) == "blinds"


def test_first_rule_wins():
    # WALL is a civil keyword and civil is checked before painting
    assert get_estimator_type({"subcategory": "Wall Putty"}) == "civil_wall"


def test_dynamic_fallback():
    assert get_estimator_type({"subcategory": "Modular Kitchen"}) == "modularkitchen"
    assert get_estimator_type({"category": "Hardware-Fittings"}) == "hardwarefittings"


def test_nothing_to_classify():
    assert get_estimator_type(None) is None
    assert get_estimator_type({}) is None
    assert get_estimator_type({"name": "   "}) is None
