"""
BOQ pricing engine tests.

Tests:
1-6.   compute_boq scaling, wastage, totals, unit rates
7-9.   Stored recipe normalization (basis, lines, step11_items fallback)
10-11. Estimator results to BOQ lines
12-13. GST summary and best offer
"""

import pytest

from boq_estimator.boq_calc import (
    basis_from_table_data,
    best_offer,
    compute_boq,
    lines_from_requirement,
    lines_from_table_data,
    price_requirement,
    tax_summary,
)
from boq_estimator.calculators.civil_wall import compute_wall_requirement


def _basis(**overrides):
    basis = {"required_unit_type": "Sqft", "base_required_qty": 1, "wastage_pct_default": 0}
    basis.update(overrides)
    return basis


def _line(**overrides):
    line = {"name": "Cement", "unit": "bags", "base_qty": 2,
            "supply_rate": 50, "install_rate": 20}
    line.update(overrides)
    return line


# ============================================================
# compute_boq
# ============================================================

def test_recipe_scaled_to_target():
    basis = _basis(base_required_qty=100, wastage_pct_default=0.05)
    boq = compute_boq(basis, [_line(base_qty=10)], 250)
    line = boq["computed"][0]
    assert line["wastage_pct_used"] == 0.05
    assert line["effective_qty"] == pytest.approx(10.5)
    assert line["per_unit_qty"] == pytest.approx(0.105)
    assert line["scaled_qty"] == pytest.approx(26.25)
    assert line["round_off_qty"] == 27
    assert line["supply_amount"] == 1350        # 27 * 50
    assert line["install_amount"] == 540        # 27 * 20
    assert line["line_total"] == 1890
    assert boq["grand_total"] == 1890
    assert boq["rate_per_unit"] == pytest.approx(7.56)     # 1890 / 250
    assert boq["rate_per_sqmt"] is None


def test_line_wastage_overrides_default_and_can_be_disabled():
    basis = _basis(wastage_pct_default=0.1)
    lines = [_line(wastage_pct=0.5), _line(apply_wastage=False, wastage_pct=0.5)]
    boq = compute_boq(basis, lines, 10)
    overridden, disabled = boq["computed"]
    assert overridden["round_off_qty"] == 30    # (2 + 1) * 10
    assert disabled["wastage_pct_used"] == 0
    assert disabled["round_off_qty"] == 20


def test_totals_sum_all_lines():
    boq = compute_boq(_basis(), [_line(), _line(base_qty=1, supply_rate=10, install_rate=0)], 10)
    assert boq["total_supply"] == 1000 + 100
    assert boq["total_install"] == 400
    assert boq["grand_total"] == 1500
    assert boq["rate_per_unit"] == 150


def test_sqmt_rate():
    boq = compute_boq(_basis(required_unit_type="Sqmt"), [_line()], 10)
    assert boq["rate_per_sqmt"] == pytest.approx(boq["rate_per_unit"] * 10.76)


def test_zero_base_and_zero_target():
    boq = compute_boq(_basis(base_required_qty=0), [_line()], 10)
    assert boq["computed"][0]["per_unit_qty"] == 2      # base falls back to 1
    empty = compute_boq(_basis(), [_line()], 0)
    assert empty["computed"][0]["round_off_qty"] == 0
    assert empty["rate_per_unit"] == 0


def test_extra_line_fields_preserved():
    boq = compute_boq(_basis(), [_line(shop_name="Sharma Traders", description="OPC 53")], 1)
    line = boq["computed"][0]
    assert line["shop_name"] == "Sharma Traders"
    assert line["description"] == "OPC 53"


# ============================================================
# Stored recipe data
# ============================================================

def test_basis_from_table_data():
    assert basis_from_table_data(None) == {
        "required_unit_type": "Sqft", "base_required_qty": 1, "wastage_pct_default": 0,
    }
    basis = basis_from_table_data({"requiredUnitType": "Sqmt", "baseRequiredQty": "100",
                                   "wastagePctDefault": 0.05})
    assert basis == {"required_unit_type": "Sqmt", "base_required_qty": 100,
                     "wastage_pct_default": 0.05}


def test_lines_from_table_data():
    lines = lines_from_table_data({"lines": [
        {"material_id": "m1", "material_name": "Gypsum board", "baseQty": 7,
         "supplyRate": 450, "install_rate": 100, "shop_name": "Gyproc Depot"},
        {"id": "m2", "name": "Screws", "qty": 105, "wastagePct": 0.1, "apply_wastage": False},
    ]})
    board, screws = lines
    assert board["id"] == "m1"
    assert board["name"] == "Gypsum board"
    assert board["location"] == "Main Area"
    assert board["base_qty"] == 7
    assert board["supply_rate"] == 450
    assert board["install_rate"] == 100
    assert board["apply_wastage"] is True
    assert board["wastage_pct"] is None
    assert board["description"] == "Gypsum board"
    assert screws["base_qty"] == 105
    assert screws["wastage_pct"] == 0.1
    assert screws["apply_wastage"] is False


def test_lines_from_step11_items():
    lines = lines_from_table_data({"lines": [], "step11_items": [
        {"id": 1, "title": "Bricks", "unit": "nos", "qty": 500, "supply_rate": 8},
    ]})
    assert lines == [{
        "id": 1, "name": "Bricks", "unit": "nos", "location": "Main Area",
        "base_qty": 500, "wastage_pct": None, "supply_rate": 8, "install_rate": 0,
    }]
    assert lines_from_table_data({}) == []


# ============================================================
# Estimator results
# ============================================================

def test_lines_from_requirement():
    result = compute_wall_requirement("gypsum", 10, 8)
    lines = lines_from_requirement(result, {"gypsum_sheets": {"supply_rate": 450, "install_rate": 100}})
    by_id = {line["id"]: line for line in lines}
    assert set(by_id) == {"gypsum_sheets", "framing_length", "screws", "joint_compound"}
    assert by_id["gypsum_sheets"]["base_qty"] == 7
    assert by_id["gypsum_sheets"]["supply_rate"] == 450
    assert by_id["screws"]["supply_rate"] == 0
    assert by_id["framing_length"]["unit"] == "rft"


def test_price_requirement():
    result = compute_wall_requirement("gypsum", 10, 8)
    boq = price_requirement(result, {"gypsum_sheets": {"supply_rate": 450, "install_rate": 100},
                                     "screws": {"supply_rate": 2}})
    assert boq["total_supply"] == 7 * 450 + 105 * 2
    assert boq["total_install"] == 700
    assert boq["grand_total"] == 3150 + 210 + 700


# ============================================================
# Tax and offers
# ============================================================

def test_tax_summary():
    taxes = tax_summary(1000)
    assert taxes["sgst"] == pytest.approx(90)
    assert taxes["cgst"] == pytest.approx(90)
    assert taxes["grand_total"] == pytest.approx(1180)
    assert tax_summary(1000, rate=0.06)["grand_total"] == pytest.approx(1120)


def test_best_offer():
    offers = [
        {"shop": "A", "rate": 120},
        {"shop": "B", "rate": 95},
        {"shop": "C", "rate": 95},
        {"shop": "D", "rate": None},
    ]
    assert best_offer(offers)["shop"] == "B"
    assert best_offer([]) is None
    assert best_offer([{"shop": "D", "rate": None}]) is None
