"""
BOQ pricing engine.

A recipe defines its material lines at a base quantity (e.g. 100 Sqft).
A project scales the recipe to its target quantity, rounds every line up
to whole units and prices supply and installation separately.

Pure math. Lines are plain dicts; any extra keys on a line (shop_name,
description, ...) are carried through to the computed line.
"""

import logging
import math
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Main Area"


def _number(value, default=0.0) -> float:
    """Numeric value of `value`; `default` for missing, unparseable, zero or NaN."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        return default
    if number == 0 or math.isnan(number):
        return default
    return number


def compute_boq(basis: dict, lines: list, target_required_qty) -> dict:
    """
    Scale recipe lines to a project quantity and price them.

    Args:
        basis: {"required_unit_type": str, "base_required_qty": float,
                "wastage_pct_default": float (fraction, e.g. 0.05)}
        lines: [{"base_qty", "wastage_pct", "supply_rate", "install_rate",
                 "apply_wastage", ...}, ...]
        target_required_qty: how much of the unit this project needs

    Returns:
        {"computed": [...], "total_supply", "total_install", "grand_total",
         "rate_per_unit", "rate_per_sqmt"}
    """
    base = _number(basis.get("base_required_qty"), 1)
    target = _number(target_required_qty, 0)
    default_wastage = _number(basis.get("wastage_pct_default"), 0)

    computed = []
    for line in lines:
        base_qty = _number(line.get("base_qty"), 0)
        if line.get("apply_wastage") is False:
            wastage_pct = 0
        elif line.get("wastage_pct") is not None:
            wastage_pct = float(line["wastage_pct"])
        else:
            wastage_pct = default_wastage

        wastage_qty = base_qty * wastage_pct
        effective_qty = base_qty + wastage_qty
        per_unit_qty = effective_qty / base if base > 0 else 0
        scaled_qty = per_unit_qty * target
        round_off_qty = math.ceil(scaled_qty)

        supply_amount = round_off_qty * _number(line.get("supply_rate"), 0)
        install_amount = round_off_qty * _number(line.get("install_rate"), 0)

        computed.append({
            **line,
            "wastage_pct_used": wastage_pct,
            "wastage_qty": wastage_qty,
            "effective_qty": effective_qty,
            "per_unit_qty": per_unit_qty,
            "scaled_qty": scaled_qty,
            "round_off_qty": round_off_qty,
            "supply_amount": supply_amount,
            "install_amount": install_amount,
            "line_total": supply_amount + install_amount,
        })

    total_supply = sum(c["supply_amount"] for c in computed)
    total_install = sum(c["install_amount"] for c in computed)
    grand_total = total_supply + total_install
    rate_per_unit = grand_total / target if target > 0 else 0

    rate_per_sqmt = None
    if basis.get("required_unit_type") == "Sqmt":
        rate_per_sqmt = rate_per_unit * settings.SQMT_RATE_FACTOR

    logger.debug("BOQ: %d lines, target=%s, grand_total=%.2f",
                 len(computed), target, grand_total)

    return {
        "computed": computed,
        "total_supply": total_supply,
        "total_install": total_install,
        "grand_total": grand_total,
        "rate_per_unit": rate_per_unit,
        "rate_per_sqmt": rate_per_sqmt,
    }


def _first(data: dict, *keys):
    """First key present with a non-None value."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def basis_from_table_data(table_data: Optional[dict]) -> dict:
    """Build a basis from stored recipe data, tolerating missing or old fields."""
    table_data = table_data or {}
    return {
        "required_unit_type": _first(table_data, "requiredUnitType", "required_unit_type") or "Sqft",
        "base_required_qty": _number(_first(table_data, "baseRequiredQty", "base_required_qty"), 1),
        "wastage_pct_default": _number(_first(table_data, "wastagePctDefault", "wastage_pct_default"), 0),
    }


def lines_from_table_data(table_data: Optional[dict]) -> list:
    """
    Build BOQ lines from a stored snapshot.

    Reads `lines` (camelCase or snake_case keys). Older snapshots only have
    `step11_items`, which carry no wastage or apply_wastage flag.
    """
    table_data = table_data or {}
    lines = table_data.get("lines")
    if isinstance(lines, list) and lines:
        result = []
        for line in lines:
            wastage = _first(line, "wastagePct", "wastage_pct")
            apply_wastage = _first(line, "apply_wastage", "applyWastage")
            name = line.get("name") or line.get("material_name")
            result.append({
                "id": line.get("id") or line.get("material_id"),
                "name": name,
                "unit": line.get("unit"),
                "location": line.get("location") or DEFAULT_LOCATION,
                "base_qty": float(_first(line, "baseQty", "base_qty", "qty") or 0),
                "wastage_pct": float(wastage) if wastage is not None else None,
                "supply_rate": float(_first(line, "supplyRate", "supply_rate") or 0),
                "install_rate": float(_first(line, "installRate", "install_rate") or 0),
                "shop_name": line.get("shop_name"),
                "apply_wastage": bool(apply_wastage) if apply_wastage is not None else True,
                "description": line.get("description") or line.get("technicalspecification") or name,
                "technicalspecification": line.get("technicalspecification"),
            })
        return result

    items = table_data.get("step11_items")
    if isinstance(items, list):
        return [
            {
                "id": item.get("id"),
                "name": item.get("title") or item.get("name"),
                "unit": item.get("unit"),
                "location": item.get("location") or DEFAULT_LOCATION,
                "base_qty": float(item.get("qty") or 0),
                "wastage_pct": None,
                "supply_rate": float(item.get("supply_rate") or 0),
                "install_rate": float(item.get("install_rate") or 0),
            }
            for item in items
        ]
    return []


def lines_from_requirement(result, rates: Optional[dict] = None) -> list:
    """
    BOQ lines from an estimator result.

    `rates` maps a count field to {"supply_rate": x, "install_rate": y};
    fields without a rate are priced at zero.
    """
    rates = rates or {}
    lines = []
    for item in result.line_items():
        rate = rates.get(item["field"], {})
        lines.append({
            "id": item["field"],
            "name": item["description"],
            "unit": item["unit"],
            "location": DEFAULT_LOCATION,
            "base_qty": item["quantity"],
            "supply_rate": rate.get("supply_rate", 0),
            "install_rate": rate.get("install_rate", 0),
            "apply_wastage": False,
        })
    return lines


def tax_summary(subtotal: float, rate: Optional[float] = None) -> dict:
    """SGST and CGST, each charged at `rate` on the subtotal."""
    if rate is None:
        rate = settings.GST_RATE
    sgst = subtotal * rate
    cgst = subtotal * rate
    return {
        "subtotal": subtotal,
        "sgst": sgst,
        "cgst": cgst,
        "grand_total": subtotal + sgst + cgst,
    }


def best_offer(offers: list) -> Optional[dict]:
    """
    The cheapest offer by `rate`; the first one wins a tie.
    Offers without a rate are skipped. None if nothing is priced.
    """
    valid = [o for o in offers if o.get("rate") is not None]
    if not valid:
        return None
    return min(valid, key=lambda o: o["rate"])


def price_requirement(result, rates: Optional[dict] = None) -> dict:
    """
    Price an estimator result directly: each count is already the project
    quantity, so the basis and target are both one lump sum.
    """
    basis = {"required_unit_type": "LS", "base_required_qty": 1, "wastage_pct_default": 0}
    return compute_boq(basis, lines_from_requirement(result, rates), 1)
