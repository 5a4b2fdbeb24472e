"""
BOQ export tests: CSV schedule and PDF document.

Tests:
1-3.   CSV layout, rows and total
4-5.   PDF generation (with and without GST)
"""

from boq_estimator.boq_calc import compute_boq
from boq_estimator.boq_export import _safe, boq_to_csv, generate_boq_pdf


def _sample_boq():
    basis = {"required_unit_type": "Sqft", "base_required_qty": 100, "wastage_pct_default": 0.05}
    lines = [
        {"name": "Cement", "unit": "bags", "base_qty": 10, "supply_rate": 50, "install_rate": 20},
        {"name": "Sand, river", "unit": "cft", "base_qty": 18, "supply_rate": 45.5,
         "install_rate": 0, "apply_wastage": False},
    ]
    return compute_boq(basis, lines, 250)


def test_csv_layout():
    csv_text = boq_to_csv(_sample_boq(), "Civil wall - Block A", {"Wall Type": "civil"})
    rows = csv_text.splitlines()
    assert rows[0] == "BILL OF QUANTITIES (BOQ)"
    assert rows[1] == "Civil wall - Block A"
    assert rows[2].startswith("Generated: ")
    assert rows[3] == "Wall Type: civil"
    assert "MATERIALS SCHEDULE" in rows
    header = rows.index("S.No,Item,Unit,Quantity,Supply Rate,Install Rate,Amount")
    assert rows[header - 1] == "MATERIALS SCHEDULE"


def test_csv_rows():
    rows = boq_to_csv(_sample_boq(), "Wall").splitlines()
    header = rows.index("S.No,Item,Unit,Quantity,Supply Rate,Install Rate,Amount")
    assert rows[header + 1] == "1,Cement,bags,27,50.00,20.00,1890.00"
    # 18 / 100 * 250 = 45 cft, no wastage; item name with a comma is quoted
    assert rows[header + 2] == '2,"Sand, river",cft,45,45.50,0.00,2047.50'


def test_csv_total_row():
    rows = boq_to_csv(_sample_boq(), "Wall").splitlines()
    assert rows[-1] == "TOTAL COST,,,,,,3937.50"     # 1890 + 2047.50


def test_pdf_bytes():
    pdf = generate_boq_pdf(_sample_boq(), {"title": "Civil wall", "client_name": "R. Iyer"})
    assert isinstance(pdf, bytes)
    assert pdf[:5] == b"%PDF-"


def test_pdf_with_gst_and_sqmt_rate():
    boq = compute_boq(
        {"required_unit_type": "Sqmt", "base_required_qty": 1},
        [{"name": "Gypsum board — 12.5 mm", "unit": "sheets", "base_qty": 1,
          "supply_rate": 450, "install_rate": 100}],
        10,
    )
    pdf = generate_boq_pdf(boq, {"include_gst": True, "unit_type": "Sqmt",
                                 "assumptions": ["Rates include transport – local only"]})
    assert pdf[:5] == b"%PDF-"


def test_safe_text_is_latin1():
    assert _safe("Rs ₹ 500 — 2×3") == "Rs Rs. 500  -  2x3"
    assert _safe(None) == ""
