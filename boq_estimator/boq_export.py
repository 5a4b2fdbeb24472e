"""
BOQ export: CSV schedule and PDF document.

Both take the dict returned by boq_calc.compute_boq().
PDF uses fpdf2 (pure Python, no system dependencies) with the built-in
Helvetica font, so all text is forced to latin-1.
"""

import csv
import io
from datetime import datetime
from typing import Optional

from fpdf import FPDF

from .boq_calc import tax_summary
from .calculators.units import round_two
from .config import settings

CSV_HEADER = ["S.No", "Item", "Unit", "Quantity", "Supply Rate", "Install Rate", "Amount"]


def _money(amount) -> str:
    try:
        return f"{round_two(float(amount)):.2f}"
    except (ValueError, TypeError):
        return "0.00"


def boq_to_csv(boq: dict, title: str, details: Optional[dict] = None) -> str:
    """
    BOQ as CSV text.

    `details` are printed as "Label: value" lines under the title,
    e.g. {"Wall Type": "civil", "Dimensions": "10ft x 10ft"}.
    """
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(["BILL OF QUANTITIES (BOQ)"])
    writer.writerow([title])
    writer.writerow([f"Generated: {datetime.now().strftime('%d/%m/%Y, %H:%M:%S')}"])
    for label, value in (details or {}).items():
        writer.writerow([f"{label}: {value}"])
    writer.writerow([])
    writer.writerow(["MATERIALS SCHEDULE"])
    writer.writerow(CSV_HEADER)

    for idx, line in enumerate(boq.get("computed", []), start=1):
        writer.writerow([
            idx,
            line.get("name") or line.get("description") or "",
            line.get("unit") or "",
            line.get("round_off_qty", 0),
            _money(line.get("supply_rate", 0)),
            _money(line.get("install_rate", 0)),
            _money(line.get("line_total", 0)),
        ])

    writer.writerow([])
    writer.writerow(["TOTAL COST", "", "", "", "", "", _money(boq.get("grand_total", 0))])
    return out.getvalue()


def _fmt(amount) -> str:
    """Format a number as Rs.X,XXX.XX"""
    try:
        return f"{settings.CURRENCY_PREFIX}{float(amount):,.2f}"
    except (ValueError, TypeError):
        return f"{settings.CURRENCY_PREFIX}0.00"


def _fmt_qty(qty) -> str:
    try:
        return f"{float(qty):g}"
    except (ValueError, TypeError):
        return "0"


def _safe(text) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        str(text)
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u00d7", "x")    # multiplication sign
        .replace("\u20b9", "Rs.")  # rupee sign
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class BoqPDF(FPDF):
    """PDF layout for a bill of quantities."""

    def __init__(self):
        super().__init__()
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "L" if label in ("S.No", "Item", "Unit") else "R"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        """Render a table data row. Text columns left, numbers right."""
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "L" if i < 3 else "R"
            self.cell(width, 5.5, str(val), align=align)
        self.ln()

    def subtotal_row(self, label, amount):
        """Render a total row spanning the full width."""
        self.set_font("Helvetica", "B", 9)
        self.cell(140, 6, label, align="R", border="T")
        self.cell(50, 6, _fmt(amount), align="R", border="T")
        self.ln(8)


def generate_boq_pdf(boq: dict, project: Optional[dict] = None) -> bytes:
    """
    Generate a PDF bill of quantities.

    Args:
        boq: compute_boq() result
        project: optional {"title", "client_name", "location", "unit_type",
                 "target_qty", "include_gst", "assumptions"}

    Returns:
        PDF bytes
    """
    project = project or {}
    title = project.get("title") or "Bill of Quantities"

    pdf = BoqPDF()
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── Header ──
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 10, _safe(settings.COMPANY_NAME), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(0, 8, "BILL OF QUANTITIES (BOQ)", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, _safe(title), new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Date: {datetime.now().strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    for key, label in (("client_name", "Prepared for"), ("location", "Location")):
        if project.get(key):
            pdf.cell(0, 5, _safe(f"{label}: {project[key]}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    # ── Materials schedule ──
    pdf.section_header("MATERIALS SCHEDULE")
    cols = [("S.No", 12), ("Item", 62), ("Unit", 18), ("Qty", 18),
            ("Supply", 26), ("Install", 26), ("Amount", 28)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)

    for idx, line in enumerate(boq.get("computed", []), start=1):
        name = line.get("name") or line.get("description") or ""
        pdf.table_row(
            [
                str(idx),
                _safe(name[:38]),
                _safe(line.get("unit") or ""),
                _fmt_qty(line.get("round_off_qty", 0)),
                _fmt(line.get("supply_rate", 0)),
                _fmt(line.get("install_rate", 0)),
                _fmt(line.get("line_total", 0)),
            ],
            widths,
        )

    pdf.subtotal_row("Total Supply", boq.get("total_supply", 0))
    pdf.subtotal_row("Total Install", boq.get("total_install", 0))

    # ── Totals ──
    pdf.section_header("PROJECT TOTAL")
    grand_total = boq.get("grand_total", 0)
    rows = [("Subtotal", grand_total)]
    if project.get("include_gst"):
        taxes = tax_summary(grand_total)
        pct = settings.GST_RATE * 100
        rows.append((f"SGST ({pct:g}%)", taxes["sgst"]))
        rows.append((f"CGST ({pct:g}%)", taxes["cgst"]))
        grand_total = taxes["grand_total"]

    pdf.set_font("Helvetica", "", 10)
    for label, amount in rows:
        pdf.cell(130, 6, label)
        pdf.cell(60, 6, _fmt(amount), align="R")
        pdf.ln()

    unit_type = project.get("unit_type") or "unit"
    pdf.cell(130, 6, f"Rate per {_safe(unit_type)}")
    pdf.cell(60, 6, _fmt(boq.get("rate_per_unit", 0)), align="R")
    pdf.ln()
    if boq.get("rate_per_sqmt") is not None:
        pdf.cell(130, 6, "Rate per Sqmt")
        pdf.cell(60, 6, _fmt(boq["rate_per_sqmt"]), align="R")
        pdf.ln()

    pdf.ln(1)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  GRAND TOTAL", fill=True)
    pdf.cell(60, 10, f"{_fmt(grand_total)}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    assumptions = project.get("assumptions") or []
    if assumptions:
        pdf.section_header("ASSUMPTIONS")
        pdf.set_font("Helvetica", "", 8)
        for a in assumptions:
            pdf.set_x(pdf.l_margin)
            pdf.cell(pw, 4.5, _safe(f"  - {a}"), new_x="LMARGIN", new_y="NEXT")

    return bytes(pdf.output())
