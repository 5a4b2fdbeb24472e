"""
BOQ API: scale a recipe to a project quantity, price it, export it.

POST /api/boq/compute     : computed lines and totals
POST /api/boq/export/csv  : download the BOQ as CSV
POST /api/boq/export/pdf  : download the BOQ as PDF
"""

from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import Response

from ..boq_calc import compute_boq
from ..boq_export import boq_to_csv, generate_boq_pdf
from ..schemas import BoqComputeRequest, BoqExportRequest, BoqResult

router = APIRouter(prefix="/boq", tags=["boq"])


def _compute(request: BoqComputeRequest) -> dict:
    return compute_boq(
        request.basis.model_dump(),
        [line.model_dump() for line in request.lines],
        request.target_required_qty,
    )


def _filename(extension: str) -> str:
    return f"BOQ-{datetime.now().strftime('%Y%m%d-%H%M%S')}.{extension}"


@router.post("/compute", response_model=BoqResult)
def compute(request: BoqComputeRequest):
    return _compute(request)


@router.post("/export/csv")
def export_csv(request: BoqExportRequest):
    csv_text = boq_to_csv(_compute(request), request.title, request.details)
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{_filename("csv")}"'},
    )


@router.post("/export/pdf")
def export_pdf(request: BoqExportRequest):
    project = {
        "title": request.title,
        "client_name": request.client_name,
        "location": request.location,
        "unit_type": request.basis.required_unit_type,
        "target_qty": request.target_required_qty,
        "include_gst": request.include_gst,
        "assumptions": request.assumptions,
    }
    pdf_bytes = generate_boq_pdf(_compute(request), project)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{_filename("pdf")}"'},
    )
