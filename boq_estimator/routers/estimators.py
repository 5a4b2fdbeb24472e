"""
Estimator API: run a domain calculator over HTTP.

GET  /api/estimators           : domains, their variants and required dimensions
POST /api/estimators/classify  : estimator domain for a product record
POST /api/estimators/{domain}  : material requirement (and optional BOQ) for one selection
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ..boq_calc import price_requirement
from ..calculators.base import UnknownVariantError
from ..calculators.registry import describe_calculators, get_calculator, has_calculator
from ..estimator_type import get_estimator_type
from ..schemas import ClassifyRequest, ClassifyResponse, EstimateRequest, EstimateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimators", tags=["estimators"])


@router.get("")
def list_estimators():
    return describe_calculators()


@router.post("/classify", response_model=ClassifyResponse)
def classify_product(request: ClassifyRequest):
    return {"estimator_type": get_estimator_type(request.model_dump())}


@router.post("/{domain}", response_model=EstimateResponse)
def run_estimate(domain: str, request: EstimateRequest):
    """
    Compute the requirement for one selection.

    `result` is null when the variant or a required dimension is missing.
    When `rates` are given, the counts are priced into a lump-sum BOQ.
    """
    if not has_calculator(domain):
        raise HTTPException(status_code=404, detail=f"No estimator for domain: {domain}")

    calculator = get_calculator(domain)
    policy = request.unknown_variant_policy.value if request.unknown_variant_policy else None
    try:
        result = calculator.estimate(
            request.variant,
            request.dimensions,
            sub_option=request.sub_option,
            material_selection=request.material_selection,
            unknown_variant_policy=policy,
        )
    except UnknownVariantError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValidationError as e:
        detail = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        raise HTTPException(status_code=422, detail=detail)

    if result is None:
        return {"domain": domain, "variant": request.variant, "result": None}

    boq = None
    if request.rates is not None:
        rates = {field: rate.model_dump() for field, rate in request.rates.items()}
        boq = price_requirement(result, rates)

    return {
        "domain": domain,
        "variant": request.variant,
        "result": result.model_dump(),
        "line_items": result.line_items(),
        "boq": boq,
    }
