import math
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, field_validator

from .calculators.base import UnknownVariantPolicy

UnitType = Literal["Sqft", "Sqmt", "Length", "LS", "RFT"]


# --- Estimators ---

class LineRate(BaseModel):
    supply_rate: float = 0.0
    install_rate: float = 0.0


class EstimateRequest(BaseModel):
    variant: Optional[str] = None
    dimensions: Dict[str, float] = {}
    sub_option: Optional[str] = None
    material_selection: Optional[dict] = None
    unknown_variant_policy: Optional[UnknownVariantPolicy] = None
    rates: Optional[Dict[str, LineRate]] = None   # count field -> rates

    @field_validator("dimensions")
    @classmethod
    def dimensions_positive(cls, value):
        for name, number in value.items():
            if not math.isfinite(number) or number <= 0:
                raise ValueError(f"dimension {name!r} must be a positive number, got {number}")
        return value


class LineItem(BaseModel):
    field: str
    description: str
    unit: str
    quantity: float


class EstimateResponse(BaseModel):
    domain: str
    variant: Optional[str] = None
    result: Optional[dict] = None
    line_items: List[LineItem] = []
    boq: Optional[dict] = None


class ClassifyRequest(BaseModel):
    subcategory: Optional[str] = None
    subcategory_name: Optional[str] = None
    category: Optional[str] = None
    category_name: Optional[str] = None
    name: Optional[str] = None


class ClassifyResponse(BaseModel):
    estimator_type: Optional[str] = None


# --- BOQ ---

class BoqBasis(BaseModel):
    required_unit_type: UnitType = "Sqft"
    base_required_qty: float = 1.0
    wastage_pct_default: float = 0.0


class BoqLine(BaseModel):
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    unit: Optional[str] = None
    location: Optional[str] = None
    base_qty: float = 0.0
    wastage_pct: Optional[float] = None
    supply_rate: float = 0.0
    install_rate: float = 0.0
    apply_wastage: Optional[bool] = None

    class Config:
        extra = "allow"     # shop_name, description, ... carried through


class BoqComputeRequest(BaseModel):
    basis: BoqBasis = BoqBasis()
    lines: List[BoqLine] = []
    target_required_qty: float = 0.0


class BoqResult(BaseModel):
    computed: List[dict] = []
    total_supply: float = 0.0
    total_install: float = 0.0
    grand_total: float = 0.0
    rate_per_unit: float = 0.0
    rate_per_sqmt: Optional[float] = None


class BoqExportRequest(BoqComputeRequest):
    title: str = "Bill of Quantities"
    details: Dict[str, str] = {}
    client_name: Optional[str] = None
    location: Optional[str] = None
    include_gst: bool = False
    assumptions: List[str] = []
