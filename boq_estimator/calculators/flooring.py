"""
Flooring calculator.

Room length and width in feet. Wastage is added to the laid area before
any material is counted (10% unless configured or overridden).
"""

from typing import ClassVar, Dict, Optional, Tuple

from ..config import settings
from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum

ADHESIVE_BAG_SQFT = 40      # one bag of tile adhesive
GROUT_KG_PER_SQFT = 0.15


class FlooringType(VariantEnum):
    TILES = "tiles"
    MARBLE = "marble"
    GRANITE = "granite"
    WOODEN = "wooden"


class FlooringMaterialSelection(MaterialSelection):
    wastage_pct: Optional[float] = None     # fraction, e.g. 0.05; None uses settings
    finish: Optional[str] = None


class FlooringRequirement(RequirementResult):
    wastage_area: float = 0.0
    total_area: float = 0.0
    flooring_sqft: int = 0
    adhesive_bags: int = 0
    grout_kg: int = 0
    underlay_sqft: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "flooring_sqft": ("Flooring", "sqft"),
        "adhesive_bags": ("Tile adhesive", "bags"),
        "grout_kg": ("Grout", "kg"),
        "underlay_sqft": ("Underlay", "sqft"),
    }


class FlooringCalculator(BaseCalculator):

    DOMAIN = "flooring"
    VARIANTS = FlooringType
    RESULT = FlooringRequirement
    SELECTION = FlooringMaterialSelection
    REQUIRED_DIMENSIONS = ("length", "width")
    BRANCHES = {
        FlooringType.TILES: "_stone_or_tile",
        FlooringType.MARBLE: "_stone_or_tile",
        FlooringType.GRANITE: "_stone_or_tile",
        FlooringType.WOODEN: "_wooden",
    }

    def base_result(self, dims: dict) -> FlooringRequirement:
        return FlooringRequirement(area=dims["length"] * dims["width"])

    def _laid_area(self, variant, dims, selection) -> dict:
        area = dims["length"] * dims["width"]
        wastage = selection.wastage_pct
        if wastage is None:
            wastage = settings.FLOORING_WASTAGE_PCT
        wastage_area = area * wastage
        total_area = area + wastage_area
        assumptions = ["%s flooring, %.0f%% wastage." % (variant.value.title(), wastage * 100)]
        if selection.finish:
            assumptions.append("Finish: %s." % selection.finish)
        return {
            "area": area,
            "wastage_area": wastage_area,
            "total_area": total_area,
            "flooring_sqft": self.ceil_count(total_area),
            "assumptions": assumptions,
        }

    def _stone_or_tile(self, variant, dims, sub_option, selection):
        fields = self._laid_area(variant, dims, selection)
        total_area = fields["total_area"]
        fields["adhesive_bags"] = self.ceil_count(total_area / ADHESIVE_BAG_SQFT)
        fields["grout_kg"] = self.ceil_count(total_area * GROUT_KG_PER_SQFT)
        fields["assumptions"] = tuple(fields["assumptions"])
        return FlooringRequirement(**fields)

    def _wooden(self, variant, dims, sub_option, selection):
        fields = self._laid_area(variant, dims, selection)
        # Floating floor on underlay, no adhesive or grout
        fields["underlay_sqft"] = self.ceil_count(fields["total_area"])
        fields["assumptions"] = tuple(fields["assumptions"])
        return FlooringRequirement(**fields)
