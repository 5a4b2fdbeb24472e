"""
Painting calculator. Wall length and height in feet, one coat system.
"""

from typing import ClassVar, Dict, Optional, Tuple

from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum

SQFT_PER_LITRE_PAINT = 100
SQFT_PER_LITRE_PRIMER = 100
SQFT_PER_SANDPAPER = 50
SQFT_PER_KG_PUTTY = 50
SQFT_PER_LITRE_WATERPROOFING = 100


class PaintType(VariantEnum):
    INTERIOR = "interior"
    EXTERIOR = "exterior"


class PaintMaterialSelection(MaterialSelection):
    brand: Optional[str] = None
    finish: Optional[str] = None    # e.g. "matt", "satin"


class PaintRequirement(RequirementResult):
    paint_litres: int = 0
    primer_litres: int = 0
    sandpaper_sheets: int = 0
    putty_kg: int = 0
    waterproofing_litres: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "paint_litres": ("Paint", "litres"),
        "primer_litres": ("Primer", "litres"),
        "sandpaper_sheets": ("Sandpaper", "sheets"),
        "putty_kg": ("Wall putty", "kg"),
        "waterproofing_litres": ("Waterproofing coat", "litres"),
    }


class PaintingCalculator(BaseCalculator):

    DOMAIN = "painting"
    VARIANTS = PaintType
    RESULT = PaintRequirement
    SELECTION = PaintMaterialSelection
    REQUIRED_DIMENSIONS = ("length", "height")
    BRANCHES = {
        PaintType.INTERIOR: "_interior",
        PaintType.EXTERIOR: "_exterior",
    }

    def base_result(self, dims: dict) -> PaintRequirement:
        return PaintRequirement(area=dims["length"] * dims["height"])

    def _common(self, variant, dims, selection) -> dict:
        area = dims["length"] * dims["height"]
        assumptions = ["%s emulsion over primer." % variant.value.title()]
        if selection.brand:
            assumptions.append("Brand: %s." % selection.brand)
        if selection.finish:
            assumptions.append("Finish: %s." % selection.finish)
        return {
            "area": area,
            "paint_litres": self.ceil_count(area / SQFT_PER_LITRE_PAINT),
            "primer_litres": self.ceil_count(area / SQFT_PER_LITRE_PRIMER),
            "sandpaper_sheets": self.ceil_count(area / SQFT_PER_SANDPAPER),
            "assumptions": assumptions,
        }

    def _interior(self, variant, dims, sub_option, selection):
        fields = self._common(variant, dims, selection)
        fields["putty_kg"] = self.ceil_count(fields["area"] / SQFT_PER_KG_PUTTY)
        fields["assumptions"] = tuple(fields["assumptions"])
        return PaintRequirement(**fields)

    def _exterior(self, variant, dims, sub_option, selection):
        fields = self._common(variant, dims, selection)
        fields["waterproofing_litres"] = self.ceil_count(
            fields["area"] / SQFT_PER_LITRE_WATERPROOFING
        )
        fields["assumptions"] = tuple(fields["assumptions"])
        return PaintRequirement(**fields)
