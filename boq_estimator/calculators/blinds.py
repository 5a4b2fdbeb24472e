"""
Window blinds calculator. Window width and height in feet.
"""

import math
from typing import ClassVar, Dict, Optional, Tuple

from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum

ROD_SPACING_FT = 1      # roman blinds: one rod per foot of drop


class BlindType(VariantEnum):
    ROLLER = "roller"
    VENETIAN = "venetian"
    ROMAN = "roman"


class BlindMaterialSelection(MaterialSelection):
    fabric: Optional[str] = None
    operation: Optional[str] = None     # "manual" / "motorised"


class BlindRequirement(RequirementResult):
    material_sqft: int = 0
    fitting_kits: int = 0
    headrail_length: int = 0
    rods: int = 0
    edge_binding_length: int = 0
    tilt_wands: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "material_sqft": ("Blind material", "sqft"),
        "fitting_kits": ("Fitting kit", "sets"),
        "headrail_length": ("Headrail", "rft"),
        "rods": ("Roman blind rod", "nos"),
        "edge_binding_length": ("Edge binding", "rft"),
        "tilt_wands": ("Tilt wand", "nos"),
    }


class BlindsCalculator(BaseCalculator):

    DOMAIN = "blinds"
    VARIANTS = BlindType
    RESULT = BlindRequirement
    SELECTION = BlindMaterialSelection
    REQUIRED_DIMENSIONS = ("width", "height")
    OPTIONAL_DIMENSIONS = {"count": 1}
    BRANCHES = {
        BlindType.ROLLER: "_roller",
        BlindType.VENETIAN: "_venetian",
        BlindType.ROMAN: "_roman",
    }

    def base_result(self, dims: dict) -> BlindRequirement:
        units = self.whole_units(dims["count"])
        return BlindRequirement(area=dims["width"] * dims["height"] * units)

    def _common(self, variant, dims, selection) -> dict:
        width, height = dims["width"], dims["height"]
        units = self.whole_units(dims["count"])
        area = width * height * units
        assumptions = ['%s blind, %d no. at %g ft x %g ft.' % (variant.value.title(), units, width, height)]
        if selection.fabric:
            assumptions.append("Fabric: %s." % selection.fabric)
        if selection.operation:
            assumptions.append("Operation: %s." % selection.operation)
        return {
            "area": area,
            "material_sqft": self.ceil_count(area),
            "fitting_kits": units,
            "headrail_length": self.ceil_count(width * units),
            "assumptions": assumptions,
        }

    def _roller(self, variant, dims, sub_option, selection):
        fields = self._common(variant, dims, selection)
        fields["assumptions"] = tuple(fields["assumptions"])
        return BlindRequirement(**fields)

    def _venetian(self, variant, dims, sub_option, selection):
        fields = self._common(variant, dims, selection)
        fields["tilt_wands"] = self.whole_units(dims["count"])
        fields["assumptions"] = tuple(fields["assumptions"])
        return BlindRequirement(**fields)

    def _roman(self, variant, dims, sub_option, selection):
        fields = self._common(variant, dims, selection)
        units = self.whole_units(dims["count"])
        fields["rods"] = math.ceil(dims["height"] / ROD_SPACING_FT) * units
        fields["edge_binding_length"] = self.ceil_count(
            2 * (dims["width"] + dims["height"]) * units
        )
        fields["assumptions"] = tuple(fields["assumptions"])
        return BlindRequirement(**fields)
