"""
Door calculator.

Door size in feet (height, width), glass size in inches (glass_height,
glass_width). Frame and glass quantities use the legacy formulas so door
BOQs keep the numbers the first estimator produced.
"""

from typing import ClassVar, Dict, Optional, Tuple

from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum
from .legacy import (
    door_frame_length_legacy_feet,
    glass_area_legacy_sqft,
    glass_perimeter_legacy_feet,
    hinge_count,
)

DOUBLE_GLAZING = "double"


class DoorType(VariantEnum):
    # With panel
    FLUSH = "flush"
    TEAK = "teak"
    WPC = "wpc"
    # Without panel
    GLASS_DOOR = "glassdoor"
    GLASS_PANEL = "glasspanel"


LOCKED_DOORS = (DoorType.FLUSH, DoorType.TEAK)

DOOR_LABELS = {
    DoorType.FLUSH: "Flush door",
    DoorType.TEAK: "Teak wood door",
    DoorType.WPC: "WPC door",
    DoorType.GLASS_DOOR: "Glass door (clear tempered)",
    DoorType.GLASS_PANEL: "Glass panel door (frosted tempered)",
}


class DoorMaterialSelection(MaterialSelection):
    frame_material: Optional[str] = None
    hinge_finish: Optional[str] = None


class DoorRequirement(RequirementResult):
    frame_length: int = 0
    shutters: int = 0
    hinges: int = 0
    locks: int = 0
    glass_area: float = 0.0
    aluminium_frame_length: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "frame_length": ("Door frame", "rft"),
        "shutters": ("Door shutter", "nos"),
        "hinges": ("Door hinges (SS)", "nos"),
        "locks": ("Door lock", "nos"),
        "glass_area": ("Toughened glass", "sqft"),
        "aluminium_frame_length": ("Aluminium glass frame", "rft"),
    }


class DoorsCalculator(BaseCalculator):

    DOMAIN = "doors"
    VARIANTS = DoorType
    RESULT = DoorRequirement
    SELECTION = DoorMaterialSelection
    REQUIRED_DIMENSIONS = ("height", "width")
    OPTIONAL_DIMENSIONS = {"count": 1}
    VARIANT_DIMENSIONS = {
        DoorType.GLASS_DOOR: ("glass_height", "glass_width"),
        DoorType.GLASS_PANEL: ("glass_height", "glass_width"),
    }
    BRANCHES = {
        DoorType.FLUSH: "_panel_door",
        DoorType.TEAK: "_panel_door",
        DoorType.WPC: "_panel_door",
        DoorType.GLASS_DOOR: "_glass_door",
        DoorType.GLASS_PANEL: "_glass_door",
    }

    def base_result(self, dims: dict) -> DoorRequirement:
        return DoorRequirement(area=dims["height"] * dims["width"] * dims["count"])

    def _frame_and_hinges(self, variant, dims, selection) -> dict:
        """Every door type gets a frame and hinges."""
        height, width, count = dims["height"], dims["width"], dims["count"]
        units = self.whole_units(count)
        assumptions = [
            "%s, %d no. at %.1f ft x %.1f ft." % (DOOR_LABELS[variant], units, height, width),
        ]
        if selection.frame_material:
            assumptions.append("Frame material: %s." % selection.frame_material)
        if selection.hinge_finish:
            assumptions.append("Hinge finish: %s." % selection.hinge_finish)
        return {
            "area": height * width * count,
            "frame_length": self.ceil_count(door_frame_length_legacy_feet(height, width) * count),
            "hinges": hinge_count(height * 12) * units,
            "assumptions": assumptions,
        }

    def _panel_door(self, variant, dims, sub_option, selection):
        fields = self._frame_and_hinges(variant, dims, selection)
        units = self.whole_units(dims["count"])
        fields["shutters"] = units
        if variant in LOCKED_DOORS:
            fields["locks"] = units
        fields["assumptions"] = tuple(fields["assumptions"])
        return DoorRequirement(**fields)

    def _glass_door(self, variant, dims, sub_option, selection):
        fields = self._frame_and_hinges(variant, dims, selection)
        units = self.whole_units(dims["count"])
        glass_h, glass_w = dims["glass_height"], dims["glass_width"]

        glass_area = glass_area_legacy_sqft(glass_h, glass_w) * units
        if sub_option == DOUBLE_GLAZING:
            glass_area *= 2
            fields["assumptions"].append("Double glazing: two panes per door.")

        fields["glass_area"] = glass_area
        fields["aluminium_frame_length"] = self.ceil_count(
            glass_perimeter_legacy_feet(glass_h, glass_w) * units
        )
        fields["assumptions"] = tuple(fields["assumptions"])
        return DoorRequirement(**fields)
