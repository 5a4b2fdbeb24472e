"""
Fire-fighting calculator. Floor length and width in feet.
"""

from typing import ClassVar, Dict, Optional, Tuple

from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum

LIGHT_HAZARD = "light hazard"
SQFT_PER_HEAD_ORDINARY = 130
SQFT_PER_HEAD_LIGHT = 225
PIPE_FT_PER_HEAD = 10
HANGER_SPACING_FT = 12
SQFT_PER_HOSE_REEL = 10000
SQFT_PER_EXTINGUISHER = 2000


class FireSystem(VariantEnum):
    SPRINKLER = "sprinkler"
    HYDRANT = "hydrant"
    EXTINGUISHER = "extinguisher"


class FireMaterialSelection(MaterialSelection):
    extinguisher_type: Optional[str] = None     # e.g. "ABC 6 kg"
    pipe_schedule: Optional[str] = None


class FireRequirement(RequirementResult):
    sprinkler_heads: int = 0
    pipe_length: int = 0
    pipe_hangers: int = 0
    hose_reels: int = 0
    landing_valves: int = 0
    extinguishers: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "sprinkler_heads": ("Sprinkler head", "nos"),
        "pipe_length": ("MS pipe", "rft"),
        "pipe_hangers": ("Pipe hanger", "nos"),
        "hose_reels": ("Hose reel", "nos"),
        "landing_valves": ("Landing valve", "nos"),
        "extinguishers": ("Fire extinguisher", "nos"),
    }


class FireFightingCalculator(BaseCalculator):

    DOMAIN = "fire_fighting"
    VARIANTS = FireSystem
    RESULT = FireRequirement
    SELECTION = FireMaterialSelection
    REQUIRED_DIMENSIONS = ("length", "width")
    BRANCHES = {
        FireSystem.SPRINKLER: "_sprinkler",
        FireSystem.HYDRANT: "_hydrant",
        FireSystem.EXTINGUISHER: "_extinguisher",
    }

    def base_result(self, dims: dict) -> FireRequirement:
        return FireRequirement(area=dims["length"] * dims["width"])

    def _sprinkler(self, variant, dims, sub_option, selection):
        area = dims["length"] * dims["width"]
        if sub_option == LIGHT_HAZARD:
            coverage, hazard = SQFT_PER_HEAD_LIGHT, "Light"
        else:
            coverage, hazard = SQFT_PER_HEAD_ORDINARY, "Ordinary"
        heads = self.ceil_count(area / coverage)
        pipe_length = self.ceil_count(heads * PIPE_FT_PER_HEAD)
        assumptions = ["%s hazard, %d sq ft per head." % (hazard, coverage)]
        if selection.pipe_schedule:
            assumptions.append("Pipe schedule: %s." % selection.pipe_schedule)
        return FireRequirement(
            area=area,
            sprinkler_heads=heads,
            pipe_length=pipe_length,
            pipe_hangers=self.ceil_count(pipe_length / HANGER_SPACING_FT),
            assumptions=tuple(assumptions),
        )

    def _hydrant(self, variant, dims, sub_option, selection):
        length, width = dims["length"], dims["width"]
        area = length * width
        reels = self.ceil_count(area / SQFT_PER_HOSE_REEL)
        return FireRequirement(
            area=area,
            hose_reels=reels,
            landing_valves=reels,
            # Ring main around the floor
            pipe_length=self.ceil_count(2 * (length + width)),
            assumptions=("One hose reel and landing valve per 10,000 sq ft.",),
        )

    def _extinguisher(self, variant, dims, sub_option, selection):
        area = dims["length"] * dims["width"]
        assumptions = ["One extinguisher per 2,000 sq ft."]
        if selection.extinguisher_type:
            assumptions.append("Extinguisher type: %s." % selection.extinguisher_type)
        return FireRequirement(
            area=area,
            extinguishers=self.ceil_count(area / SQFT_PER_EXTINGUISHER),
            assumptions=tuple(assumptions),
        )
