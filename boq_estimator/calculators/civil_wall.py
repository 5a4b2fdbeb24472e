"""
Civil wall / partition calculator.

Dimensions in feet: length (run of wall) and height.
Brick walls get bricks/cement/sand; drywall partitions get sheets on both
faces plus a stud-and-track frame. Glass partitions are half solid, half glazing.
"""

import math
from typing import ClassVar, Dict, Optional, Tuple

from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum

NINE_INCH = "9 inch"
THICKNESS_9_INCH_FT = 0.75
THICKNESS_4_5_INCH_FT = 0.375

# Per sq ft of wall face
BRICKS_PER_SQFT_9_INCH = 10
BRICKS_PER_SQFT_4_5_INCH = 5
# Per 100 sq ft of wall face
CEMENT_BAGS_PER_100_SQFT_9_INCH = 1.5
CEMENT_BAGS_PER_100_SQFT_4_5_INCH = 0.8
SAND_CFT_PER_100_SQFT_9_INCH = 18
SAND_CFT_PER_100_SQFT_4_5_INCH = 10

SHEET_FACES = 2
GYPSUM_SHEET_SQFT = 24      # board coverage per face
PLYWOOD_SHEET_SQFT = 32     # 8' x 4'
SCREWS_PER_GYPSUM_SHEET = 15
SCREWS_PER_PLYWOOD_SHEET = 20
JOINT_COMPOUND_PER_SHEET = 0.5
SOLID_SHARE = 0.5
GLASS_SHARE = 0.5


class WallType(VariantEnum):
    CIVIL = "civil"
    GYPSUM = "gypsum"
    PLYWOOD = "plywood"
    GYPSUM_GLASS = "gypsum-glass"
    PLYWOOD_GLASS = "plywood-glass"


class WallMaterialSelection(MaterialSelection):
    plywood_grade: Optional[str] = None
    wastage_pct: float = 0.0    # percent, applied to bricks/cement/sand


class WallRequirement(RequirementResult):
    wall_volume: float = 0.0
    bricks: int = 0
    cement_bags: int = 0
    sand_cft: int = 0
    gypsum_sheets: int = 0
    plywood_sheets: int = 0
    glass_area: float = 0.0
    framing_length: int = 0
    screws: int = 0
    joint_compound: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "bricks": ("Bricks", "nos"),
        "cement_bags": ("Cement", "bags"),
        "sand_cft": ("Sand", "cft"),
        "gypsum_sheets": ("Gypsum board", "sheets"),
        "plywood_sheets": ("Plywood", "sheets"),
        "glass_area": ("Partition glass", "sqft"),
        "framing_length": ("Metal framing (tracks + studs)", "rft"),
        "screws": ("Drywall screws", "nos"),
        "joint_compound": ("Joint compound", "kg"),
    }


def wall_framing_length(length: float, height: float) -> int:
    """
    Stud-and-track framing in running feet for a partition.

    Top and bottom tracks run the full length; full-height studs every
    ~2 ft plus one end stud.
    """
    tracks = length * 2
    studs = (math.ceil(length / 2) + 1) * height
    return math.ceil(tracks + studs)


def _sheets(area: float, sheet_sqft: float) -> int:
    """Sheets to cover both faces of `area`."""
    return math.ceil((area * SHEET_FACES) / sheet_sqft)


class CivilWallCalculator(BaseCalculator):

    DOMAIN = "civil_wall"
    VARIANTS = WallType
    RESULT = WallRequirement
    SELECTION = WallMaterialSelection
    REQUIRED_DIMENSIONS = ("length", "height")
    BRANCHES = {
        WallType.CIVIL: "_civil",
        WallType.GYPSUM: "_gypsum",
        WallType.PLYWOOD: "_plywood",
        WallType.GYPSUM_GLASS: "_glass_partition",
        WallType.PLYWOOD_GLASS: "_glass_partition",
    }

    def base_result(self, dims: dict) -> WallRequirement:
        return WallRequirement(area=dims["length"] * dims["height"])

    def _civil(self, variant, dims, sub_option, selection):
        area = dims["length"] * dims["height"]
        is_9_inch = sub_option == NINE_INCH
        thickness = THICKNESS_9_INCH_FT if is_9_inch else THICKNESS_4_5_INCH_FT
        waste = selection.wastage_pct / 100

        if is_9_inch:
            bricks_per_sqft = BRICKS_PER_SQFT_9_INCH
            cement_rate = CEMENT_BAGS_PER_100_SQFT_9_INCH
            sand_rate = SAND_CFT_PER_100_SQFT_9_INCH
        else:
            bricks_per_sqft = BRICKS_PER_SQFT_4_5_INCH
            cement_rate = CEMENT_BAGS_PER_100_SQFT_4_5_INCH
            sand_rate = SAND_CFT_PER_100_SQFT_4_5_INCH

        assumptions = [
            "%s brick wall (%.3f ft thick)." % ("9\"" if is_9_inch else "4.5\"", thickness),
        ]
        if waste:
            assumptions.append("%.1f%% wastage on bricks, cement and sand." % selection.wastage_pct)

        return WallRequirement(
            area=area,
            wall_volume=area * thickness,
            bricks=self.apply_waste(area * bricks_per_sqft, waste),
            cement_bags=self.apply_waste((area / 100) * cement_rate, waste),
            sand_cft=self.apply_waste((area / 100) * sand_rate, waste),
            assumptions=tuple(assumptions),
        )

    def _gypsum(self, variant, dims, sub_option, selection):
        length, height = dims["length"], dims["height"]
        area = length * height
        sheets = _sheets(area, GYPSUM_SHEET_SQFT)
        return WallRequirement(
            area=area,
            gypsum_sheets=sheets,
            framing_length=wall_framing_length(length, height),
            screws=sheets * SCREWS_PER_GYPSUM_SHEET,
            joint_compound=self.ceil_count(sheets * JOINT_COMPOUND_PER_SHEET),
            assumptions=("Gypsum board on both faces, studs at ~2 ft centres.",),
        )

    def _plywood(self, variant, dims, sub_option, selection):
        length, height = dims["length"], dims["height"]
        area = length * height
        sheets = _sheets(area, PLYWOOD_SHEET_SQFT)
        return WallRequirement(
            area=area,
            plywood_sheets=sheets,
            framing_length=wall_framing_length(length, height),
            screws=sheets * SCREWS_PER_PLYWOOD_SHEET,
            assumptions=self._plywood_notes(selection),
        )

    def _glass_partition(self, variant, dims, sub_option, selection):
        length, height = dims["length"], dims["height"]
        area = length * height
        solid_area = area * SOLID_SHARE
        glass_part = area * GLASS_SHARE
        assumptions = ("Partition split 50/50 between solid panel and glazing.",)

        gypsum_sheets = plywood_sheets = 0
        if variant is WallType.GYPSUM_GLASS:
            gypsum_sheets = _sheets(solid_area, GYPSUM_SHEET_SQFT)
        else:
            plywood_sheets = _sheets(solid_area, PLYWOOD_SHEET_SQFT)
            assumptions += self._plywood_notes(selection)

        return WallRequirement(
            area=area,
            glass_area=glass_part,
            gypsum_sheets=gypsum_sheets,
            plywood_sheets=plywood_sheets,
            # Framing spans the whole opening, not just the solid half
            framing_length=wall_framing_length(length, height),
            assumptions=assumptions,
        )

    def _plywood_notes(self, selection) -> tuple:
        if selection.plywood_grade:
            return ("Plywood grade: %s." % selection.plywood_grade,)
        return ()


def compute_wall_requirement(wall_type, length, height, sub_option=None,
                             material_selection=None,
                             unknown_variant_policy=None) -> Optional[WallRequirement]:
    """
    Wall requirement for one selection, or None if wall_type, length or height is missing.

    Unrecognized wall types follow the unknown-variant policy: the default
    ("degrade") returns a result with only `area` set.
    """
    calc = CivilWallCalculator()
    return calc.estimate(
        wall_type,
        {"length": length, "height": height},
        sub_option=sub_option,
        material_selection=material_selection,
        unknown_variant_policy=unknown_variant_policy,
    )
