"""
Electrical calculator.

Two ways to size a job:
  points - rooms x outlets per room, each outlet a wiring point
  area   - rule-of-thumb counts from carpet area in sq ft
"""

from typing import ClassVar, Dict, Optional, Tuple

from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum

SWITCH_BOARDS_PER_POINT = 0.2
MCBS_PER_POINT = 0.1

# sq ft served by one unit
SQFT_PER_WIRE_COIL = 100
CONDUITS_PER_100_SQFT = 2
SQFT_PER_SWITCH = 50
SQFT_PER_CABLE_CLIP = 20
SQFT_PER_SOCKET = 200
SQFT_PER_LIGHT_FITTING = 200
SQFT_PER_MCB = 500
SQFT_PER_DISTRIBUTION_BOARD = 5000


class ElectricalMethod(VariantEnum):
    POINTS = "points"
    AREA = "area"


class ElectricalMaterialSelection(MaterialSelection):
    wire_brand: Optional[str] = None
    wire_gauge: Optional[str] = None


class ElectricalRequirement(RequirementResult):
    points: float = 0.0
    wiring_points: int = 0
    switch_boards: int = 0
    wire_coils: int = 0
    conduit_pipes: int = 0
    switches: int = 0
    cable_clips: int = 0
    sockets: int = 0
    light_fittings: int = 0
    mcbs: int = 0
    distribution_boards: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "wiring_points": ("Wiring point", "points"),
        "switch_boards": ("Switch board", "nos"),
        "wire_coils": ("Wire coil (90 m)", "coils"),
        "conduit_pipes": ("PVC conduit pipe", "nos"),
        "switches": ("Modular switch", "nos"),
        "cable_clips": ("Cable clip", "nos"),
        "sockets": ("Socket", "nos"),
        "light_fittings": ("Light fitting", "nos"),
        "mcbs": ("MCB", "nos"),
        "distribution_boards": ("Distribution board", "nos"),
    }


class ElectricalCalculator(BaseCalculator):

    DOMAIN = "electrical"
    VARIANTS = ElectricalMethod
    RESULT = ElectricalRequirement
    SELECTION = ElectricalMaterialSelection
    VARIANT_DIMENSIONS = {
        ElectricalMethod.POINTS: ("rooms", "outlets_per_room"),
        ElectricalMethod.AREA: ("floor_area",),
    }
    BRANCHES = {
        ElectricalMethod.POINTS: "_by_points",
        ElectricalMethod.AREA: "_by_area",
    }

    def base_result(self, dims: dict) -> ElectricalRequirement:
        return ElectricalRequirement()

    def _notes(self, selection) -> tuple:
        notes = []
        if selection.wire_brand:
            notes.append("Wire brand: %s." % selection.wire_brand)
        if selection.wire_gauge:
            notes.append("Wire gauge: %s." % selection.wire_gauge)
        return tuple(notes)

    def _by_points(self, variant, dims, sub_option, selection):
        points = dims["rooms"] * dims["outlets_per_room"]
        return ElectricalRequirement(
            points=points,
            wiring_points=self.ceil_count(points),
            switch_boards=self.ceil_count(points * SWITCH_BOARDS_PER_POINT),
            mcbs=self.ceil_count(points * MCBS_PER_POINT),
            assumptions=("One switch board per 5 points, one MCB per 10.",) + self._notes(selection),
        )

    def _by_area(self, variant, dims, sub_option, selection):
        area = dims["floor_area"]
        return ElectricalRequirement(
            area=area,
            wire_coils=self.ceil_count(area / SQFT_PER_WIRE_COIL),
            conduit_pipes=self.ceil_count((area / 100) * CONDUITS_PER_100_SQFT),
            switches=self.ceil_count(area / SQFT_PER_SWITCH),
            cable_clips=self.ceil_count(area / SQFT_PER_CABLE_CLIP),
            sockets=self.ceil_count(area / SQFT_PER_SOCKET),
            light_fittings=self.ceil_count(area / SQFT_PER_LIGHT_FITTING),
            mcbs=self.ceil_count(area / SQFT_PER_MCB),
            distribution_boards=self.ceil_count(area / SQFT_PER_DISTRIBUTION_BOARD),
            assumptions=("Counts sized from carpet area.",) + self._notes(selection),
        )
