"""
Plumbing calculator.

Input: run_length (ft of supply line) and number of fixtures.
Pipe is bought in stock lengths; every fixture takes two elbows, a valve
and (after the first) a tee off the main run.
"""

import math
from typing import ClassVar, Dict, Optional, Tuple

from .base import BaseCalculator, MaterialSelection, RequirementResult, VariantEnum

STOCK_LENGTH_FT = {
    "cpvc": 10,
    "upvc": 10,
    "gi": 20,
}
ELBOWS_PER_FIXTURE = 2
CLAMP_SPACING_FT = 3
JOINTS_PER_CEMENT_TIN = 25
JOINTS_PER_TAPE_ROLL = 10


class PipeMaterial(VariantEnum):
    CPVC = "cpvc"
    UPVC = "upvc"
    GI = "gi"


class PlumbingMaterialSelection(MaterialSelection):
    pipe_diameter: Optional[str] = None
    brand: Optional[str] = None


class PlumbingRequirement(RequirementResult):
    run_length: float = 0.0
    pipe_lengths: int = 0
    elbows: int = 0
    tees: int = 0
    valves: int = 0
    clamps: int = 0
    solvent_cement_tins: int = 0
    thread_tape_rolls: int = 0

    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {
        "pipe_lengths": ("Pipe (stock length)", "nos"),
        "elbows": ("Elbow", "nos"),
        "tees": ("Tee", "nos"),
        "valves": ("Ball valve", "nos"),
        "clamps": ("Pipe clamp", "nos"),
        "solvent_cement_tins": ("Solvent cement", "tins"),
        "thread_tape_rolls": ("Thread seal tape", "rolls"),
    }


class PlumbingCalculator(BaseCalculator):

    DOMAIN = "plumbing"
    VARIANTS = PipeMaterial
    RESULT = PlumbingRequirement
    SELECTION = PlumbingMaterialSelection
    REQUIRED_DIMENSIONS = ("run_length", "fixtures")
    BRANCHES = {
        PipeMaterial.CPVC: "_solvent_welded",
        PipeMaterial.UPVC: "_solvent_welded",
        PipeMaterial.GI: "_threaded",
    }

    def base_result(self, dims: dict) -> PlumbingRequirement:
        return PlumbingRequirement(run_length=dims["run_length"])

    def _pipe_and_fittings(self, variant, dims, selection) -> dict:
        run_length = dims["run_length"]
        fixtures = self.whole_units(dims["fixtures"])
        stock = STOCK_LENGTH_FT[variant.value]
        assumptions = ["%s pipe in %d ft lengths." % (variant.value.upper(), stock)]
        if selection.pipe_diameter:
            assumptions.append("Pipe diameter: %s." % selection.pipe_diameter)
        if selection.brand:
            assumptions.append("Brand: %s." % selection.brand)
        return {
            "run_length": run_length,
            "pipe_lengths": self.ceil_count(run_length / stock),
            "elbows": fixtures * ELBOWS_PER_FIXTURE,
            "tees": max(fixtures - 1, 0),
            "valves": fixtures,
            "clamps": self.ceil_count(run_length / CLAMP_SPACING_FT),
            "assumptions": assumptions,
        }

    def _solvent_welded(self, variant, dims, sub_option, selection):
        fields = self._pipe_and_fittings(variant, dims, selection)
        joints = fields["pipe_lengths"] + fields["elbows"] + fields["tees"]
        fields["solvent_cement_tins"] = math.ceil(joints / JOINTS_PER_CEMENT_TIN)
        fields["assumptions"] = tuple(fields["assumptions"])
        return PlumbingRequirement(**fields)

    def _threaded(self, variant, dims, sub_option, selection):
        fields = self._pipe_and_fittings(variant, dims, selection)
        threaded_joints = fields["elbows"] + fields["tees"]
        fields["thread_tape_rolls"] = math.ceil(threaded_joints / JOINTS_PER_TAPE_ROLL)
        fields["assumptions"] = tuple(fields["assumptions"])
        return PlumbingRequirement(**fields)
