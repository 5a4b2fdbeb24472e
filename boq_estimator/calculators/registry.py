"""
Calculator registry: maps estimator domain keys to calculator classes.
"""

import logging

from .base import BaseCalculator
from .blinds import BlindsCalculator
from .civil_wall import CivilWallCalculator
from .doors import DoorsCalculator
from .electrical import ElectricalCalculator
from .fire_fighting import FireFightingCalculator
from .flooring import FlooringCalculator
from .painting import PaintingCalculator
from .plumbing import PlumbingCalculator

logger = logging.getLogger(__name__)

CALCULATOR_REGISTRY: dict[str, type] = {
    "civil_wall": CivilWallCalculator,
    "doors": DoorsCalculator,
    "flooring": FlooringCalculator,
    "electrical": ElectricalCalculator,
    "plumbing": PlumbingCalculator,
    "fire_fighting": FireFightingCalculator,
    "painting": PaintingCalculator,
    "blinds": BlindsCalculator,
}


def get_calculator(domain: str, **kwargs) -> BaseCalculator:
    """Returns an instance of the calculator for a domain, or raises ValueError."""
    if domain not in CALCULATOR_REGISTRY:
        logger.info("No calculator for domain %r", domain)
        raise ValueError(
            f"No calculator registered for domain: {domain}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[domain](**kwargs)


def has_calculator(domain: str) -> bool:
    """Check if a calculator exists for a domain."""
    return domain in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered estimator domains."""
    return list(CALCULATOR_REGISTRY.keys())


def describe_calculators() -> list[dict]:
    """Per domain: its variants and the dimensions each variant needs."""
    described = []
    for domain, calc_class in CALCULATOR_REGISTRY.items():
        variants = []
        for variant in calc_class.VARIANTS:
            required = list(calc_class.REQUIRED_DIMENSIONS)
            required += list(calc_class.VARIANT_DIMENSIONS.get(variant, ()))
            variants.append({"variant": variant.value, "required_dimensions": required})
        described.append({
            "domain": domain,
            "variants": variants,
            "optional_dimensions": dict(calc_class.OPTIONAL_DIMENSIONS),
            "line_items": {
                field: {"description": description, "unit": unit}
                for field, (description, unit) in calc_class.RESULT.LINE_ITEMS.items()
            },
        })
    return described
