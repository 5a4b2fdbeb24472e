"""
Abstract base class and shared types for all estimator calculators.

Input:  variant + dimensions dict + optional sub-option + material selection
Output: a frozen RequirementResult subclass, or None when input is insufficient
"""

import enum
import logging
import math
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel

from ..config import settings

logger = logging.getLogger(__name__)


class UnknownVariantPolicy(str, enum.Enum):
    DEGRADE = "degrade"   # base result, counts at zero
    REJECT = "reject"     # raise UnknownVariantError


class UnknownVariantError(ValueError):
    """Raised under the reject policy when a variant is not in the domain's enum."""

    def __init__(self, domain: str, value, allowed: list):
        self.domain = domain
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown {domain} variant: {value!r}. Allowed: {self.allowed}"
        )


class VariantEnum(str, enum.Enum):
    """Closed set of construction types for one domain."""

    @classmethod
    def parse(cls, value):
        """Member for a raw value, or None when the value is not recognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]


class MaterialSelection(BaseModel):
    """Recognized material options for a domain. Unknown keys are rejected."""

    class Config:
        extra = "forbid"
        frozen = True


class RequirementResult(BaseModel):
    """
    Material requirement for one estimate.

    Subclasses declare the superset of fields for every branch of their
    domain; whatever the executed branch doesn't set stays at zero.
    """

    area: float = 0.0
    assumptions: Tuple[str, ...] = ()

    # count field -> (description, unit), rendered as BOQ line items
    LINE_ITEMS: ClassVar[Dict[str, Tuple[str, str]]] = {}

    class Config:
        frozen = True

    @classmethod
    def count_fields(cls) -> list:
        """Names of the ceiling-rounded (int) fields."""
        return [name for name, field in cls.model_fields.items() if field.annotation is int]

    def line_items(self) -> list:
        """Non-zero counts as [{field, description, unit, quantity}, ...]."""
        items = []
        for field, (description, unit) in self.LINE_ITEMS.items():
            quantity = getattr(self, field)
            if quantity:
                items.append({
                    "field": field,
                    "description": description,
                    "unit": unit,
                    "quantity": quantity,
                })
        return items


class BaseCalculator(ABC):
    """All domain estimators inherit from this."""

    DOMAIN = ""
    VARIANTS = VariantEnum
    RESULT = RequirementResult
    SELECTION = MaterialSelection

    # Dimensions every variant needs; a missing one means "no estimate yet"
    REQUIRED_DIMENSIONS: Tuple[str, ...] = ()
    # name -> default when absent
    OPTIONAL_DIMENSIONS: Dict[str, float] = {}
    # variant -> extra dimensions only that variant needs
    VARIANT_DIMENSIONS: dict = {}
    # variant -> name of the method computing it, called as
    # method(variant, dims, sub_option, selection); must cover every member
    BRANCHES: dict = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        missing = [v.value for v in cls.VARIANTS if v not in cls.BRANCHES]
        if missing:
            raise TypeError(f"{cls.__name__} has no branch for variant(s): {missing}")
        for variant, method_name in cls.BRANCHES.items():
            if not callable(getattr(cls, method_name, None)):
                raise TypeError(
                    f"{cls.__name__}.{method_name} (branch for {variant.value!r}) is not a method"
                )

    def __init__(self, unknown_variant_policy: Optional[str] = None):
        self.unknown_variant_policy = unknown_variant_policy

    @abstractmethod
    def base_result(self, dims: dict) -> RequirementResult:
        """Result returned for an unrecognized variant under the degrade policy."""

    def estimate(self, variant, dimensions: Optional[dict] = None,
                 sub_option: Optional[str] = None, material_selection=None,
                 unknown_variant_policy: Optional[str] = None) -> Optional[RequirementResult]:
        """
        Compute the material requirement for one selection.

        Returns None when the variant or a required dimension is missing.
        Unrecognized variants follow the unknown-variant policy.
        """
        if not variant:
            return None
        dimensions = dimensions or {}

        dims = self._collect_dimensions(dimensions, self.REQUIRED_DIMENSIONS)
        if dims is None:
            return None
        for name, default in self.OPTIONAL_DIMENSIONS.items():
            value = self.parse_dimension(dimensions.get(name))
            dims[name] = default if value is None else value

        selection = self.parse_selection(material_selection)

        kind = self.VARIANTS.parse(variant)
        if kind is None:
            return self._unknown_variant(variant, dims, unknown_variant_policy)

        extra = self._collect_dimensions(dimensions, self.VARIANT_DIMENSIONS.get(kind, ()))
        if extra is None:
            return None
        dims.update(extra)

        logger.debug("%s estimate: variant=%s dims=%s sub_option=%r",
                     self.DOMAIN, kind.value, dims, sub_option)
        branch = getattr(self, self.BRANCHES[kind])
        return branch(kind, dims, sub_option, selection)

    def resolve_policy(self, override: Optional[str] = None) -> UnknownVariantPolicy:
        """Per-call override, then this instance's policy, then settings."""
        policy = override or self.unknown_variant_policy or settings.UNKNOWN_VARIANT_POLICY
        return UnknownVariantPolicy(policy)

    def _unknown_variant(self, variant, dims: dict, override: Optional[str]):
        policy = self.resolve_policy(override)
        if policy is UnknownVariantPolicy.REJECT:
            raise UnknownVariantError(self.DOMAIN, variant, self.VARIANTS.values())
        logger.warning("Unknown %s variant %r, returning base result (allowed: %s)",
                       self.DOMAIN, variant, self.VARIANTS.values())
        return self.base_result(dims)

    def _collect_dimensions(self, dimensions: dict, names) -> Optional[dict]:
        collected = {}
        for name in names:
            value = self.parse_dimension(dimensions.get(name))
            if value is None:
                return None
            collected[name] = value
        return collected

    def parse_selection(self, material_selection) -> MaterialSelection:
        """Validate a dict (or pass through a model) into this domain's selection type."""
        if material_selection is None:
            return self.SELECTION()
        if isinstance(material_selection, self.SELECTION):
            return material_selection
        return self.SELECTION.model_validate(material_selection)

    # --- Helper methods for all calculators ---

    def parse_number(self, value, default=None):
        """Parse a numeric value from user input. Handles strings like '10', '10.5'."""
        if value is None:
            return default
        try:
            return float(str(value).strip())
        except (ValueError, TypeError):
            return default

    def parse_dimension(self, value):
        """
        A dimension as a number, or None when it is missing.

        Missing means absent, empty, unparseable, zero or NaN. Negative values
        are passed through untouched; validating them is the caller's job.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            number = value
        else:
            number = self.parse_number(value)
        if number is None or number == 0 or math.isnan(number):
            return None
        return number

    def ceil_count(self, quantity: float) -> int:
        """Round a material count UP. Never under-order."""
        return math.ceil(quantity)

    def apply_waste(self, quantity: float, waste_factor: float) -> int:
        """Apply waste factor to a quantity. Always round UP to next whole unit."""
        # 1200 * 1.12 is 1344.0000000000002 in floats
        return math.ceil(round(quantity * (1 + waste_factor), 9))

    def whole_units(self, count: float) -> int:
        """Number of physical units (doors, blinds, fixtures) for a possibly fractional count."""
        return math.ceil(count)
