"""
Input data models for beam checks using Pydantic for validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from beam_check.errors import InvalidInputError, InvalidUnitError
from beam_check.utils.constants import (
    DEFLECTION_LIMIT, PROPERTY_DESCRIPTIONS, YIELD_STRESS, YOUNGS_MODULUS
)


class LengthUnit(str, Enum):
    """Units accepted for span and load position."""
    MM = "mm"
    CM = "cm"
    M = "m"


class ForceUnit(str, Enum):
    """Units accepted for the point load."""
    N = "N"
    KN = "kN"
    KG = "kg"  # kilogram-force


class StressUnit(str, Enum):
    """Display units for bending stress."""
    N_PER_MM2 = "N/mm²"
    MPA = "MPa"
    KPA = "kPa"


class DeflectionUnit(str, Enum):
    """Display units for deflection."""
    MM = "mm"
    CM = "cm"
    M = "m"


_UNIT_FIELDS = {
    "length_unit": ("length", LengthUnit),
    "force_unit": ("force", ForceUnit),
    "distance_unit": ("distance", LengthUnit),
    "stress_unit": ("stress", StressUnit),
    "deflection_unit": ("deflection", DeflectionUnit),
}


def _checked_unit(key: str, raw: Any) -> str:
    quantity, enum_cls = _UNIT_FIELDS[key]
    allowed = [member.value for member in enum_cls]
    value = raw.value if isinstance(raw, Enum) else raw
    if value not in allowed:
        raise InvalidUnitError(quantity, raw, allowed)
    return value


class UnitSelection(BaseModel):
    """Unit choices for one calculation call.

    Every field defaults to the base unit, so callers only name the units
    they actually use (the simply supported check never reads
    ``distance_unit``).
    """
    model_config = ConfigDict(frozen=True, use_enum_values=True, validate_default=True)

    length_unit: LengthUnit = LengthUnit.MM
    force_unit: ForceUnit = ForceUnit.N
    distance_unit: LengthUnit = LengthUnit.MM
    stress_unit: StressUnit = StressUnit.N_PER_MM2
    deflection_unit: DeflectionUnit = DeflectionUnit.MM

    def __init__(self, **data: Any) -> None:
        for key, raw in data.items():
            if key in _UNIT_FIELDS:
                data[key] = _checked_unit(key, raw)
        super().__init__(**data)

    @classmethod
    def from_mapping(cls, units: Mapping[str, Any]) -> "UnitSelection":
        """Build a selection from a plain mapping of unit strings.

        Raises:
            InvalidUnitError: a value is not one of the recognised units
            InvalidInputError: a key is not a unit field
        """
        values = {}
        for key, raw in units.items():
            if key not in _UNIT_FIELDS:
                raise InvalidInputError(f"Unknown unit field: {key}")
            values[key] = raw
        return cls(**values)


class SectionProperties(BaseModel):
    """Geometric properties of one beam size, as held in the section table.

    Symmetric sections carry ``I``/``Z``; asymmetric and rectangular hollow
    sections may carry only the major-axis ``I_major``/``Z_major``.  Any
    other columns in the table (area, mass, dimensions) are kept as extras.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    I: Optional[float] = Field(None, description="Moment of inertia in mm⁴")
    I_major: Optional[float] = Field(None, description="Major-axis moment of inertia in mm⁴")
    Z: Optional[float] = Field(None, description="Section modulus in mm³")
    Z_major: Optional[float] = Field(None, description="Major-axis section modulus in mm³")

    @model_validator(mode="after")
    def _check_bending_properties(self) -> "SectionProperties":
        if not (self.I or self.I_major):
            raise ValueError("section needs a nonzero I or I_major")
        if not (self.Z or self.Z_major):
            raise ValueError("section needs a nonzero Z or Z_major")
        for name in ("I", "I_major", "Z", "Z_major"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative")
        return self

    @property
    def moment_of_inertia(self) -> float:
        """I, falling back to I_major (mm⁴)."""
        return self.I or self.I_major

    @property
    def section_modulus(self) -> float:
        """Z, falling back to Z_major (mm³)."""
        return self.Z or self.Z_major

    @property
    def uses_major_axis(self) -> bool:
        """True when either bending property came from a major-axis column."""
        return not self.I or not self.Z

    def rows(self) -> Iterator[Tuple[str, Any, str]]:
        """Yield (property, value, description) for every value present."""
        for key, value in self.model_dump(exclude_none=True).items():
            yield key, value, PROPERTY_DESCRIPTIONS.get(key, key)


class DesignConstants(BaseModel):
    """Material and serviceability constants for generic mild steel."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    youngs_modulus: float = Field(
        default=YOUNGS_MODULUS,
        gt=0,
        allow_inf_nan=False,
        description="Young's modulus E in N/mm²"
    )
    yield_stress: float = Field(
        default=YIELD_STRESS,
        gt=0,
        allow_inf_nan=False,
        description="Stress used as 100% utilization in N/mm²"
    )
    deflection_limit: float = Field(
        default=DEFLECTION_LIMIT,
        gt=0,
        allow_inf_nan=False,
        description="Minimum acceptable span/deflection ratio"
    )


class SimplySupportedInput(BaseModel):
    """Central point load on a beam supported at both ends."""
    model_config = ConfigDict(frozen=True)

    beam_category: str = Field(..., min_length=1)
    size_label: str = Field(..., min_length=1)
    length: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Span in units.length_unit"
    )
    force: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Point load in units.force_unit"
    )
    units: UnitSelection = Field(default_factory=UnitSelection)


class CantileverInput(SimplySupportedInput):
    """Point load at a distance from the fixed end of a cantilever."""
    distance_from_fixed_end: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Load position from the support in units.distance_unit"
    )
