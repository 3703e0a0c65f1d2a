"""
Output data models for beam check results.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict

from .inputs import SectionProperties


class DesignStatus(str, Enum):
    """Status of a beam check."""
    PASS = "pass"
    FAIL = "fail"


class CalculationStep(BaseModel):
    """Single narrative step, rendered verbatim by the caller."""
    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class CalculationResult(BaseModel):
    """Result of one beam calculation.

    Numeric fields are decimal strings fixed to two fractional digits.
    """
    model_config = ConfigDict(frozen=True)

    beam_type: str  # 'simply_supported' or 'cantilever'

    stress: str  # in units.stress_unit
    deflection: str  # in units.deflection_unit
    properties: SectionProperties
    utilization: str  # % of yield, from N/mm² stress
    span_ratio: str
    steps: List[CalculationStep]

    moment: str  # N·mm
    deflection_acceptable: bool
    status: DesignStatus

    @property
    def is_safe(self) -> bool:
        """Stress within yield and deflection within the serviceability limit."""
        return self.status == DesignStatus.PASS
