# Data models for beam checks
from .inputs import (
    UnitSelection, SectionProperties, DesignConstants,
    SimplySupportedInput, CantileverInput,
    LengthUnit, ForceUnit, StressUnit, DeflectionUnit
)
from .outputs import CalculationResult, CalculationStep, DesignStatus
