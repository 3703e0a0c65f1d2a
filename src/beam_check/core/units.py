"""
Unit conversion at the calculation boundaries.

Inputs are converted to base units (mm, N) before any formula is evaluated;
results are converted from base units (N/mm², mm) only for display.
Unrecognised units raise InvalidUnitError instead of passing through
unconverted.
"""

from beam_check.errors import InvalidUnitError
from beam_check.utils.constants import (
    DEFLECTION_FACTORS, FORCE_FACTORS, LENGTH_FACTORS, STRESS_FACTORS
)


def _factor(table: dict, unit, quantity: str) -> float:
    try:
        return table[unit]
    except (KeyError, TypeError):
        raise InvalidUnitError(quantity, unit, table) from None


def to_base_length(value: float, unit: str, quantity: str = "length") -> float:
    """Length in ``unit`` to mm."""
    return value * _factor(LENGTH_FACTORS, unit, quantity)


def to_base_force(value: float, unit: str) -> float:
    """Force in ``unit`` to N (``kg`` is kilogram-force)."""
    return value * _factor(FORCE_FACTORS, unit, "force")


def to_display_stress(stress: float, unit: str, invert_kpa: bool = False) -> float:
    """
    Stress in N/mm² to the display unit.

    N/mm² and MPa are identical.  For kPa the simply supported check
    multiplies by 1000 while the cantilever check divides by 1000;
    ``invert_kpa`` selects the dividing behaviour.
    """
    factor = _factor(STRESS_FACTORS, unit, "stress")
    if invert_kpa:
        return stress / factor
    return stress * factor


def to_display_deflection(deflection_mm: float, unit: str) -> float:
    """Deflection in mm to the display unit."""
    return deflection_mm / _factor(DEFLECTION_FACTORS, unit, "deflection")


def deflection_to_mm(deflection: float, unit: str) -> float:
    """Recover a display deflection back to mm."""
    return deflection * _factor(DEFLECTION_FACTORS, unit, "deflection")
