"""
Shared calculation pipeline for both support arrangements.

Coordinates the workflow once inputs are in base units:
1. Resolve I and Z from the section properties
2. Moment, stress and deflection in base units
3. Display conversion of stress and deflection
4. Utilization and span/deflection ratio
5. Step narrative
"""

import logging
from collections.abc import Mapping
from typing import Optional, Union

from pydantic import ValidationError

from beam_check.errors import InvalidInputError
from beam_check.models.inputs import DesignConstants, SectionProperties, UnitSelection
from beam_check.models.outputs import CalculationResult, DesignStatus
from beam_check.utils.formatting import format_fixed

from .formulas import BeamFormulas
from .narrative import build_steps
from .units import deflection_to_mm, to_display_deflection, to_display_stress

logger = logging.getLogger(__name__)


Units = Union[UnitSelection, Mapping, None]


def coerce_units(units: Units) -> UnitSelection:
    """Accept a UnitSelection, a plain mapping of unit strings, or None."""
    if units is None:
        return UnitSelection()
    if isinstance(units, UnitSelection):
        return units
    if isinstance(units, Mapping):
        return UnitSelection.from_mapping(units)
    raise InvalidInputError(f"Unsupported units record: {type(units).__name__}")


def validate_input(model, **values):
    """Build an input model, reporting bad values as InvalidInputError."""
    try:
        return model(**values)
    except ValidationError as exc:
        raise InvalidInputError(str(exc)) from exc


def is_deflection_acceptable(span_ratio: float, limit: float) -> bool:
    """Serviceability check: span/deflection of at least ``limit``."""
    return span_ratio >= limit


def evaluate(
    formulas: BeamFormulas,
    section: SectionProperties,
    beam_category: str,
    size_label: str,
    length_mm: float,
    force_n: float,
    distance_mm: Optional[float],
    units: UnitSelection,
    constants: DesignConstants,
) -> CalculationResult:
    """
    Evaluate one beam in base units and build the result.

    Args:
        formulas: Formula provider for the support arrangement
        section: Section properties from the table
        beam_category: Category name, echoed in the narrative
        size_label: Size label, echoed in the narrative
        length_mm: Span in mm
        force_n: Point load in N
        distance_mm: Load distance from the fixed end in mm, or None
        units: Display units for stress and deflection
        constants: E, yield stress and deflection limit

    Returns:
        CalculationResult with formatted fields and six steps
    """
    I = section.moment_of_inertia
    Z = section.section_modulus
    E = constants.youngs_modulus

    moment = formulas.moment(force_n, length_mm, distance_mm)
    base_stress = moment / Z
    deflection_mm = formulas.deflection(force_n, length_mm, distance_mm, E, I)

    stress = to_display_stress(base_stress, units.stress_unit, formulas.invert_kpa)
    deflection = to_display_deflection(deflection_mm, units.deflection_unit)

    utilization = (base_stress / constants.yield_stress) * 100

    if formulas.span_ratio_in_mm:
        span_ratio = length_mm / deflection_to_mm(deflection, units.deflection_unit)
    else:
        # cantilever ratio is taken against the displayed deflection
        span_ratio = length_mm / deflection

    acceptable = is_deflection_acceptable(span_ratio, constants.deflection_limit)
    ok = acceptable and utilization <= 100

    logger.debug(
        "%s %s %s: M=%.6g N·mm, σ=%.6g N/mm², δ=%.6g mm, U=%.4g%%, L/δ=%.6g",
        formulas.name, beam_category, size_label,
        moment, base_stress, deflection_mm, utilization, span_ratio,
    )

    steps = build_steps(
        formulas,
        beam_category,
        size_label,
        length=length_mm,
        force=force_n,
        distance=distance_mm,
        moment=moment,
        stress=base_stress,
        deflection=deflection,
        utilization=utilization,
        span_ratio=span_ratio,
        acceptable=acceptable,
        constants=constants,
    )

    return CalculationResult(
        beam_type=formulas.name,
        stress=format_fixed(stress),
        deflection=format_fixed(deflection),
        properties=section,
        utilization=format_fixed(utilization),
        span_ratio=format_fixed(span_ratio),
        steps=steps,
        moment=format_fixed(moment),
        deflection_acceptable=acceptable,
        status=DesignStatus.PASS if ok else DesignStatus.FAIL,
    )
