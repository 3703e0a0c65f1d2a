"""
Cantilever with a point load at distance a from the fixed end.

    M = Pa            σ = M/Z            δ = Pa²(3L - a)/6EI

Differences from the simply supported check:
- the section is validated before any arithmetic
- stress in kPa is reported as N/mm² ÷ 1000
- span/deflection uses the displayed deflection, so its scale follows the
  chosen deflection unit
"""

import logging
from typing import Optional

from beam_check.errors import InvalidInputError
from beam_check.models.inputs import CantileverInput, DesignConstants
from beam_check.models.outputs import CalculationResult
from beam_check.sections import SectionPropertyTable
from beam_check.utils.constants import HOLLOW_CATEGORIES
from beam_check.utils.formatting import format_number

from .engine import Units, coerce_units, evaluate, validate_input
from .formulas import CANTILEVER
from .units import to_base_force, to_base_length

logger = logging.getLogger(__name__)


class CantileverBeamSolver:
    """
    Bending check for a beam fixed at one end with a single point load.
    """

    def __init__(
        self,
        table: Optional[SectionPropertyTable] = None,
        constants: Optional[DesignConstants] = None,
    ):
        self.table = table if table is not None else SectionPropertyTable.default()
        self.constants = constants or DesignConstants()

    def calculate(
        self,
        beam_category: str,
        size_label: str,
        length: float,                  # in units.length_unit
        force: float,                   # in units.force_unit
        distance_from_fixed_end: float,  # in units.distance_unit
        units: Units = None,
    ) -> CalculationResult:
        """
        Stress, deflection and serviceability ratios for one cantilever.

        Args:
            beam_category: Section table category, e.g. 'rhs'
            size_label: Size label within the category
            length: Cantilever length, positive
            force: Point load, positive
            distance_from_fixed_end: Load position, positive and not beyond the length
            units: UnitSelection or mapping of unit strings (defaults to base units)

        Returns:
            CalculationResult with formatted values and six steps

        Raises:
            SectionNotFoundError: category or size label is not in the table
            InvalidUnitError: a unit is not recognised
            InvalidInputError: a numeric input is invalid or the load is off the beam
        """
        section = self.table.lookup(beam_category, size_label)
        if section.uses_major_axis:
            kind = "hollow" if beam_category in HOLLOW_CATEGORIES else "asymmetric"
            logger.debug(
                "Using major-axis properties for %s section %s %s",
                kind, beam_category, size_label,
            )

        units = coerce_units(units)
        inputs = validate_input(
            CantileverInput,
            beam_category=beam_category,
            size_label=size_label,
            length=length,
            force=force,
            distance_from_fixed_end=distance_from_fixed_end,
            units=units,
        )

        length_mm = to_base_length(inputs.length, units.length_unit)
        force_n = to_base_force(inputs.force, units.force_unit)
        distance_mm = to_base_length(
            inputs.distance_from_fixed_end, units.distance_unit, "distance"
        )
        if distance_mm > length_mm:
            raise InvalidInputError(
                f"Load distance {format_number(distance_mm)} mm exceeds "
                f"cantilever length {format_number(length_mm)} mm"
            )
        logger.debug(
            "Cantilever: L=%s mm, P=%s N, a=%s mm", length_mm, force_n, distance_mm
        )

        return evaluate(
            CANTILEVER,
            section,
            inputs.beam_category,
            inputs.size_label,
            length_mm=length_mm,
            force_n=force_n,
            distance_mm=distance_mm,
            units=units,
            constants=self.constants,
        )
