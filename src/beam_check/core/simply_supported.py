"""
Simply supported beam with a central point load.

    M = PL/4            σ = M/Z            δ = PL³/48EI

Stress in kPa is reported as N/mm² × 1000 and the span/deflection ratio is
always taken in mm, whatever deflection unit is displayed.
"""

import logging
from typing import Optional

from beam_check.models.inputs import DesignConstants, SimplySupportedInput
from beam_check.models.outputs import CalculationResult
from beam_check.sections import SectionPropertyTable

from .engine import Units, coerce_units, evaluate, validate_input
from .formulas import SIMPLY_SUPPORTED
from .units import to_base_force, to_base_length

logger = logging.getLogger(__name__)


class SimplySupportedBeamSolver:
    """
    Bending check for a beam on two supports with a load at mid-span.
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
        length: float,   # span in units.length_unit
        force: float,    # load in units.force_unit
        units: Units = None,
    ) -> CalculationResult:
        """
        Stress, deflection and serviceability ratios for one beam.

        Args:
            beam_category: Section table category, e.g. 'universal_beam'
            size_label: Size label within the category, e.g. '203x133x25'
            length: Span, positive
            force: Central point load, positive
            units: UnitSelection or mapping of unit strings (defaults to base units)

        Returns:
            CalculationResult with formatted values and six steps

        Raises:
            InvalidUnitError: a unit is not recognised
            InvalidInputError: length or force is not a positive finite number
            SectionNotFoundError: category or size label is not in the table
        """
        units = coerce_units(units)
        inputs = validate_input(
            SimplySupportedInput,
            beam_category=beam_category,
            size_label=size_label,
            length=length,
            force=force,
            units=units,
        )

        length_mm = to_base_length(inputs.length, units.length_unit)
        force_n = to_base_force(inputs.force, units.force_unit)
        logger.debug("Simply supported: L=%s mm, P=%s N", length_mm, force_n)

        section = self.table.lookup(inputs.beam_category, inputs.size_label)

        return evaluate(
            SIMPLY_SUPPORTED,
            section,
            inputs.beam_category,
            inputs.size_label,
            length_mm=length_mm,
            force_n=force_n,
            distance_mm=None,
            units=units,
            constants=self.constants,
        )
