# beam_check - bending stress and deflection checks for steel beams
"""
BEAM-CHECK: Point-Load Checks for Steel Beams
=============================================

Quick structural checks of simply supported beams and cantilevers under a
single point load, using section properties from a steel section table.

    errors.py       Exception taxonomy
    models/         Pydantic input and output records
    core/           Unit conversion, formulas, narrative and the two solvers
    sections.py     Section property table (packaged YAML)
    config.py       YAML loading for sections and design constants
    cli.py          Command-line interface
"""

from .errors import (
    BeamCheckError, SectionNotFoundError, InvalidUnitError,
    InvalidInputError, ConfigurationError
)
from .models import (
    UnitSelection, SectionProperties, DesignConstants,
    CalculationResult, CalculationStep, DesignStatus
)
from .sections import SectionPropertyTable
from .core import SimplySupportedBeamSolver, CantileverBeamSolver

__version__ = "0.1.0"
