"""
Step-by-step narrative shown alongside the numeric results.

The six titles are fixed; the content embeds the formula text and the
substituted values.  Callers render the text verbatim, so the wording is
part of the result.
"""

from typing import List, Optional

from beam_check.models.inputs import DesignConstants
from beam_check.models.outputs import CalculationStep
from beam_check.utils.formatting import format_fixed, format_number

from .formulas import BeamFormulas


STEP_TITLES = (
    "Step 1: Identify Beam Properties",
    "Step 2: Calculate Bending Moment",
    "Step 3: Calculate Bending Stress",
    "Step 4: Calculate Deflection",
    "Step 5: Check Stress Utilization",
    "Step 6: Check Deflection Criteria",
)


def category_label(beam_category: str) -> str:
    """'universal_beam' -> 'UNIVERSAL BEAM' (first underscore only)."""
    return beam_category.replace("_", " ", 1).upper()


def build_steps(
    formulas: BeamFormulas,
    beam_category: str,
    size_label: str,
    length: float,           # mm
    force: float,            # N
    distance: Optional[float],  # mm, cantilever only
    moment: float,           # N·mm
    stress: float,           # N/mm²
    deflection: float,       # display unit
    utilization: float,      # %
    span_ratio: float,
    acceptable: bool,
    constants: DesignConstants,
) -> List[CalculationStep]:
    """
    Build the six calculation steps for one result.

    Args:
        formulas: Formula provider for the support arrangement
        beam_category: Section table category as supplied by the caller
        size_label: Section size label
        length: Span in mm
        force: Point load in N
        distance: Load distance from the fixed end in mm (cantilever)
        moment: Bending moment in N·mm
        stress: Bending stress in N/mm²
        deflection: Deflection in the requested display unit
        utilization: Stress utilization in percent
        span_ratio: Span/deflection ratio as reported
        acceptable: Whether the span ratio meets the limit
        constants: Yield stress and deflection limit quoted in the text

    Returns:
        Ordered list of six CalculationStep
    """
    fy = format_number(constants.yield_stress)
    limit = format_number(constants.deflection_limit)
    L = format_number(length)

    contents = (
        f"Selected {category_label(beam_category)} with size {size_label}",

        "\n".join([
            formulas.moment_intro,
            formulas.moment_formula,
            formulas.moment_substitution(force, length, distance),
            f"M = {format_fixed(moment)} N·mm",
        ]),

        "\n".join([
            "σ = Moment / Section Modulus",
            f"σ = {format_fixed(moment)} N·mm / Z",
            f"σ = {format_fixed(stress)} N/mm²",
        ]),

        "\n".join([
            formulas.deflection_formula,
            f"δ = {format_fixed(deflection)} mm",
        ]),

        "\n".join([
            f"Using typical yield strength of {fy} N/mm² for mild steel:",
            f"Utilization = ({format_fixed(stress)} / {fy}) × 100%",
            f"Utilization = {format_fixed(utilization)}%",
        ]),

        "\n".join([
            f"Span/Deflection = {L} / {format_fixed(deflection)} = {format_fixed(span_ratio)}",
            f"Typical limit for serviceability: L/{limit} = "
            f"{format_fixed(length / constants.deflection_limit)} mm",
            f"Deflection is {'acceptable' if acceptable else 'excessive'}",
        ]),
    )

    return [
        CalculationStep(title=title, content=content)
        for title, content in zip(STEP_TITLES, contents)
    ]
