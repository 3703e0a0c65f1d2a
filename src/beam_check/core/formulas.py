"""
Closed-form point-load formulas for each support arrangement.

Each arrangement is a BeamFormulas record: the moment and deflection
functions plus the bits of narrative text and output behaviour that differ
between the two checks.  The shared engine and narrative builder are driven
entirely by these records.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from beam_check.utils.formatting import format_number


@dataclass(frozen=True)
class BeamFormulas:
    """Formula provider for one support arrangement."""
    name: str

    # (force N, length mm, distance mm) -> moment N·mm
    moment: Callable[[float, float, Optional[float]], float]
    # (force N, length mm, distance mm, E N/mm², I mm⁴) -> deflection mm
    deflection: Callable[[float, float, Optional[float], float, float], float]

    # kPa display divides by 1000 instead of multiplying
    invert_kpa: bool
    # span/deflection uses deflection recovered to mm, not the display value
    span_ratio_in_mm: bool

    moment_intro: str
    moment_formula: str
    # (force N, length mm, distance mm) -> substitution line
    moment_substitution: Callable[[float, float, Optional[float]], str]
    deflection_formula: str


def _simply_supported_moment(force, length, distance=None):
    # M = PL/4
    return force * length / 4


def _simply_supported_deflection(force, length, distance, E, I):
    # δ = PL³/48EI
    return (force * length ** 3) / (48 * E * I)


def _cantilever_moment(force, length, distance):
    # M = Pa
    return force * distance


def _cantilever_deflection(force, length, distance, E, I):
    # δ = Pa²(3L - a)/6EI, deflection at the free end
    return (force * distance ** 2 * (3 * length - distance)) / (6 * E * I)


SIMPLY_SUPPORTED = BeamFormulas(
    name="simply_supported",
    moment=_simply_supported_moment,
    deflection=_simply_supported_deflection,
    invert_kpa=False,
    span_ratio_in_mm=True,
    moment_intro="For a simply supported beam with point load at center:",
    moment_formula="M = Force × Length / 4",
    moment_substitution=lambda force, length, distance: (
        f"M = {format_number(force)} N × {format_number(length)} mm / 4"
    ),
    deflection_formula="δ = (Force × Length³) / (48 × Young's Modulus × I)",
)

CANTILEVER = BeamFormulas(
    name="cantilever",
    moment=_cantilever_moment,
    deflection=_cantilever_deflection,
    invert_kpa=True,
    span_ratio_in_mm=False,
    moment_intro="For a cantilever beam with point load at distance from fixed end:",
    moment_formula="M = Force × Distance",
    moment_substitution=lambda force, length, distance: (
        f"M = {format_number(force)} N × {format_number(distance)} mm"
    ),
    deflection_formula=(
        "δ = (Force × Distance² × (3 × Length - Distance)) / "
        "(6 × Young's Modulus × I)"
    ),
)
