"""Command-line interface for beam checks.

Usage::

    beam-check simply-supported universal_beam 203x133x25 --length 4 --length-unit m --force 10 --force-unit kN
    beam-check cantilever rhs 200x100x8 --length 2000 --force 5000 --distance 1500
    beam-check sizes [CATEGORY]
    beam-check properties CATEGORY SIZE
"""

from __future__ import annotations

import logging

import click

from .config import load_design_constants
from .core import CantileverBeamSolver, SimplySupportedBeamSolver
from .errors import BeamCheckError
from .models import (
    CalculationResult, DeflectionUnit, ForceUnit, LengthUnit, StressUnit, UnitSelection
)
from .sections import SectionPropertyTable
from .utils.formatting import format_number


def _choices(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls])


def _fail(exc: Exception) -> None:
    click.secho(f"Error: {exc}", fg="red", err=True)
    raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="beam-check")
@click.option(
    "--sections", "sections_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML section table to use instead of the packaged one.",
)
@click.option(
    "--constants", "constants_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file overriding youngs_modulus, yield_stress, deflection_limit.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log calculation details.")
@click.pass_context
def main(ctx: click.Context, sections_path: str | None, constants_path: str | None,
         verbose: bool) -> None:
    """Bending stress and deflection checks for steel beams."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        table = (
            SectionPropertyTable.from_yaml(sections_path)
            if sections_path else SectionPropertyTable.default()
        )
        constants = load_design_constants(constants_path)
    except (BeamCheckError, FileNotFoundError) as exc:
        _fail(exc)

    ctx.obj = {"table": table, "constants": constants}


def _unit_options(func):
    """Display unit options shared by both checks."""
    func = click.option(
        "--deflection-unit", type=_choices(DeflectionUnit), default="mm", show_default=True
    )(func)
    func = click.option(
        "--stress-unit", type=_choices(StressUnit), default="N/mm²", show_default=True
    )(func)
    func = click.option(
        "--force-unit", type=_choices(ForceUnit), default="N", show_default=True
    )(func)
    func = click.option(
        "--length-unit", type=_choices(LengthUnit), default="mm", show_default=True
    )(func)
    func = click.option("--force", type=float, required=True, help="Point load.")(func)
    func = click.option("--length", type=float, required=True, help="Beam length.")(func)
    func = click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")(func)
    func = click.option(
        "--steps/--no-steps", default=True, show_default=True,
        help="Print the step-by-step calculation.",
    )(func)
    return func


def _echo_result(result: CalculationResult, units: UnitSelection, steps: bool,
                 as_json: bool) -> None:
    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    click.secho("=" * 60, bold=True)
    click.secho(f"  {result.beam_type.replace('_', ' ').upper()} BEAM CHECK", bold=True)
    click.secho("=" * 60, bold=True)
    click.echo(f"  Bending moment    : {result.moment} N·mm")
    click.echo(f"  Bending stress    : {result.stress} {units.stress_unit}")
    click.echo(f"  Deflection        : {result.deflection} {units.deflection_unit}")
    click.echo(f"  Utilization       : {result.utilization} %")
    click.echo(f"  Span / deflection : {result.span_ratio}")
    click.echo("  Status            : ", nl=False)
    click.secho(result.status.value.upper(), fg="green" if result.is_safe else "red")

    if steps:
        for step in result.steps:
            click.echo("")
            click.secho(step.title, bold=True)
            click.echo(step.content)


# ---------------------------------------------------------------------------
# simply-supported
# ---------------------------------------------------------------------------

@main.command("simply-supported")
@click.argument("category")
@click.argument("size")
@_unit_options
@click.pass_obj
def simply_supported(obj, category, size, length, force, length_unit, force_unit,
                     stress_unit, deflection_unit, as_json, steps) -> None:
    """Central point load on a beam supported at both ends."""
    units = UnitSelection(
        length_unit=length_unit,
        force_unit=force_unit,
        stress_unit=stress_unit,
        deflection_unit=deflection_unit,
    )
    solver = SimplySupportedBeamSolver(obj["table"], obj["constants"])
    try:
        result = solver.calculate(category, size, length, force, units)
    except BeamCheckError as exc:
        _fail(exc)
    _echo_result(result, units, steps, as_json)


# ---------------------------------------------------------------------------
# cantilever
# ---------------------------------------------------------------------------

@main.command()
@click.argument("category")
@click.argument("size")
@_unit_options
@click.option("--distance", type=float, required=True,
              help="Load distance from the fixed end.")
@click.option("--distance-unit", type=_choices(LengthUnit), default="mm", show_default=True)
@click.pass_obj
def cantilever(obj, category, size, length, force, length_unit, force_unit,
               stress_unit, deflection_unit, as_json, steps, distance,
               distance_unit) -> None:
    """Point load on a cantilever at a distance from the fixed end."""
    units = UnitSelection(
        length_unit=length_unit,
        force_unit=force_unit,
        distance_unit=distance_unit,
        stress_unit=stress_unit,
        deflection_unit=deflection_unit,
    )
    solver = CantileverBeamSolver(obj["table"], obj["constants"])
    try:
        result = solver.calculate(category, size, length, force, distance, units)
    except BeamCheckError as exc:
        _fail(exc)
    _echo_result(result, units, steps, as_json)


# ---------------------------------------------------------------------------
# sizes / properties
# ---------------------------------------------------------------------------

@main.command()
@click.argument("category", required=False)
@click.pass_obj
def sizes(obj, category: str | None) -> None:
    """List section categories, or the sizes in CATEGORY."""
    table: SectionPropertyTable = obj["table"]
    try:
        names = table.sizes(category) if category else table.categories()
    except BeamCheckError as exc:
        _fail(exc)
    for name in names:
        click.echo(name)


@main.command()
@click.argument("category")
@click.argument("size")
@click.pass_obj
def properties(obj, category: str, size: str) -> None:
    """Show the section properties of CATEGORY SIZE."""
    table: SectionPropertyTable = obj["table"]
    try:
        section = table.lookup(category, size)
    except BeamCheckError as exc:
        _fail(exc)

    click.echo(f"{'Property':<10} {'Value':>14}  Description")
    for key, value, description in section.rows():
        shown = format_number(value) if isinstance(value, (int, float)) else str(value)
        click.echo(f"{key:<10} {shown:>14}  {description}")


if __name__ == "__main__":
    main()
