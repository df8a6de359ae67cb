"""Typer-based CLI entry point."""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .distributions import (
    DistributionRegister,
    RandomSource,
    configure_distributions_register,
    get_distributions,
)
from .errors import DistributionError, ExpressionError
from .expressions import ExpressionEngine, load_distribution_extensions
from .types import Kind

if TYPE_CHECKING:
    from .distributions import ParameterDescriptor

app = typer.Typer(help="PySATL Calc probability distribution calculator.")
console = Console()

VERSION_OPTION = typer.Option(False, "--version", help="Show version and exit.")
DISCRETE_OPTION = typer.Option(False, "--discrete", help="Only list discrete distributions.")
CONTINUOUS_OPTION = typer.Option(
    False, "--continuous", help="Only list continuous distributions."
)
NAME_ARGUMENT = typer.Argument(..., help="Internal name of the distribution, e.g. `normal`.")
EXPRESSION_ARGUMENT = typer.Argument(..., help="Expression to evaluate, e.g. `normal_cdf(1;0;1)`.")
VAR_OPTION = typer.Option(
    None,
    "--var",
    help="Variable binding `name=value` (repeat for multiples).",
    show_default=False,
)
SEED_OPTION = typer.Option(
    None, "--seed", help="Seed of the random number generator.", show_default=False
)


def _parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _parameter_label(parameter: ParameterDescriptor) -> str:
    domain = parameter.describe()
    if domain in ("ℤ", "ℝ"):
        return f"{parameter.name} ∈ {domain}"
    return domain


def _parse_bindings(bindings: list[str]) -> dict[str, Any]:
    scope: dict[str, Any] = {}
    for binding in bindings:
        name, sep, value = binding.partition("=")
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(
                f"expected name=value but got {binding!r}", param_hint="--var"
            )
        try:
            scope[name] = _parse_number(value.strip())
        except ValueError as exc:
            raise typer.BadParameter(
                f"{value.strip()!r} is not a number", param_hint="--var"
            ) from exc
    return scope


@app.callback(invoke_without_command=True)
def cli_callback(  # noqa: B008
    ctx: typer.Context,
    version: bool = VERSION_OPTION,
) -> None:
    if version:
        console.print(f"[bold green]pysatl-calc {__version__}[/bold green]")
        raise typer.Exit()
    if ctx.invoked_subcommand is None and not ctx.resilient_parsing:
        console.print(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_distributions(  # noqa: B008
    discrete: bool = DISCRETE_OPTION,
    continuous: bool = CONTINUOUS_OPTION,
) -> None:
    """List the available distributions."""
    if discrete and continuous:
        console.print("[red]Specify either --discrete or --continuous, not both.[/red]")
        raise typer.Exit(code=1)

    kind = Kind.DISCRETE if discrete else Kind.CONTINUOUS if continuous else None
    table = Table(title="Distributions")
    table.add_column("Name")
    table.add_column("Display name")
    table.add_column("Kind")
    table.add_column("Parameters", overflow="fold")
    for distribution in get_distributions(kind):
        params = ", ".join(_parameter_label(p) for p in distribution.parameters)
        table.add_row(
            distribution.name,
            distribution.display_name,
            distribution.kind.value,
            params or "-",
        )
    console.print(table)


@app.command()
def describe(name: str = NAME_ARGUMENT) -> None:  # noqa: B008
    """Show the function signatures and parameter domains of a distribution."""
    configure_distributions_register()
    try:
        distribution = DistributionRegister.get(name)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]{distribution.display_name}[/bold] ({distribution.kind.value})")
    for signature in distribution.signatures().values():
        console.print(f"  {signature}")

    if distribution.parameters:
        table = Table(title="Parameters")
        table.add_column("Parameter")
        table.add_column("Type")
        table.add_column("Domain")
        for parameter in distribution.parameters:
            table.add_row(
                parameter.name,
                "integer" if parameter.discrete else "real",
                parameter.describe(),
            )
        console.print(table)


@app.command("eval")
def evaluate(  # noqa: B008
    expression: str = EXPRESSION_ARGUMENT,
    var: list[str] | None = VAR_OPTION,
    seed: int | None = SEED_OPTION,
) -> None:
    """Evaluate an expression that may call the distribution functions."""
    scope = _parse_bindings(var or [])
    engine = ExpressionEngine()
    load_distribution_extensions(engine, RandomSource(seed) if seed is not None else None)

    try:
        result = engine.evaluate(expression.replace(";", ","), scope)
    except (DistributionError, ExpressionError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    console.print(result)
