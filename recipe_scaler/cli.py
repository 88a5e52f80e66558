"""CLI entry point for Recipe Scaler."""

import json
import logging
import math
from typing import IO, Any

import click

from . import __version__, config
from .formatter import format_quantity
from .recipe import Recipe
from .scaler import (
    InvalidServings,
    ScalingResult,
    format_scale_info,
    scale_recipe,
    scale_recipes,
    scaling_tips,
)
from .shopping import build_shopping_list
from .timing import adjust_time, time_adjustment_factor

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Set up logging for CLI use."""
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def load_json(source: IO[str]) -> Any:
    """Read JSON from an open file, exiting with a message on bad input."""
    try:
        return json.load(source)
    except json.JSONDecodeError as e:
        click.echo(f"✗ Invalid JSON in {source.name}: {e}", err=True)
        raise SystemExit(1) from None


def display_result(result: ScalingResult, show_shopping_list: bool = False) -> None:
    """Display a scaled recipe."""
    click.echo()
    click.echo("=" * 60)
    click.echo(f"RECIPE: {result.title}")
    click.echo("=" * 60)
    click.echo(
        "Scaling: "
        + format_scale_info(
            result.scaling_factor, result.original_servings, result.target_servings
        )
    )

    click.echo("\nIngredients:")
    for i, ing in enumerate(result.ingredients, 1):
        line = f"  {i}. {ing}"
        if not ing.was_scaled:
            line += "  [not scaled]"
        elif result.scaling_factor != 1.0:
            line += f"  (was {ing.original_quantity})"
        click.echo(line)

    if result.prep_time or result.cook_time:
        click.echo()
        if result.prep_time:
            click.echo(f"Prep time: {result.prep_time}")
        if result.cook_time:
            click.echo(f"Cook time: {result.cook_time}")
        if result.time_adjustment != 1.0:
            click.echo(f"Times adjusted to {result.time_adjustment_percent}%")

    tips = scaling_tips(result.scaling_factor)
    if tips:
        click.echo("\nScaling tips:")
        for tip in tips:
            click.echo(f"  - {tip}")

    if show_shopping_list:
        click.echo("\nShopping list:")
        for item in build_shopping_list(result):
            quantity = f"{item.quantity} " if item.quantity else ""
            click.echo(f"  [{item.category}] {quantity}{item.name}")

    click.echo()


def result_to_json(result: ScalingResult, include_shopping_list: bool) -> dict[str, Any]:
    data = result.to_dict()
    if include_shopping_list:
        data["shopping_list"] = [item.to_dict() for item in build_shopping_list(result)]
    return data


# ============================================================================
# Main CLI Group
# ============================================================================


@click.group()
@click.version_option(version=__version__, prog_name=config.APP_NAME)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Recipe Scaler.

    Scale recipe ingredients and cooking times to a new number of servings.
    """
    configure_logging(verbose)


# ============================================================================
# Scaling Commands
# ============================================================================


@cli.command("scale")
@click.argument("recipe_file", type=click.File("r", encoding="utf-8"))
@click.option("--servings", "-S", type=float, help="Scale to target servings")
@click.option("--scale", "-s", type=float, help="Scale recipe by multiplier (e.g., 2 for double)")
@click.option("--shopping-list", is_flag=True, help="Also show shopping list items")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
def scale_cmd(
    recipe_file: IO[str],
    servings: float | None,
    scale: float | None,
    shopping_list: bool,
    as_json: bool,
):
    """Scale a recipe stored as JSON (use - for stdin).

    Examples:

    \b
        recipe-scaler scale pancakes.json --servings 8
        recipe-scaler scale pancakes.json --scale 0.5 --json
    """
    if servings is None and scale is None:
        click.echo("✗ Provide --servings or --scale.", err=True)
        raise SystemExit(1)

    if servings is not None and scale is not None:
        click.echo("✗ Provide either --servings or --scale, not both.", err=True)
        raise SystemExit(1)

    data = load_json(recipe_file)
    if not isinstance(data, dict):
        click.echo("✗ Recipe file must contain a JSON object.", err=True)
        raise SystemExit(1)

    try:
        result = scale_recipe(Recipe.from_dict(data), target_servings=servings, multiplier=scale)
    except InvalidServings as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None

    if as_json:
        click.echo(json.dumps(result_to_json(result, shopping_list), indent=2, ensure_ascii=False))
    else:
        display_result(result, show_shopping_list=shopping_list)


@cli.command("bulk")
@click.argument("recipes_file", type=click.File("r", encoding="utf-8"))
@click.option("--servings", "-S", type=float, required=True, help="Target servings for each recipe")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text")
def bulk_cmd(recipes_file: IO[str], servings: float, as_json: bool):
    """Scale every recipe in a JSON list to the same number of servings."""
    data = load_json(recipes_file)
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        click.echo("✗ Recipes file must contain a JSON list of recipes.", err=True)
        raise SystemExit(1)

    try:
        results = scale_recipes([Recipe.from_dict(item) for item in data], servings)
    except InvalidServings as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None

    if as_json:
        payload = [result_to_json(result, False) for result in results]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for result in results:
        display_result(result)

    click.echo(f"Scaled {len(results)} recipe(s) to {servings:g} servings each")
    click.echo(f"Total servings: {len(results) * servings:g}")


# ============================================================================
# Utility Commands
# ============================================================================


@cli.command("time")
@click.argument("duration")
@click.option("--factor", "-f", type=float, required=True, help="Ingredient scaling factor")
def time_cmd(duration: str, factor: float):
    """Adjust a cooking time for a scaling factor.

    Example:

    \b
        recipe-scaler time "30 minutes" --factor 2
    """
    try:
        adjustment = time_adjustment_factor(factor)
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None

    logger.debug("Time adjustment for factor %s: %.3f", factor, adjustment)
    click.echo(adjust_time(duration, factor))


@cli.command("fraction")
@click.argument("amount", type=float)
@click.argument("unit", required=False, default="")
def fraction_cmd(amount: float, unit: str):
    """Format a decimal amount as a kitchen-friendly fraction."""
    if not math.isfinite(amount):
        click.echo("✗ Amount must be a finite number.", err=True)
        raise SystemExit(1)
    if amount < 0:
        click.echo("✗ Amount must not be negative.", err=True)
        raise SystemExit(1)
    click.echo(format_quantity(amount, unit))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
