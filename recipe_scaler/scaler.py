"""Recipe scaling: serving math, per-ingredient scaling and the scaling entry points."""

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from . import config
from .formatter import format_decimal, format_quantity
from .quantity import parse_quantity
from .recipe import Ingredient, Recipe
from .timing import apply_time_adjustment, time_adjustment_factor

logger = logging.getLogger(__name__)

# Scaling further than this gets extra cooking advice
TIPS_THRESHOLD = 2.0

LARGE_BATCH_TIPS = [
    "Use larger cookware",
    "Cook in batches if needed",
    "Adjust seasonings gradually",
]


class ScalingError(Exception):
    """Base exception for recipe scaling errors."""


class InvalidServings(ScalingError, ValueError):
    """Raised when a scaling request has an unusable serving count."""

    def __init__(self, servings: Any, message: str | None = None):
        self.servings = servings
        super().__init__(
            message or f"Target servings must be a positive number, got {servings!r}"
        )


@dataclass
class ScaledIngredient:
    """An ingredient after scaling, keeping its original quantity for display or undo."""

    name: str
    quantity: str | None
    original_quantity: str | None
    scaling_factor: float
    was_scaled: bool
    category: str | None = None
    notes: str | None = None
    original_amount: float | None = None
    scaled_amount: float | None = None

    def __str__(self) -> str:
        parts = []
        if self.quantity:
            parts.append(self.quantity)
        parts.append(self.name)
        if self.notes:
            parts.append(f"({self.notes})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "original_quantity": self.original_quantity,
            "scaling_factor": self.scaling_factor,
            "was_scaled": self.was_scaled,
            "category": self.category,
            "notes": self.notes,
        }


@dataclass
class ScalingRequest:
    """Everything needed to scale one recipe."""

    target_servings: float
    ingredients: list[Ingredient] = field(default_factory=list)
    original_servings: float | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    title: str | None = None

    @classmethod
    def from_recipe(cls, recipe: Recipe, target_servings: float) -> "ScalingRequest":
        return cls(
            target_servings=target_servings,
            ingredients=list(recipe.ingredients),
            original_servings=recipe.servings,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            title=recipe.title,
        )


@dataclass
class ScalingResult:
    """The outcome of scaling a recipe."""

    scaling_factor: float
    original_servings: float
    target_servings: float
    ingredients: list[ScaledIngredient]
    prep_time: str | None
    cook_time: str | None
    time_adjustment: float
    title: str | None = None

    @property
    def unscaled_ingredients(self) -> list[ScaledIngredient]:
        """Ingredients whose quantity could not be parsed and were left as-is."""
        return [ing for ing in self.ingredients if not ing.was_scaled]

    @property
    def time_adjustment_percent(self) -> int:
        return int(math.floor(self.time_adjustment * 100 + 0.5))

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "title": self.title,
            "scaling_factor": self.scaling_factor,
            "original_servings": self.original_servings,
            "target_servings": self.target_servings,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "time_adjustment": self.time_adjustment,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def effective_original_servings(original_servings: float | None) -> float:
    """
    Get the serving count to scale from.

    Missing, zero, negative or non-finite values fall back to DEFAULT_SERVINGS.
    """
    if not _is_positive_number(original_servings):
        logger.debug(
            "Original servings %r unusable, assuming %s",
            original_servings,
            config.DEFAULT_SERVINGS,
        )
        return config.DEFAULT_SERVINGS
    return float(original_servings)


def validate_target_servings(target_servings: Any) -> float:
    """
    Check that a target serving count is usable.

    Raises:
        InvalidServings: If target_servings is missing, non-positive or not finite
    """
    if not _is_positive_number(target_servings):
        raise InvalidServings(target_servings)
    return target_servings


def calculate_scale_factor(original_servings: float | None, target_servings: float) -> float:
    """
    Calculate the scaling factor for a recipe.

    Args:
        original_servings: Original recipe serving size (defaults to 4 if unusable)
        target_servings: Desired serving size

    Returns:
        target_servings / effective original servings, always positive

    Raises:
        InvalidServings: If target_servings is not a positive number
    """
    target = validate_target_servings(target_servings)
    return target / effective_original_servings(original_servings)


def scale_ingredient(ingredient: Ingredient, scale_factor: float) -> ScaledIngredient:
    """
    Scale a single ingredient.

    Unparseable quantities ("salt to taste", "a pinch") are passed through
    unchanged with was_scaled=False.
    """
    parsed = parse_quantity(ingredient.quantity)

    if parsed is None:
        logger.debug("Passing through unparseable quantity %r", ingredient.quantity)
        return ScaledIngredient(
            name=ingredient.name,
            quantity=ingredient.quantity,
            original_quantity=ingredient.quantity,
            scaling_factor=scale_factor,
            was_scaled=False,
            category=ingredient.category,
            notes=ingredient.notes,
        )

    amount, unit = parsed
    scaled_amount = amount * scale_factor

    return ScaledIngredient(
        name=ingredient.name,
        quantity=format_quantity(scaled_amount, unit),
        original_quantity=ingredient.quantity,
        scaling_factor=scale_factor,
        was_scaled=True,
        category=ingredient.category,
        notes=ingredient.notes,
        original_amount=amount,
        scaled_amount=scaled_amount,
    )


def scale(request: ScalingRequest) -> ScalingResult:
    """
    Scale a recipe snapshot to a new serving count.

    The request is validated before anything is scaled, so an invalid target
    never yields a partial result.

    Raises:
        InvalidServings: If the target serving count is not positive
    """
    target = validate_target_servings(request.target_servings)
    original = effective_original_servings(request.original_servings)
    factor = target / original

    ingredients = [scale_ingredient(ing, factor) for ing in request.ingredients]

    adjustment = time_adjustment_factor(factor)
    prep_time = apply_time_adjustment(request.prep_time, adjustment)
    cook_time = apply_time_adjustment(request.cook_time, adjustment)

    unscaled = sum(1 for ing in ingredients if not ing.was_scaled)
    logger.info(
        "Scaled %r from %s to %s servings (factor %.3f, %d of %d ingredients unscaled)",
        request.title,
        original,
        target,
        factor,
        unscaled,
        len(ingredients),
    )

    return ScalingResult(
        scaling_factor=factor,
        original_servings=original,
        target_servings=target,
        ingredients=ingredients,
        prep_time=prep_time,
        cook_time=cook_time,
        time_adjustment=adjustment,
        title=request.title,
    )


def scale_recipe(
    recipe: Recipe,
    target_servings: float | None = None,
    multiplier: float | None = None,
) -> ScalingResult:
    """
    Scale all ingredients and times in a recipe.

    Args:
        recipe: The recipe to scale
        target_servings: Desired serving size
        multiplier: Direct multiplier (overrides target_servings)

    Raises:
        InvalidServings: If the resulting target is not positive
        ValueError: If neither target_servings nor multiplier is given
    """
    if multiplier is not None:
        if not _is_positive_number(multiplier):
            raise InvalidServings(
                multiplier, f"Multiplier must be a positive number, got {multiplier!r}"
            )
        target_servings = effective_original_servings(recipe.servings) * multiplier
    elif target_servings is None:
        raise ValueError("Provide target_servings or multiplier to scale a recipe")

    return scale(ScalingRequest.from_recipe(recipe, target_servings))


def scale_recipes(recipes: list[Recipe], target_servings: float) -> list[ScalingResult]:
    """
    Scale several recipes to the same serving count.

    The target is validated once up front; an invalid target rejects the whole batch.
    """
    validate_target_servings(target_servings)
    return [scale(ScalingRequest.from_recipe(recipe, target_servings)) for recipe in recipes]


def scaling_tips(scale_factor: float) -> list[str]:
    """Cooking advice for large scale-ups, empty otherwise."""
    if scale_factor > TIPS_THRESHOLD:
        return list(LARGE_BATCH_TIPS)
    return []


def format_servings(servings: float | None) -> str:
    if servings is None:
        return ""
    return format_decimal(servings)


def format_scale_info(
    scale_factor: float, original_servings: float | None, new_servings: float | None
) -> str:
    """
    Format scaling information for display.

    Args:
        scale_factor: The scaling factor used
        original_servings: Original serving size
        new_servings: New serving size after scaling

    Returns:
        Human-readable scaling description
    """
    original = format_servings(original_servings)
    new = format_servings(new_servings)

    if scale_factor == 1.0:
        if original:
            return f"Original recipe ({original} servings)"
        return "Original recipe"

    if scale_factor == 2.0:
        desc = "Doubled"
    elif scale_factor == 0.5:
        desc = "Halved"
    elif scale_factor == 3.0:
        desc = "Tripled"
    else:
        desc = f"Scaled {format_decimal(scale_factor)}x"

    if original and new:
        return f"{desc} ({original} → {new} servings)"
    elif new:
        return f"{desc} ({new} servings)"

    return desc
