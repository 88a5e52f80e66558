"""Recipe Scaler - scale recipe ingredients and cooking times to new serving counts."""

__version__ = "1.0.0"

from .formatter import decimal_to_fraction, format_quantity
from .quantity import (
    DecimalMatch,
    FractionMatch,
    Quantity,
    Unparseable,
    match_quantity,
    parse_quantity,
)
from .recipe import Ingredient, Recipe
from .scaler import (
    InvalidServings,
    ScaledIngredient,
    ScalingError,
    ScalingRequest,
    ScalingResult,
    calculate_scale_factor,
    scale,
    scale_recipe,
    scale_recipes,
)
from .shopping import ShoppingListItem, build_shopping_list
from .timing import adjust_time, time_adjustment_factor

__all__ = [
    "Recipe",
    "Ingredient",
    "Quantity",
    "FractionMatch",
    "DecimalMatch",
    "Unparseable",
    "match_quantity",
    "parse_quantity",
    "decimal_to_fraction",
    "format_quantity",
    "adjust_time",
    "time_adjustment_factor",
    "ScalingRequest",
    "ScalingResult",
    "ScaledIngredient",
    "ScalingError",
    "InvalidServings",
    "calculate_scale_factor",
    "scale",
    "scale_recipe",
    "scale_recipes",
    "ShoppingListItem",
    "build_shopping_list",
]
