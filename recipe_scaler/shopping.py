"""Shopping list items derived from a scaled recipe."""

from dataclasses import dataclass
from typing import Any

from .scaler import ScalingResult, format_servings

DEFAULT_CATEGORY = "Other"


@dataclass
class ShoppingListItem:
    """One line on a shopping list, as handed to the shopping-list store."""

    name: str
    quantity: str | None
    category: str
    notes: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "category": self.category,
            "notes": self.notes,
        }


def build_shopping_list(
    result: ScalingResult, recipe_title: str | None = None
) -> list[ShoppingListItem]:
    """
    Build shopping list items from scaled ingredients.

    Ingredient order is kept. Unscaled ingredients are included with their
    original quantity text.

    Args:
        result: The scaling result
        recipe_title: Title for the notes, defaults to the result's title

    Returns:
        One ShoppingListItem per ingredient
    """
    title = recipe_title or result.title or "recipe"
    note = f"For {title} ({format_servings(result.target_servings)} servings)"

    return [
        ShoppingListItem(
            name=ing.name,
            quantity=ing.quantity,
            category=ing.category or DEFAULT_CATEGORY,
            notes=note,
        )
        for ing in result.ingredients
    ]
