"""Recipe snapshot data model consumed by the scaler."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Ingredient:
    """A recipe ingredient with its free-text quantity."""

    name: str
    quantity: str | None = None  # e.g. "1 1/2 cups"
    category: str | None = None
    notes: str | None = None

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
            "category": self.category,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ingredient":
        """Create ingredient from dictionary. Numeric quantities are kept as text."""
        quantity = data.get("quantity")
        if quantity is not None and not isinstance(quantity, str):
            quantity = str(quantity)
        return cls(
            name=data.get("name", ""),
            quantity=quantity,
            category=data.get("category"),
            notes=data.get("notes"),
        )


@dataclass
class Recipe:
    """A plain recipe snapshot."""

    title: str
    ingredients: list[Ingredient] = field(default_factory=list)
    servings: float | None = None
    prep_time: str | None = None
    cook_time: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert recipe to dictionary for serialization."""
        return {
            "title": self.title,
            "servings": self.servings,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        """
        Create recipe from dictionary.

        Accepts both snake_case and the camelCase keys used by the recipe store
        (``prepTime``, ``cookTime``).
        """
        ingredients = [Ingredient.from_dict(ing) for ing in data.get("ingredients", [])]
        return cls(
            title=data.get("title", "Untitled recipe"),
            servings=data.get("servings"),
            prep_time=data.get("prep_time", data.get("prepTime")),
            cook_time=data.get("cook_time", data.get("cookTime")),
            ingredients=ingredients,
        )
