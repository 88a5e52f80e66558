"""Shared fixtures for recipe-scaler tests."""

import pytest

from recipe_scaler.recipe import Ingredient, Recipe


@pytest.fixture
def pancake_recipe():
    """A four-serving recipe mixing parseable and unparseable quantities."""
    return Recipe(
        title="Pancakes",
        servings=4,
        prep_time="20 minutes",
        cook_time="30 minutes",
        ingredients=[
            Ingredient(name="flour", quantity="1 1/2 cups", category="Baking"),
            Ingredient(name="sugar", quantity="0.75 cup", category="Baking"),
            Ingredient(name="eggs", quantity="2", category="Dairy"),
            Ingredient(name="salt", quantity="to taste"),
            Ingredient(name="butter", quantity="1/2 cup", notes="melted"),
        ],
    )


@pytest.fixture
def pancake_recipe_dict():
    """The same recipe as the recipe store hands it over."""
    return {
        "title": "Pancakes",
        "servings": 4,
        "prepTime": "20 minutes",
        "cookTime": "30 minutes",
        "ingredients": [
            {"name": "flour", "quantity": "1 1/2 cups", "category": "Baking"},
            {"name": "sugar", "quantity": "0.75 cup", "category": "Baking"},
            {"name": "eggs", "quantity": "2", "category": "Dairy"},
            {"name": "salt", "quantity": "to taste"},
            {"name": "butter", "quantity": "1/2 cup", "notes": "melted"},
        ],
    }
