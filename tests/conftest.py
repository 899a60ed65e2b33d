"""Pytest configuration and shared fixtures."""

import pytest

from recipecart.schemas import Recipe

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "cli: marks tests that drive the command-line entry point")


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def make_recipe():
    """Build a Recipe from a title and (name, quantity, unit, aisle) tuples."""

    def _make(title: str, *lines: tuple[str, str, str, str], recipe_id: int | None = None) -> Recipe:
        return Recipe(
            id=recipe_id,
            title=title,
            ingredients=[
                {"name": name, "quantity": quantity, "unit": unit, "aisle": aisle}
                for name, quantity, unit, aisle in lines
            ],
        )

    return _make


@pytest.fixture
def flour_recipes(make_recipe):
    """Two recipes using flour with differently spelled units and aisles."""
    return [
        make_recipe("A", ("flour", "2", "cups", "Baking"), recipe_id=1),
        make_recipe("B", ("Flour", "1/2", "cup", "baking"), recipe_id=2),
    ]


@pytest.fixture
def recipe_collection():
    """A small recipe store export, as plain dicts."""
    return [
        {
            "id": 1,
            "title": "Pancakes",
            "description": "Fluffy breakfast pancakes",
            "cuisine": "American",
            "ingredients": [
                {"name": "all-purpose flour", "quantity": "1 1/2", "unit": "cups", "aisle": "Baking"},
                {"name": "milk", "quantity": "1¼", "unit": "cup", "aisle": "dairy and eggs"},
                {"name": "eggs", "quantity": "1", "unit": "", "aisle": "Dairy/Eggs"},
                {"name": "baking powder", "quantity": "3 1/2", "unit": "tsp", "aisle": "baking"},
            ],
        },
        {
            "id": 2,
            "title": "Omelette",
            "cuisine": "French",
            "ingredients": [
                {"name": "Eggs", "quantity": "3", "unit": "", "aisle": "Dairy & Eggs"},
                {"name": "butter", "quantity": "1", "unit": "tbsp", "aisle": "Dairy & Eggs"},
                {"name": "chives", "quantity": "", "unit": "", "aisle": "produce"},
                {"name": "salt", "quantity": "1", "unit": "pinch", "aisle": "spices"},
            ],
        },
        {
            "id": 3,
            "title": "Roast Chicken",
            "cuisine": "British",
            "ingredients": [
                {"name": "chicken", "quantity": "about 4", "unit": "lbs", "aisle": "meat and seafood"},
                {"name": "butter", "quantity": "2", "unit": "oz", "aisle": "dairy & eggs"},
                {"name": "lemon", "quantity": "1", "unit": "each", "aisle": "Produce"},
            ],
        },
    ]
