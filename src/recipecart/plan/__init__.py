"""Shopping list planning from selected recipes."""

from recipecart.plan.shopping_list import (
    AggregationKey,
    IngredientTotals,
    ShoppingListAccumulator,
    ShoppingListAggregator,
    aggregate,
    select_recipes,
)

__all__ = [
    "AggregationKey",
    "IngredientTotals",
    "ShoppingListAccumulator",
    "ShoppingListAggregator",
    "aggregate",
    "select_recipes",
]
