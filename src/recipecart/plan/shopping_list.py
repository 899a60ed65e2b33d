"""Shopping list aggregation across selected recipes."""

import uuid
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from recipecart.config import settings
from recipecart.logging_config import LoggingContext, get_logger
from recipecart.normalize.display import format_volume, format_weight
from recipecart.normalize.names import normalize_aisle, normalize_ingredient_name
from recipecart.normalize.quantity import parse_quantity
from recipecart.normalize.units import (
    CountUnit,
    UnitFamily,
    VolumeUnit,
    WeightUnit,
    classify_unit,
)
from recipecart.schemas import AggregatedResult, DisplayRow, IngredientLine, Recipe

logger = get_logger(__name__)

RecipeLike = Recipe | Mapping[str, Any]


class AggregationKey(NamedTuple):
    """Identity of one shopping list bucket."""

    aisle: str
    name: str
    family: UnitFamily
    unit_label: str = ""  # only set for unknown units


@dataclass
class IngredientTotals:
    """Running totals for one ingredient in one aisle, split by unit family."""

    display_name: str
    sources: set[str] = field(default_factory=set)
    count_total: float = 0.0
    volume_ml_total: float = 0.0
    weight_g_total: float = 0.0
    preferred_volume_units: set[str] = field(default_factory=set)
    preferred_weight_units: set[str] = field(default_factory=set)
    unknown_totals: dict[str, float] = field(default_factory=dict)


class ShoppingListAccumulator:
    """
    Per-run accumulator of ingredient totals.

    Aisles keep first-seen order. Build a fresh instance for every
    aggregation; instances are not meant to be shared between runs.
    """

    def __init__(self, default_aisle: str | None = None):
        self.default_aisle = default_aisle or settings.default_aisle or "Other"
        self._by_aisle: dict[str, dict[str, IngredientTotals]] = {}
        self.lines_seen = 0
        self.lines_skipped = 0

    def add(self, recipe_title: str, line: IngredientLine) -> AggregationKey | None:
        """
        Add one ingredient line.

        Returns the bucket key the line was counted in, or None when the line
        has no usable name and was skipped. An empty recipe_title still counts
        the line but is not recorded in the bucket's sources.
        """
        self.lines_seen += 1

        name_key = normalize_ingredient_name(line.name)
        if not name_key:
            self.lines_skipped += 1
            logger.debug(f"Skipping unnamed ingredient line from '{recipe_title}'")
            return None

        aisle = normalize_aisle(line.aisle, default=self.default_aisle)
        quantity = parse_quantity(line.quantity)
        unit = classify_unit(line.unit)

        by_name = self._by_aisle.setdefault(aisle, {})
        totals = by_name.get(name_key)
        if totals is None:
            totals = IngredientTotals(display_name=line.name.strip())
            by_name[name_key] = totals
        elif not totals.display_name:
            totals.display_name = line.name.strip()

        if recipe_title:
            totals.sources.add(recipe_title)

        if isinstance(unit, CountUnit):
            totals.count_total += quantity
        elif isinstance(unit, VolumeUnit):
            totals.volume_ml_total += quantity * unit.factor_to_base
            totals.preferred_volume_units.add(unit.canonical_unit)
        elif isinstance(unit, WeightUnit):
            totals.weight_g_total += quantity * unit.factor_to_base
            totals.preferred_weight_units.add(unit.canonical_unit)
        else:
            logger.debug(f"Unknown unit '{unit.canonical_unit}' for '{name_key}', kept separate")
            label = unit.display_unit
            totals.unknown_totals[label] = totals.unknown_totals.get(label, 0.0) + quantity
            return AggregationKey(aisle, name_key, unit.family, label)

        return AggregationKey(aisle, name_key, unit.family)

    def buckets(self) -> Iterator[tuple[AggregationKey, IngredientTotals]]:
        """
        Yield every bucket with a non-zero total, in display order.

        Aisles in first-seen order, names sorted within an aisle, then count,
        volume, weight and unknown labels in first-seen order.
        """
        for aisle, by_name in self._by_aisle.items():
            for name_key in sorted(by_name):
                totals = by_name[name_key]
                if totals.count_total:
                    yield AggregationKey(aisle, name_key, UnitFamily.COUNT), totals
                if totals.volume_ml_total:
                    yield AggregationKey(aisle, name_key, UnitFamily.VOLUME), totals
                if totals.weight_g_total:
                    yield AggregationKey(aisle, name_key, UnitFamily.WEIGHT), totals
                for label, total in totals.unknown_totals.items():
                    if total:
                        yield AggregationKey(aisle, name_key, UnitFamily.UNKNOWN, label), totals

    def to_result(self, decimals: int | None = None) -> AggregatedResult:
        """Convert the accumulated totals into aisle-grouped display rows."""
        result: AggregatedResult = {}

        for key, totals in self.buckets():
            if key.family is UnitFamily.COUNT:
                quantity, unit = totals.count_total, ""
            elif key.family is UnitFamily.VOLUME:
                quantity, unit = format_volume(
                    totals.volume_ml_total, totals.preferred_volume_units, decimals
                )
            elif key.family is UnitFamily.WEIGHT:
                quantity, unit = format_weight(
                    totals.weight_g_total, totals.preferred_weight_units, decimals
                )
            else:
                quantity, unit = totals.unknown_totals[key.unit_label], key.unit_label

            row = DisplayRow(
                aisle=key.aisle,
                name=totals.display_name or key.name,
                quantity=quantity,
                unit=unit,
                sources=sorted(totals.sources),
            )
            result.setdefault(key.aisle, []).append(row)

        return result


def _as_recipe(recipe: RecipeLike) -> Recipe:
    if isinstance(recipe, Recipe):
        return recipe
    return Recipe.model_validate(recipe)


class ShoppingListAggregator:
    """
    Merges the ingredients of selected recipes into one shopping list:
    - Quantity parsing of free-text amounts ("1½", "about 2", "1-2")
    - Unit normalization (e.g., 2 cups + 1/2 cup -> 2.5 cup)
    - Grouping by normalized store aisle
    - Provenance via the contributing recipe titles
    """

    def __init__(self, default_aisle: str | None = None, decimals: int | None = None):
        self.default_aisle = default_aisle
        self.decimals = decimals

    def aggregate(self, recipes: Iterable[RecipeLike]) -> AggregatedResult:
        """
        Aggregate the ingredient lines of the given recipes.

        Args:
            recipes: Recipes in selection order, as Recipe models or plain dicts.

        Returns:
            Mapping of aisle name to its ordered display rows.
        """
        accumulator = ShoppingListAccumulator(default_aisle=self.default_aisle)
        recipe_count = 0

        with LoggingContext(run_id=uuid.uuid4().hex):
            for raw_recipe in recipes:
                recipe = _as_recipe(raw_recipe)
                recipe_count += 1
                recipe_id = str(recipe.id) if recipe.id is not None else None
                with LoggingContext(recipe_id=recipe_id):
                    for line in recipe.ingredients:
                        accumulator.add(recipe.title, line)

            result = accumulator.to_result(self.decimals)

            logger.info(
                f"Aggregated {accumulator.lines_seen} lines from {recipe_count} recipes "
                f"into {sum(len(rows) for rows in result.values())} rows "
                f"across {len(result)} aisles ({accumulator.lines_skipped} skipped)"
            )

        return result


def aggregate(recipes: Iterable[RecipeLike]) -> AggregatedResult:
    """Aggregate recipes into an aisle-grouped shopping list with default settings."""
    return ShoppingListAggregator().aggregate(recipes)


def _recipe_id(recipe: RecipeLike) -> Any:
    if isinstance(recipe, Recipe):
        return recipe.id
    return recipe.get("id")


def select_recipes(
    recipes: Iterable[RecipeLike],
    selected_ids: Iterable[str | int],
) -> list[RecipeLike]:
    """
    Pick the recipes whose id is in selected_ids.

    The collection's order is kept, not the order of the ids. Ids compare as
    strings so 7 and "7" select the same recipe.
    """
    wanted = {str(recipe_id) for recipe_id in selected_ids}
    return [recipe for recipe in recipes if str(_recipe_id(recipe)) in wanted]
