"""
Command-line shopping list builder.

Reads a JSON file of recipes (a list, or an object with a "recipes" key),
optionally narrows it to selected recipe ids, and prints the merged
shopping list grouped by aisle.

Run with: recipecart recipes.json --recipe-id 1 --recipe-id 4 --sources

Environment Variables:
    RECIPECART_DEFAULT_AISLE: Aisle for ingredients without one (default: Other)
    RECIPECART_DISPLAY_DECIMALS: Decimals kept in display quantities (default: 2)
    RECIPECART_LOG_LEVEL: Log level (default: INFO)
    RECIPECART_LOG_FORMAT: "text" or "json" (default: text)
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from recipecart.config import get_settings
from recipecart.logging_config import configure_logging, get_logger
from recipecart.normalize.display import format_display_row
from recipecart.plan.shopping_list import ShoppingListAggregator, select_recipes
from recipecart.schemas import AggregatedResult, Recipe

logger = get_logger(__name__)


class RecipeFileError(ValueError):
    """Raised when a recipe file cannot be read or has the wrong shape."""


def load_recipes(path: Path) -> list[Recipe]:
    """Load and validate recipes from a JSON file."""
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RecipeFileError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RecipeFileError(f"{path} is not valid JSON: {e}") from e

    if isinstance(payload, dict):
        payload = payload.get("recipes")
    if not isinstance(payload, list):
        raise RecipeFileError(f"{path} must hold a list of recipes or an object with 'recipes'")

    try:
        return [Recipe.model_validate(item) for item in payload]
    except ValidationError as e:
        raise RecipeFileError(f"{path} has an invalid recipe: {e}") from e


def render_text(result: AggregatedResult, show_sources: bool = False) -> str:
    """Render the shopping list as aisle headings followed by their rows."""
    if not result:
        return "No ingredients found for selected recipes."

    blocks = []
    for aisle, rows in result.items():
        lines = [aisle, "-" * len(aisle)]
        lines.extend(f"  [ ] {format_display_row(row, show_sources)}" for row in rows)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_json(result: AggregatedResult) -> str:
    """Render the shopping list as JSON, aisle order preserved."""
    data = {aisle: [row.model_dump() for row in rows] for aisle, rows in result.items()}
    return json.dumps(data, indent=2, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build a shopping list from recipes")
    parser.add_argument("recipes_file", type=Path, help="JSON file with recipes")
    parser.add_argument(
        "--recipe-id",
        "-r",
        action="append",
        dest="recipe_ids",
        help="Only include this recipe id (repeatable)",
    )
    parser.add_argument("--sources", "-s", action="store_true", help="Show recipe sources")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--default-aisle", type=str, help="Aisle for ingredients without one")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(log_level=settings.log_level, json_format=settings.json_logs)

    try:
        recipes = load_recipes(args.recipes_file)
    except RecipeFileError as e:
        logger.error(str(e))
        return 1

    if args.recipe_ids:
        selected = select_recipes(recipes, args.recipe_ids)
        if not selected:
            logger.warning(f"No recipes matched ids: {', '.join(args.recipe_ids)}")
    else:
        selected = recipes

    aggregator = ShoppingListAggregator(default_aisle=args.default_aisle)
    result = aggregator.aggregate(selected)

    if args.json:
        print(render_json(result))
    else:
        print(render_text(result, show_sources=args.sources))

    return 0


if __name__ == "__main__":
    sys.exit(main())
