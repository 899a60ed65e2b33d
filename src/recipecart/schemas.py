"""Common data schemas for recipes and shopping list rows."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_text(value: Any) -> Any:
    """Treat missing text as empty and render bare numbers as text."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class IngredientLine(BaseModel):
    """One ingredient line as entered in a recipe."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    quantity: str = ""
    unit: str = ""
    aisle: str = ""

    @field_validator("name", "quantity", "unit", "aisle", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> Any:
        return _coerce_text(value)


class Recipe(BaseModel):
    """Recipe as supplied by the recipe store. Only the title and ingredients are used."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | int | None = None
    title: str = ""
    ingredients: list[IngredientLine] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _title_or_empty(cls, value: Any) -> Any:
        return _coerce_text(value)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class DisplayRow(BaseModel):
    """A single merged line of the shopping list."""

    aisle: str
    name: str
    quantity: float
    unit: str = ""
    sources: list[str] = Field(default_factory=list, description="Contributing recipe titles")


AggregatedResult = dict[str, list[DisplayRow]]
