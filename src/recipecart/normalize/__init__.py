"""Normalize free-text quantities, units, aisles and ingredient names."""

from recipecart.normalize.display import (
    format_display_row,
    format_quantity,
    format_volume,
    format_weight,
    round_for_display,
)
from recipecart.normalize.names import normalize_aisle, normalize_ingredient_name
from recipecart.normalize.quantity import parse_quantity
from recipecart.normalize.units import (
    CountUnit,
    UnitDescriptor,
    UnitFamily,
    UnknownUnit,
    VolumeUnit,
    WeightUnit,
    can_aggregate,
    classify_unit,
    normalize_unit,
)

__all__ = [
    "CountUnit",
    "UnitDescriptor",
    "UnitFamily",
    "UnknownUnit",
    "VolumeUnit",
    "WeightUnit",
    "can_aggregate",
    "classify_unit",
    "format_display_row",
    "format_quantity",
    "format_volume",
    "format_weight",
    "normalize_aisle",
    "normalize_ingredient_name",
    "normalize_unit",
    "parse_quantity",
    "round_for_display",
]
