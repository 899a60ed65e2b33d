"""Unit classification and conversion tables."""

import re
from dataclasses import dataclass
from enum import Enum

# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Volume conversions per canonical unit (base unit: ml)
VOLUME_FACTORS: dict[str, float] = {
    "tsp": 4.92892159375,
    "tbsp": 14.78676478125,
    "cup": 236.5882365,
    "ml": 1.0,
    "l": 1000.0,
    "fl oz": 29.5735295625,
    "pt": 473.176473,
    "qt": 946.352946,
    "gal": 3785.411784,
}

# Weight conversions per canonical unit (base unit: g)
WEIGHT_FACTORS: dict[str, float] = {
    "g": 1.0,
    "kg": 1000.0,
    "oz": 28.349523125,
    "lb": 453.59237,
}

# Spelling -> canonical unit
VOLUME_ALIASES: dict[str, str] = {
    # US customary
    "tsp": "tsp",
    "tsps": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "cup": "cup",
    "cups": "cup",
    "fl oz": "fl oz",
    "floz": "fl oz",
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "pt": "pt",
    "pint": "pt",
    "pints": "pt",
    "qt": "qt",
    "quart": "qt",
    "quarts": "qt",
    "gal": "gal",
    "gallon": "gal",
    "gallons": "gal",
    # Metric
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
}

WEIGHT_ALIASES: dict[str, str] = {
    # Metric
    "g": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    # Imperial
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
}

COUNT_ALIASES: frozenset[str] = frozenset({"each", "ea", "pc", "pcs", "piece", "pieces"})


class UnitFamily(str, Enum):
    """Measurement category of a unit. Declaration order is display order."""

    COUNT = "count"
    VOLUME = "volume"
    WEIGHT = "weight"
    UNKNOWN = "unknown"


# =============================================================================
# Unit Descriptors
# =============================================================================


@dataclass(frozen=True)
class CountUnit:
    """Bare counts ("3 eggs") and explicit piece units."""

    canonical_unit: str = ""

    family = UnitFamily.COUNT
    base_unit = "each"
    factor_to_base = 1.0

    @property
    def display_unit(self) -> str:
        return self.canonical_unit


@dataclass(frozen=True)
class VolumeUnit:
    """A volume unit convertible to milliliters."""

    canonical_unit: str
    factor_to_base: float

    family = UnitFamily.VOLUME
    base_unit = "ml"

    @property
    def display_unit(self) -> str:
        return self.canonical_unit


@dataclass(frozen=True)
class WeightUnit:
    """A weight unit convertible to grams."""

    canonical_unit: str
    factor_to_base: float

    family = UnitFamily.WEIGHT
    base_unit = "g"

    @property
    def display_unit(self) -> str:
        return self.canonical_unit


@dataclass(frozen=True)
class UnknownUnit:
    """A unit outside the known tables; never converted or merged with another label."""

    canonical_unit: str

    family = UnitFamily.UNKNOWN
    base_unit = None
    factor_to_base = None

    @property
    def display_unit(self) -> str:
        return self.canonical_unit


UnitDescriptor = CountUnit | VolumeUnit | WeightUnit | UnknownUnit

_VOLUME_UNITS: dict[str, VolumeUnit] = {
    alias: VolumeUnit(canonical, VOLUME_FACTORS[canonical])
    for alias, canonical in VOLUME_ALIASES.items()
}
_WEIGHT_UNITS: dict[str, WeightUnit] = {
    alias: WeightUnit(canonical, WEIGHT_FACTORS[canonical])
    for alias, canonical in WEIGHT_ALIASES.items()
}
_BARE_COUNT = CountUnit("")
_EACH = CountUnit("each")

_WHITESPACE_RE = re.compile(r"\s+")


# =============================================================================
# Classification
# =============================================================================


def normalize_unit(raw: str | None) -> str:
    """Lowercase, trim, collapse whitespace and drop one trailing period."""
    unit = _WHITESPACE_RE.sub(" ", (raw or "").lower().strip())
    if unit.endswith("."):
        unit = unit[:-1]
    return unit


def classify_unit(raw: str | None) -> UnitDescriptor:
    """
    Classify a free-text unit into count, volume, weight or unknown.

    Examples:
        "" -> CountUnit("")
        "Tablespoons" -> VolumeUnit("tbsp", 14.78676478125)
        "lbs." -> WeightUnit("lb", 453.59237)
        "knob" -> UnknownUnit("knob")
    """
    unit = normalize_unit(raw)

    if not unit:
        return _BARE_COUNT

    if unit in COUNT_ALIASES:
        return _EACH

    if unit in _VOLUME_UNITS:
        return _VOLUME_UNITS[unit]

    if unit in _WEIGHT_UNITS:
        return _WEIGHT_UNITS[unit]

    return UnknownUnit(unit)


def can_aggregate(unit1: str | None, unit2: str | None) -> bool:
    """
    Check if quantities in two units can be summed together.

    Units of the same convertible family always can; unknown units only
    combine with the same normalized label.
    """
    first = classify_unit(unit1)
    second = classify_unit(unit2)

    if first.family != second.family:
        return False
    if first.family is UnitFamily.UNKNOWN:
        return first.canonical_unit == second.canonical_unit
    return True
