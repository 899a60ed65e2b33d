"""Display unit selection and rounding for summed quantities."""

import math
import sys
from collections.abc import Collection

from recipecart.config import settings
from recipecart.normalize.units import VOLUME_FACTORS, WEIGHT_FACTORS
from recipecart.schemas import DisplayRow

_CUP_ML = VOLUME_FACTORS["cup"]
_TBSP_ML = VOLUME_FACTORS["tbsp"]
_TSP_ML = VOLUME_FACTORS["tsp"]
_LB_G = WEIGHT_FACTORS["lb"]
_OZ_G = WEIGHT_FACTORS["oz"]


def round_for_display(value: float, decimals: int | None = None) -> float:
    """
    Round half away from zero, nudged by machine epsilon.

    The nudge keeps sums like 2.9999999999999996 from rendering as 2.99.
    """
    if decimals is None:
        decimals = settings.display_decimals
    if not math.isfinite(value):
        return value

    scale = 10**decimals
    shifted = abs(value + sys.float_info.epsilon) * scale
    return math.copysign(math.floor(shifted + 0.5), value) / scale


def format_volume(
    total_ml: float,
    preferred_units: Collection[str] = (),
    decimals: int | None = None,
) -> tuple[float, str]:
    """
    Choose a display unit for a volume total and convert into it.

    A unit used by any contributing line wins over the size thresholds, larger
    units first: l, cup, tbsp, tsp, then ml. Without any hint, tiny volumes
    fall back to teaspoons.
    """
    if "l" in preferred_units or total_ml >= 1000:
        unit = "l"
    elif "cup" in preferred_units or total_ml >= _CUP_ML / 4:
        unit = "cup"
    elif "tbsp" in preferred_units or total_ml >= _TBSP_ML:
        unit = "tbsp"
    elif "tsp" in preferred_units or total_ml >= _TSP_ML:
        unit = "tsp"
    elif "ml" in preferred_units:
        unit = "ml"
    else:
        unit = "tsp"

    return round_for_display(total_ml / VOLUME_FACTORS[unit], decimals), unit


def format_weight(
    total_g: float,
    preferred_units: Collection[str] = (),
    decimals: int | None = None,
) -> tuple[float, str]:
    """Choose a display unit for a weight total (kg, lb, oz, g) and convert into it."""
    if "kg" in preferred_units or total_g >= 1000:
        unit = "kg"
    elif "lb" in preferred_units or total_g >= _LB_G:
        unit = "lb"
    elif "oz" in preferred_units or total_g >= _OZ_G:
        unit = "oz"
    else:
        unit = "g"

    return round_for_display(total_g / WEIGHT_FACTORS[unit], decimals), unit


def format_quantity(quantity: float) -> str:
    """Render a quantity without trailing zeros; zero renders as nothing."""
    if quantity <= 0:
        return ""
    return f"{quantity:.2f}".rstrip("0").rstrip(".")


def format_display_row(row: DisplayRow, show_sources: bool = False) -> str:
    """Render one shopping list row as text, e.g. "2.5 cup flour (A, B)"."""
    parts = [format_quantity(row.quantity), row.unit, row.name]
    line = " ".join(part for part in parts if part)
    if show_sources and row.sources:
        line += f" ({', '.join(row.sources)})"
    return line
