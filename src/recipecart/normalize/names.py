"""Aisle and ingredient name normalization."""

import re

from recipecart.config import settings

# Store sections the recipe importer is asked to use
CANONICAL_AISLES: dict[str, str] = {
    r"dairy & eggs": "Dairy & Eggs",
    r"produce": "Produce",
    r"meat & seafood": "Meat & Seafood",
    r"pantry": "Pantry",
    r"bakery": "Bakery",
    r"frozen": "Frozen",
    r"beverages": "Beverages",
    r"spices": "Spices",
    r"baking": "Baking",
}

_CANONICAL_AISLE_RES = [
    (re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)"), display)
    for phrase, display in CANONICAL_AISLES.items()
]
_AND_RE = re.compile(r"\s+and\s+")
_WHITESPACE_RE = re.compile(r"\s+")


def _title_words(text: str) -> str:
    """Upper-case the first letter of each word, leaving the rest as is."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def normalize_aisle(aisle: str | None, default: str | None = None) -> str:
    """
    Normalize an aisle label for grouping and display.

    "dairy and eggs", "Dairy/Eggs" and "DAIRY & EGGS" all become "Dairy & Eggs".
    Empty labels fall back to the default aisle ("Other").
    """
    fallback = default or settings.default_aisle or "Other"

    text = (aisle or "").lower().strip()
    if not text:
        return fallback

    text = _AND_RE.sub(" & ", text)
    text = text.replace("/", " & ")
    text = _WHITESPACE_RE.sub(" ", text).strip()
    if not text:
        return fallback

    for pattern, display in _CANONICAL_AISLE_RES:
        text = pattern.sub(display, text)

    return _title_words(text)


def normalize_ingredient_name(name: str | None) -> str:
    """
    Normalize an ingredient name for matching.

    - Lowercase
    - Hyphens become spaces ("all-purpose" -> "all purpose")
    - Remove extra whitespace
    """
    if not name:
        return ""

    name = name.lower().strip().replace("-", " ")
    return " ".join(name.split())
