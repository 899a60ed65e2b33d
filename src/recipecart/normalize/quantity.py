"""Free-text quantity parsing."""

import re

# Unicode vulgar fractions and their ASCII spelling
UNICODE_FRACTIONS: dict[str, str] = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

# "1½" reads as a mixed number, so the whole part is kept apart
_ATTACHED_FRACTION_RES = {
    symbol: re.compile(rf"(\d){symbol}") for symbol in UNICODE_FRACTIONS
}
_QUALIFIER_SYMBOL_RE = re.compile(r"[~≈]")
_QUALIFIER_WORD_RE = re.compile(r"\b(?:about|approx\.?|approximately|around|roughly)\b")
_RANGE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*[-–]\s*(\d+(?:\.\d+)?)")
_NON_NUMERIC_RE = re.compile(r"[^0-9./]")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_DECIMAL_PREFIX_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _expand_unicode_fractions(text: str) -> str:
    # One symbol at a time in table order, so "¼½" becomes "1/4 1/2"
    for symbol, ascii_fraction in UNICODE_FRACTIONS.items():
        text = _ATTACHED_FRACTION_RES[symbol].sub(rf"\1 {ascii_fraction}", text)
        text = text.replace(symbol, ascii_fraction)
    return text


def _token_value(token: str) -> float:
    """Numeric value of one cleaned token, 0.0 when it is not a number."""
    fraction = _FRACTION_RE.match(token)
    if fraction:
        denominator = float(fraction.group(2))
        if denominator:
            return float(fraction.group(1)) / denominator

    decimal = _DECIMAL_PREFIX_RE.match(token)
    if decimal:
        return float(decimal.group(0))
    return 0.0


def parse_quantity(raw: str | None) -> float:
    """
    Parse a free-text quantity into a number.

    Handles formats like:
    - "2" -> 2.0
    - "1/2" -> 0.5
    - "2 1/2" (mixed number) -> 2.5
    - "1½" -> 1.5
    - "about 1/2" -> 0.5
    - "1-2" (range, first bound is used) -> 1.0

    Never raises: empty or unparseable text yields 0.0.
    """
    if not raw:
        return 0.0

    text = str(raw).strip().lower()
    if not text:
        return 0.0

    text = _expand_unicode_fractions(text)

    # Qualifiers carry no amount
    text = _QUALIFIER_SYMBOL_RE.sub(" ", text)
    text = _QUALIFIER_WORD_RE.sub(" ", text)

    text = _RANGE_RE.sub(r"\1", text)

    total = 0.0
    for token in text.split():
        cleaned = _NON_NUMERIC_RE.sub("", token)
        if cleaned:
            total += _token_value(cleaned)

    return total
