import re
from typing import Optional

# Unicode vulgar fraction glyphs and their values
UNICODE_FRAC = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

FRACTION_GLYPHS = "".join(UNICODE_FRAC)

_FRACTION_RE = re.compile(r"^([0-9]+)\s*/\s*([0-9]+)$")


def _parse_fraction(text: str) -> float:
    """Parse a fraction string (e.g., '1/2') into a float."""
    match = _FRACTION_RE.match(text.strip())
    if not match:
        raise ValueError(f"Not a fraction: {text}")

    numerator = int(match.group(1))
    denominator = int(match.group(2))

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def _glyph_value(text: str) -> Optional[float]:
    """Return the value of a single vulgar fraction glyph, or None."""
    return UNICODE_FRAC.get(text)
