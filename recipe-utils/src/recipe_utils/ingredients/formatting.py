"""Rendering of numeric quantities as cooking-friendly text."""

import math
from typing import Tuple

# Fractions a scaled quantity may be rounded to, in tie-break order
DISPLAY_FRACTIONS = [
    (0.125, "⅛"),
    (0.25, "¼"),
    (1 / 3, "⅓"),
    (0.375, "⅜"),
    (0.5, "½"),
    (0.625, "⅝"),
    (2 / 3, "⅔"),
    (0.75, "¾"),
    (0.875, "⅞"),
]

FRACTION_TOLERANCE = 0.05


def format_quantity(n: float) -> str:
    """Render a quantity the way a recipe would print it.

    Near-whole values print as integers, values close to a common fraction
    print with the matching glyph, and anything else falls back to one
    decimal place.

    Args:
        n: The quantity to render.

    Returns:
        The rendered quantity.

    Examples:
        >>> format_quantity(3.75)
        '3 ¾'
        >>> format_quantity(2)
        '2'
        >>> format_quantity(0.5)
        '½'
        >>> format_quantity(1.2)
        '1.2'
    """
    if not math.isfinite(n):
        return str(n)

    whole = math.floor(n)
    frac = n - whole

    if frac < FRACTION_TOLERANCE:
        return str(whole)

    value, glyph = _closest_fraction(frac)
    if abs(frac - value) < FRACTION_TOLERANCE:
        return f"{whole} {glyph}" if whole > 0 else glyph

    # Round half up to one decimal place
    rounded = math.floor(n * 10 + 0.5) / 10
    if rounded % 1 == 0:
        return str(int(rounded))
    return f"{rounded:.1f}"


def _closest_fraction(frac: float) -> Tuple[float, str]:
    """Nearest display fraction; on a tie the earlier (smaller) one wins."""
    return min(DISPLAY_FRACTIONS, key=lambda candidate: abs(frac - candidate[0]))
