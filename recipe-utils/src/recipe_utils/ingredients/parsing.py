"""Ingredient parsing and scaling utilities."""

import logging
import re
from typing import Callable, List, Optional, Tuple

from recipe_utils.ingredients.formatting import format_quantity
from recipe_utils.ingredients.models import ParsedIngredient
from recipe_utils.ingredients.number_utils import (
    FRACTION_GLYPHS,
    _glyph_value,
    _parse_fraction,
)
from recipe_utils.ingredients.units import UNITS

logger = logging.getLogger(__name__)

# --- Constants ---

_GLYPH = f"[{FRACTION_GLYPHS}]"
_SLASH_FRACTION = r"[0-9]+\s*/\s*[0-9]+"
_DECIMAL = r"[0-9]+\.?[0-9]*"

# Each pattern consumes the quantity token plus any whitespace after it
_MIXED_RE = re.compile(rf"^([0-9]+)\s+({_SLASH_FRACTION}|{_GLYPH})\s*")
_NUMBER_GLYPH_RE = re.compile(rf"^({_DECIMAL})\s*({_GLYPH})\s*")
_FRACTION_RE = re.compile(rf"^({_SLASH_FRACTION})\s*")
_GLYPH_RE = re.compile(rf"^({_GLYPH})\s*")
_NUMBER_RE = re.compile(rf"^({_DECIMAL})\s*")

_UNIT_RE = re.compile(
    r"^(" + "|".join(re.escape(unit) for unit in UNITS) + r")\b\.?\s*(?:of\s+)?",
    re.IGNORECASE,
)

# --- Functions ---


def parse_ingredient(raw: str) -> ParsedIngredient:
    """Parse a free-text ingredient line into quantity, unit and name.

    The line is consumed in three stages: a leading quantity, then a unit
    from the fixed vocabulary, then whatever remains is the name. Any stage
    may come up empty; the function never raises.

    Args:
        raw: Raw ingredient text (e.g., "2 1/2 cups flour" or "salt to taste").

    Returns:
        A ParsedIngredient. ``quantity`` and ``unit`` are None when nothing
        matched; ``name`` falls back to the trimmed input when nothing is left.

    Examples:
        >>> parse_ingredient("2 1/2 cups flour")
        ParsedIngredient(quantity=2.5, unit='cups', name='flour', original='2 1/2 cups flour')
        >>> parse_ingredient("salt to taste").quantity is None
        True
    """
    original = raw.strip()

    quantity, rest = _parse_amount(original)
    unit, rest = _parse_unit(rest)
    name = _parse_name(rest, original)

    return ParsedIngredient(quantity=quantity, unit=unit, name=name, original=original)


def _parse_amount(text: str) -> Tuple[Optional[float], str]:
    """Parse a quantity from the start of an ingredient string.

    Patterns are tried in priority order: mixed numbers ("2 1/2", "2 ½"),
    a number followed by a glyph ("2½"), a bare slash fraction, a bare glyph
    and finally a plain decimal or integer.

    Args:
        text: Trimmed ingredient text.

    Returns:
        A tuple containing:
            - amount: Parsed value, or None if no quantity (or a fraction with
              a zero denominator) was found
            - rest: Text remaining after the quantity token and its trailing
              whitespace
    """
    for pattern, to_amount in _AMOUNT_PARSERS:
        match = pattern.match(text)
        if not match:
            continue
        rest = text[match.end():]
        try:
            return to_amount(match), rest
        except (ValueError, ZeroDivisionError):
            # The token looked like a quantity but has no value, e.g. "1/0"
            logger.debug("Unusable quantity %r in %r", match.group(0).strip(), text)
            return None, rest

    return None, text


def _fraction_value(token: str) -> float:
    """Value of a slash fraction or a single vulgar fraction glyph."""
    glyph = _glyph_value(token)
    if glyph is not None:
        return glyph
    return _parse_fraction(token)


def _mixed_number(match: re.Match) -> float:
    """Parse mixed numbers like '2 1/2' or '2 ½'."""
    whole = int(match.group(1))
    try:
        return whole + _fraction_value(match.group(2))
    except ZeroDivisionError:
        return float(whole)


def _number_with_glyph(match: re.Match) -> float:
    """Parse a number directly followed by a glyph, like '2½'."""
    return float(match.group(1)) + _fraction_value(match.group(2))


def _simple_fraction(match: re.Match) -> float:
    """Parse a bare fraction like '1/2'."""
    return _parse_fraction(match.group(1))


def _simple_glyph(match: re.Match) -> float:
    return _fraction_value(match.group(1))


def _simple_number(match: re.Match) -> float:
    return float(match.group(1))


_AMOUNT_PARSERS: List[Tuple[re.Pattern, Callable[[re.Match], float]]] = [
    (_MIXED_RE, _mixed_number),
    (_NUMBER_GLYPH_RE, _number_with_glyph),
    (_FRACTION_RE, _simple_fraction),
    (_GLYPH_RE, _simple_glyph),
    (_NUMBER_RE, _simple_number),
]


def _parse_unit(text: str) -> Tuple[Optional[str], str]:
    """Parse a unit from the start of an ingredient string.

    Matches one of the known unit literals case-insensitively, on a word
    boundary, optionally followed by a period and the word "of". The unit is
    returned lowercased but not canonicalized, so "cups" stays "cups".
    """
    match = _UNIT_RE.match(text)
    if not match:
        return None, text
    return match.group(1).lower(), text[match.end():]


def _parse_name(text: str, original: str) -> str:
    """Return the trimmed remainder, falling back to the original text."""
    return text.strip() or original


def scale_ingredient(raw: str, factor: float) -> str:
    """Scale the quantity of an ingredient line and re-render it.

    Lines without a quantity, or a factor of exactly 1, are returned untouched
    so their original formatting survives.

    Args:
        raw: Raw ingredient text.
        factor: Multiplier applied to the quantity.

    Returns:
        The rendered line, e.g. "2 cup sugar" for ("1 cup sugar", 2).
    """
    parsed = parse_ingredient(raw)

    if parsed.quantity is None or factor == 1:
        return raw

    parts = [format_quantity(parsed.quantity * factor)]
    if parsed.unit:
        parts.append(parsed.unit)
    parts.append(parsed.name)

    return " ".join(parts)
