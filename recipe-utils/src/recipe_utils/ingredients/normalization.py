"""Ingredient normalization utilities."""

import re
from typing import Optional

from recipe_utils.ingredients.units import NO_UNIT, normalize_unit


def normalize_ingredient_name(name: str) -> str:
    """Normalize an ingredient name for grouping.

    Lowercases, drops parenthetical notes and everything after the first
    comma, and collapses whitespace.

    Args:
        name: Parsed ingredient name.

    Returns:
        The grouping name.

    Examples:
        >>> normalize_ingredient_name("Garlic, minced")
        'garlic'
        >>> normalize_ingredient_name("butter (softened)  ")
        'butter'
    """
    text = name.lower()
    text = re.sub(r"\(.*?\)", "", text)
    text = re.sub(r",.*$", "", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def canonical_unit(unit: Optional[str]) -> str:
    """Canonical unit for grouping, with ``"none"`` standing in for no unit."""
    return normalize_unit(unit) or NO_UNIT


def grouping_key(name: str, unit: Optional[str]) -> str:
    """Build the ``name|unit`` key that decides which entries merge.

    Examples:
        >>> grouping_key("Sugar", "cups")
        'sugar|cup'
        >>> grouping_key("large eggs", None)
        'large eggs|none'
    """
    return f"{normalize_ingredient_name(name)}|{canonical_unit(unit)}"
