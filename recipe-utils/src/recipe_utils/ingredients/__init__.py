"""Ingredient parsing, scaling and normalization utilities."""

from .formatting import format_quantity
from .models import ParsedIngredient
from .normalization import canonical_unit, grouping_key, normalize_ingredient_name
from .parsing import parse_ingredient, scale_ingredient
from .units import UNIT_LOOKUP, UNIT_MAP, normalize_unit

__all__ = [
    "parse_ingredient",
    "scale_ingredient",
    "format_quantity",
    "ParsedIngredient",
    "normalize_ingredient_name",
    "canonical_unit",
    "grouping_key",
    "normalize_unit",
    "UNIT_MAP",
    "UNIT_LOOKUP",
]
