"""Cooking unit vocabulary and canonicalization."""

from typing import Optional

# Canonical unit -> every literal form recognised at the start of an ingredient
UNIT_MAP = {
    # Volume
    "cup": ["cup", "cups"],
    "tbsp": ["tbsp", "tablespoon", "tablespoons"],
    "tsp": ["tsp", "teaspoon", "teaspoons"],
    "ml": ["ml", "milliliter", "milliliters"],
    "l": ["l", "liter", "liters", "litre", "litres"],
    # Mass
    "oz": ["oz", "ounce", "ounces"],
    "lb": ["lb", "lbs", "pound", "pounds"],
    "g": ["g", "gram", "grams"],
    "kg": ["kg", "kilogram", "kilograms"],
    # Small measures
    "pinch": ["pinch", "pinches"],
    "dash": ["dash", "dashes"],
    # Count
    "clove": ["clove", "cloves"],
    "slice": ["slice", "slices"],
    "piece": ["piece", "pieces"],
    "can": ["can", "cans"],
    "bunch": ["bunch", "bunches"],
    "sprig": ["sprig", "sprigs"],
    "head": ["head", "heads"],
    "stalk": ["stalk", "stalks"],
    "stick": ["stick", "sticks"],
    "handful": ["handful", "handfuls"],
    "package": ["package", "packages"],
    "packet": ["packet", "packets"],
}

# Create reverse mapping for lookup
UNIT_LOOKUP = {v: k for k, vs in UNIT_MAP.items() for v in vs}

# Longest first so a literal is never shadowed by one of its prefixes
UNITS = sorted(UNIT_LOOKUP, key=len, reverse=True)

NO_UNIT = "none"


def normalize_unit(unit: Optional[str]) -> Optional[str]:
    """Map a unit literal to its canonical singular form.

    Unknown units are returned lowercased rather than dropped, so they still
    group with themselves.

    Examples:
        >>> normalize_unit("Tablespoons")
        'tbsp'
        >>> normalize_unit("lbs")
        'lb'
        >>> normalize_unit(None) is None
        True
    """
    if not unit:
        return None
    unit = unit.lower()
    return UNIT_LOOKUP.get(unit, unit)
