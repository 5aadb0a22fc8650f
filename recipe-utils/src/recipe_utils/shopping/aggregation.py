"""Aggregation of recipe ingredients into a shopping list."""

import logging
import unicodedata
from typing import Dict, Iterable, List, Tuple

from recipe_utils.ingredients.formatting import format_quantity
from recipe_utils.ingredients.normalization import grouping_key, normalize_ingredient_name
from recipe_utils.ingredients.parsing import parse_ingredient, scale_ingredient
from recipe_utils.recipes.models import RecipeLike, as_recipe
from recipe_utils.shopping.models import ShoppingEntry, ShoppingItem

logger = logging.getLogger(__name__)


def build_shopping_list(
    recipes: Iterable[RecipeLike], factor: float = 1.0
) -> List[ShoppingItem]:
    """Merge the ingredients of several recipes into one shopping list.

    Every ingredient line is parsed and grouped by its normalized name and
    canonical unit. A group whose entries all carry a quantity is summed;
    otherwise its original lines are listed side by side, since adding
    "2 cups" to "a pinch" means nothing.

    Args:
        recipes: Recipes, or mappings with ``title`` and ``ingredients`` keys.
        factor: Multiplier applied to every parsed quantity before summing.
            Entry quantities hold the scaled value; ``original`` stays the
            raw line.

    Returns:
        Shopping items sorted by normalized name, accents ignored. Entries
        keep recipe order, then line order within each recipe.
    """
    groups: Dict[str, ShoppingItem] = {}

    for recipe in map(as_recipe, recipes):
        for raw in recipe.ingredients:
            parsed = parse_ingredient(raw)
            key = grouping_key(parsed.name, parsed.unit)

            item = groups.get(key)
            if item is None:
                item = ShoppingItem(
                    name=normalize_ingredient_name(parsed.name),
                    display_name=parsed.name,
                )
                groups[key] = item

            quantity = parsed.quantity
            if quantity is not None:
                quantity *= factor

            item.entries.append(
                ShoppingEntry(
                    quantity=quantity,
                    unit=parsed.unit,
                    recipe_name=recipe.title,
                    original=raw,
                )
            )

    items = list(groups.values())
    for item in items:
        item.combined = _combine_entries(item, factor)

    return sorted(items, key=_sort_key)


def _combine_entries(item: ShoppingItem, factor: float = 1.0) -> str:
    """Render the display string for one group of entries."""
    if all(entry.quantity is not None for entry in item.entries):
        total = 0.0
        for entry in item.entries:
            total += entry.quantity
        unit = item.entries[0].unit
        formatted = format_quantity(total)
        if unit:
            return f"{formatted} {unit} {item.display_name}"
        return f"{formatted} {item.display_name}"

    logger.debug(
        "Listing %d entries for %r separately; not all have a quantity",
        len(item.entries),
        item.name,
    )
    return "; ".join(scale_ingredient(entry.original, factor) for entry in item.entries)


def _sort_key(item: ShoppingItem) -> Tuple[str, str]:
    """Sort on the name with accents removed, so "échalote" sits among the e's."""
    decomposed = unicodedata.normalize("NFKD", item.name)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c))
    return folded, item.name
