"""Plain-text and tabular exports of a shopping list."""

import datetime
from typing import List, Optional

import pandas as pd

from recipe_utils.shopping.models import ShoppingItem

SEPARATOR_WIDTH = 40

CSV_COLUMNS = [
    "item",
    "display_name",
    "combined",
    "quantity",
    "unit",
    "recipe",
    "original",
]


def shopping_list_to_text(items: List[ShoppingItem], title: Optional[str] = None) -> str:
    """Format a shopping list as plain text for copying or download.

    Args:
        items: Shopping items, typically from ``build_shopping_list``.
        title: Optional heading, underlined with ``=``.

    Returns:
        The rendered list. No trailing newline.

    Example:
        >>> print(shopping_list_to_text(items))  # doctest: +SKIP
        Shopping List
        ────────────────────────────────────────
        ☐ 2 cup sugar

        Recipes:
          • Cookies
    """
    lines = []
    if title:
        lines.append(title)
        lines.append("=" * len(title))
        lines.append("")

    lines.append("Shopping List")
    lines.append("─" * SEPARATOR_WIDTH)
    for item in items:
        lines.append(f"☐ {item.combined}")

    # dict keeps first-seen order
    recipe_names = dict.fromkeys(
        entry.recipe_name for item in items for entry in item.entries
    )
    if recipe_names:
        lines.append("")
        lines.append("Recipes:")
        for name in recipe_names:
            lines.append(f"  • {name}")

    return "\n".join(lines)


def shopping_list_filename(day: datetime.date) -> str:
    """Download filename for a shopping list, e.g. ``shopping-list-2024-05-01.txt``."""
    return f"shopping-list-{day.isoformat()}.txt"


def shopping_list_to_dataframe(items: List[ShoppingItem]) -> pd.DataFrame:
    """Flatten a shopping list into one row per contributing ingredient line."""
    rows = [
        {
            "item": item.name,
            "display_name": item.display_name,
            "combined": item.combined,
            "quantity": entry.quantity,
            "unit": entry.unit,
            "recipe": entry.recipe_name,
            "original": entry.original,
        }
        for item in items
        for entry in item.entries
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def write_shopping_list_csv(items: List[ShoppingItem], output_file: str) -> None:
    """Write a shopping list to CSV, one row per ingredient line."""
    df = shopping_list_to_dataframe(items)
    df.to_csv(output_file, index=False, encoding="utf-8")
