"""Shopping list aggregation and export."""

from .aggregation import build_shopping_list
from .export import (
    shopping_list_filename,
    shopping_list_to_dataframe,
    shopping_list_to_text,
    write_shopping_list_csv,
)
from .models import ShoppingEntry, ShoppingItem

__all__ = [
    "build_shopping_list",
    "shopping_list_to_text",
    "shopping_list_filename",
    "shopping_list_to_dataframe",
    "write_shopping_list_csv",
    "ShoppingEntry",
    "ShoppingItem",
]
