"""Recipe Utils - Ingredient parsing, scaling and shopping list aggregation."""

__version__ = "0.1.0"

from . import ingredients, recipes, shopping

__all__ = ["ingredients", "recipes", "shopping"]
