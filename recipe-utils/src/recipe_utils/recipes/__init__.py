"""Recipe models, sources and serving-size utilities."""

from .models import Recipe, as_recipe
from .scaling import adjust_servings, scale_recipe, servings_scale_factor
from .sources import (
    JsonExportSource,
    RecipeSource,
    TextRecipeSource,
    get_all_recipe_sources,
    get_recipe_source,
    load_recipe_export,
    recipes_from_export,
    select_recipes,
)

__all__ = [
    "Recipe",
    "as_recipe",
    "adjust_servings",
    "scale_recipe",
    "servings_scale_factor",
    "RecipeSource",
    "JsonExportSource",
    "TextRecipeSource",
    "get_recipe_source",
    "get_all_recipe_sources",
    "load_recipe_export",
    "recipes_from_export",
    "select_recipes",
]
