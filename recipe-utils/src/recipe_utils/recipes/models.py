"""Recipe data model."""

import dataclasses
from typing import Any, List, Mapping, Optional, Union


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding a recipe's title and ingredient lines."""

    title: str
    ingredients: List[str]
    servings: Optional[int] = None


RecipeLike = Union[Recipe, Mapping[str, Any]]


def as_recipe(recipe: RecipeLike) -> Recipe:
    """Accept either a Recipe or a ``{"title", "ingredients"}`` mapping."""
    if isinstance(recipe, Recipe):
        return recipe
    ingredients = recipe.get("ingredients")
    if not isinstance(ingredients, list):
        ingredients = []
    return Recipe(
        title=recipe.get("title", ""),
        ingredients=[line for line in ingredients if isinstance(line, str)],
        servings=recipe.get("servings"),
    )
