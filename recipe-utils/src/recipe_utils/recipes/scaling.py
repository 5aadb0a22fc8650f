"""Serving-size adjustment for whole recipes."""

from typing import Iterable, List, Optional, Union

from recipe_utils.ingredients.parsing import scale_ingredient

from .models import Recipe


def servings_scale_factor(
    servings: Optional[int], target_servings: Optional[int]
) -> float:
    """Multiplier that turns a recipe's servings into the target servings.

    Returns 1.0 when either value is missing or not positive, so an unknown
    serving count never rescales anything.

    Examples:
        >>> servings_scale_factor(4, 6)
        1.5
        >>> servings_scale_factor(None, 6)
        1.0
    """
    if not servings or not target_servings or servings <= 0 or target_servings <= 0:
        return 1.0
    return target_servings / servings


def adjust_servings(current: int, delta: int, minimum: int = 1) -> int:
    """Step a serving count up or down, never going below ``minimum``."""
    return max(minimum, current + delta)


def scale_recipe(recipe: Union[Recipe, Iterable[str]], factor: float) -> List[str]:
    """Scale every ingredient line of a recipe by ``factor``."""
    lines = recipe.ingredients if isinstance(recipe, Recipe) else recipe
    return [scale_ingredient(line, factor) for line in lines]
