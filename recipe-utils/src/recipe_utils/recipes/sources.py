"""Recipe source utilities for loading recipes saved by the application."""

import json
import logging
import pathlib
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Union

from .models import Recipe

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"

PathLike = Union[str, pathlib.Path]


def recipes_from_export(data: Any) -> List[Recipe]:
    """Build recipes from a parsed JSON export.

    Accepts the export document (``{"exportedAt": ..., "recipes": [...]}``)
    or a bare list of recipe objects. Malformed recipe entries are skipped
    with a warning; malformed ingredient lines are dropped.

    Args:
        data: Parsed JSON.

    Returns:
        Recipes in document order.

    Raises:
        ValueError: If ``data`` is neither an export document nor a list.
    """
    if isinstance(data, dict) and "recipes" in data:
        entries = data["recipes"]
    else:
        entries = data
    if not isinstance(entries, list):
        raise ValueError("Recipe export must be a list or contain a 'recipes' list")

    recipes = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("Skipping recipe #%d: expected an object", index)
            continue
        recipes.append(_recipe_from_dict(entry))
    return recipes


def _recipe_from_dict(entry: dict) -> Recipe:
    title = str(entry.get("title") or "").strip() or DEFAULT_TITLE

    ingredients = entry.get("ingredients")
    if not isinstance(ingredients, list):
        if ingredients is not None:
            logger.warning("Recipe %r has no ingredient list", title)
        ingredients = []
    lines = [line for line in ingredients if isinstance(line, str)]
    if len(lines) != len(ingredients):
        logger.warning(
            "Dropped %d non-text ingredient(s) from %r",
            len(ingredients) - len(lines),
            title,
        )

    servings = entry.get("servings")
    if not isinstance(servings, int) or isinstance(servings, bool) or servings <= 0:
        servings = None

    return Recipe(title=title, ingredients=lines, servings=servings)


def load_recipe_export(path: PathLike) -> List[Recipe]:
    """Load recipes from a JSON export file.

    Raises:
        ValueError: If the document has the wrong shape.
        OSError, json.JSONDecodeError: If the file cannot be read or parsed.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return recipes_from_export(data)


def select_recipes(
    recipes: Iterable[Recipe], titles: Optional[Iterable[str]] = None
) -> List[Recipe]:
    """Pick recipes by title, case-insensitively, keeping their original order.

    An empty or missing ``titles`` selects every recipe.
    """
    recipes = list(recipes)
    wanted = {title.strip().lower() for title in titles or []}
    if not wanted:
        return recipes
    return [recipe for recipe in recipes if recipe.title.strip().lower() in wanted]


class RecipeSource(ABC):
    """Abstract base class for recipe sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this recipe source."""
        pass

    @abstractmethod
    def load_recipes(self, path: PathLike) -> List[Recipe]:
        """Load every recipe stored at ``path``."""
        pass


class JsonExportSource(RecipeSource):
    """Recipes from the application's JSON export."""

    @property
    def name(self) -> str:
        return "json"

    def load_recipes(self, path: PathLike) -> List[Recipe]:
        return load_recipe_export(path)


class TextRecipeSource(RecipeSource):
    """Recipes kept as plain text files.

    Each ``.txt`` file holds one recipe: the first non-blank line is the title
    and every following non-blank line is an ingredient. Lines starting with
    ``#`` are comments. ``path`` may be a single file or a directory, which is
    read in sorted filename order.
    """

    @property
    def name(self) -> str:
        return "text"

    def load_recipes(self, path: PathLike) -> List[Recipe]:
        path = pathlib.Path(path)
        files = sorted(path.glob("*.txt")) if path.is_dir() else [path]

        recipes = []
        for file_path in files:
            recipe = self.parse_recipe_text(file_path.read_text(encoding="utf-8"))
            if recipe is None:
                logger.warning("No recipe found in %s", file_path)
                continue
            recipes.append(recipe)
        return recipes

    def parse_recipe_text(self, text: str) -> Optional[Recipe]:
        """Parse one recipe from text, or None if the text has no title."""
        lines = []
        for line in text.splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                lines.append(line)

        if not lines:
            return None
        return Recipe(title=lines[0], ingredients=lines[1:])


def get_recipe_source(name: str) -> Optional[RecipeSource]:
    """Get a recipe source by name."""
    sources = {
        "json": JsonExportSource(),
        "text": TextRecipeSource(),
    }
    return sources.get(name.lower())


def get_all_recipe_sources() -> List[RecipeSource]:
    """Get all available recipe sources."""
    return [JsonExportSource(), TextRecipeSource()]
