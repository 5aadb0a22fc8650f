"""Build a combined shopping list from saved recipes."""

import argparse
import logging
import sys

from tqdm import tqdm

from recipe_utils.recipes import get_recipe_source, select_recipes
from recipe_utils.shopping import (
    build_shopping_list,
    shopping_list_to_text,
    write_shopping_list_csv,
)


def main():
    """Load recipes, merge their ingredients and write the shopping list."""
    parser = argparse.ArgumentParser(
        description="Combine recipe ingredients into a single shopping list"
    )
    parser.add_argument(
        "path",
        help="Recipe export JSON file, or a text file/directory with --source text",
    )
    parser.add_argument(
        "--source",
        choices=["json", "text"],
        default="json",
        help="Format of the recipes at PATH (default: json)",
    )
    parser.add_argument(
        "--recipe",
        action="append",
        default=[],
        metavar="TITLE",
        help="Only include this recipe (repeatable; default: all recipes)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Multiply every ingredient quantity by this factor (default: 1)",
    )
    parser.add_argument("--title", type=str, default=None, help="Heading for the list")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the text list to this file instead of stdout",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Also write one row per ingredient line to this CSV file",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.scale <= 0:
        parser.error("--scale must be positive")

    source = get_recipe_source(args.source)
    try:
        recipes = source.load_recipes(args.path)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        parser.error(f"could not load recipes from {args.path}: {e}")

    selected = select_recipes(recipes, args.recipe)
    if not selected:
        print("No matching recipes found.", file=sys.stderr)
        sys.exit(1)

    items = build_shopping_list(
        tqdm(selected, desc="Collecting ingredients"), factor=args.scale
    )
    text = shopping_list_to_text(items, args.title)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Wrote {len(items)} items from {len(selected)} recipes to {args.output}")
    else:
        print(text)

    if args.csv:
        write_shopping_list_csv(items, args.csv)
        print(f"Wrote ingredient breakdown to {args.csv}", file=sys.stderr)


if __name__ == "__main__":
    main()
