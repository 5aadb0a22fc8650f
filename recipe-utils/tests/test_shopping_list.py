import logging

import pytest

from recipe_utils.recipes.models import Recipe
from recipe_utils.shopping import aggregation
from recipe_utils.shopping.aggregation import build_shopping_list


def _recipe(title, *ingredients):
    return {"title": title, "ingredients": list(ingredients)}


def test_identical_lines_merge_into_one_item():
    items = build_shopping_list(
        [_recipe("Cookies", "1 cup sugar"), _recipe("Cake", "1 cup sugar")]
    )

    assert len(items) == 1
    item = items[0]
    assert item.name == "sugar"
    assert item.display_name == "sugar"
    assert item.combined == "2 cup sugar"
    assert len(item.entries) == 2
    assert [entry.recipe_name for entry in item.entries] == ["Cookies", "Cake"]
    assert [entry.quantity for entry in item.entries] == [1.0, 1.0]


def test_plural_and_singular_units_merge_using_first_unit():
    items = build_shopping_list(
        [_recipe("A", "1 cup sugar"), _recipe("B", "2 cups sugar")]
    )

    assert len(items) == 1
    assert items[0].combined == "3 cup sugar"
    assert [entry.unit for entry in items[0].entries] == ["cup", "cups"]


def test_fractions_are_summed():
    items = build_shopping_list(
        [_recipe("A", "½ cup milk"), _recipe("B", "1 1/4 cups milk")]
    )
    assert items[0].combined == "1 ¾ cup milk"


def test_unitless_quantities_are_summed():
    items = build_shopping_list(
        [_recipe("A", "3 large eggs"), _recipe("B", "2 large eggs")]
    )
    assert items[0].combined == "5 large eggs"


def test_names_are_normalized_for_grouping():
    items = build_shopping_list(
        [
            _recipe("Pasta", "2 cloves Garlic, minced"),
            _recipe("Soup", "3 cloves garlic (peeled)"),
        ]
    )

    assert len(items) == 1
    assert items[0].name == "garlic"
    assert items[0].display_name == "Garlic, minced"
    assert items[0].combined == "5 cloves Garlic, minced"


def test_missing_quantity_lists_originals():
    items = build_shopping_list(
        [_recipe("Bread", "2 cups flour"), _recipe("Gravy", "cup of flour")]
    )

    assert len(items) == 1
    assert items[0].combined == "2 cups flour; cup of flour"


def test_unquantified_line_with_different_name_stays_separate():
    items = build_shopping_list(
        [_recipe("Bread", "2 cups flour"), _recipe("Gravy", "a pinch of flour")]
    )

    assert [item.name for item in items] == ["a pinch of flour", "flour"]
    assert [item.combined for item in items] == ["a pinch of flour", "2 cups flour"]


def test_different_units_are_not_merged():
    items = build_shopping_list(
        [_recipe("A", "2 cloves garlic"), _recipe("B", "1 head garlic")]
    )

    assert [item.combined for item in items] == ["2 cloves garlic", "1 head garlic"]


def test_items_sorted_by_normalized_name():
    items = build_shopping_list(
        [_recipe("A", "2 zucchini", "1 cup Apples", "3 Bananas"), _recipe("B", "1 carrot")]
    )

    names = [item.name for item in items]
    assert names == ["apples", "bananas", "carrot", "zucchini"]
    assert names == sorted(names)


def test_entries_keep_recipe_then_line_order_and_raw_text():
    items = build_shopping_list(
        [
            _recipe("First", "  1 cup sugar ", "1 tbsp sugar"),
            _recipe("Second", "2 cups sugar"),
        ]
    )

    cup_item = next(item for item in items if item.entries[0].unit == "cup")
    assert [entry.original for entry in cup_item.entries] == [
        "  1 cup sugar ",
        "2 cups sugar",
    ]
    assert [entry.recipe_name for entry in cup_item.entries] == ["First", "Second"]
    assert len(items) == 2


def test_accepts_recipe_objects():
    items = build_shopping_list(
        [Recipe(title="Salad", ingredients=["1 head lettuce", "2 tomatoes"])]
    )
    assert [item.combined for item in items] == ["1 head lettuce", "2 tomatoes"]


@pytest.mark.parametrize(
    "recipes",
    [[], [_recipe("Empty")], [{"title": "No ingredients", "ingredients": None}]],
)
def test_empty_input_gives_empty_list(recipes):
    assert build_shopping_list(recipes) == []


def test_each_line_is_parsed_once(mocker):
    spy = mocker.spy(aggregation, "parse_ingredient")

    build_shopping_list([_recipe("A", "1 cup sugar", "2 eggs"), _recipe("B", "salt")])

    assert spy.call_count == 3
    assert [call.args[0] for call in spy.call_args_list] == ["1 cup sugar", "2 eggs", "salt"]


def test_unsummable_group_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="recipe_utils.shopping.aggregation"):
        build_shopping_list([_recipe("A", "2 cups flour"), _recipe("B", "cup of flour")])

    assert "not all have a quantity" in caplog.text


def test_factor_scales_quantities_before_summing():
    recipes = [_recipe(f"Batch {n}", "1 cup sugar") for n in range(10)]

    items = build_shopping_list(recipes, factor=0.1)

    assert len(items) == 1
    assert items[0].combined == "1 cup sugar"
    assert [entry.quantity for entry in items[0].entries] == [pytest.approx(0.1)] * 10
    assert items[0].entries[0].original == "1 cup sugar"


def test_factor_applies_to_listed_originals():
    items = build_shopping_list(
        [_recipe("Bread", "2 cups flour"), _recipe("Gravy", "cup of flour")], factor=2
    )
    assert items[0].combined == "4 cups flour; cup of flour"


def test_accented_names_sort_with_their_base_letter():
    items = build_shopping_list(
        [_recipe("A", "1 zucchini", "2 échalote", "3 eggs", "1 Éclair")]
    )
    assert [item.name for item in items] == ["échalote", "éclair", "eggs", "zucchini"]


def test_string_ingredients_are_not_split_into_characters():
    assert build_shopping_list([{"title": "Soup", "ingredients": "2 carrots"}]) == []
