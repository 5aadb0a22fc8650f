import datetime

import pandas as pd
import pytest

from recipe_utils.shopping import (
    build_shopping_list,
    shopping_list_filename,
    shopping_list_to_dataframe,
    shopping_list_to_text,
    write_shopping_list_csv,
)

SEPARATOR = "─" * 40


@pytest.fixture
def items():
    return build_shopping_list(
        [
            {"title": "Cookies", "ingredients": ["1 cup sugar", "2 large eggs"]},
            {"title": "Cake", "ingredients": ["1 cup sugar", "a pinch of salt"]},
        ]
    )


def test_shopping_list_to_text(items):
    expected = "\n".join(
        [
            "Shopping List",
            SEPARATOR,
            "☐ a pinch of salt",
            "☐ 2 large eggs",
            "☐ 2 cup sugar",
            "",
            "Recipes:",
            "  • Cake",
            "  • Cookies",
        ]
    )
    assert shopping_list_to_text(items) == expected


def test_shopping_list_to_text_with_title(items):
    text = shopping_list_to_text(items, "Reel Recipes")
    lines = text.split("\n")

    assert lines[:4] == ["Reel Recipes", "============", "", "Shopping List"]
    assert lines[4] == SEPARATOR


def test_shopping_list_to_text_empty():
    assert shopping_list_to_text([]) == f"Shopping List\n{SEPARATOR}"


def test_shopping_list_to_text_is_deterministic(items):
    assert shopping_list_to_text(items, "Week 1") == shopping_list_to_text(
        items, "Week 1"
    )


def test_shopping_list_filename():
    assert (
        shopping_list_filename(datetime.date(2024, 5, 1))
        == "shopping-list-2024-05-01.txt"
    )


def test_shopping_list_to_dataframe(items):
    df = shopping_list_to_dataframe(items)

    assert list(df.columns) == [
        "item",
        "display_name",
        "combined",
        "quantity",
        "unit",
        "recipe",
        "original",
    ]
    assert len(df) == 4
    sugar = df[df["item"] == "sugar"]
    assert list(sugar["recipe"]) == ["Cookies", "Cake"]
    assert set(sugar["combined"]) == {"2 cup sugar"}


def test_shopping_list_to_dataframe_empty():
    df = shopping_list_to_dataframe([])
    assert df.empty
    assert "combined" in df.columns


def test_write_shopping_list_csv(items, tmp_path):
    output_file = tmp_path / "shopping.csv"
    write_shopping_list_csv(items, str(output_file))

    df = pd.read_csv(output_file)
    assert len(df) == 4
    assert df.loc[df["item"] == "large eggs", "quantity"].tolist() == [2.0]
