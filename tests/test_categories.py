import pandas as pd
import pytest

from tblpeek import ColumnNotFoundError, colvaluecategories, unclassified_values, value_category_counts


FRUIT = {"apple", "pear", "plum"}


def classify(value):
    if value in FRUIT:
        return "fruit"
    if value in {"carrot", "leek"}:
        return "vegetable"
    return False


@pytest.fixture
def food_df():
    return pd.DataFrame({
        "item": ["apple", "pear", "carrot", "rock", "apple", "sand", "rock", "plum"],
        "qty": range(8),
    })


def test_value_category_counts(food_df):
    counts = value_category_counts(food_df, classify, "item", "kind")
    assert list(counts.columns) == ["kind", "count", "percent"]
    assert counts["kind"].tolist() == ["fruit", False, "vegetable"]
    assert counts["count"].tolist() == [4, 3, 1]
    assert counts["percent"].tolist() == [50.0, 37.5, 12.5]
    assert counts["count"].sum() == len(food_df)


def test_value_category_counts_percent_rounding():
    df = pd.DataFrame({"v": ["apple", "rock", "leek"]})
    counts = value_category_counts(df, classify, "v", "kind")
    assert counts["percent"].tolist() == [33.33, 33.33, 33.33]
    assert abs(counts["percent"].sum() - 100) <= 0.1


def test_value_category_counts_leaves_input_untouched(food_df):
    before = list(food_df.columns)
    value_category_counts(food_df, classify, "item", "kind")
    assert list(food_df.columns) == before


def test_unclassified_values(food_df):
    assert unclassified_values(food_df, classify, "item") == ["rock", "sand"]


def test_unclassified_values_skips_missing_labels(capsys):
    df = pd.DataFrame({"v": ["apple", "rock", "?", "?"]})

    def partial(value):
        if value == "?":
            return None
        return classify(value)

    assert unclassified_values(df, partial, "v") == ["rock"]
    assert "Warning:" in capsys.readouterr().err
    counts = value_category_counts(df, partial, "v", "kind")
    assert counts["count"].sum() == 4


def test_colvaluecategories_prints_both_reports(food_df, capsys):
    colvaluecategories(food_df, classify, "item", "kind")
    out = capsys.readouterr().out
    rows = [line.split() for line in out.splitlines()]
    assert ["fruit", "4", "50.0"] in rows
    assert out.rstrip().endswith("['rock', 'sand']")


def test_colvaluecategories_unknown_column(food_df):
    with pytest.raises(ColumnNotFoundError):
        colvaluecategories(food_df, classify, "nope", "kind")


@pytest.mark.parametrize("newcol,expected", [
    ("count", ["count", "count_1", "percent"]),
    ("percent", ["percent", "count", "percent_1"]),
])
def test_value_category_counts_label_named_like_statistics(newcol, expected):
    df = pd.DataFrame({"v": ["a", "b", "a"]})
    counts = value_category_counts(df, lambda v: v == "a", "v", newcol)
    assert list(counts.columns) == expected
    assert counts[newcol].tolist() == [True, False]
    assert counts[expected[1]].tolist() == [2, 1]
    assert counts[expected[2]].tolist() == [66.67, 33.33]


def test_colvaluecategories_label_named_count(capsys):
    df = pd.DataFrame({"v": ["a", "b", "a"]})
    colvaluecategories(df, lambda v: v == "a", "v", "count")
    out = capsys.readouterr().out
    rows = [line.split() for line in out.splitlines()]
    assert ["True", "2", "66.67"] in rows
    assert out.rstrip().endswith("['b']")
