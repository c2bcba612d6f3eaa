"""Bucket a column's values with a classifier and report the bucket sizes."""
from typing import Any, Callable, List

import pandas as pd

from .utils import get_unique_header, is_missing, resolve_column, show_df, verbose, warn


def _labels(df: pd.DataFrame, f: Callable[[Any], Any], name) -> pd.Series:
    return df[name].map(f)


def value_category_counts(df: pd.DataFrame, f: Callable[[Any], Any], col, newcol: str) -> pd.DataFrame:
    """
    Rows per classifier label, largest first.

    ``f`` is applied to every value of ``col``; the labels become ``newcol``.
    Returns ``newcol``, ``count`` and ``percent`` (of all rows, 2 decimals).
    Missing labels are counted as a bucket of their own. A ``newcol`` named
    ``count`` or ``percent`` pushes that statistic to a suffixed name.
    """
    name = resolve_column(df, col)
    labels = _labels(df, f, name)
    sizes = labels.groupby(labels, dropna=False, sort=False, observed=True).size()

    count_col = get_unique_header("count", [newcol])
    percent_col = get_unique_header("percent", [newcol, count_col])
    counts = pd.DataFrame({newcol: sizes.index, count_col: sizes.to_numpy()})
    total = len(df)
    counts[percent_col] = (100.0 * counts[count_col] / total).round(2) if total else 0.0
    return counts.sort_values(count_col, ascending=False, kind="stable").reset_index(drop=True)


def unclassified_values(df: pd.DataFrame, f: Callable[[Any], Any], col) -> List[Any]:
    """Distinct values of ``col`` whose label from ``f`` is falsy; missing labels are skipped."""
    name = resolve_column(df, col)
    labels = _labels(df, f, name)
    missing = labels.map(is_missing)
    n_missing = int(missing.sum())
    if n_missing:
        warn(f"{n_missing} value(s) of '{name}' got no label and were skipped.")
    unmatched = labels.map(lambda v: not is_missing(v) and not bool(v))
    return df.loc[unmatched.astype(bool), name].drop_duplicates().tolist()


def colvaluecategories(df: pd.DataFrame, f: Callable[[Any], Any], col, newcol: str) -> None:
    """
    Print how many rows fall in each bucket of ``f`` applied to ``col``,
    then the distinct values of ``col`` that ``f`` did not match.
    """
    counts = value_category_counts(df, f, col, newcol)
    verbose(f"{len(counts)} bucket(s) in '{newcol}'.")
    show_df(counts, index=False)
    print()
    print(unclassified_values(df, f, col))
