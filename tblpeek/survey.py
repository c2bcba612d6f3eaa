"""
Whole-table reports: per-column statistics, a structural skim and top-N
category breakdowns (``surveydf``), plus a missingness/uniqueness report
(``dfuniqmissing``).
"""
from typing import Any, Hashable, List, Sequence, Tuple

import pandas as pd

from . import config
from .skim import skim
from .utils import get_unique_header, header, info, resolve_column, show_df, verbose, warn


def _is_orderable(s: pd.Series) -> bool:
    if isinstance(s.dtype, pd.CategoricalDtype):
        return bool(s.cat.ordered)
    return (pd.api.types.is_numeric_dtype(s)
            or pd.api.types.is_datetime64_any_dtype(s)
            or pd.api.types.is_timedelta64_dtype(s))


def column_extrema(s: pd.Series) -> Tuple[Any, Any]:
    """(min, max) of the non-missing values, or ("", "") when the column has no ordering."""
    if not _is_orderable(s):
        return "", ""
    x = s.dropna()
    if x.empty:
        return "", ""
    try:
        return x.min(), x.max()
    except TypeError:
        return "", ""


def survey_table(df: pd.DataFrame) -> pd.DataFrame:
    """min, max, nmissing, nuniqueall and eltype for every column.

    nuniqueall counts missing values as one more distinct value.
    """
    rows = []
    for name in df.columns:
        s = df[name]
        lo, hi = column_extrema(s)
        if isinstance(lo, str) and lo == "" and len(s):
            verbose(f"No min/max for column '{name}' ({s.dtype}).")
        rows.append({
            "variable": name,
            "min": lo,
            "max": hi,
            "nmissing": int(s.isna().sum()),
            "nuniqueall": int(s.nunique(dropna=False)),
            "eltype": str(s.dtype),
        })
    return pd.DataFrame(rows, columns=["variable", "min", "max", "nmissing", "nuniqueall", "eltype"])


def top_categories(df: pd.DataFrame, col, cap: int) -> pd.DataFrame:
    """
    The ``min(cap, distinct values)`` most frequent values of ``col``.

    Columns: the value, ``nrow`` (rows holding it) and ``proportion`` (percent
    of all rows), sorted by ``nrow`` descending. Ties keep first-seen order.
    If ``col`` is itself called ``nrow`` or ``proportion`` the count column
    gets a numeric suffix (``nrow_1``).
    """
    name = resolve_column(df, col)
    n_distinct = int(df[name].nunique(dropna=False))
    n = max(0, min(int(cap), n_distinct))
    if cap > n_distinct:
        info(f"Top {cap} for '{name}' clamped to {n_distinct} distinct values.")

    # Count columns must not clobber the value column.
    nrow_col = get_unique_header("nrow", [name])
    prop_col = get_unique_header("proportion", [name, nrow_col])
    counts = (df.groupby(name, dropna=False, sort=False, observed=True)
                .size()
                .reset_index(name=nrow_col))
    total = len(df)
    counts[prop_col] = (100.0 * counts[nrow_col] / total) if total else 0.0
    counts = counts.sort_values(nrow_col, ascending=False, kind="stable")
    return counts.head(n).reset_index(drop=True)


def _percent_format(v: float) -> str:
    return f"{v:.{config.FLOAT_PRECISION}f}"


def surveydf(df: pd.DataFrame, cats: Sequence[Tuple[Any, int]] = ()) -> None:
    """
    Print column statistics and a skim of ``df``.

    ``cats`` is a sequence of ``(column, n)`` pairs; for each one the top
    ``n`` values of that column are printed with their row counts and
    percentages, in the order given.
    """
    # Fail on a bad column before anything is printed.
    resolved: List[Tuple[Hashable, int]] = [(resolve_column(df, c), n) for c, n in cats]

    show_df(survey_table(df), index=False)
    print("\n")
    skim(df)
    print("\n")
    for name, cap in resolved:
        table = top_categories(df, name, cap)
        header(f"Top {len(table)} unique values of {name}", sep="-")
        show_df(table, index=False, float_format=_percent_format)
        print("\n")


def describe_df(df: pd.DataFrame, name: str, cats: Sequence[Tuple[Any, int]] = ()) -> None:
    """Print ``name`` as a banner underlined with '=', then run surveydf."""
    header(name, sep="=")
    print("\n")
    surveydf(df, cats)


describeDF = describe_df


def uniq_missing_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-column type, distinct and missing counts, their percentages of the
    row count, then min and max.

    A table without rows reports 0.0 for both percentages.
    """
    total = len(df)
    if total == 0 and len(df.columns):
        warn("Table has no rows; percent_missing and percent_unique reported as 0.")
    rows = []
    for name in df.columns:
        s = df[name]
        nunique = int(s.nunique(dropna=True))
        nmissing = int(s.isna().sum())
        lo, hi = column_extrema(s)
        rows.append({
            "column": name,
            "eltype": str(s.dtype),
            "nunique": nunique,
            "nmissing": nmissing,
            "percent_missing": (100.0 * nmissing / total) if total else 0.0,
            "percent_unique": (100.0 * nunique / total) if total else 0.0,
            "min": lo,
            "max": hi,
        })
    cols = ["column", "eltype", "nunique", "nmissing", "percent_missing", "percent_unique", "min", "max"]
    return pd.DataFrame(rows, columns=cols)


def dfuniqmissing(df: pd.DataFrame) -> None:
    """Print the missing/unique report for every column, untruncated."""
    show_df(uniq_missing_table(df), index=False)
