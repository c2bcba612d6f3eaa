"""
Structural skim of a table: one compact summary block per kind of column.

Columns are split into numeric, bool, datetime and categorical (everything
else); each kind gets its own table of missingness and shape statistics.
Numeric columns carry a small block-character histogram.
"""
from typing import Dict, List

import numpy as np
import pandas as pd

from .utils import header, show_df

SPARK_CHARS = "▁▂▃▄▅▆▇█"
KIND_ORDER = ["numeric", "bool", "datetime", "categorical"]


def column_kind(s: pd.Series) -> str:
    if pd.api.types.is_bool_dtype(s):
        return "bool"
    if pd.api.types.is_numeric_dtype(s):
        return "numeric"
    if pd.api.types.is_datetime64_any_dtype(s):
        return "datetime"
    return "categorical"


def sparkline(s: pd.Series, bins: int = 8) -> str:
    """Histogram of a numeric Series drawn with one block character per bin; empty bins are blank."""
    x = pd.to_numeric(s, errors="coerce").dropna().astype(float)
    x = x[np.isfinite(x)]
    if x.empty:
        return ""
    counts, _ = np.histogram(x, bins=bins)
    peak = counts.max()
    top = len(SPARK_CHARS) - 1
    return "".join(SPARK_CHARS[int(round(top * c / peak))] if c else " " for c in counts)


def _base_row(name, s: pd.Series, n: int) -> dict:
    nmiss = int(s.isna().sum())
    return {
        "column": name,
        "n_missing": nmiss,
        "complete_rate": ((n - nmiss) / n) if n else 0.0,
    }


def _numeric_row(name, s, n):
    row = _base_row(name, s, n)
    x = pd.to_numeric(s, errors="coerce").dropna().astype(float)
    if x.empty:
        stats = dict.fromkeys(["mean", "std", "min", "p25", "median", "p75", "max"], np.nan)
    else:
        q = x.quantile([0.25, 0.5, 0.75])
        stats = {
            "mean": x.mean(), "std": x.std(), "min": x.min(),
            "p25": q.loc[0.25], "median": q.loc[0.5], "p75": q.loc[0.75], "max": x.max(),
        }
    row.update(stats)
    row["hist"] = sparkline(x)
    return row


def _bool_row(name, s, n):
    row = _base_row(name, s, n)
    x = s.dropna().astype(bool)
    row["mean"] = x.mean() if len(x) else np.nan
    row["counts"] = f"True: {int(x.sum())}, False: {int((~x).sum())}"
    return row


def _datetime_row(name, s, n):
    row = _base_row(name, s, n)
    row["min"] = s.min()
    row["max"] = s.max()
    row["n_unique"] = int(s.nunique(dropna=True))
    return row


def _categorical_row(name, s, n):
    row = _base_row(name, s, n)
    lens = s.dropna().astype(str).str.len()
    row["n_unique"] = int(s.nunique(dropna=True))
    row["min_len"] = int(lens.min()) if len(lens) else np.nan
    row["max_len"] = int(lens.max()) if len(lens) else np.nan
    return row


_ROW_BUILDERS = {
    "numeric": _numeric_row,
    "bool": _bool_row,
    "datetime": _datetime_row,
    "categorical": _categorical_row,
}


def skim_tables(df: pd.DataFrame) -> Dict[str, pd.DataFrame]:
    """Per-kind summary tables, only for kinds that occur in ``df``."""
    n = len(df)
    rows: Dict[str, List[dict]] = {k: [] for k in KIND_ORDER}
    for name in df.columns:
        s = df[name]
        kind = column_kind(s)
        rows[kind].append(_ROW_BUILDERS[kind](name, s, n))
    return {k: pd.DataFrame(rows[k]) for k in KIND_ORDER if rows[k]}


def skim(df: pd.DataFrame) -> None:
    """Print a data summary followed by one table per column kind."""
    tables = skim_tables(df)
    overview = pd.DataFrame({
        "": ["Number of rows", "Number of columns"] + [f"{k} columns" for k in tables],
        "value": [len(df), len(df.columns)] + [len(t) for t in tables.values()],
    })
    header("Data summary", sep="-")
    show_df(overview, index=False)
    for kind, table in tables.items():
        print()
        header(f"Column type: {kind}", sep="-")
        show_df(table, index=False)
