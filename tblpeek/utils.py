"""Shared helpers: banners, stderr diagnostics, column lookup and full-width printing."""
import sys
from contextlib import contextmanager
from typing import Any, Dict, Hashable

import numpy as np
import pandas as pd

from . import config
from .errors import ColumnNotFoundError


def header(title: str, sep: str = "-", pre: str = "", post: str = "") -> None:
    """Print ``title`` between two rules of ``sep`` as wide as the title.

    ``pre`` and ``post`` are printed before the first rule and after the
    second one, e.g. newlines to space the banner from surrounding output.
    """
    rule = sep * len(title)
    print(f"{pre}{rule}\n{title}\n{rule}{post}")


#----
# Diagnostics (stderr only, so redirected report output stays clean)
#----

def _progress(msg: str) -> None:
    sys.stderr.write(str(msg) + "\n")
    sys.stderr.flush()


def info(msg: str) -> None:
    _progress(f"Info: {msg}")


def warn(msg: str) -> None:
    _progress(f"Warning: {msg}")


def verbose(msg: str) -> None:
    if config.VERBOSE:
        _progress(f"VERBOSE: {msg}")


#----
# Column lookup
#----

def column_map(df: pd.DataFrame) -> Dict[Hashable, pd.Series]:
    """Map each column name to its Series."""
    return {name: df[name] for name in df.columns}


def resolve_column(df: pd.DataFrame, ref: Any) -> Hashable:
    """Return the column name for ``ref`` (a name, or a 1-based position).

    Names win over positions, so tables with integer column labels still
    resolve by name. Raises ColumnNotFoundError for anything else.
    """
    columns = column_map(df)
    try:
        if ref in columns:
            return ref
    except TypeError:
        # unhashable reference
        raise ColumnNotFoundError(ref, columns.keys())
    if isinstance(ref, (int, np.integer)) and not isinstance(ref, bool):
        if 1 <= ref <= len(df.columns):
            return df.columns[int(ref) - 1]
    raise ColumnNotFoundError(ref, columns.keys())


def get_unique_header(candidate, existing_columns):
    """Returns a unique header name given a candidate and the existing column names."""
    existing = list(existing_columns)
    if candidate not in existing:
        return candidate
    base = candidate
    i = 1
    while f"{base}_{i}" in existing:
        i += 1
    return f"{base}_{i}"


#----
# Printing
#----

@contextmanager
def full_display():
    """Temporarily lift pandas' row/column/width truncation."""
    with pd.option_context(
        "display.max_rows", None,
        "display.max_columns", None,
        "display.width", None,
        "display.max_colwidth", None,
    ):
        yield


def show_df(df: pd.DataFrame, index: bool = True, float_format=None) -> None:
    """Print every row and column of ``df``."""
    with full_display():
        sys.stdout.write(df.to_string(index=index, float_format=float_format) + "\n")


def is_missing(value: Any) -> bool:
    """True for None/NaN/NaT/NA scalars; False for anything else, including containers."""
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
