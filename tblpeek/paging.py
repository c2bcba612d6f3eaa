"""Show a slice of rows from a wide table, a fixed number of columns at a time."""
from typing import List, Tuple

import pandas as pd

from .errors import RowRangeError
from .utils import show_df, verbose


def column_windows(ncols: int, ndisplay: int) -> List[Tuple[int, int]]:
    """1-based inclusive (first, last) column ranges of width ``ndisplay``; the last may be narrower."""
    if ndisplay < 1:
        raise ValueError(f"Error: Columns per window must be >= 1, got {ndisplay}.")
    return [(s, min(s + ndisplay - 1, ncols)) for s in range(1, ncols + 1, ndisplay)]


def _row_window(nrows: int, rstart: int, rc: int) -> Tuple[int, int]:
    if rstart < 1:
        raise RowRangeError(f"Error: Start row {rstart} must be >= 1 (1-indexed).")
    if rc < 1:
        raise RowRangeError(f"Error: Row count {rc} must be >= 1.")
    rend = rstart + rc - 1
    if rend > nrows:
        raise RowRangeError(f"Error: Rows {rstart} to {rend} are out of bounds. Table has {nrows} rows.")
    return rstart, rend


def pageddf(df: pd.DataFrame, rstart: int, rc: int, ndisplay: int) -> None:
    """
    Print ``rc`` rows starting at row ``rstart`` (1-based), ``ndisplay``
    columns per block.

    Raises RowRangeError if the rows asked for are not all in the table.
    """
    nrows, ncols = df.shape
    rstart, rend = _row_window(nrows, rstart, rc)
    windows = column_windows(ncols, ndisplay)
    verbose(f"Paging {ncols} columns in {len(windows)} window(s) of up to {ndisplay}.")

    print(f"\n****** DataFrame with {nrows} rows and {ncols} columns. ******")
    print(f"\n********** Showing rows {rstart} to {rend} ********** \n")
    for first, last in windows:
        print(f"Cols {first} to {last}")
        show_df(df.iloc[rstart - 1:rend, first - 1:last])
        print("\n")
