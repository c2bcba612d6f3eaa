"""
tblpeek: quick console views of pandas DataFrames and text files.

Summary statistics and top values per column, missing/unique rates,
classifier bucket counts, paged views of wide tables, and the head or tail
of a text file. Everything prints to stdout; wrap a call in
``append_output`` to send it to a file instead.
"""
from .categories import colvaluecategories, unclassified_values, value_category_counts
from .config import set_verbose
from .errors import ColumnNotFoundError, RowRangeError, TblpeekError
from .files import peek_lines, peekfile
from .output import WriteMode, append_output
from .paging import column_windows, pageddf
from .skim import skim, skim_tables
from .survey import (describeDF, describe_df, dfuniqmissing, surveydf, survey_table,
                     top_categories, uniq_missing_table)
from .utils import column_map, header, resolve_column

__version__ = "0.1.0"

__all__ = [
    "ColumnNotFoundError", "RowRangeError", "TblpeekError", "WriteMode",
    "append_output", "colvaluecategories", "column_map", "column_windows",
    "describeDF", "describe_df", "dfuniqmissing", "header", "pageddf",
    "peek_lines", "peekfile", "resolve_column", "set_verbose", "skim",
    "skim_tables", "survey_table", "surveydf", "top_categories",
    "unclassified_values", "uniq_missing_table", "value_category_counts",
]
