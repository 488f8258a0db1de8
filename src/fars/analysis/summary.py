"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input: YearTables (DataFrames with ``MONTH`` and ``year`` columns).
Output: SummaryTable (one row per month, one column per year).

Package Location: src/fars/analysis/summary.py

Gap Rule:
    A month with no accidents in a given year is left as ``<NA>`` in the
    pivot, never filled with zero.  Counts use the nullable ``Int64``
    dtype so present cells stay integers alongside the gaps.
"""

from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from .columns import validate_columns

_MONTH_MIN: int = 1
_MONTH_MAX: int = 12

_REQUIRED_COLUMNS: List[str] = ["MONTH", "year"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_monthly_counts(tables: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """
    Count accidents per month and year and pivot years into columns.

    Args:
        tables: YearTables, each with columns ``MONTH`` and ``year``.
            Extra columns are ignored.

    Returns:
        DataFrame with a ``MONTH`` column (ascending, only months 1-12 that
        occur in the data) followed by one ``Int64`` column per year
        (ascending, integer labels).  Empty input yields an empty frame
        with only the ``MONTH`` column.

    Raises:
        ValueError: If a table is missing ``MONTH`` or ``year``.
    """
    frames = list(tables)
    for df in frames:
        validate_columns(df, _REQUIRED_COLUMNS, label="year table")

    if not frames:
        return pd.DataFrame({"MONTH": pd.Series(dtype="int64")})

    combined = pd.concat(
        [df[_REQUIRED_COLUMNS] for df in frames], ignore_index=True
    )

    # FARS codes an unknown month as 99
    months = pd.to_numeric(combined["MONTH"], errors="coerce")
    in_range = months.between(_MONTH_MIN, _MONTH_MAX)
    combined = combined[in_range].copy()
    combined["MONTH"] = months[in_range].astype(int)
    combined["year"] = combined["year"].astype(int)

    if combined.empty:
        return pd.DataFrame({"MONTH": pd.Series(dtype="int64")})

    counts = combined.groupby(["year", "MONTH"]).size()

    wide = (
        counts.unstack("year")
        .sort_index()
        .sort_index(axis=1)
        .astype("Int64")
    )
    wide.columns = [int(col) for col in wide.columns]
    wide.columns.name = None

    return wide.reset_index()
