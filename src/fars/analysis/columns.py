"""
FARS Column Checks (Functional Core)

Package Location: src/fars/analysis/columns.py
"""

from __future__ import annotations

from typing import List

import pandas as pd


def validate_columns(
    df: pd.DataFrame,
    required: List[str],
    label: str = 'DataFrame',
) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.
        label: Name of the frame used in the error message.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{label} is missing required columns: {missing}")
