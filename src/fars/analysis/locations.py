"""
FARS Accident Locations (Functional Core)

Pure functions only. No I/O, no side effects.  Inputs are never mutated;
every function returns a new DataFrame.

Package Location: src/fars/analysis/locations.py

Sentinel Rule:
    FARS stores an unknown position as an out-of-range number rather than
    a blank.  Longitudes above 900 and latitudes above 90 are sentinels
    and become ``NaN`` before anything is plotted.
"""

from __future__ import annotations

from typing import List, Tuple, Union

import numpy as np
import pandas as pd

from ..errors import InvalidStateError
from .columns import validate_columns

# ---------------------------------------------------------------------------
# Sentinel thresholds
# ---------------------------------------------------------------------------

_LONGITUDE_SENTINEL: float = 900.0
_LATITUDE_SENTINEL: float = 90.0

_COORD_COLUMNS: List[str] = ["LONGITUD", "LATITUDE"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state_num: Union[int, str]) -> pd.DataFrame:
    """
    Keep only the accidents recorded in one state.

    Args:
        df: Accident records with a ``STATE`` column.
        state_num: FARS state code.  Coerced with ``int()``.

    Returns:
        Copy of the matching rows.

    Raises:
        InvalidStateError: If *state_num* does not occur in ``STATE``.
        ValueError: If ``STATE`` is missing or *state_num* is not integral.
    """
    validate_columns(df, ["STATE"], label="accident records")
    state_num = int(state_num)

    if state_num not in set(df["STATE"].dropna().unique().tolist()):
        raise InvalidStateError(state_num)

    return df.loc[df["STATE"] == state_num].copy()


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    Args:
        df: Accident records with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        New DataFrame; the caller's frame is left unchanged.

    Raises:
        ValueError: If a coordinate column is missing.
    """
    validate_columns(df, _COORD_COLUMNS, label="accident records")

    lon = pd.to_numeric(df["LONGITUD"], errors="coerce")
    lat = pd.to_numeric(df["LATITUDE"], errors="coerce")

    return df.assign(
        LONGITUD=lon.mask(lon > _LONGITUDE_SENTINEL, np.nan),
        LATITUDE=lat.mask(lat > _LATITUDE_SENTINEL, np.nan),
    )


def coordinate_bounds(
    df: pd.DataFrame,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Return the ``(lon_range, lat_range)`` spanned by non-missing values.

    Args:
        df: Cleaned accident records.

    Returns:
        ``((lon_min, lon_max), (lat_min, lat_max))``.  A range is
        ``(nan, nan)`` when its column has no valid values.
    """
    lon = df["LONGITUD"].dropna()
    lat = df["LATITUDE"].dropna()
    lon_range = (float(lon.min()), float(lon.max())) if not lon.empty else (np.nan, np.nan)
    lat_range = (float(lat.min()), float(lat.max())) if not lat.empty else (np.nan, np.nan)
    return lon_range, lat_range
