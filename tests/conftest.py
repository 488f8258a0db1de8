"""
Pytest configuration and fixtures
"""
from pathlib import Path

import pandas as pd
import pytest


def _accidents_frame(months, states, lons, lats) -> pd.DataFrame:
    return pd.DataFrame({
        "STATE": states,
        "ST_CASE": range(10001, 10001 + len(months)),
        "MONTH": months,
        "LONGITUD": lons,
        "LATITUDE": lats,
        "FATALS": [1] * len(months),
    })


@pytest.fixture
def accidents_2013() -> pd.DataFrame:
    """One accident in every month, plus a second one in January."""
    months = list(range(1, 13)) + [1]
    states = [4] * 7 + [6] * 6
    lons = [-112.07, -111.93, 999.9999, -110.97, -112.40, -111.65, -114.02,
            -118.24, -121.49, -122.42, 999.9999, -117.16, -119.78]
    lats = [33.45, 33.42, 34.10, 99.9999, 33.61, 35.20, 34.48,
            34.05, 38.58, 37.77, 36.74, 32.72, 99.9999]
    return _accidents_frame(months, states, lons, lats)


@pytest.fixture
def accidents_2014() -> pd.DataFrame:
    """No accidents in July; an unknown month (99) that must be dropped."""
    months = [1, 2, 3, 4, 5, 6, 8, 9, 10, 11, 12, 12, 99]
    states = [4] * 13
    lons = [-112.0] * 13
    lats = [33.5] * 13
    return _accidents_frame(months, states, lons, lats)


@pytest.fixture
def data_dir(tmp_path, accidents_2013, accidents_2014) -> Path:
    """Directory holding accident_2013.csv.bz2 and accident_2014.csv.bz2."""
    accidents_2013.to_csv(tmp_path / "accident_2013.csv.bz2", index=False)
    accidents_2014.to_csv(tmp_path / "accident_2014.csv.bz2", index=False)
    return tmp_path
