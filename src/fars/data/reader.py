"""
FARS Data Reader (Imperative Shell)

This module owns every file-system touch in the package: it maps a year
to its archive name, parses the archive into a DataFrame, and loads
batches of years for the monthly summary.

Package Location: src/fars/data/reader.py

File layout:
   One bz2-compressed CSV per year, named ``accident_<YYYY>.csv.bz2``,
   located in the working directory unless an explicit ``data_dir`` is
   supplied.  Required columns are ``STATE``, ``MONTH``, ``LONGITUD`` and
   ``LATITUDE``; any other column is carried through untouched.

Partial failure:
   ``read_table`` raises immediately.  ``load_years`` is the only place a
   read failure is downgraded: the year gets a failed ``YearLoad`` and a
   WARNING is logged, so one missing archive never aborts the batch.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from ..errors import AccidentFileNotFoundError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------
_FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"
_FILENAME_PATTERN = re.compile(r"^accident_(\d{4})\.csv\.bz2$")

# Columns kept per year for the monthly summary
_SUMMARY_COLUMNS: List[str] = ["MONTH", "year"]


@dataclass(frozen=True, eq=False)
class YearLoad:
    """Outcome of loading one year inside a batch.

    Exactly one of ``table`` / ``error`` is set.  Instances compare by
    identity; a DataFrame field has no usable ``==``.
    """
    year: Union[int, str]
    table: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.table is None) == (self.error is None):
            raise ValueError(
                f"YearLoad for {self.year!r} needs exactly one of table or error"
            )

    @property
    def ok(self) -> bool:
        return self.table is not None


# ---------------------------------------------------------------------------
# Public API – single files
# ---------------------------------------------------------------------------

def make_filename(year: Union[int, str]) -> str:
    """
    Build the archive file name for a year.

    Pure string formatting, no I/O.

    Args:
        year: Four-digit year.  Strings and floats are coerced with
            ``int()``.

    Returns:
        File name such as ``'accident_2013.csv.bz2'``.

    Raises:
        ValueError: If *year* cannot be coerced to an integer.
    """
    return _FILENAME_TEMPLATE.format(year=int(year))


def resolve_path(
    year: Union[int, str],
    data_dir: Optional[Path] = None,
) -> Path:
    """
    Join the archive name for *year* onto *data_dir*.

    Args:
        year: Four-digit year.
        data_dir: Directory holding the archives.  ``None`` means the
            current working directory.

    Returns:
        Path to the archive (may not exist).
    """
    base = Path(data_dir) if data_dir is not None else Path.cwd()
    return base / make_filename(year)


def read_table(path: Union[str, Path]) -> pd.DataFrame:
    """
    Parse one accident archive into a DataFrame.

    Compression is inferred from the extension.  ``low_memory=False`` makes
    pandas read the file in one pass so mixed-type columns do not emit a
    ``DtypeWarning``.

    Args:
        path: Path to an ``accident_<YYYY>.csv.bz2`` file.

    Returns:
        Fully materialized DataFrame, one row per accident.

    Raises:
        AccidentFileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise AccidentFileNotFoundError(path)

    return pd.read_csv(path, compression="infer", low_memory=False)


def available_years(data_dir: Optional[Path] = None) -> List[int]:
    """
    Return the years that have an archive in *data_dir*.

    Args:
        data_dir: Directory to scan.  ``None`` means the working directory.

    Returns:
        Sorted list of years.  Empty list if the directory holds no
        matching files or does not exist.
    """
    base = Path(data_dir) if data_dir is not None else Path.cwd()
    if not base.is_dir():
        return []

    years = set()
    for entry in base.iterdir():
        match = _FILENAME_PATTERN.match(entry.name)
        if match and entry.is_file():
            years.add(int(match.group(1)))
    return sorted(years)


# ---------------------------------------------------------------------------
# Public API – batches
# ---------------------------------------------------------------------------

def load_years(
    years: Iterable[Union[int, str]],
    data_dir: Optional[Path] = None,
) -> Dict[Union[int, str], YearLoad]:
    """
    Load the ``MONTH`` column of several years, tagged with their year.

    Each successful table has exactly the columns ``[MONTH, year]``.  A
    year that is not an integer, or whose archive is missing or
    unreadable, is logged at WARNING (``"invalid year: <year>"``) and
    stored as a failed ``YearLoad``; the remaining years are still loaded.

    Args:
        years: Four-digit years.  Duplicates collapse to one entry.
        data_dir: Directory holding the archives.  ``None`` means the
            working directory.

    Returns:
        Dict in request order, keyed by integer year, or by the raw
        value when it cannot be coerced to an integer.
    """
    results: Dict[Union[int, str], YearLoad] = {}

    for raw_year in years:
        key = raw_year
        path = None
        try:
            key = year = int(raw_year)
            if year in results:
                continue
            path = resolve_path(year, data_dir)
            df = read_table(path)
            table = df.assign(year=year)[_SUMMARY_COLUMNS]
        except Exception as exc:
            if key in results:
                continue
            logger.warning(
                f"invalid year: {key}",
                extra={
                    "year": key,
                    "path": str(path) if path is not None else None,
                    "reason": str(exc),
                },
            )
            results[key] = YearLoad(year=key, error=str(exc))
            continue

        results[year] = YearLoad(year=year, table=table)

    return results
