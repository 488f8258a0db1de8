"""
FARS Accident Reports (Imperative Shell)

Thin orchestration layer: resolves years → archive paths, calls reader.py
to fetch DataFrames, calls the functional core to summarize or filter,
and renders figures.

No parsing or aggregation logic lives here.

Package Location: src/fars/reports/accidents.py

Usage::

    from fars import summarize_years, map_state

    summarize_years([2013, 2014, 2015])
    #     MONTH   2013   2014   2015
    # 0       1   2230   2168   2368
    # ...

    map_state(4, 2013, output_path="az_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from ..analysis.locations import clean_coordinates, select_state
from ..analysis.summary import summarize_monthly_counts
from ..data import reader
from ..plotting.state_map import plot_state_map

logger = logging.getLogger(__name__)


def summarize_years(
    years: Iterable[Union[int, str]],
    data_dir: Optional[Path] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose archive is missing are logged at WARNING and left out of
    the result; they never abort the summary.

    Args:
        years: Four-digit years.
        data_dir: Directory holding the archives.  ``None`` means the
            working directory.

    Returns:
        SummaryTable: ``MONTH`` column (ascending) plus one nullable
        integer column per loaded year (ascending).  A month with no
        accidents in a year is ``<NA>``, not zero.
    """
    loads = reader.load_years(years, data_dir=data_dir)
    tables = [load.table for load in loads.values() if load.ok]
    return summarize_monthly_counts(tables)


def map_state(
    state_num: Union[int, str],
    year: Union[int, str],
    data_dir: Optional[Path] = None,
    output_path: Optional[Path] = None,
) -> None:
    """
    Plot the location of every accident in one state and year.

    When the state has no accidents an INFO notice ``"no accidents to
    plot"`` is logged and nothing is drawn.

    Args:
        state_num: FARS state code.
        year: Four-digit year.
        data_dir: Directory holding the archives.  ``None`` means the
            working directory.
        output_path: When given, the figure is written there as HTML.
            Otherwise it is shown with ``fig.show()``.

    Raises:
        AccidentFileNotFoundError: If the year's archive is absent.
        InvalidStateError: If *state_num* is not in the year's data.
    """
    data = reader.read_table(reader.resolve_path(year, data_dir))
    state_num = int(state_num)

    df_state = select_state(data, state_num)
    if df_state.empty:
        logger.info(
            "no accidents to plot",
            extra={"state": state_num, "year": int(year)},
        )
        return None

    fig = plot_state_map(clean_coordinates(df_state), state_num, int(year))

    if output_path is not None:
        out_path = Path(output_path)
        fig.write_html(str(out_path))
        logger.info(
            f"State map saved → {out_path}",
            extra={"state": state_num, "year": int(year)},
        )
    else:
        fig.show()
    return None
