"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: cleaned accident records for one state and year.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Viewport Rule:
    The base map (US state outlines) is zoomed to the range spanned by
    the non-missing longitudes and latitudes.  Rows with either
    coordinate missing are not drawn.
"""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from ..analysis.columns import validate_columns
from ..analysis.locations import coordinate_bounds

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MARKER_STYLE: Dict[str, Any] = {'color': 'black', 'size': 2, 'opacity': 0.8}

# Padding (degrees) around the data range so edge markers stay visible
_PAD_DEG: float = 0.25

_REQUIRED_COLUMNS: List[str] = ['LONGITUD', 'LATITUDE']


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
) -> go.Figure:
    """
    Build a scatter map of accident locations.

    Args:
        df_state: Accident records for one state with sentinel values
            already replaced by ``NaN`` (see
            ``fars.analysis.locations.clean_coordinates``).
        state_num: FARS state code, used in the title.
        year: Four-digit year, used in the title.

    Returns:
        ``plotly.graph_objects.Figure`` with one ``Scattergeo`` trace,
        ready for ``fig.show()`` or ``fig.write_html()``.

    Raises:
        ValueError: If ``df_state`` is missing coordinate columns.
    """
    validate_columns(df_state, _REQUIRED_COLUMNS, label='df_state')

    df = df_state.dropna(subset=_REQUIRED_COLUMNS)
    (lon_min, lon_max), (lat_min, lat_max) = coordinate_bounds(df_state)

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=df['LONGITUD'],
        lat=df['LATITUDE'],
        mode='markers',
        marker=dict(
            color=_MARKER_STYLE['color'],
            size=_MARKER_STYLE['size'],
            opacity=_MARKER_STYLE['opacity'],
        ),
        name='Accident',
        showlegend=False,
        hovertemplate=(
            "Lon: %{lon:.4f}<br>"
            "Lat: %{lat:.4f}<extra></extra>"
        ),
    ))

    geo = dict(
        scope='north america',
        projection=dict(type='mercator'),
        showland=True,
        landcolor='white',
        showsubunits=True,
        subunitcolor='gray',
        showcountries=True,
        countrycolor='gray',
    )
    # lataxis/lonaxis ranges only when there is something to scale to
    if not np.isnan(lon_min) and not np.isnan(lat_min):
        geo.update(
            lonaxis=dict(range=[lon_min - _PAD_DEG, lon_max + _PAD_DEG]),
            lataxis=dict(range=[lat_min - _PAD_DEG, lat_max + _PAD_DEG]),
        )

    fig.update_layout(
        title=f'State {state_num} – Accidents {year}',
        geo=geo,
        template='plotly_white',
        margin=dict(l=10, r=10, t=50, b=10),
    )

    return fig
