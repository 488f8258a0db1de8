"""
Unit tests for the state accident map figure
"""
import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

from fars.plotting.state_map import plot_state_map


@pytest.mark.unit
class TestPlotStateMap:

    @pytest.fixture
    def df_state(self):
        return pd.DataFrame({
            "STATE": [4, 4, 4, 4],
            "LONGITUD": [-112.0, -110.0, np.nan, -111.0],
            "LATITUDE": [33.0, 35.0, 34.0, np.nan],
        })

    def test_returns_figure_with_valid_points_only(self, df_state):
        fig = plot_state_map(df_state, 4, 2013)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        trace = fig.data[0]
        assert isinstance(trace, go.Scattergeo)
        assert list(trace.lon) == [-112.0, -110.0]
        assert list(trace.lat) == [33.0, 35.0]

    def test_viewport_spans_non_missing_range(self, df_state):
        fig = plot_state_map(df_state, 4, 2013)

        lon_lo, lon_hi = fig.layout.geo.lonaxis.range
        lat_lo, lat_hi = fig.layout.geo.lataxis.range
        assert lon_lo < -112.0 and lon_hi > -110.0
        assert lat_lo < 33.0 and lat_hi > 35.0

    def test_title_names_state_and_year(self, df_state):
        fig = plot_state_map(df_state, 4, 2013)
        assert "4" in fig.layout.title.text
        assert "2013" in fig.layout.title.text

    def test_no_valid_coordinates(self):
        df = pd.DataFrame({"LONGITUD": [np.nan], "LATITUDE": [np.nan]})
        fig = plot_state_map(df, 4, 2013)
        lon = fig.data[0].lon
        assert lon is None or len(lon) == 0
        assert fig.layout.geo.lonaxis.range is None

    def test_missing_columns_raise(self):
        with pytest.raises(ValueError, match="LONGITUD"):
            plot_state_map(pd.DataFrame({"LATITUDE": [1.0]}), 4, 2013)
