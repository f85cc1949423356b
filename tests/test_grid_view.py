"""
Unit tests for the grid view and chart components.

Tests cover:
- Cell intensity mapping (live cells by neighbor count, frontier shading)
- Heatmap figure construction
- Population / frontier charts from a KPI DataFrame
"""

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

from conway.core.world import IndexedWorld, NaiveWorld
from conway.ui.components.charts import frontier_over_time, population_over_time
from conway.ui.components.grid_view import (
    FRONTIER_LEVEL,
    LIVE_BASE,
    cell_intensity,
    render_world_grid,
)


BLOCK = {(1, 1), (1, 2), (2, 1), (2, 2)}


@pytest.fixture(params=[NaiveWorld, IndexedWorld])
def block_world(request):
    return request.param.from_cells(6, 5, BLOCK)


class TestCellIntensity:
    def test_shape(self, block_world):
        assert cell_intensity(block_world).shape == (5, 6)

    def test_live_cells_scale_with_neighbors(self, block_world):
        intensity = cell_intensity(block_world)
        expected = LIVE_BASE + (1.0 - LIVE_BASE) * 3 / 8
        for x, y in BLOCK:
            assert intensity[y, x] == pytest.approx(expected)

    def test_isolated_live_cell_gets_base(self):
        world = NaiveWorld.from_cells(6, 6, [(3, 3)])
        assert cell_intensity(world)[3, 3] == pytest.approx(LIVE_BASE)

    def test_frontier_shaded(self, block_world):
        intensity = cell_intensity(block_world)
        assert intensity[0, 0] == pytest.approx(FRONTIER_LEVEL)
        assert intensity[3, 3] == pytest.approx(FRONTIER_LEVEL)

    def test_frontier_hidden(self, block_world):
        intensity = cell_intensity(block_world, show_frontier=False)
        assert intensity[0, 0] == 0.0
        assert np.count_nonzero(intensity) == 4

    def test_background_zero(self, block_world):
        assert cell_intensity(block_world)[4, 5] == 0.0

    def test_values_in_unit_range(self):
        world = IndexedWorld(12, 12)
        world.seed_random(0.6, rng=np.random.default_rng(0))
        intensity = cell_intensity(world)
        assert intensity.min() >= 0.0
        assert intensity.max() <= 1.0


class TestRenderWorldGrid:
    def test_returns_heatmap_figure(self, block_world):
        fig = render_world_grid(block_world)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert isinstance(fig.data[0], go.Heatmap)

    def test_default_title(self, block_world):
        fig = render_world_grid(block_world)
        assert "Alive 4" in fig.layout.title.text
        assert "6×5" in fig.layout.title.text

    def test_custom_title_and_colorscale(self, block_world):
        fig = render_world_grid(block_world, title="Block", colorscale="Greys")
        assert fig.layout.title.text == "Block"

    def test_y_axis_points_down(self, block_world):
        fig = render_world_grid(block_world)
        assert tuple(fig.layout.yaxis.range) == (4.5, -0.5)


class TestCharts:
    @pytest.fixture
    def df(self) -> pd.DataFrame:
        return pd.DataFrame([
            {"generation": 1, "alive_count": 10, "births": 3, "deaths": 2, "frontier_size": 40},
            {"generation": 2, "alive_count": 11, "births": 4, "deaths": 3, "frontier_size": 44},
        ])

    def test_population_traces(self, df):
        fig = population_over_time(df)
        assert [trace.name for trace in fig.data] == ["Alive", "Born", "Died"]

    def test_population_missing_columns(self):
        fig = population_over_time(pd.DataFrame([{"alive_count": 3}]))
        assert len(fig.data) == 1

    def test_frontier_trace(self, df):
        fig = frontier_over_time(df)
        assert len(fig.data) == 1
        assert list(fig.data[0].y) == [40, 44]
