"""
KPI Metrics collection for the Game of Life.

MetricsCollector turns the world state and the statistics of the latest
generation into a flat dictionary suitable for CSV export and charts.
"""

from __future__ import annotations

import numpy as np

from conway.core.config import LifeConfig
from conway.core.world import World
from conway.simulation.engine import GenerationStats


# ---------------------------------------------------------------------------
# MetricsCollector
# ---------------------------------------------------------------------------

class MetricsCollector:
    """
    Collects and computes KPIs per generation.

    Usage:
      1. After each generation, call `collect(world, gen_stats)`
      2. Resulting dict is appended to `history`

    Attributes:
        config: Configuration.
        history: List of KPI dicts, one per generation.
    """

    def __init__(self, config: LifeConfig):
        self.config = config
        self.history: list[dict] = []

    def collect(self, world: World, gen_stats: GenerationStats) -> dict:
        """
        Compute all KPIs for the current generation and append to history.

        Args:
            world: Current world state.
            gen_stats: Statistics of the generation just computed.

        Returns:
            Dict of KPI_name → value.
        """
        kpis: dict = {}

        # --- Population ---
        kpis["generation"] = gen_stats.generation
        kpis["alive_count"] = world.alive_count
        kpis["births"] = gen_stats.births
        kpis["deaths"] = gen_stats.deaths
        kpis["density"] = world.alive_count / (world.width * world.height)
        kpis["extinction_flag"] = world.is_empty
        kpis["changed"] = gen_stats.changed

        # --- Activity ---
        kpis["frontier_size"] = gen_stats.frontier_size

        # --- Extent (axis-aligned, ignores wrapping) ---
        kpis["bbox_width"], kpis["bbox_height"] = self._bounding_box(world)

        self.history.append(kpis)
        return kpis

    @staticmethod
    def _bounding_box(world: World) -> tuple[int, int]:
        if world.is_empty:
            return 0, 0
        cells = np.array(list(world.alive))
        span = cells.max(axis=0) - cells.min(axis=0) + 1
        return int(span[0]), int(span[1])

    def get_history(self) -> list[dict]:
        """Return all collected KPI dicts."""
        return list(self.history)

    @staticmethod
    def kpi_names() -> list[str]:
        """Ordered KPI column names (CSV header)."""
        return [
            "generation",
            "alive_count",
            "births",
            "deaths",
            "density",
            "extinction_flag",
            "changed",
            "frontier_size",
            "bbox_width",
            "bbox_height",
        ]
