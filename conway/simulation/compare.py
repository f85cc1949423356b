"""
Cross-engine comparison.

Runs the naive and indexed engines side by side from the same starting
cells and checks that they agree after every generation. Also times both
engines and verifies that the indexed engine's neighbor index is exact at
the end of the run.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from conway.core.world import IndexedWorld, NaiveWorld
from conway.utils.spatial import Coord


@dataclass
class ComparisonResult:
    """Outcome of a lockstep naive-vs-indexed run."""
    generations: int = 0
    diverged_at: Optional[int] = None
    naive_seconds: float = 0.0
    indexed_seconds: float = 0.0
    final_alive_count: int = 0
    index_errors: list[str] = field(default_factory=list)

    @property
    def equivalent(self) -> bool:
        """True if the engines never disagreed and the index is exact."""
        return self.diverged_at is None and not self.index_errors

    @property
    def speedup(self) -> float:
        """naive time / indexed time (0.0 when the indexed time is zero)."""
        if self.indexed_seconds <= 0:
            return 0.0
        return self.naive_seconds / self.indexed_seconds


def compare_engines(
    width: int,
    height: int,
    cells: Iterable[Coord],
    generations: int,
) -> ComparisonResult:
    """
    Evolve both engines from the same cells and compare after each generation.

    Stops at the first generation where the live sets differ.

    Args:
        width, height: Grid dimensions.
        cells: Initially live cells.
        generations: Number of generations to compare.

    Returns:
        ComparisonResult.
    """
    cells = list(cells)
    naive = NaiveWorld.from_cells(width, height, cells)
    indexed = IndexedWorld.from_cells(width, height, cells)
    result = ComparisonResult()

    if naive.alive != indexed.alive:
        result.diverged_at = 0
        return result

    for gen in range(1, generations + 1):
        start = time.perf_counter()
        naive.evolve()
        result.naive_seconds += time.perf_counter() - start

        start = time.perf_counter()
        indexed.evolve()
        result.indexed_seconds += time.perf_counter() - start

        result.generations = gen
        if naive.alive != indexed.alive:
            result.diverged_at = gen
            break

    result.final_alive_count = indexed.alive_count
    result.index_errors = indexed.check_index()
    return result
