"""
World (grid state) for the Game of Life engine.

Manages the 2D toroidal grid of live/dead cells and advances it one
generation at a time under Conway's rule. Two variants share one contract:

  - NaiveWorld stores only the set of live cells and recounts neighbors for
    every cell that could change on each generation.
  - IndexedWorld additionally keeps a live-neighbor count for every cell with
    at least one live neighbor, patched incrementally on every toggle, so a
    generation only re-examines that active frontier.

Operations mutate the world in place and return it, so calls chain:
world.toggle_cell(p).toggle_cell(p) leaves the world as it was.
"""

from __future__ import annotations

from collections import defaultdict
from copy import deepcopy
from typing import Iterable, Optional

import numpy as np
from numpy.typing import NDArray

from conway.core.rules import next_state
from conway.utils.spatial import Coord, neighbors, toroidal_wrap


class World:
    """
    Common state and queries for both engine variants.

    Attributes:
        width: Grid width.
        height: Grid height.
        alive: Set of live (x, y) cells, always inside the grid.
        generation: Number of evolve() calls applied so far.
    """

    engine_name = "base"

    def __init__(self, width: int, height: int):
        """
        Create an all-dead world.

        Args:
            width: Grid width (positive).
            height: Grid height (positive).
        """
        self.width = width
        self.height = height
        self.alive: set[Coord] = set()
        self.generation: int = 0

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[Coord]) -> World:
        """Create a world with the given cells alive (wrapped onto the grid)."""
        world = cls(width, height)
        for pos in cells:
            world.make_alive(pos)
        return world

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def wrap(self, pos: Coord) -> Coord:
        """Normalize a signed coordinate onto the torus."""
        return toroidal_wrap(pos[0], pos[1], self.width, self.height)

    def neighbors(self, pos: Coord) -> list[Coord]:
        """The 8 wrapped neighbors of a cell."""
        return neighbors(pos[0], pos[1], self.width, self.height)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_alive(self, pos: Coord) -> bool:
        """True if the cell at pos is alive."""
        return self.wrap(pos) in self.alive

    def neighbor_count(self, pos: Coord) -> int:
        """Number of live cells among the 8 neighbors of pos."""
        return self._count_alive_neighbors(self.wrap(pos))

    def _count_alive_neighbors(self, pos: Coord) -> int:
        alive = self.alive
        return sum(1 for n in self.neighbors(pos) if n in alive)

    @property
    def alive_count(self) -> int:
        """Number of live cells."""
        return len(self.alive)

    @property
    def is_empty(self) -> bool:
        """True if every cell is dead."""
        return not self.alive

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def toggle_cell(self, pos: Coord) -> World:
        raise NotImplementedError

    def evolve(self) -> World:
        raise NotImplementedError

    def make_alive(self, pos: Coord) -> World:
        """Bring a cell to life (no-op if already alive)."""
        if not self.is_alive(pos):
            self.toggle_cell(pos)
        return self

    def make_dead(self, pos: Coord) -> World:
        """Kill a cell (no-op if already dead)."""
        if self.is_alive(pos):
            self.toggle_cell(pos)
        return self

    def clear(self) -> World:
        """Kill every cell."""
        for pos in list(self.alive):
            self.make_dead(pos)
        return self

    def seed_random(
        self,
        density: float,
        rng: Optional[np.random.Generator] = None,
    ) -> int:
        """
        Bring a random soup of cells to life.

        Each cell is independently selected with probability `density`.
        Cells that are already alive stay alive.

        Args:
            density: Probability in [0, 1] that a cell is selected.
            rng: Random generator. None = unseeded default_rng().

        Returns:
            Number of cells selected.
        """
        if rng is None:
            rng = np.random.default_rng()
        if density <= 0:
            return 0

        mask = rng.random((self.height, self.width)) < density
        rows, cols = np.nonzero(mask)
        for y, x in zip(rows.tolist(), cols.tolist()):
            self.make_alive((x, y))
        return len(rows)

    # ------------------------------------------------------------------
    # Array views (for rendering and metrics)
    # ------------------------------------------------------------------

    def to_array(self) -> NDArray[np.uint8]:
        """0/1 grid of shape (height, width), indexed [y, x]."""
        grid = np.zeros((self.height, self.width), dtype=np.uint8)
        if self.alive:
            xs, ys = zip(*self.alive)
            grid[list(ys), list(xs)] = 1
        return grid

    def neighbor_counts(self) -> NDArray[np.uint8]:
        """
        Live-neighbor count of every cell, shape (height, width).

        Sums the grid shifted by each of the 8 offsets, which wraps the same
        way (and on tiny grids double-counts the same way) as neighbors().
        """
        grid = self.to_array()
        counts = np.zeros_like(grid)
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                counts += np.roll(grid, shift=(dy, dx), axis=(0, 1))
        return counts

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def copy(self) -> World:
        """Deep copy of this world."""
        return deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.alive == other.alive
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self.width}x{self.height}, "
            f"gen={self.generation}, alive={self.alive_count})"
        )


# ---------------------------------------------------------------------------
# Naive engine
# ---------------------------------------------------------------------------

class NaiveWorld(World):
    """World that recounts neighbors from scratch every generation."""

    engine_name = "naive"

    def toggle_cell(self, pos: Coord) -> NaiveWorld:
        """Flip the cell at pos between alive and dead."""
        pos = self.wrap(pos)
        if pos in self.alive:
            self.alive.remove(pos)
        else:
            self.alive.add(pos)
        return self

    def evolve(self) -> NaiveWorld:
        """
        Advance one generation.

        The evolvable set is every live cell plus every neighbor of a live
        cell; anything outside it has no live neighbors and stays dead.
        Each member is counted against the current alive set, and the
        survivors and births form the new alive set.
        """
        evolvable: set[Coord] = set(self.alive)
        for pos in self.alive:
            evolvable.update(self.neighbors(pos))

        self.alive = {
            pos for pos in evolvable
            if next_state(pos in self.alive, self._count_alive_neighbors(pos))
        }
        self.generation += 1
        return self


# ---------------------------------------------------------------------------
# Indexed engine
# ---------------------------------------------------------------------------

class IndexedWorld(World):
    """
    World with an incrementally maintained live-neighbor index.

    alive_adjacency[c] is the exact number of live cells among the 8
    neighbors of c. Coordinates with no live neighbors are absent; an entry
    is deleted as soon as its count drops to zero, so the index never holds
    zeros and its size tracks the active frontier.

    Attributes:
        alive_adjacency: Dict of (x, y) → live-neighbor count (> 0).
    """

    engine_name = "indexed"

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.alive_adjacency: dict[Coord, int] = {}

    def toggle_cell(self, pos: Coord) -> IndexedWorld:
        """
        Flip the cell at pos and patch the counts of its 8 neighbors.

        Only neighbor entries change; the cell's own entry is left alone
        (unless the grid is so small that the cell is its own neighbor).
        """
        pos = self.wrap(pos)
        adjacency = self.alive_adjacency

        if pos in self.alive:
            self.alive.remove(pos)
            for n in self.neighbors(pos):
                count = adjacency[n] - 1
                if count:
                    adjacency[n] = count
                else:
                    del adjacency[n]
        else:
            self.alive.add(pos)
            for n in self.neighbors(pos):
                adjacency[n] = adjacency.get(n, 0) + 1
        return self

    def evolve(self) -> IndexedWorld:
        """
        Advance one generation by re-examining only the active frontier.

        The work list is taken from the index before any flip is applied, so
        every cell is judged against its count from this generation. Live
        cells missing from the index have zero live neighbors and always die.
        """
        alive = self.alive
        work = [(pos, count, pos in alive) for pos, count in self.alive_adjacency.items()]
        work.extend((pos, 0, True) for pos in alive if pos not in self.alive_adjacency)

        births: list[Coord] = []
        deaths: list[Coord] = []
        for pos, count, is_alive in work:
            if next_state(is_alive, count) != is_alive:
                (deaths if is_alive else births).append(pos)

        for pos in births:
            self.make_alive(pos)
        for pos in deaths:
            self.make_dead(pos)

        self.generation += 1
        return self

    def neighbor_count(self, pos: Coord) -> int:
        """Live-neighbor count from the index (0 when untracked)."""
        return self.alive_adjacency.get(self.wrap(pos), 0)

    def neighbor_counts(self) -> NDArray[np.uint8]:
        """Live-neighbor count of every cell, read from the index."""
        counts = np.zeros((self.height, self.width), dtype=np.uint8)
        for (x, y), count in self.alive_adjacency.items():
            counts[y, x] = count
        return counts

    @property
    def frontier_size(self) -> int:
        """Number of coordinates tracked in the adjacency index."""
        return len(self.alive_adjacency)

    def check_index(self) -> list[str]:
        """
        Recount every neighbor from scratch and compare with the index.

        Returns:
            List of discrepancy messages (empty = index is exact).
        """
        expected: dict[Coord, int] = defaultdict(int)
        for pos in self.alive:
            for n in self.neighbors(pos):
                expected[n] += 1

        errors = []
        for pos in sorted(set(expected) | set(self.alive_adjacency)):
            want = expected.get(pos, 0)
            got = self.alive_adjacency.get(pos)
            if got == 0:
                errors.append(f"{pos}: zero count stored in index")
            elif (got or 0) != want:
                errors.append(f"{pos}: index has {got}, actual count is {want}")
        return errors

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self.alive_adjacency == other.alive_adjacency


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

ENGINES: dict[str, type[World]] = {
    NaiveWorld.engine_name: NaiveWorld,
    IndexedWorld.engine_name: IndexedWorld,
}


def new_world(width: int, height: int, engine: str = "indexed") -> World:
    """
    Create an all-dead world of the given size.

    Args:
        width, height: Grid dimensions (positive).
        engine: "naive" or "indexed".

    Raises:
        ValueError: If the engine name is unknown.
    """
    try:
        cls = ENGINES[engine]
    except KeyError:
        raise ValueError(
            f"Unknown engine '{engine}', expected one of {sorted(ENGINES)}"
        ) from None
    return cls(width, height)
