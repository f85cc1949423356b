"""
Conway's evolution rule (B3/S23), shared by every engine variant.
"""

from __future__ import annotations

BIRTH_COUNT = 3
SURVIVAL_COUNTS = frozenset({2, 3})


def next_state(alive: bool, live_neighbors: int) -> bool:
    """
    Decide whether a cell is alive in the next generation.

    - alive with 2 live neighbors stays alive
    - any cell with 3 live neighbors is alive
    - everything else is dead

    Args:
        alive: Current liveness of the cell.
        live_neighbors: Number of its 8 toroidal neighbors currently alive.

    Returns:
        Liveness in the next generation.
    """
    if live_neighbors == BIRTH_COUNT:
        return True
    return alive and live_neighbors in SURVIVAL_COUNTS
