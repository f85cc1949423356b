"""
Spatial utilities for the Game of Life engine.

Provides toroidal (wrap-around) grid math: coordinate wrapping and
neighbor enumeration.

All functions assume a 2D grid with dimensions (width, height) where
coordinates wrap: x % width, y % height.
"""

from __future__ import annotations

Coord = tuple[int, int]

# Row-major order, center excluded.
NEIGHBOR_OFFSETS: tuple[Coord, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def toroidal_wrap(x: int, y: int, width: int, height: int) -> Coord:
    """
    Wrap (x, y) coordinates to stay within grid bounds.

    Python's % is a floored modulo, so negative offsets fold back onto the
    far edge: toroidal_wrap(-1, 0, w, h) == (w - 1, 0).

    Args:
        x, y: Raw coordinates (may be negative or >= dimensions).
        width, height: Grid dimensions.

    Returns:
        Wrapped (x, y) tuple within [0, width) and [0, height).
    """
    return x % width, y % height


def neighbors(x: int, y: int, width: int, height: int) -> list[Coord]:
    """
    Enumerate the 8 toroidal neighbors of (x, y).

    Always returns exactly 8 wrapped coordinates in NEIGHBOR_OFFSETS order.
    When width or height is <= 2 some of them coincide (on a 1-wide axis the
    cell is its own neighbor); callers count each entry, duplicates included.

    Args:
        x, y: Center position.
        width, height: Grid dimensions.

    Returns:
        List of 8 (x, y) tuples.
    """
    return [
        toroidal_wrap(x + dx, y + dy, width, height)
        for dx, dy in NEIGHBOR_OFFSETS
    ]


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """True if (x, y) already lies inside [0, width) x [0, height)."""
    return 0 <= x < width and 0 <= y < height
