"""
2D Grid View component for the Game of Life UI.

Renders the world as a Plotly heatmap:
  - Live cells are bright, brighter the more live neighbors they have
  - Dead cells with live neighbors (the active frontier) get a faint shade
  - Everything else is background
"""

from typing import Optional

import numpy as np
import plotly.graph_objects as go
from numpy.typing import NDArray

from conway.core.world import World

LIVE_BASE = 0.4        # intensity of a live cell with no live neighbors
FRONTIER_LEVEL = 0.15  # intensity of a dead cell with live neighbors


def cell_intensity(world: World, show_frontier: bool = True) -> NDArray[np.float64]:
    """
    Map every cell to a display intensity in [0, 1], shape (height, width).

    Live cells map to LIVE_BASE..1.0 in proportion to their live-neighbor
    count (0..8). Dead frontier cells map to FRONTIER_LEVEL when
    show_frontier is set; all other cells are 0.
    """
    counts = world.neighbor_counts().astype(np.float64)
    alive = world.to_array().astype(bool)

    intensity = np.zeros_like(counts)
    intensity[alive] = LIVE_BASE + (1.0 - LIVE_BASE) * np.minimum(counts[alive], 8) / 8
    if show_frontier:
        intensity[~alive & (counts > 0)] = FRONTIER_LEVEL
    return intensity


def render_world_grid(
    world: World,
    title: Optional[str] = None,
    cell_size: int = 10,
    colorscale: str = "Viridis",
    show_frontier: bool = True,
) -> go.Figure:
    """
    Render the world grid.

    Args:
        world: World to draw.
        title: Optional chart title.
        cell_size: Pixels per cell (figure size scales with the grid).
        colorscale: Plotly colorscale name.
        show_frontier: Shade dead cells that have live neighbors.

    Returns:
        Plotly figure.
    """
    if title is None:
        title = (
            f"{world.engine_name.title()} engine ({world.width}×{world.height}) | "
            f"Generation {world.generation} | Alive {world.alive_count}"
        )

    fig = go.Figure(go.Heatmap(
        z=cell_intensity(world, show_frontier=show_frontier),
        customdata=world.neighbor_counts(),
        zmin=0.0,
        zmax=1.0,
        colorscale=colorscale,
        showscale=False,
        xgap=1,
        ygap=1,
        hovertemplate="Cell (%{x}, %{y})<br>Live neighbors: %{customdata}<extra></extra>",
    ))

    fig.update_layout(
        title=title,
        width=max(300, world.width * cell_size + 80),
        height=max(300, world.height * cell_size + 100),
        xaxis=dict(
            range=[-0.5, world.width - 0.5],
            showgrid=False,
            zeroline=False,
            scaleanchor="y",
            scaleratio=1,
            constrain="domain",
        ),
        yaxis=dict(
            range=[world.height - 0.5, -0.5],
            showgrid=False,
            zeroline=False,
        ),
        template="plotly_white",
        margin=dict(l=40, r=40, t=60, b=40),
    )

    return fig
