"""
Reusable chart components for the Game of Life UI.

Provides helper functions that return Plotly figures for:
  - Population (alive / births / deaths) over generations
  - Active frontier size over generations
"""

import plotly.graph_objects as go
import pandas as pd


# ---------------------------------------------------------------------------
# Population charts
# ---------------------------------------------------------------------------

def population_over_time(
    df: pd.DataFrame,
    title: str = "Population Over Time",
) -> go.Figure:
    """
    Line chart of population metrics over generations.

    Args:
        df: DataFrame with generation KPIs (uses 'alive_count', 'births', 'deaths').
        title: Chart title.

    Returns:
        Plotly figure.
    """
    fig = go.Figure()

    pop_cols = {
        "alive_count": ("Alive", "#2ecc71"),
        "births": ("Born", "#3498db"),
        "deaths": ("Died", "#e74c3c"),
    }

    x = df["generation"] if "generation" in df.columns else df.index
    for col, (label, color) in pop_cols.items():
        if col in df.columns:
            fig.add_trace(go.Scatter(
                x=x,
                y=df[col],
                mode="lines",
                name=label,
                line=dict(color=color, width=2),
            ))

    fig.update_layout(
        title=title,
        xaxis_title="Generation",
        yaxis_title="Cells",
        template="plotly_white",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def frontier_over_time(
    df: pd.DataFrame,
    title: str = "Active Frontier",
) -> go.Figure:
    """Line chart of the number of cells with at least one live neighbor."""
    fig = go.Figure()
    if "frontier_size" in df.columns:
        x = df["generation"] if "generation" in df.columns else df.index
        fig.add_trace(go.Scatter(
            x=x,
            y=df["frontier_size"],
            mode="lines",
            name="Frontier",
            line=dict(color="#9b59b6", width=2),
            fill="tozeroy",
        ))

    fig.update_layout(
        title=title,
        xaxis_title="Generation",
        yaxis_title="Cells",
        template="plotly_white",
    )
    return fig
