"""
Playground page for the Game of Life UI.

Allows users to:
  - Toggle individual cells
  - Step one generation, or play/pause continuous evolution
  - Clear or randomize the grid
  - Switch between the naive and indexed engines
"""

import time

import numpy as np
import pandas as pd
import streamlit as st

from conway.core.config import get_default_config
from conway.simulation.game import Game, ToggleCell, TogglePause, new_game
from conway.simulation.ticker import Ticker
from conway.ui.components.charts import population_over_time
from conway.ui.components.grid_view import render_world_grid


# ---------------------------------------------------------------------------
# Session state helpers
# ---------------------------------------------------------------------------

def _new_session_game(width: int, height: int, engine: str) -> None:
    game = new_game(width, height, engine=engine)
    ticker = Ticker()
    game.attach(ticker)
    st.session_state.pg_game = game
    st.session_state.pg_ticker = ticker
    st.session_state.pg_history = [_history_row(game)]


def _history_row(game: Game) -> dict:
    return {"generation": game.world.generation, "alive_count": game.world.alive_count}


def _init_session_state() -> None:
    """Initialize session state for the playground."""
    if "config" not in st.session_state:
        st.session_state.config = get_default_config()
    if "pg_game" not in st.session_state:
        config = st.session_state.config
        _new_session_game(config.world.width, config.world.height, config.engine.variant)


def _record_generation(game: Game) -> None:
    history = st.session_state.pg_history
    if not history or history[-1]["generation"] != game.world.generation:
        history.append(_history_row(game))


# ---------------------------------------------------------------------------
# Main render
# ---------------------------------------------------------------------------

def render_playground() -> None:
    """Render the interactive playground page."""
    _init_session_state()
    config = st.session_state.config
    game: Game = st.session_state.pg_game
    ticker: Ticker = st.session_state.pg_ticker

    st.title("🔬 Playground")

    # --- Grid setup ---
    with st.expander("Grid setup", expanded=False):
        col1, col2, col3, col4 = st.columns(4)
        width = col1.number_input("Width", min_value=1, max_value=256,
                                  value=game.world.width, key="pg_width")
        height = col2.number_input("Height", min_value=1, max_value=256,
                                   value=game.world.height, key="pg_height")
        engine = col3.selectbox("Engine", options=["indexed", "naive"],
                                index=0 if game.world.engine_name == "indexed" else 1,
                                key="pg_engine")
        if col4.button("🆕 New grid", key="pg_new"):
            _new_session_game(int(width), int(height), engine)
            st.rerun()

    # --- Controls ---
    btn1, btn2, btn3, btn4 = st.columns(4)
    play_label = "▶️ Play" if game.is_paused else "⏸️ Pause"
    if btn1.button(play_label, key="pg_play"):
        game.handle(TogglePause())
        st.rerun()
    if btn2.button("⏭️ Step", disabled=not game.is_paused, key="pg_step"):
        # A manual step runs even though the game is paused.
        game.world.evolve()
        _record_generation(game)
    if btn3.button("🧹 Clear", key="pg_clear"):
        game.world.clear()
        st.session_state.pg_history = [_history_row(game)]
    with btn4:
        density = st.slider("Density", 0.0, 1.0, value=config.seed.density,
                            step=0.05, key="pg_density")
        if st.button("🎲 Randomize", key="pg_random"):
            game.world.clear()
            game.world.seed_random(density, rng=np.random.default_rng())
            st.session_state.pg_history = [_history_row(game)]

    # --- Toggle a cell ---
    tcol1, tcol2, tcol3 = st.columns([1, 1, 2])
    x = tcol1.number_input("x", min_value=0, max_value=game.world.width - 1,
                           value=0, key="pg_x")
    y = tcol2.number_input("y", min_value=0, max_value=game.world.height - 1,
                           value=0, key="pg_y")
    with tcol3:
        st.write("")
        if st.button("🔁 Toggle cell", key="pg_toggle"):
            game.handle(ToggleCell((int(x), int(y))))
        st.caption(
            f"({int(x)}, {int(y)}) is {'alive' if game.is_alive((int(x), int(y))) else 'dead'}, "
            f"{game.neighbor_count((int(x), int(y)))} live neighbors"
        )

    # --- Grid ---
    fig = render_world_grid(
        game.world,
        cell_size=config.view.cell_size,
        colorscale=config.view.colorscale,
        show_frontier=config.view.show_frontier,
    )
    st.plotly_chart(fig, use_container_width=False)

    kcol1, kcol2, kcol3 = st.columns(3)
    kcol1.metric("Generation", game.world.generation)
    kcol2.metric("Alive", game.world.alive_count)
    kcol3.metric("State", "Paused" if game.is_paused else "Running")

    history = st.session_state.pg_history
    if len(history) > 1:
        st.plotly_chart(population_over_time(pd.DataFrame(history)), use_container_width=True)

    # --- Animation: one tick per rerun while running ---
    if not game.is_paused:
        time.sleep(config.view.tick_interval_ms / 1000)
        ticker.fire()
        _record_generation(game)
        st.rerun()

