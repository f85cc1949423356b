"""
Headless Run page for the Game of Life UI.

Allows users to:
  - Run a seeded random soup for a number of generations
  - See live progress and KPIs
  - View population / frontier charts and download the KPI table
"""

import time
from copy import deepcopy

import streamlit as st
import pandas as pd

from conway.core.config import get_default_config
from conway.logging.run_manager import RunManager
from conway.simulation.engine import SimulationEngine
from conway.simulation.metrics import MetricsCollector
from conway.ui.components.charts import frontier_over_time, population_over_time
from conway.ui.components.grid_view import render_world_grid


# ---------------------------------------------------------------------------
# Session state helpers
# ---------------------------------------------------------------------------

def _init_session_state() -> None:
    """Initialize session state for the run viewer."""
    defaults = {
        "rv_generation_data": [],   # list of KPI dicts
        "rv_engine": None,
        "rv_result": None,
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


# ---------------------------------------------------------------------------
# Main render
# ---------------------------------------------------------------------------

def render_run_viewer() -> None:
    """Render the headless run page."""
    _init_session_state()
    st.title("▶️ Headless Run")

    config = deepcopy(st.session_state.get("config", get_default_config()))

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        max_generations = st.number_input(
            "Max Generations", min_value=1, max_value=100000,
            value=config.run.max_generations, step=10, key="rv_max_gen",
        )
    with col2:
        seed = st.number_input(
            "Seed", min_value=0, max_value=999999999,
            value=config.world.seed, step=1, key="rv_seed",
        )
    with col3:
        density = st.slider("Density", 0.0, 1.0, value=config.seed.density,
                            step=0.05, key="rv_density")
    with col4:
        engine = st.selectbox("Engine", options=["indexed", "naive"], key="rv_engine_sel")

    save_run = st.checkbox("Save metrics to disk", value=False, key="rv_save")

    if st.button("🚀 Run", key="rv_start"):
        config.engine.variant = engine
        config.seed.density = density
        _run_simulation(config, int(max_generations), int(seed), save_run)

    if st.session_state.rv_generation_data:
        _display_results()


# ---------------------------------------------------------------------------
# Simulation execution
# ---------------------------------------------------------------------------

def _run_simulation(config, max_generations: int, seed: int, save_run: bool) -> None:
    """Run the full simulation with live progress display."""
    engine = SimulationEngine(config, seed=seed)
    engine.initialize()
    metrics = MetricsCollector(config)
    run_manager = RunManager(config) if save_run else None

    progress_bar = st.progress(0.0, text="Starting run...")
    kpi_cols = st.columns(3)
    kpi_gen = kpi_cols[0].empty()
    kpi_pop = kpi_cols[1].empty()
    kpi_frontier = kpi_cols[2].empty()

    def on_generation(gen_number: int, eng: SimulationEngine) -> None:
        kpis = metrics.collect(eng.world, eng.stats_history[-1])
        if run_manager is not None:
            run_manager.log_generation(kpis)
        progress_bar.progress(min(gen_number / max_generations, 1.0),
                              text=f"Generation {gen_number}/{max_generations}")
        kpi_gen.metric("🔄 Generation", gen_number)
        kpi_pop.metric("🟢 Alive", kpis["alive_count"])
        kpi_frontier.metric("🌐 Frontier", kpis["frontier_size"])

    engine.on_generation = on_generation

    start_time = time.time()
    result = engine.run(max_generations=max_generations)
    elapsed = time.time() - start_time
    progress_bar.progress(1.0, text="✅ Run complete!")

    summary = {
        "engine": result.engine,
        "total_generations": result.total_generations,
        "initial_alive": result.initial_alive_count,
        "final_alive": result.final_alive_count,
        "extinct": result.extinct,
        "stable": result.stable,
        "elapsed_seconds": round(elapsed, 2),
        "seed": seed,
    }
    if run_manager is not None:
        run_manager.finalize(summary)
        st.info(f"Saved to {run_manager.run_dir}")

    st.session_state.rv_generation_data = metrics.get_history()
    st.session_state.rv_engine = engine
    st.session_state.rv_result = summary


# ---------------------------------------------------------------------------
# Results display
# ---------------------------------------------------------------------------

def _display_results() -> None:
    """Display generation KPI data as charts and table."""
    df = pd.DataFrame(st.session_state.rv_generation_data)
    if df.empty:
        return

    summary = st.session_state.rv_result
    if summary:
        st.markdown("---")
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Generations", summary["total_generations"])
        col2.metric("Initial Alive", summary["initial_alive"])
        col3.metric("Final Alive", summary["final_alive"])
        col4.metric("Elapsed Time", f"{summary['elapsed_seconds']}s")
        if summary["extinct"]:
            st.warning("💀 Everything died out.")
        elif summary["stable"]:
            st.success("🧱 Settled into a still life.")

    tab_pop, tab_frontier, tab_grid = st.tabs(["Population", "Frontier", "Final Grid"])
    with tab_pop:
        st.plotly_chart(population_over_time(df), use_container_width=True)
    with tab_frontier:
        st.plotly_chart(frontier_over_time(df), use_container_width=True)
    with tab_grid:
        engine = st.session_state.rv_engine
        if engine is not None:
            st.plotly_chart(render_world_grid(engine.world, cell_size=6), use_container_width=False)

    with st.expander("📋 Raw Data Table"):
        st.dataframe(df, use_container_width=True)

    st.download_button(
        "⬇️ Download CSV",
        data=df.to_csv(index=False),
        file_name="life_kpis.csv",
        mime="text/csv",
        key="rv_dl_csv",
    )
