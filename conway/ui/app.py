"""
Game of Life: Streamlit Web UI

Pages selected from the sidebar:
  1. Playground: toggle cells, step, play/pause on a live grid
  2. Headless Run: evolve a random soup and chart its KPIs
"""

import streamlit as st

# Must be the very first Streamlit command
st.set_page_config(
    page_title="Game of Life",
    page_icon="🧫",
    layout="wide",
    initial_sidebar_state="expanded",
)


def main() -> None:
    """Main entry point for the Streamlit app."""

    st.sidebar.title("🧫 Game of Life")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigation",
        options=[
            "🏠 Home",
            "🔬 Playground",
            "▶️ Headless Run",
        ],
        index=1,
    )

    if page == "🏠 Home":
        _render_home()
    elif page == "🔬 Playground":
        from conway.ui.pages.playground import render_playground
        render_playground()
    elif page == "▶️ Headless Run":
        from conway.ui.pages.run_viewer import render_run_viewer
        render_run_viewer()


def _render_home() -> None:
    """Render the home page."""
    st.title("🧫 Game of Life")
    st.markdown("""
    Conway's Game of Life on a toroidal grid: the top edge touches the bottom
    and the left edge touches the right.

    ### Rules

    | Cell | Live neighbors | Next generation |
    |------|----------------|-----------------|
    | alive | 2 or 3 | stays alive |
    | dead | 3 | becomes alive |
    | any | anything else | dead |

    ### Engines

    | Engine | How it finds the next generation |
    |--------|----------------------------------|
    | **Naive** | Recounts neighbors of every live cell and its neighbors each generation |
    | **Indexed** | Keeps a live-neighbor count per frontier cell, updated on every toggle |
    """)


if __name__ == "__main__":
    main()
