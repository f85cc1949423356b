"""
Game of Life: CLI Entry Point

Usage:
    python main.py --mode run --config config/default_config.json
    python main.py --mode compare --generations 100
    python main.py --ui
"""

import argparse
import sys
import time
from pathlib import Path


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Game of Life on a toroidal grid with naive and indexed engines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --ui                                         Launch Streamlit UI
  python main.py --mode run --config config/default_config.json      Evolve a random soup
  python main.py --mode compare --generations 200 --density 0.3      Check both engines agree
        """,
    )

    parser.add_argument(
        "--mode",
        choices=["run", "compare"],
        default=None,
        help="Run mode: 'run' for a headless run, 'compare' to check engine equivalence",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/default_config.json",
        help="Path to JSON config file (default: config/default_config.json)",
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Launch Streamlit web UI (ignores --mode and --config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override random seed (overrides config value)",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=None,
        help="Override max generations",
    )
    parser.add_argument(
        "--engine",
        choices=["naive", "indexed"],
        default=None,
        help="Override engine variant (run mode)",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=None,
        help="Override initial soup density",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Override output directory",
    )

    return parser.parse_args()


def launch_ui() -> None:
    """Launch the Streamlit web UI."""
    import subprocess
    ui_path = Path(__file__).parent / "conway" / "ui" / "app.py"
    if not ui_path.exists():
        print(f"Error: UI app not found at {ui_path}")
        sys.exit(1)
    subprocess.run(
        [
            sys.executable, "-m", "streamlit", "run", str(ui_path),
            "--server.port=8501",
            "--server.headless=true",
            "--browser.gatherUsageStats=false",
        ],
        check=True,
    )


def build_config(args: argparse.Namespace):
    """Load the config file (defaults if it is missing) and apply CLI overrides."""
    from conway.core.config import check_config, get_default_config, load_config

    config_path = Path(args.config)
    if config_path.exists():
        config = load_config(config_path)
    else:
        print(f"  Config {config_path} not found, using defaults.")
        config = get_default_config()

    if args.seed is not None:
        config.world.seed = args.seed
    if args.generations is not None:
        config.run.max_generations = args.generations
    if args.engine is not None:
        config.engine.variant = args.engine
    if args.density is not None:
        config.seed.density = args.density
    if args.output is not None:
        config.run.output_dir = args.output

    check_config(config)
    return config


def run_single(config) -> None:
    """Evolve one random soup and log per-generation KPIs."""
    from conway.simulation.engine import SimulationEngine
    from conway.simulation.metrics import MetricsCollector
    from conway.logging.run_manager import RunManager

    print(f"[Game of Life] Headless run")
    print(f"  Grid: {config.world.width}x{config.world.height}")
    print(f"  Engine: {config.engine.variant}")
    print(f"  Density: {config.seed.density}")
    print(f"  Seed: {config.world.seed}")
    print(f"  Max Generations: {config.run.max_generations}")
    print(f"  Output: {config.run.output_dir}")
    print()

    engine = SimulationEngine(config)
    engine.initialize()
    metrics = MetricsCollector(config)
    run_manager = RunManager(config)

    def on_generation(gen_number: int, eng: SimulationEngine) -> None:
        kpis = metrics.collect(eng.world, eng.stats_history[-1])
        run_manager.log_generation(kpis)
        print(
            f"  Gen {gen_number:5d} | Alive: {kpis['alive_count']:6d} | "
            f"Born: {kpis['births']:5d} | Died: {kpis['deaths']:5d} | "
            f"Frontier: {kpis['frontier_size']:6d}"
        )

    engine.on_generation = on_generation

    start_time = time.time()
    result = engine.run()
    elapsed = time.time() - start_time

    print()
    print(f"[Result]")
    print(f"  Generations: {result.total_generations}")
    print(f"  Initial alive: {result.initial_alive_count}")
    print(f"  Final alive: {result.final_alive_count}")
    print(f"  Extinct: {result.extinct}")
    print(f"  Stable: {result.stable}")
    print(f"  Elapsed: {elapsed:.2f}s")

    summary = {
        "engine": result.engine,
        "total_generations": result.total_generations,
        "initial_alive": result.initial_alive_count,
        "final_alive": result.final_alive_count,
        "extinct": result.extinct,
        "stable": result.stable,
        "elapsed_seconds": round(elapsed, 2),
        "seed": config.world.seed,
    }
    run_manager.finalize(summary)
    print(f"  Output saved to: {run_manager.run_dir}")


def run_compare(config) -> None:
    """Run both engines in lockstep from the same soup and report agreement."""
    import numpy as np

    from conway.core.world import NaiveWorld
    from conway.simulation.compare import compare_engines

    width, height = config.world.width, config.world.height
    soup = NaiveWorld(width, height)
    soup.seed_random(config.seed.density, rng=np.random.default_rng(config.world.seed))

    print(f"[Game of Life] Engine comparison")
    print(f"  Grid: {width}x{height}")
    print(f"  Initial alive: {soup.alive_count}")
    print(f"  Generations: {config.run.max_generations}")
    print()

    result = compare_engines(width, height, soup.alive, config.run.max_generations)

    print(f"[Result]")
    print(f"  Generations compared: {result.generations}")
    print(f"  Final alive: {result.final_alive_count}")
    print(f"  Naive: {result.naive_seconds:.3f}s | Indexed: {result.indexed_seconds:.3f}s "
          f"| Speedup: {result.speedup:.2f}x")

    if result.diverged_at is not None:
        print(f"  Engines diverged at generation {result.diverged_at}")
    for error in result.index_errors:
        print(f"  Index error: {error}")

    if not result.equivalent:
        sys.exit(1)
    print(f"  Engines agree.")


def main() -> None:
    args = parse_args()

    if args.ui:
        launch_ui()
        return

    if args.mode is None:
        print("Error: Specify --mode (run|compare) or --ui to launch the web interface.")
        print("Run with --help for usage information.")
        sys.exit(1)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.mode == "run":
        run_single(config)
    elif args.mode == "compare":
        run_compare(config)


if __name__ == "__main__":
    main()
