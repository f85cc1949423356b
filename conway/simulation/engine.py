"""
Simulation Engine: headless generation loop for the Game of Life.

Builds a world from configuration, seeds it with a random soup, and
advances it generation by generation, recording per-generation statistics.
Runs stop early on extinction or, optionally, when the pattern stops
changing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Callable

import numpy as np

from conway.core.config import LifeConfig
from conway.core.world import World, new_world


# ---------------------------------------------------------------------------
# Generation statistics
# ---------------------------------------------------------------------------

@dataclass
class GenerationStats:
    """Statistics collected for a single generation."""
    generation: int = 0
    alive_count: int = 0
    births: int = 0
    deaths: int = 0
    frontier_size: int = 0
    changed: bool = True


# ---------------------------------------------------------------------------
# Run result
# ---------------------------------------------------------------------------

@dataclass
class RunResult:
    """Result of a complete headless run."""
    config: LifeConfig
    seed: int
    engine: str
    initial_alive_count: int = 0
    total_generations: int = 0
    final_alive_count: int = 0
    extinct: bool = False
    stable: bool = False
    generation_stats: list[GenerationStats] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Simulation Engine
# ---------------------------------------------------------------------------

class SimulationEngine:
    """
    Headless driver around a World.

    Attributes:
        config: Configuration.
        world: The world being advanced (variant chosen by config.engine).
        rng: Seeded random generator used for the initial soup.
        stats_history: GenerationStats for every generation computed.
        on_generation: Optional callback invoked after each generation(gen_number, engine).
    """

    def __init__(self, config: LifeConfig, seed: Optional[int] = None):
        """
        Create a simulation engine.

        Args:
            config: Configuration.
            seed: Random seed override. None = use config.world.seed.
        """
        self.config = config

        if seed is not None:
            self.config.world.seed = seed

        self.world: World = new_world(
            config.world.width,
            config.world.height,
            engine=config.engine.variant,
        )
        self.rng = np.random.default_rng(self.config.world.seed)
        self.stats_history: list[GenerationStats] = []
        self.initial_alive_count: int = 0

        self.on_generation: Optional[Callable[[int, "SimulationEngine"], None]] = None

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self, density: Optional[float] = None) -> int:
        """
        Seed the world with a random soup.

        Args:
            density: Fraction of cells brought to life. None = config.seed.density.

        Returns:
            Number of live cells after seeding.
        """
        if density is None:
            density = self.config.seed.density
        self.world.seed_random(density, rng=self.rng)
        self.initial_alive_count = self.world.alive_count
        return self.initial_alive_count

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def step(self) -> GenerationStats:
        """
        Advance one generation and record its statistics.

        Returns:
            GenerationStats for the generation just computed.
        """
        world = self.world
        before = set(world.alive)
        world.evolve()
        after = world.alive

        stats = GenerationStats(
            generation=world.generation,
            alive_count=len(after),
            births=len(after - before),
            deaths=len(before - after),
            frontier_size=int(np.count_nonzero(world.neighbor_counts())),
        )
        stats.changed = stats.births > 0 or stats.deaths > 0
        self.stats_history.append(stats)

        if self.on_generation is not None:
            self.on_generation(world.generation, self)

        return stats

    def run(self, max_generations: Optional[int] = None) -> RunResult:
        """
        Advance the world until a stop condition is met.

        Stops when ANY of these conditions is met:
          - max_generations computed
          - extinction (no live cells)
          - no cell changed (only if config.run.stop_when_stable)

        Args:
            max_generations: Generation limit. None = config.run.max_generations.

        Returns:
            RunResult with summary statistics.
        """
        if max_generations is None:
            max_generations = self.config.run.max_generations

        result = RunResult(
            config=self.config,
            seed=self.config.world.seed,
            engine=self.world.engine_name,
            initial_alive_count=self.world.alive_count,
        )

        generations_run = 0
        while generations_run < max_generations:
            if self.world.is_empty:
                break

            stats = self.step()
            generations_run += 1

            if self.world.is_empty:
                break
            if self.config.run.stop_when_stable and not stats.changed:
                result.stable = True
                break

        result.total_generations = generations_run
        result.final_alive_count = self.world.alive_count
        result.extinct = self.world.is_empty
        result.generation_stats = list(self.stats_history)
        return result

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def alive_count(self) -> int:
        """Number of live cells."""
        return self.world.alive_count

    @property
    def current_generation(self) -> int:
        """Number of generations computed so far."""
        return self.world.generation

    def __repr__(self) -> str:
        return (
            f"SimulationEngine(engine={self.world.engine_name}, "
            f"gen={self.current_generation}, alive={self.alive_count})"
        )
