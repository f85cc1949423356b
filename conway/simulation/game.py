"""
Game: a World plus a pause flag, driven by discrete commands.

A UI routes user input into three commands:
  - ToggleCell(pos): flip one cell (allowed while paused or running)
  - Tick(): advance exactly one generation, ignored while paused
  - TogglePause(): start or stop the simulation

When attached to a Ticker, the game is subscribed only while running.
Pausing removes the subscription, so no ticks reach the game (or pile up)
until it is unpaused; the first tick after unpausing advances exactly one
generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from conway.core.world import World, new_world
from conway.simulation.ticker import Ticker
from conway.utils.spatial import Coord


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ToggleCell:
    """Flip the cell at pos."""
    pos: Coord


@dataclass(frozen=True)
class Tick:
    """Advance one generation (if running)."""


@dataclass(frozen=True)
class TogglePause:
    """Switch between paused and running."""


Command = Union[ToggleCell, Tick, TogglePause]


# ---------------------------------------------------------------------------
# Game
# ---------------------------------------------------------------------------

class Game:
    """
    Interactive Game of Life session.

    Attributes:
        world: The grid being simulated.
        is_paused: While True, tick commands are ignored.
        ticker: Tick source this game is attached to, if any.
    """

    def __init__(self, world: World, is_paused: bool = True):
        self.world = world
        self.is_paused = is_paused
        self.ticker: Optional[Ticker] = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle_cell(self, pos: Coord) -> World:
        """Flip the cell at pos and return the updated world."""
        return self.world.toggle_cell(pos)

    def tick(self) -> bool:
        """
        Advance the world one generation unless paused.

        Returns:
            True if a generation was computed.
        """
        if self.is_paused:
            return False
        self.world.evolve()
        return True

    def toggle_pause(self) -> bool:
        """
        Flip the pause flag and update the tick subscription.

        Returns:
            The new value of is_paused.
        """
        self.is_paused = not self.is_paused
        self._sync_subscription()
        return self.is_paused

    def handle(self, command: Command) -> Game:
        """
        Apply one command.

        Raises:
            TypeError: If command is not a known command type.
        """
        if isinstance(command, ToggleCell):
            self.toggle_cell(command.pos)
        elif isinstance(command, Tick):
            self.tick()
        elif isinstance(command, TogglePause):
            self.toggle_pause()
        else:
            raise TypeError(f"Unknown command: {command!r}")
        return self

    # ------------------------------------------------------------------
    # Tick source
    # ------------------------------------------------------------------

    def attach(self, ticker: Ticker) -> None:
        """Link this game to a tick source (replacing any previous one)."""
        self.detach()
        self.ticker = ticker
        self._sync_subscription()

    def detach(self) -> None:
        """Drop the link to the current tick source."""
        if self.ticker is not None:
            self.ticker.unsubscribe(self._on_tick)
            self.ticker = None

    @property
    def is_subscribed(self) -> bool:
        """True if the attached ticker currently delivers ticks to this game."""
        return self.ticker is not None and self.ticker.is_subscribed(self._on_tick)

    def _on_tick(self) -> None:
        self.tick()

    def _sync_subscription(self) -> None:
        if self.ticker is None:
            return
        if self.is_paused:
            self.ticker.unsubscribe(self._on_tick)
        else:
            self.ticker.subscribe(self._on_tick)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_alive(self, pos: Coord) -> bool:
        return self.world.is_alive(pos)

    def neighbor_count(self, pos: Coord) -> int:
        return self.world.neighbor_count(pos)

    def __repr__(self) -> str:
        state = "paused" if self.is_paused else "running"
        return f"Game({state}, {self.world!r})"


def new_game(width: int, height: int, engine: str = "indexed") -> Game:
    """Create a paused game over an all-dead world."""
    return Game(new_world(width, height, engine=engine), is_paused=True)
