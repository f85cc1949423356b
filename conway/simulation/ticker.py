"""
Tick source for driving a Game.

A Ticker stands in for the host's display-refresh callback: whoever owns the
clock calls fire() once per frame, and every current subscriber receives one
tick. Ticks are never queued; a callback that is not subscribed when fire()
runs simply misses that tick.
"""

from __future__ import annotations

from typing import Callable

TickCallback = Callable[[], object]


class Ticker:
    """
    Synchronous fan-out of tick events.

    Attributes:
        ticks_fired: Total number of fire() calls.
    """

    def __init__(self):
        self._subscribers: list[TickCallback] = []
        self.ticks_fired: int = 0

    def subscribe(self, callback: TickCallback) -> None:
        """Start delivering ticks to callback (no-op if already subscribed)."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: TickCallback) -> None:
        """Stop delivering ticks to callback (no-op if not subscribed)."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def is_subscribed(self, callback: TickCallback) -> bool:
        return callback in self._subscribers

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def fire(self) -> int:
        """
        Deliver one tick to every current subscriber.

        Returns:
            Number of subscribers that received the tick.
        """
        self.ticks_fired += 1
        receivers = list(self._subscribers)
        for callback in receivers:
            callback()
        return len(receivers)

    def __repr__(self) -> str:
        return f"Ticker(subscribers={self.subscriber_count}, fired={self.ticks_fired})"
