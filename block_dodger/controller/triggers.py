"""
The two independent sources that drive the main loop: key presses and the
tick clock.
"""
import time
from typing import Callable, Optional

from block_dodger.cli.commands import parse_key
from block_dodger.core.actions import Action


class KeyboardInput:
    """Non-blocking key source reading from a curses window."""

    def __init__(self, win):
        self.win = win
        self.win.timeout(0)

    def poll(self) -> Optional[Action]:
        """Return the action for a pending key, or None right away if there is none."""
        return parse_key(self.win.getch())


class TickClock:
    """
    Fires once the tick interval has elapsed since the last tick.

    ``clock`` returns the current time in seconds; tests pass a fake one.
    """

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic):
        self.interval = interval
        self.clock = clock
        self.last_tick = clock()

    def due(self) -> bool:
        now = self.clock()
        if now - self.last_tick >= self.interval:
            self.last_tick = now
            return True
        return False
