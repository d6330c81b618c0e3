"""Stand-ins for curses windows, the clock and the keyboard."""
from __future__ import annotations

import curses
from typing import Iterable


class FakeWindow:
    """Records what is drawn instead of talking to a terminal."""

    def __init__(self, rows: int = 12, cols: int = 12, keys: Iterable[int] = ()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.cells: dict[tuple[int, int], str] = {}
        self.attrs: dict[tuple[int, int], int] = {}
        self.boxed = False
        self.refreshes = 0
        self.delay = None

    def getmaxyx(self):
        return (self.rows, self.cols)

    def timeout(self, delay: int) -> None:
        self.delay = delay

    def getch(self) -> int:
        if self.keys:
            return self.keys.pop(0)
        return curses.ERR

    def erase(self) -> None:
        self.cells.clear()
        self.attrs.clear()
        self.boxed = False

    def box(self) -> None:
        self.boxed = True

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        if y >= self.rows or x + len(text) > self.cols:
            raise curses.error("addstr outside window")
        for offset, char in enumerate(text):
            self.cells[(y, x + offset)] = char
            if attr:
                self.attrs[(y, x + offset)] = attr

    def refresh(self) -> None:
        self.refreshes += 1

    def row_text(self, y: int) -> str:
        return "".join(self.cells.get((y, x), " ") for x in range(self.cols))


class FakeClock:
    """Time only moves when a test advances it."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedKeyboard:
    """Returns queued actions, then None."""

    def __init__(self, actions=()):
        self.actions = list(actions)

    def poll(self):
        if self.actions:
            return self.actions.pop(0)
        return None
