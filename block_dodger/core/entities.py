from dataclasses import dataclass
from typing import Tuple


@dataclass
class Player:
    """The marker steered by the user. Only ``x`` ever changes."""
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Obstacle:
    """A single falling block cell."""
    x: int
    y: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)
