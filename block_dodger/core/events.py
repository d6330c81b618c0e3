"""
Events produced while advancing the game state.
"""
from dataclasses import dataclass


class Event:
    """Base class for all game events."""
    pass


@dataclass
class ObstacleSpawned(Event):
    """A new obstacle appeared in the top row."""
    x: int


@dataclass
class ObstacleCleared(Event):
    """An obstacle fell past the bottom of the board."""
    x: int


@dataclass
class PlayerHit(Event):
    """An obstacle landed on the player. Ends the game."""
    x: int
    y: int
    score: int
