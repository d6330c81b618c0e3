from dataclasses import dataclass


class Action:
    """Base class for all player actions."""
    pass


@dataclass
class MoveLeft(Action):
    """Shift the player one column to the left."""
    pass


@dataclass
class MoveRight(Action):
    """Shift the player one column to the right."""
    pass


@dataclass
class Quit(Action):
    """Exit the game."""
    pass
