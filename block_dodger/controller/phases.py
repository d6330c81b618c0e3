from enum import Enum, auto


class Phase(Enum):
    """Game phases that control the flow of the game."""
    RUNNING = auto()    # Blocks fall, player can move
    GAME_OVER = auto()  # A block hit the player
    STOPPED = auto()    # The user quit
