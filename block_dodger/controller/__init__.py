from .phases import Phase
from .mainloop import GameController, GameResult, run_game

__all__ = ['Phase', 'GameController', 'GameResult', 'run_game']
