from .game_state import GameState, SPAWN_PROBABILITY

__all__ = ['GameState', 'SPAWN_PROBABILITY']
