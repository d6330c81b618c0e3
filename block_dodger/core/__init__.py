"""
Game rules: state, entities, actions and events.
"""
from .state.game_state import GameState, SPAWN_PROBABILITY, TICK_RATE

__all__ = ['GameState', 'SPAWN_PROBABILITY', 'TICK_RATE']
