from gymnasium import spaces
import numpy as np

from block_dodger.core.state.game_state import GameState

PLAYER_CHANNEL = 0
OBSTACLE_CHANNEL = 1
N_CHANNELS = 2

# Discrete actions
STAY_ACTION = 0
LEFT_ACTION = 1
RIGHT_ACTION = 2
N_ACTIONS = 3


def get_observation_from_game_state(state: GameState) -> np.ndarray:
    """
    Convert a game state to an agent observation.

    Returns:
        float32 array of shape (height, width, 2) marking the player cell in
        channel 0 and obstacle cells in channel 1.
    """
    grid = np.zeros((state.height, state.width, N_CHANNELS), dtype=np.float32)
    for x, y in state.obstacle_positions():
        grid[y, x, OBSTACLE_CHANNEL] = 1
    if state.width > 0 and state.height > 0:
        grid[state.player.y, state.player.x, PLAYER_CHANNEL] = 1
    return grid


def get_observation_space(state: GameState) -> spaces.Box:
    return spaces.Box(low=0.0, high=1.0, shape=(state.height, state.width, N_CHANNELS), dtype=np.float32)


def get_action_space() -> spaces.Discrete:
    return spaces.Discrete(N_ACTIONS)
