"""
Heuristic agent that sidesteps the nearest falling block.
"""
import logging
import math
from typing import Any, List, Tuple

import numpy as np

from block_dodger.agents.base import Agent
from block_dodger.agents.observation_adapter import (
    PLAYER_CHANNEL, OBSTACLE_CHANNEL, STAY_ACTION, LEFT_ACTION, RIGHT_ACTION
)

logger = logging.getLogger("agent")


class DodgeAgent(Agent):
    """
    Looks at the player's column and its two neighbours and moves to the one
    whose nearest block above the player row is furthest away.

    A block one row above the player lands on it next tick, so such a column
    always loses against any other. Standing still wins ties.
    """

    def act(self, observation: Any) -> int:
        grid = np.asarray(observation)
        player_cells = np.argwhere(grid[:, :, PLAYER_CHANNEL] > 0)
        if len(player_cells) == 0:
            logger.warning("No player in observation, standing still")
            return STAY_ACTION
        player_y, player_x = (int(v) for v in player_cells[0])
        width = grid.shape[1]

        candidates: List[Tuple[int, int]] = [
            (STAY_ACTION, player_x),
            (LEFT_ACTION, player_x - 1),
            (RIGHT_ACTION, player_x + 1),
        ]
        best_action, best_distance = STAY_ACTION, -1.0
        for action, column in candidates:
            if not 0 <= column < width:
                continue
            distance = self._distance_to_block(grid, column, player_y)
            if distance > best_distance:
                best_action, best_distance = action, distance

        logger.debug(f"Player at ({player_x},{player_y}), chose action {best_action} (distance {best_distance})")
        return best_action

    @staticmethod
    def _distance_to_block(grid: np.ndarray, column: int, player_y: int) -> float:
        """Rows between the player row and the lowest block above it in ``column``."""
        above = np.flatnonzero(grid[:player_y, column, OBSTACLE_CHANNEL] > 0)
        if len(above) == 0:
            return math.inf
        return float(player_y - above[-1])
