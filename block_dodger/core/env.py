import logging
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np

from block_dodger.core.state.game_state import GameState, SPAWN_PROBABILITY
from block_dodger.core.events import PlayerHit
from block_dodger.agents.observation_adapter import (
    get_observation_from_game_state, get_observation_space, get_action_space,
    LEFT_ACTION, RIGHT_ACTION
)
from block_dodger.ui.curses.draw_field import render_rows

logger = logging.getLogger('core.env')


class BlockDodgerEnv(gym.Env):
    """
    Gymnasium environment running the same rules as the terminal game.

    Each step applies at most one move and then advances the game one tick.
    """
    metadata = {'render_modes': ['ansi']}

    def __init__(self, config: Optional[Dict[str, Any]] = None, render_mode: Optional[str] = None):
        super().__init__()

        config = config or {}
        self.config = config
        self.width = config.get('width', 16)
        self.height = config.get('height', 16)
        self.spawn_probability = config.get('spawn_probability', SPAWN_PROBABILITY)
        self.max_episode_steps = config.get('max_episode_steps', 1000)
        self.render_mode = render_mode

        self.state = self._new_state()
        self.tick_count = 0
        self.terminated = False

        self.observation_space = get_observation_space(self.state)
        self.action_space = get_action_space()

    def _new_state(self) -> GameState:
        return GameState(
            width=self.width,
            height=self.height,
            spawn_probability=self.spawn_probability,
            rng=self.np_random,
        )

    def reset(self, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment.
        """
        super().reset(seed=seed)
        self.state = self._new_state()
        self.tick_count = 0
        self.terminated = False
        return get_observation_from_game_state(self.state), {'score': 0}

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Take a step in the environment.
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")
        if self.terminated:
            raise RuntimeError("step() called after episode terminated; call reset()")

        if action == LEFT_ACTION:
            self.state.move_left()
        elif action == RIGHT_ACTION:
            self.state.move_right()

        events = self.state.update()
        self.tick_count += 1

        terminated = self.state.check_collision()
        if terminated:
            self.terminated = True
            events.append(PlayerHit(x=self.state.player.x, y=self.state.player.y, score=self.state.score))
            logger.debug(f"Episode over after {self.tick_count} ticks, score {self.state.score}")
        truncated = not terminated and self.tick_count >= self.max_episode_steps
        reward = 0.0 if terminated else 1.0

        obs = get_observation_from_game_state(self.state)
        return obs, reward, terminated, truncated, {'score': self.state.score, 'events': events}

    def render(self) -> Optional[str]:
        """
        Render the environment as text when ``render_mode`` is ``'ansi'``.
        """
        if self.render_mode != 'ansi':
            return None
        lines = [f"Score: {self.state.score}"] + render_rows(self.state)
        return '\n'.join(lines)
