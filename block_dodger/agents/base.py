"""
Abstract base class for agents.
"""
from abc import ABC, abstractmethod
from typing import Any


class Agent(ABC):
    """
    Abstract base class for all agents.

    Follows the Gymnasium interface so an agent can drive either the
    terminal game or ``BlockDodgerEnv``.
    """

    @abstractmethod
    def act(self, observation: Any) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: Grid produced by ``get_observation_from_game_state``

        Returns:
            One of the discrete actions (stay, left, right)
        """
        pass

    def reset(self) -> None:
        """
        Reset the agent's internal state.

        Default implementation does nothing.
        """
        pass
