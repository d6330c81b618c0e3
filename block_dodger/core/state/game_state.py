from dataclasses import dataclass, field
from typing import List, Optional
import logging

import numpy as np

from block_dodger.core.entities import Player, Obstacle
from block_dodger.core.events import Event, ObstacleSpawned, ObstacleCleared

logger = logging.getLogger('core')

# Seconds between two game ticks
TICK_RATE = 0.2
# Chance that a block appears in a given column on a given tick
SPAWN_PROBABILITY = 0.1


@dataclass
class GameState:
    """
    GameState holds everything that changes while a game is played: the
    player, the falling obstacles and the score.

    The board is ``width`` columns by ``height`` rows, row 0 being the top.
    Obstacles are only added, moved and removed by ``update()`` (or seeded
    explicitly with ``spawn_at()``).
    """
    width: int
    height: int
    spawn_probability: float = SPAWN_PROBABILITY
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False, compare=False)
    player: Player = field(init=False)
    obstacles: List[Obstacle] = field(default_factory=list)
    score: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Board dimensions must be non-negative, got {self.width}x{self.height}")
        self.player = Player(x=self.width // 2, y=max(self.height - 2, 0))

    def update(self, rng: Optional[np.random.Generator] = None) -> List[Event]:
        """
        Advance the game by one tick.

        Phases run in a fixed order: spawn, advance, cull, score. A block
        spawned this tick has therefore already moved to row 1 when the
        caller checks for a collision.

        Args:
            rng: Random source for this tick, defaults to the state's own.

        Returns:
            Events that happened during the tick.
        """
        rng = self.rng if rng is None else rng
        events: List[Event] = []

        # One independent trial per column; several blocks may share a cell
        if self.width > 0:
            hits = rng.random(self.width) < self.spawn_probability
            for x in np.flatnonzero(hits):
                self.obstacles.append(Obstacle(x=int(x), y=0))
                events.append(ObstacleSpawned(x=int(x)))

        for obstacle in self.obstacles:
            obstacle.y += 1

        remaining = []
        for obstacle in self.obstacles:
            if obstacle.y < self.height:
                remaining.append(obstacle)
            else:
                events.append(ObstacleCleared(x=obstacle.x))
        self.obstacles = remaining

        self.score += 1
        logger.debug(f"Tick {self.score}: {len(self.obstacles)} obstacles, player at {self.player.position}")
        return events

    def check_collision(self) -> bool:
        """Return True if any obstacle occupies the player's cell."""
        return any(obstacle.position == self.player.position for obstacle in self.obstacles)

    def move_left(self) -> None:
        if self.player.x > 0:
            self.player.x -= 1

    def move_right(self) -> None:
        if self.player.x < self.width - 1:
            self.player.x += 1

    def spawn_at(self, x: int, y: int = 0) -> Obstacle:
        """Place an obstacle directly, bypassing the random spawn."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Position ({x},{y}) is outside the {self.width}x{self.height} board")
        obstacle = Obstacle(x=x, y=y)
        self.obstacles.append(obstacle)
        return obstacle

    def obstacle_positions(self) -> set:
        """Cells currently holding at least one obstacle."""
        return {obstacle.position for obstacle in self.obstacles}
