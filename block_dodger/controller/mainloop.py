import curses
import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from block_dodger.agents.base import Agent
from block_dodger.agents.dodge_agent import DodgeAgent
from block_dodger.agents.observation_adapter import (
    get_observation_from_game_state, LEFT_ACTION, RIGHT_ACTION
)
from block_dodger.controller.phases import Phase
from block_dodger.controller.triggers import KeyboardInput, TickClock
from block_dodger.core.actions import Action, MoveLeft, MoveRight, Quit
from block_dodger.core.events import Event, ObstacleSpawned, PlayerHit
from block_dodger.core.state.game_state import GameState, TICK_RATE
from block_dodger.ui.curses import windows, draw_field

logger = logging.getLogger('core')

# Idle pacing between loop iterations, does not affect the tick rate
RENDERING_FPS = 60


@dataclass
class GameResult:
    """How a game ended."""
    phase: Phase
    score: int


class GameController:
    """
    Merges key presses and clock ticks into the game state and draws a frame
    after each loop iteration.
    """
    def __init__(self, win, state: GameState, keyboard: KeyboardInput, clock: TickClock,
                 agent: Optional[Agent] = None, player_attr: int = curses.A_REVERSE):
        self.win = win
        self.state = state
        self.keyboard = keyboard
        self.clock = clock
        self.agent = agent
        self.player_attr = player_attr
        self.phase = Phase.RUNNING
        if self.agent is not None:
            self.agent.reset()

    @property
    def running(self) -> bool:
        return self.phase == Phase.RUNNING

    def process_action(self, action: Action) -> None:
        """Apply a player action immediately."""
        if not self.running:
            return

        if isinstance(action, Quit):
            self.phase = Phase.STOPPED
            logger.info(f"Game quit at score {self.state.score}")
        elif self.agent is not None:
            # The agent steers, only quitting is left to the keyboard
            return
        elif isinstance(action, MoveLeft):
            self.state.move_left()
        elif isinstance(action, MoveRight):
            self.state.move_right()

    def handle_input(self) -> None:
        """Handle at most one pending key press."""
        action = self.keyboard.poll()
        if action is not None:
            self.process_action(action)

    def agent_move(self) -> None:
        """Let the autoplay agent pick a move for the coming tick."""
        choice = self.agent.act(get_observation_from_game_state(self.state))
        if choice == LEFT_ACTION:
            self.state.move_left()
        elif choice == RIGHT_ACTION:
            self.state.move_right()

    def update(self) -> List[Event]:
        """Advance one tick and end the game on a collision."""
        if not self.running:
            return []

        if self.agent is not None:
            self.agent_move()

        events = self.state.update()
        spawned = sum(1 for event in events if isinstance(event, ObstacleSpawned))
        if spawned:
            logger.debug(f"{spawned} obstacles spawned")

        if self.state.check_collision():
            self.phase = Phase.GAME_OVER
            hit = PlayerHit(x=self.state.player.x, y=self.state.player.y, score=self.state.score)
            events.append(hit)
            logger.info(f"Player hit at ({hit.x},{hit.y}), final score {hit.score}")
        return events

    def render(self) -> None:
        draw_field.render(self.win, self.state, self.player_attr)

    def step(self) -> None:
        """
        One loop iteration: input, then a tick if one is due, then a frame.

        Nothing is drawn once the game has ended.
        """
        self.handle_input()
        if not self.running:
            return

        if self.clock.due():
            self.update()
            if not self.running:
                return

        self.render()

    def run(self) -> GameResult:
        """Loop until the game ends. Ctrl-C counts as quitting."""
        frame_duration = 1.0 / RENDERING_FPS
        try:
            while self.running:
                frame_start_time = time.monotonic()
                self.step()
                sleep_time = frame_duration - (time.monotonic() - frame_start_time)
                if self.running and sleep_time > 0:
                    time.sleep(sleep_time)
        except KeyboardInterrupt:
            self.phase = Phase.STOPPED
            logger.info(f"Game interrupted at score {self.state.score}")
        return GameResult(phase=self.phase, score=self.state.score)


def run_game(stdscr, seed: Optional[int] = None, autoplay: bool = False) -> GameResult:
    """
    Main game loop. Meant to be called through ``curses.wrapper``.
    """
    win, player_attr = windows.make_window(stdscr)
    width, height = windows.board_size(win)

    state = GameState(width=width, height=height, rng=np.random.default_rng(seed))
    logger.info(f"Starting game on a {width}x{height} board (seed={seed}, autoplay={autoplay})")

    controller = GameController(
        win,
        state,
        KeyboardInput(win),
        TickClock(TICK_RATE),
        agent=DodgeAgent() if autoplay else None,
        player_attr=player_attr,
    )
    controller.render()
    return controller.run()
