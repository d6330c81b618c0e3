import curses
import logging
import time
from typing import List

from block_dodger.core.state.game_state import GameState

logger = logging.getLogger('graphics')

PLAYER_CHAR = '@'
OBSTACLE_CHAR = '#'
EMPTY_CHAR = ' '


def render_rows(state: GameState) -> List[str]:
    """
    Build the text of the board, one string per row.

    The player cell wins over an obstacle in the same cell.
    """
    occupied = state.obstacle_positions()
    player_x, player_y = state.player.position
    rows = []
    for y in range(state.height):
        line = []
        for x in range(state.width):
            if x == player_x and y == player_y:
                line.append(PLAYER_CHAR)
            elif (x, y) in occupied:
                line.append(OBSTACLE_CHAR)
            else:
                line.append(EMPTY_CHAR)
        rows.append(''.join(line))
    return rows


def render(win, state: GameState, player_attr: int = curses.A_REVERSE) -> None:
    """
    Draw one full frame: a box titled with the score around the board.
    """
    start_time = time.time()

    win.erase()
    win.box()

    max_rows, max_cols = win.getmaxyx()
    win.addstr(0, 2, f"Score: {state.score}"[:max(max_cols - 3, 0)])

    for y, line in enumerate(render_rows(state)):
        # Never write into the bottom border or past the right edge
        if 1 + y >= max_rows - 1:
            break
        win.addstr(1 + y, 1, line[:max(max_cols - 2, 0)])

    player_x, player_y = state.player.position
    if 1 + player_y < max_rows - 1 and 1 + player_x < max_cols - 1 and state.width > 0:
        win.addstr(1 + player_y, 1 + player_x, PLAYER_CHAR, player_attr)

    win.refresh()

    execution_time_ms = (time.time() - start_time) * 1000
    if execution_time_ms > 10:  # Only log slow frames
        logger.debug(f"Field render executed in {execution_time_ms:.2f}ms")
