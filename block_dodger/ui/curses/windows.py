import curses
import logging
from typing import Tuple

logger = logging.getLogger('graphics')

PLAYER_COLOR_PAIR = 1


def make_window(stdscr) -> Tuple["curses.window", int]:
    """
    Prepare the main screen for the game.

    Hides the cursor, switches input to non-blocking mode and sets up the
    highlight used for the player cell.

    Returns:
        The window to draw the field in and the curses attribute for the player.
    """
    curses.curs_set(0)
    stdscr.nodelay(True)
    stdscr.keypad(True)
    stdscr.clear()
    stdscr.refresh()

    player_attr = curses.A_REVERSE
    if curses.has_colors():
        curses.start_color()
        curses.init_pair(PLAYER_COLOR_PAIR, curses.COLOR_BLACK, curses.COLOR_YELLOW)
        player_attr = curses.color_pair(PLAYER_COLOR_PAIR)

    return stdscr, player_attr


def board_size(win) -> Tuple[int, int]:
    """Playable (width, height) inside the window border."""
    rows, cols = win.getmaxyx()
    width = max(cols - 2, 0)
    height = max(rows - 2, 0)
    logger.debug(f"Window {cols}x{rows}, board {width}x{height}")
    return width, height
