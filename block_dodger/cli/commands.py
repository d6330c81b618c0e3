import curses
import logging
from typing import Optional

from block_dodger.core.actions import Action, MoveLeft, MoveRight, Quit

logger = logging.getLogger('cli')

ESCAPE_KEY = 27


def parse_key(key: int) -> Optional[Action]:
    """
    Translate a curses key code into an Action.

    Keys:
    - left arrow: move left
    - right arrow: move right
    - q / ESC: quit

    Returns None when no key was pressed (curses.ERR) or the key is not bound.
    """
    if key == curses.ERR:
        return None

    if key == curses.KEY_LEFT:
        return MoveLeft()
    elif key == curses.KEY_RIGHT:
        return MoveRight()
    elif key in (ord('q'), ESCAPE_KEY):
        logger.debug(f"Parsed key {key} as Quit")
        return Quit()

    logger.debug(f"Ignoring unbound key: {key}")
    return None
