#!/usr/bin/env python3
import curses
import locale
import logging
import shutil
import sys
import traceback
from typing import List, Optional

from block_dodger import logging_setup
from block_dodger.cli.args import parse_args
from block_dodger.controller.mainloop import run_game

# Smallest terminal that still leaves one playable cell inside the border
MIN_ROWS = 3
MIN_COLS = 3


def check_terminal_size() -> Optional[str]:
    """Check if terminal is large enough for the game."""
    cols, rows = shutil.get_terminal_size(fallback=(80, 24))
    if rows < MIN_ROWS or cols < MIN_COLS:
        return f"Terminal too small: {rows}x{cols}. Need at least {MIN_ROWS}x{MIN_COLS}."
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for Block Dodger."""
    args = parse_args(argv)
    logging_setup.setup_logging(args.log_dir, args.log_level)
    logger = logging.getLogger('cli')
    logger.debug("game started")
    # Set up locale for proper character display
    try:
        locale.setlocale(locale.LC_ALL, '')
    except locale.Error as e:
        logger.warning(f"Could not set locale: {e}")

    size_error = check_terminal_size()
    if size_error:
        print(size_error)
        print("Please resize your terminal window and try again.")
        return 1

    # curses.wrapper restores the terminal on every way out
    try:
        result = curses.wrapper(run_game, args.seed, args.autoplay)
    except KeyboardInterrupt:
        # Only reached before the game loop starts, which handles Ctrl-C itself
        print("Game terminated by user.")
        return 0
    except curses.error as e:
        logger.exception("Terminal error")
        print(f"Curses error: {e}")
        print("This might be due to a terminal window that's too small or doesn't support required features.")
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"An error occurred: {e}")
        traceback.print_exc()
        return 1

    logger.debug(f"game ended: {result.phase.name}")
    print(f"Game Over! Final Score: {result.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
