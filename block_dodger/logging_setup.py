import logging
import os

# Named loggers, each writing to its own file
LOGGER_NAMES = ('core', 'graphics', 'cli', 'agent')


def _replace_file_handler(logger: logging.Logger, path: str, formatter: logging.Formatter) -> None:
    """Attach a fresh file handler, dropping any left by an earlier setup."""
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    handler = logging.FileHandler(path, mode='w')
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(log_dir: str = "logs", level: int = logging.DEBUG) -> None:
    """Set up logging with separate log files for the different components.

    Nothing goes to the terminal, curses owns it while the game runs.
    """
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # core: game rules and state, graphics: rendering, cli: input and
    # arguments, agent: autoplay decisions
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        _replace_file_handler(logger, os.path.join(log_dir, f'{name}.log'), formatter)
        logger.setLevel(level)
        # Prevent log propagation to avoid duplicate entries
        logger.propagate = False

    # Root logger for any uncategorized logs
    root_logger = logging.getLogger()
    _replace_file_handler(root_logger, os.path.join(log_dir, 'game.log'), formatter)
    root_logger.setLevel(level)
