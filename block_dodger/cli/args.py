import argparse
import logging
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        args: Parsed arguments with seed, autoplay, log_dir and log_level
    """
    parser = argparse.ArgumentParser(description='Block Dodger - dodge the falling blocks in your terminal')

    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the block generator (default: random)')
    parser.add_argument('--autoplay', action='store_true',
                        help='Let the built-in agent steer the player')
    parser.add_argument('--log-dir', type=str, default='logs',
                        help='Directory for log files (default: logs)')
    parser.add_argument('--log-level', type=str.upper, default='DEBUG',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level (default: DEBUG)')

    args = parser.parse_args(argv)
    args.log_level = getattr(logging, args.log_level)

    return args
