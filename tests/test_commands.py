import curses
import logging

from block_dodger.cli.args import parse_args
from block_dodger.cli.commands import parse_key, ESCAPE_KEY
from block_dodger.core.actions import MoveLeft, MoveRight, Quit


def test_arrow_keys_move():
    assert parse_key(curses.KEY_LEFT) == MoveLeft()
    assert parse_key(curses.KEY_RIGHT) == MoveRight()


def test_q_and_escape_quit():
    assert parse_key(ord('q')) == Quit()
    assert parse_key(ESCAPE_KEY) == Quit()


def test_no_key_and_unbound_keys_are_ignored():
    assert parse_key(curses.ERR) is None
    assert parse_key(ord('x')) is None
    assert parse_key(curses.KEY_UP) is None
    assert parse_key(ord('Q')) is None


def test_default_arguments():
    args = parse_args([])
    assert args.seed is None
    assert args.autoplay is False
    assert args.log_dir == 'logs'
    assert args.log_level == logging.DEBUG


def test_arguments_are_parsed():
    args = parse_args(['--seed', '12', '--autoplay', '--log-dir', '/tmp/x', '--log-level', 'warning'])
    assert args.seed == 12
    assert args.autoplay is True
    assert args.log_dir == '/tmp/x'
    assert args.log_level == logging.WARNING
