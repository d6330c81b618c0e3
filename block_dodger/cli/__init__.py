from .args import parse_args
from .commands import parse_key

__all__ = ['parse_args', 'parse_key']
