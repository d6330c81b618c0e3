"""
Block Dodger - a terminal game where you dodge falling blocks.
"""

__version__ = "0.1.0"
