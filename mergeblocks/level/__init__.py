"""
Level Module for Merge Blocks Solver

Usage:
    from mergeblocks.level import load_level

    board = load_level("levels/two_steps.txt")
    if board is None:
        ...  # malformed level
"""

from .reader import read_level, parse_level, load_level

__all__ = [
    "read_level",
    "parse_level",
    "load_level",
]
