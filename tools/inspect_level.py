#!/usr/bin/env python3
"""
Diagnostic script to inspect a level.

Prints the parsed board, its groups and every board reachable with one push.

Usage:
    python tools/inspect_level.py levels/two_steps.txt [--settle]
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mergeblocks.level import load_level
from mergeblocks.solver import find_successors, is_solved
from mergeblocks.display import render_board


def inspect(level_path: str, settle: bool = False) -> int:
    """Print a level and its successors."""
    board = load_level(level_path, settle=settle)
    if board is None:
        print(f"Failed to read level: {level_path}")
        return 1

    print(f"{'='*60}")
    print(f"Level: {level_path}")
    print(f"{'='*60}")
    print(render_board(board))
    print(f"Size: {board.rows}x{board.cols}")
    print(f"Groups: {board.group_count}")
    print(f"Colors: {sorted(board.colors())}")
    print(f"Solved: {is_solved(board)}")

    successors = find_successors(board)
    print(f"\n{len(successors)} successor(s):")
    for move, successor in successors:
        marker = " (solved)" if is_solved(successor) else ""
        print(f"\n  Push {move}{marker}")
        print(render_board(successor))

    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    sys.exit(inspect(sys.argv[1], settle="--settle" in sys.argv[2:]))
