"""
Successor Module - Enumerates the states one push away from a board.
"""

from typing import Dict, List, Tuple

from .board import BoardState
from .move import HORIZONTAL, Move
from .physics import GridSimulator


def find_successors(board: BoardState) -> List[Tuple[Move, BoardState]]:
    """
    Find every distinct board reachable by one legal push.

    Each group is tried in both horizontal directions on a fresh copy.
    Different moves that end in the same board are reported once, under
    the first move that produced it. Results are sorted by board order
    so the search visits them deterministically.

    Args:
        board: Current board state

    Returns:
        List of (move, resulting board) pairs
    """
    found: Dict[BoardState, Move] = {}

    for group in range(1, board.group_count + 1):
        for direction in HORIZONTAL:
            simulator = GridSimulator(board)
            if not simulator.attempt_group_move(group, direction):
                continue
            result = simulator.to_board()
            if result not in found:
                found[result] = Move(group=group, direction=direction)

    return [(move, result) for result, move in sorted(found.items(), key=lambda item: item[0])]
