"""
Win Detection Module - Checks whether every color forms one region.
"""

from typing import List, Set

from .board import BoardState


def is_solved(board: BoardState) -> bool:
    """
    Check whether the puzzle is solved.

    Counting groups per color is not enough: two blocks of one color can
    share a group through a neutral block without touching each other.
    Connectivity here follows only cells of the exact same color.

    Args:
        board: Board to check

    Returns:
        True if no color is found in two separate regions
    """
    grid = board.grid
    visited: List[List[bool]] = [[False] * board.width for _ in range(board.height)]
    colors: Set[int] = set()

    for r in range(1, board.height - 1):
        for c in range(1, board.width - 1):
            cell = grid[r][c]
            if visited[r][c] or not cell.is_colored:
                continue
            if cell.color in colors:
                # second region of one color
                return False
            colors.add(cell.color)
            _mark_color_region(board, r, c, visited)

    return True


def _mark_color_region(board: BoardState, row: int, col: int,
                       visited: List[List[bool]]) -> None:
    """Mark every cell reachable from (row, col) through same-color blocks."""
    grid = board.grid
    color = grid[row][col].color
    visited[row][col] = True
    stack = [(row, col)]

    while stack:
        r, c = stack.pop()
        for r2, c2 in ((r, c - 1), (r, c + 1), (r + 1, c), (r - 1, c)):
            other = grid[r2][c2]
            if not visited[r2][c2] and other.is_block and other.color == color:
                visited[r2][c2] = True
                stack.append((r2, c2))
