"""
Text Display

Renders boards as box drawings. Cells of the same piece (same type and
group) are drawn without a divider between them, so merged groups read
as one shape.
"""

from typing import List

from ..solver import BoardState, Solution


def render_board(board: BoardState) -> str:
    """
    Render a board with box-drawing characters.

    Args:
        board: Board to render

    Returns:
        Multi-line string ending in a newline
    """
    grid = board.grid
    width = board.width
    frame = "+-" + "--" * (width - 1) + "+"
    lines: List[str] = [frame]

    for r in range(board.height):
        row = grid[r]
        parts = ['|']
        for c in range(width):
            parts.append(row[c].char)
            if c + 1 < width:
                parts.append(' ' if row[c].same_piece(row[c + 1]) else '|')
        parts.append('|')
        lines.append("".join(parts))

        if r + 1 < board.height:
            below = grid[r + 1]
            parts = ['|']
            for c in range(width):
                down_same = row[c].same_piece(below[c])
                parts.append(' ' if down_same else '-')
                if c + 1 < width:
                    # corner: all four surrounding cells belong together
                    joined = (down_same and row[c].same_piece(row[c + 1])
                              and row[c].same_piece(below[c + 1]))
                    parts.append('·' if joined else '+')
            parts.append('|')
            lines.append("".join(parts))

    lines.append(frame)
    return "\n".join(lines) + "\n"


def format_solution(solution: Solution) -> str:
    """
    Format a solution as step-by-step board drawings.

    Args:
        solution: Result of a strategy

    Returns:
        Text listing every step, or a no-solution message
    """
    if not solution.is_solved:
        return "No solution found!\n"

    parts = [f"Found a solution in {solution.move_count} steps.\n"]
    for i, board in enumerate(solution.board_states):
        parts.append(f"\nStep {i}:\n")
        parts.append(render_board(board))
    return "".join(parts)
