"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import BoardState
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of distinct board states discovered
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    An unsolvable level yields no board states at all, which is
    different from an already solved level (one state, zero moves).

    Attributes:
        moves: Ordered sequence of moves to execute
        board_states: Board state after each move (first is initial)
        metrics: Performance statistics
    """
    moves: List[Move] = field(default_factory=list)
    board_states: List[BoardState] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def is_solved(self) -> bool:
        """True if a path to a solved board was found."""
        return len(self.board_states) > 0

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def final_board(self) -> Optional[BoardState]:
        """Solved board at the end of the path, or None if unsolvable."""
        return self.board_states[-1] if self.board_states else None

    def get_board_after_move(self, index: int) -> BoardState:
        """
        Get board state after executing move at index.

        Args:
            index: Move index (0-based)

        Returns:
            BoardState after move (index+1 in board_states)

        Raises:
            IndexError: If index out of range
        """
        return self.board_states[index + 1]
