"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from .board import BoardState
from .move import Move
from .context import SolutionContext
from .solution import Solution
from .successors import find_successors
from .win import is_solved


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for help output
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute solution for the given board state.

        Args:
            context: Solution context with board and progress reporting

        Returns:
            Solution with moves, board states and metrics
        """
        pass

    def find_all_valid_moves(self, board: BoardState) -> List[Tuple[Move, BoardState]]:
        """
        Find all pushes that change the board, with their resulting boards.

        Args:
            board: Current board state

        Returns:
            List of distinct (move, resulting board) pairs
        """
        return find_successors(board)

    def is_goal(self, board: BoardState) -> bool:
        """Check whether a board is solved."""
        return is_solved(board)
