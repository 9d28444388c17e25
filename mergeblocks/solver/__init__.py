"""
Solver Package - State model, move physics and search for the merge blocks puzzle.

Colored blocks sit in a walled grid, fall under gravity and can be pushed
sideways as groups. Touching blocks of the same color merge into one
group. A level is solved when every color forms a single connected region.

Public API:
    - BoardState: Immutable board representation
    - Cell, CellType, Coordinate: Grid contents and positions
    - Move, Direction: Group push definition
    - GridSimulator: Mutable working copy that applies pushes
    - settle_board(): Drop all blocks and merge without moving anything
    - is_solved(): Win detection
    - find_successors(): All boards one push away
    - Solution: Result of strategy computation
    - SolutionMetrics: Performance statistics
    - SolutionContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - strategy_descriptions(): Registered strategy names and descriptions

Usage:
    from mergeblocks.solver import create_strategy, BoardState, SolutionContext

    board = BoardState.from_rows(["1 1"])
    context = SolutionContext(board=board)

    strategy = create_strategy("bfs")
    solution = strategy.solve(context)

    for move in solution.moves:
        print(f"Push {move}")
"""

# Core data structures
from .cell import Cell, CellType, Coordinate, EMPTY, WALL
from .move import Direction, Move, HORIZONTAL
from .board import BoardState
from .physics import GridSimulator, settle_board
from .win import is_solved
from .successors import find_successors
from .solution import Solution, SolutionMetrics
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    DEFAULT_STRATEGY,
    create_strategy,
    strategy_descriptions,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Cell",
    "CellType",
    "Coordinate",
    "EMPTY",
    "WALL",
    "Direction",
    "Move",
    "HORIZONTAL",
    "BoardState",
    "GridSimulator",
    "settle_board",
    "is_solved",
    "find_successors",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "DEFAULT_STRATEGY",
    "create_strategy",
    "strategy_descriptions",
    "register_strategy",
]
