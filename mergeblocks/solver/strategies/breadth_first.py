"""
Breadth-First Strategy - Shortest solution by exhaustive search.

Explores board states in order of move count, so the first solved
board reached is at minimum depth. Every distinct board is stored once;
the list of visited boards doubles as the FIFO queue since new boards
are only appended and are processed strictly in index order.
"""

import time
import logging
from typing import Dict, List, Optional

from ..base import SolverStrategy
from ..board import BoardState
from ..move import Move
from ..context import SolutionContext
from ..solution import Solution, SolutionMetrics
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Breadth-first search over the state graph defined by single pushes.

    Algorithm:
        1. Return the initial board alone if it is already solved
        2. Number boards in discovery order, remembering each board's
           predecessor index and the move that produced it
        3. Expand boards in index order; the first solved successor ends
           the search and the path is rebuilt from predecessor links
        4. If every discovered board is expanded, the level is unsolvable

    All moves cost the same, so this finds a solution with the fewest moves.
    """
    name = "bfs"
    description = "Breadth-first search (optimal) - Fewest moves, exhaustive"

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute a shortest solution.

        Args:
            context: Solution context with board and progress reporting

        Returns:
            Solution with the path to a solved board, or with no board
            states if the level cannot be solved
        """
        start_time = time.perf_counter()
        initial = context.board

        if self.is_goal(initial):
            logger.info("Initial board is already solved")
            return self._build_solution([], [initial], 1, start_time)

        index: Dict[BoardState, int] = {initial: 0}
        boards: List[BoardState] = [initial]
        previous: List[int] = [-1]
        moves: List[Optional[Move]] = [None]

        i = 0
        while i < len(boards):
            for move, successor in self.find_all_valid_moves(boards[i]):
                if self.is_goal(successor):
                    logger.info(f"Solution found (expanded {len(boards)} states)")
                    path_moves, path_boards = self._reconstruct(i, boards, previous, moves)
                    path_moves.append(move)
                    path_boards.append(successor)
                    return self._build_solution(path_moves, path_boards, len(boards), start_time)

                if successor in index:
                    continue
                index[successor] = len(boards)
                boards.append(successor)
                previous.append(i)
                moves.append(move)

                if context.should_report(len(boards)):
                    context.report_progress(
                        len(boards),
                        f"{len(boards)} states, {len(boards) - i - 1} queued"
                    )
            i += 1

        logger.info(f"No solution found (expanded {len(boards)} states)")
        return self._build_solution([], [], len(boards), start_time)

    @staticmethod
    def _reconstruct(last: int, boards: List[BoardState], previous: List[int],
                     moves: List[Optional[Move]]):
        """Walk predecessor links from last back to the initial board."""
        path_boards: List[BoardState] = []
        path_moves: List[Move] = []
        j = last
        while j >= 0:
            path_boards.append(boards[j])
            if moves[j] is not None:
                path_moves.append(moves[j])
            j = previous[j]
        path_boards.reverse()
        path_moves.reverse()
        return path_moves, path_boards

    def _build_solution(
        self,
        moves: List[Move],
        board_states: List[BoardState],
        states_explored: int,
        start_time: float
    ) -> Solution:
        """Build Solution object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.debug(
            f"[BFS] {len(moves)} moves, {states_explored} states, {elapsed_ms:.1f}ms"
        )

        return Solution(
            moves=moves,
            board_states=board_states,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                strategy_name=self.name
            )
        )
