"""
Solution Context Module - Shared context for strategy execution.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .board import BoardState


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the board to solve
    and progress reporting.

    Attributes:
        board: Initial board state to solve
        progress_callback: Optional callback for progress updates
        progress_interval: Report progress every this many states
    """
    board: BoardState
    progress_callback: Optional[Callable[[int, str], None]] = None
    progress_interval: int = 10000

    def report_progress(self, states: int, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            states: Number of states discovered so far
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(states, message)

    def should_report(self, states: int) -> bool:
        """Check whether a progress report is due after this many states."""
        return self.progress_interval > 0 and states % self.progress_interval == 0
