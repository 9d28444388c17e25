"""
Physics Module - Move simulation on a mutable working copy of a board.

All grid mutation in the solver happens here. A move either commits
completely or is rolled back, so callers never observe a partial push.

Pipeline for one move:
    1. Grab every cell that has to move (group cohesion + chained pushes)
    2. Place the grabbed cells one step over, or put them back on collision
    3. Settle: let every block fall as far as it can
    4. Merge touching same-colored groups and renumber group ids
"""

import logging
from typing import List, Sequence, Tuple

from .board import BoardState
from .cell import Cell, Coordinate, EMPTY
from .move import Direction

logger = logging.getLogger(__name__)


class GridSimulator:
    """
    Mutable copy of a BoardState that applies pushes, gravity and merges.

    Attributes:
        width: Number of columns including the border
        height: Number of rows including the border
        group_count: Number of distinct block groups
        grid: List of row lists of Cell values (mutated in place)
    """

    def __init__(self, board: BoardState):
        """
        Initialize simulator from a board.

        Args:
            board: Board to copy; it is never modified
        """
        self.width = board.width
        self.height = board.height
        self.group_count = board.group_count
        self.grid: List[List[Cell]] = [list(row) for row in board.grid]

    @classmethod
    def from_cells(cls, cells: Sequence[Sequence[Cell]], group_count: int) -> 'GridSimulator':
        """
        Create a simulator directly from a bordered cell matrix.

        Args:
            cells: Full grid including the wall border
            group_count: Number of groups used by the cells

        Returns:
            GridSimulator over a copy of the cells
        """
        simulator = cls.__new__(cls)
        simulator.width = len(cells[0])
        simulator.height = len(cells)
        simulator.group_count = group_count
        simulator.grid = [list(row) for row in cells]
        return simulator

    def to_board(self) -> BoardState:
        """Freeze the current grid into an immutable BoardState."""
        return BoardState(
            width=self.width,
            height=self.height,
            group_count=self.group_count,
            grid=tuple(tuple(row) for row in self.grid),
        )

    def attempt_group_move(self, group: int, direction: Direction) -> bool:
        """
        Push a whole group one cell in a direction.

        On success the board is also settled and merged. On failure the
        grid is left exactly as it was.

        Args:
            group: Group id to push (1..group_count)
            direction: Direction to push in

        Returns:
            True if the group moved, False if a wall blocked the push

        Raises:
            ValueError: If the group id or direction is invalid
        """
        if not isinstance(direction, Direction):
            raise ValueError(f"Invalid direction: {direction!r}")
        if not 1 <= group <= self.group_count:
            raise ValueError(f"Invalid group {group} (board has {self.group_count} groups)")

        for r in range(1, self.height - 1):
            for c in range(1, self.width - 1):
                if self.grid[r][c].is_block and self.grid[r][c].group == group:
                    if not self._try_shift(r, c, direction):
                        return False
                    self.settle()
                    self.update_connections()
                    return True

        raise ValueError(f"Group {group} not found on board")

    def settle(self) -> None:
        """
        Let every block fall as far as it can.

        A single top-to-bottom sweep is enough: a block that drops into a
        lower row is visited again when the sweep reaches that row.
        """
        for r in range(1, self.height - 1):
            for c in range(1, self.width - 1):
                if self.grid[r][c].is_block:
                    self._try_shift(r, c, Direction.DOWN)

    def update_connections(self) -> None:
        """
        Merge groups of touching blocks that share a color.

        Scans right and down neighbours of every colored block. The
        neighbour's group is absorbed into the current block's group and
        higher group ids shift down to keep numbering contiguous.
        """
        for r in range(1, self.height - 1):
            for c in range(1, self.width - 1):
                if not self.grid[r][c].is_colored:
                    continue
                for r2, c2 in ((r, c + 1), (r + 1, c)):
                    # Re-read: renumbering may have changed this cell's group
                    cell = self.grid[r][c]
                    other = self.grid[r2][c2]
                    if other.is_block and other.group != cell.group and other.color == cell.color:
                        removed = other.group
                        self._regroup(r2, c2, removed, cell.group)
                        self._remove_group_number(removed)

    def _try_shift(self, row: int, col: int, direction: Direction) -> bool:
        """
        Move the block at (row, col) and everything it drags along.

        Args:
            row: Row of a block cell
            col: Column of a block cell
            direction: Direction to shift in

        Returns:
            True if the cells moved, False if they were put back
        """
        grabbed: List[Tuple[Coordinate, Cell]] = []
        moved = self._grab(row, col, direction, grabbed)
        dr, dc = direction.value if moved else (0, 0)

        for coord, cell in grabbed:
            target = self.grid[coord.row + dr]
            assert target[coord.col + dc].is_empty
            target[coord.col + dc] = cell

        return moved

    def _grab(self, row: int, col: int, direction: Direction,
              grabbed: List[Tuple[Coordinate, Cell]]) -> bool:
        """
        Lift every cell that must move with the block at (row, col).

        Lifted cells are cleared from the grid and appended to grabbed
        with their original position. Stops as soon as a wall is found
        in the push direction; cells lifted so far stay in grabbed so
        the caller can restore them.

        Args:
            row: Row of the starting block
            col: Column of the starting block
            direction: Push direction
            grabbed: Output list of (original coordinate, cell)

        Returns:
            False if any lifted cell is pushed into a wall
        """
        assert self.grid[row][col].is_block
        stack = [Coordinate(row, col)]

        while stack:
            coord = stack.pop()
            cell = self.grid[coord.row][coord.col]
            if not cell.is_block:
                continue  # already lifted

            grabbed.append((coord, cell))
            self.grid[coord.row][coord.col] = EMPTY

            for d in Direction:
                neighbour = coord.offset(d)
                other = self.grid[neighbour.row][neighbour.col]
                if d is direction:
                    if other.is_wall:
                        return False
                    if other.is_block:
                        stack.append(neighbour)
                elif other.is_block and other.group == cell.group:
                    stack.append(neighbour)

        return True

    def _regroup(self, row: int, col: int, old: int, new: int) -> None:
        """Flood-fill group id old to new starting at (row, col)."""
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            cell = self.grid[r][c]
            if not cell.is_block or cell.group != old:
                continue
            self.grid[r][c] = Cell.block(cell.color, new)
            stack.extend(((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)))

    def _remove_group_number(self, group: int) -> None:
        """Close the gap left by a merged-away group id."""
        assert 0 < group <= self.group_count
        for r in range(1, self.height - 1):
            row = self.grid[r]
            for c in range(1, self.width - 1):
                cell = row[c]
                assert not (cell.is_block and cell.group == group)
                if cell.is_block and cell.group > group:
                    row[c] = Cell.block(cell.color, cell.group - 1)
        self.group_count -= 1
        logger.debug(f"Merged group {group}, {self.group_count} groups remain")


def settle_board(board: BoardState) -> BoardState:
    """
    Settle a board and merge touching groups without moving anything.

    Used to bring a freshly loaded level into a resting configuration.

    Args:
        board: Board to settle

    Returns:
        Settled BoardState (the input board if nothing changed)
    """
    simulator = GridSimulator(board)
    simulator.settle()
    simulator.update_connections()
    settled = simulator.to_board()
    return board if settled == board else settled
