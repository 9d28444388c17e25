"""
Board State Module - Immutable grid representation for the merge blocks puzzle.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Set, Tuple, TYPE_CHECKING

from .cell import Cell, CellType, Coordinate, EMPTY, WALL

if TYPE_CHECKING:
    from .move import Move


Grid = Tuple[Tuple[Cell, ...], ...]


def _encode(grid: Grid) -> bytes:
    """Canonical byte encoding of a grid: type, color, then a big-endian 16-bit group."""
    return bytes(
        value
        for row in grid
        for cell in row
        for value in (cell.type, cell.color, cell.group >> 8, cell.group & 0xFF)
    )


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    The grid includes a one-cell wall border on all four sides.
    Group ids of blocks always form the contiguous range 1..group_count.
    Two boards are equal iff their dimensions and every cell (group ids
    included) are equal; hashing and ordering use a canonical byte
    encoding computed once at construction.

    Attributes:
        width: Number of columns including the border
        height: Number of rows including the border
        group_count: Number of distinct block groups
        grid: Tuple of row tuples of Cell values
    """
    width: int
    height: int
    group_count: int
    grid: Grid
    _key: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_key", _encode(self.grid))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'BoardState':
        """
        Create BoardState from rows of level text.

        '#' is a wall, '1'-'9' a colored block, anything else is empty.
        Each block starts in its own group (numbered in reading order)
        and touching blocks of the same color are then merged.

        Args:
            rows: Rectangular list of strings, without the border

        Returns:
            BoardState with a synthesized wall border
        """
        from .physics import GridSimulator

        height = len(rows) + 2
        width = len(rows[0]) + 2
        groups = 0
        cells: List[List[Cell]] = []

        for r in range(height):
            row: List[Cell] = []
            for c in range(width):
                if r == 0 or r == height - 1 or c == 0 or c == width - 1:
                    row.append(WALL)
                    continue
                ch = rows[r - 1][c - 1]
                if ch == '#':
                    row.append(WALL)
                elif '1' <= ch <= '9':
                    groups += 1
                    row.append(Cell.block(int(ch), groups))
                else:
                    row.append(EMPTY)
            cells.append(row)

        simulator = GridSimulator.from_cells(cells, groups)
        simulator.update_connections()
        return simulator.to_board()

    @classmethod
    def from_interior(cls, cells: Sequence[Sequence[Cell]]) -> 'BoardState':
        """
        Create BoardState from explicit cells with groups already assigned.

        Allows neutral (color 0) blocks and mixed-color groups, which the
        level text format cannot express. No merge pass is run.

        Args:
            cells: Rectangular matrix of Cell values, without the border

        Returns:
            BoardState with a synthesized wall border

        Raises:
            ValueError: If block group ids are not exactly 1..N
        """
        width = len(cells[0]) + 2
        border = tuple([WALL] * width)
        grid = (border,) + tuple(
            (WALL,) + tuple(row) + (WALL,) for row in cells
        ) + (border,)

        groups = {cell.group for row in cells for cell in row if cell.is_block}
        if groups != set(range(1, len(groups) + 1)):
            raise ValueError(f"Group ids must be contiguous from 1, got {sorted(groups)}")

        return cls(width=width, height=len(grid), group_count=len(groups), grid=grid)

    def apply_move(self, move: 'Move') -> Optional['BoardState']:
        """
        Apply a move to create a new board state.

        Pushes the group, lets blocks fall and merges touching groups.
        Original board is unchanged.

        Args:
            move: Move to apply

        Returns:
            New BoardState, or None if the push is blocked by a wall
        """
        from .physics import GridSimulator

        simulator = GridSimulator(self)
        if not simulator.attempt_group_move(move.group, move.direction):
            return None
        return simulator.to_board()

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at specific position.

        Args:
            row: Row index
            col: Column index

        Returns:
            Cell at that position (WALL outside the grid)
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.grid[row][col]
        return WALL

    @property
    def rows(self) -> int:
        """Number of interior rows."""
        return self.height - 2

    @property
    def cols(self) -> int:
        """Number of interior columns."""
        return self.width - 2

    def blocks(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Iterate over (coordinate, cell) for every block in reading order."""
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                if cell.type == CellType.BLOCK:
                    yield Coordinate(r, c), cell

    def groups(self) -> Set[int]:
        """Set of group ids present on the board."""
        return {cell.group for _, cell in self.blocks()}

    def colors(self) -> Set[int]:
        """Set of chromatic colors present on the board."""
        return {cell.color for _, cell in self.blocks() if cell.color > 0}

    def is_solved(self) -> bool:
        """Check whether every color forms a single connected region."""
        from .win import is_solved
        return is_solved(self)

    def __hash__(self):
        """Enable using BoardState as dict key or in sets."""
        return hash(self._key)

    def __eq__(self, other):
        """Enable board equality comparison."""
        if not isinstance(other, BoardState):
            return False
        return (self.width == other.width and self.height == other.height
                and self._key == other._key)

    def __lt__(self, other: 'BoardState') -> bool:
        """Deterministic ordering used to sort successor states."""
        return ((self.width, self.height, self.group_count, self._key)
                < (other.width, other.height, other.group_count, other._key))

    def to_rows(self) -> List[str]:
        """
        Convert the interior back to level text.

        Group ids and neutral blocks are not representable and are lost.

        Returns:
            List of strings without the border
        """
        return [
            "".join(cell.char for cell in row[1:-1])
            for row in self.grid[1:-1]
        ]
