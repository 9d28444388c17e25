"""
Cell Module - Grid cell contents and coordinates.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .move import Direction


class CellType(IntEnum):
    """
    Kind of content held by a grid cell.

    Integer values define the ordering used when boards are compared.
    """
    EMPTY = 0
    WALL = 1
    BLOCK = 2


@dataclass(frozen=True, order=True)
class Cell:
    """
    Content of one grid position.

    Attributes:
        type: EMPTY, WALL or BLOCK
        color: 0 for neutral blocks (never merge), 1-9 for colored blocks
        group: 0 for non-blocks, 1+ for the group the block belongs to
    """
    type: CellType = CellType.EMPTY
    color: int = 0
    group: int = 0

    @classmethod
    def block(cls, color: int, group: int) -> 'Cell':
        """
        Create a movable block cell.

        Args:
            color: Block color (0 neutral, 1-9 chromatic)
            group: Group id (1+)

        Returns:
            Block cell
        """
        return cls(type=CellType.BLOCK, color=color, group=group)

    @property
    def is_block(self) -> bool:
        return self.type == CellType.BLOCK

    @property
    def is_wall(self) -> bool:
        return self.type == CellType.WALL

    @property
    def is_empty(self) -> bool:
        return self.type == CellType.EMPTY

    @property
    def is_colored(self) -> bool:
        """True for blocks that take part in merging (color 1-9)."""
        return self.type == CellType.BLOCK and self.color > 0

    @property
    def char(self) -> str:
        """Single character used by the text renderer."""
        if self.type == CellType.EMPTY:
            return ' '
        if self.type == CellType.WALL:
            return '#'
        return str(self.color)

    def same_piece(self, other: 'Cell') -> bool:
        """True if both cells have the same type and group (drawn without a divider)."""
        return self.type == other.type and self.group == other.group


EMPTY = Cell()
WALL = Cell(type=CellType.WALL)


@dataclass(frozen=True)
class Coordinate:
    """
    Position of a cell on the grid.

    Attributes:
        row: Row index (0 is the top border)
        col: Column index (0 is the left border)
    """
    row: int
    col: int

    def offset(self, direction: 'Direction') -> 'Coordinate':
        """
        Get the neighbouring coordinate in a direction.

        Args:
            direction: Direction to step in

        Returns:
            Coordinate one step away
        """
        dr, dc = direction.value
        return Coordinate(self.row + dr, self.col + dc)
