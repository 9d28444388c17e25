"""
Move Module - Represents a push of one block group.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    Orthogonal directions with their (row, col) deltas.

    Declaration order (left, right, down, up) is the neighbour order
    used by the move simulator.
    """
    LEFT = (0, -1)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    UP = (-1, 0)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]


# Only horizontal pushes are player moves; falling is automatic
HORIZONTAL: Tuple[Direction, ...] = (Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Move:
    """
    Represents pushing a group one cell sideways.

    Group ids are only meaningful relative to the board the move
    is applied to, since merges renumber groups.

    Attributes:
        group: Id of the group being pushed (1..group_count)
        direction: Direction.LEFT or Direction.RIGHT
    """
    group: int
    direction: Direction

    def __str__(self) -> str:
        return f"group {self.group} {self.direction.name.lower()}"
