"""
Direction Module - Compass directions of travel on the grid.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    Direction of travel, i.e. the way the mover was heading when it
    arrived at a cell. Values double as closed-set indices.
    """
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of a single step in this direction."""
        return _DELTAS[self]

    def opposite(self) -> "Direction":
        """Direction pointing the other way (a reversal)."""
        return Direction((self.value + 2) % 4)

    def step(self, position: Tuple[int, int]) -> Tuple[int, int]:
        """Position reached by moving one cell from position."""
        dr, dc = self.delta
        return (position[0] + dr, position[1] + dc)


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}
