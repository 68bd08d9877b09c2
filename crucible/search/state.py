"""
Search State Module - A single node of the constrained search space.
"""

from dataclasses import dataclass
from typing import Tuple

from .direction import Direction


@dataclass(frozen=True)
class SearchState:
    """
    Position plus the movement history that matters for future moves.

    Two states at the same cell are different search nodes when they
    arrived heading in different directions or with different run
    lengths, because those decide which moves remain legal.

    Attributes:
        position: (row, col) of the cell
        direction: Direction of travel when the cell was entered
        run_length: Consecutive moves made in that direction (>= 1)
        g: Accumulated cost from the source
        f: g plus the heuristic at position
    """
    position: Tuple[int, int]
    direction: Direction
    run_length: int
    g: int
    f: int

    @property
    def key(self) -> Tuple[Tuple[int, int], Direction, int]:
        """Identity used by the closed set."""
        return (self.position, self.direction, self.run_length)
