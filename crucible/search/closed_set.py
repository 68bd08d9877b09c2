"""
Closed Set Module - Tracks which (cell, direction, run-length) nodes are final.
"""

from typing import Tuple

from .direction import Direction
from .grid import GridModel


class ClosedSet:
    """
    Dominance flags for the constrained search.

    One flag per (row, col, arrival direction, run length), stored in a
    flat bytearray with run length varying fastest. A flag is set when a
    state is expanded; any later state matching a set flag is discarded
    without expansion.

    The source cell can only be left, never entered, so arrivals heading
    LEFT (from its right neighbour) and UP (from the cell below) are closed
    for every run length up front.
    """

    def __init__(self, grid: GridModel, max_run: int):
        """
        Args:
            grid: Grid being searched
            max_run: Largest run length that needs a bucket
        """
        self.max_run = max_run
        self._cols = grid.cols
        self._flags = bytearray(grid.rows * grid.cols * len(Direction) * max_run)

        for direction in (Direction.LEFT, Direction.UP):
            base = self._base(grid.source, direction)
            self._flags[base:base + max_run] = b"\x01" * max_run

    def _base(self, position: Tuple[int, int], direction: Direction) -> int:
        """Offset of the run-length-1 bucket for this cell and direction."""
        row, col = position
        return ((row * self._cols + col) * len(Direction) + direction.value) * self.max_run

    def _check_run(self, run_length: int) -> None:
        if not 1 <= run_length <= self.max_run:
            raise ValueError(f"run_length {run_length} outside [1, {self.max_run}]")

    def is_closed(self, position: Tuple[int, int], direction: Direction, run_length: int) -> bool:
        """Check whether this node has already been finalized."""
        self._check_run(run_length)
        return self._flags[self._base(position, direction) + run_length - 1] == 1

    def mark_closed(
        self,
        position: Tuple[int, int],
        direction: Direction,
        run_length: int,
        collapse_remaining_buckets: bool
    ) -> None:
        """
        Finalize a node.

        Args:
            position: Cell of the expanded state
            direction: Arrival direction of the expanded state
            run_length: Run length of the expanded state
            collapse_remaining_buckets: Also close every longer run length
                at this cell and direction. Only sound when min_run <= 1.
        """
        self._check_run(run_length)
        start = self._base(position, direction) + run_length - 1
        if collapse_remaining_buckets:
            count = self.max_run - run_length + 1
            self._flags[start:start + count] = b"\x01" * count
        else:
            self._flags[start] = 1

    @property
    def closed_count(self) -> int:
        """Number of flags currently set."""
        return self._flags.count(1)
