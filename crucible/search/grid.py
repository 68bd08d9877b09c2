"""
Grid Model Module - Immutable cost grid with a precomputed heuristic field.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .direction import Direction
from .errors import InvalidConfiguration, ParseError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

DIGITS = "0123456789"
MAX_CELL_COST = 9


@dataclass(frozen=True, eq=False)
class GridModel:
    """
    Immutable per-cell traversal costs for the search.

    The mover starts in the top-left cell and must reach the bottom-right
    cell. Entering a cell costs that cell's value; the source cell itself
    is never paid for.

    Attributes:
        costs: Read-only 2D int64 array of costs in [0, 9]
        heuristic_field: Read-only 2D int64 array, lower bound on the
                         cost still to pay from each cell to the goal
    """
    costs: np.ndarray
    heuristic_field: np.ndarray = field(init=False, repr=False)
    _cost_rows: List[List[int]] = field(init=False, repr=False)
    _heuristic_rows: List[List[int]] = field(init=False, repr=False)

    def __post_init__(self):
        try:
            raw = np.array(self.costs)
        except ValueError as e:
            raise ParseError(f"Grid rows must all have the same length: {e}") from e
        if raw.ndim != 2 or raw.size == 0:
            raise ParseError(f"Grid must be a non-empty 2D matrix, got shape {raw.shape}")
        # Rejects floats, bools and the object arrays ragged rows produce
        if raw.dtype.kind not in ("i", "u"):
            raise ParseError(f"Grid costs must be integers, got dtype {raw.dtype}")

        costs = raw.astype(np.int64)
        if costs.min() < 0 or costs.max() > MAX_CELL_COST:
            raise ParseError(f"Grid costs must lie in [0, {MAX_CELL_COST}]")
        if costs.size < 2:
            raise InvalidConfiguration("Grid has a single cell: source and goal coincide")
        costs.setflags(write=False)

        rows, cols = costs.shape
        row_idx, col_idx = np.indices((rows, cols), dtype=np.int64)
        manhattan = (rows - 1 - row_idx) + (cols - 1 - col_idx)
        # Manhattan distance only bounds the remaining cost when every step
        # costs at least 1; zero-cost cells drop the field to zero.
        heuristic = manhattan * min(1, int(costs.min()))
        heuristic.setflags(write=False)

        object.__setattr__(self, "costs", costs)
        object.__setattr__(self, "heuristic_field", heuristic)
        # Plain lists for the search loop; single-element numpy reads are slow
        object.__setattr__(self, "_cost_rows", costs.tolist())
        object.__setattr__(self, "_heuristic_rows", heuristic.tolist())
        logger.debug(f"Grid built: {rows}x{cols}, min cost {int(costs.min())}")

    @classmethod
    def from_text(cls, text: str) -> 'GridModel':
        """
        Parse a block of digit lines.

        Args:
            text: Newline-separated rows of '0'-'9' characters

        Returns:
            GridModel instance

        Raises:
            ParseError: If input is empty, ragged or contains non-digits
            InvalidConfiguration: If the grid is 1x1
        """
        return cls.from_lines(text.splitlines())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'GridModel':
        """
        Parse rows of digit characters.

        Surrounding whitespace and blank lines before the first row or
        after the last row are ignored. A blank line between rows is an
        error.
        """
        stripped = [line.strip() for line in lines]
        while stripped and not stripped[-1]:
            stripped.pop()
        while stripped and not stripped[0]:
            stripped.pop(0)
        if not stripped:
            raise ParseError("Grid input is empty")

        width = len(stripped[0])
        rows: List[List[int]] = []
        for r, line in enumerate(stripped):
            if len(line) != width:
                raise ParseError(
                    f"Row {r} has length {len(line)}, expected {width}"
                )
            row = []
            for c, char in enumerate(line):
                if char not in DIGITS:
                    raise ParseError(f"Non-digit character {char!r} at row {r}, col {c}")
                row.append(ord(char) - ord("0"))
            rows.append(row)

        return cls(costs=np.array(rows, dtype=np.int64))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'GridModel':
        """
        Create a grid from integer rows (e.g. a 2D list).

        Raises:
            ParseError: If rows are empty, ragged or hold non-integer values
            InvalidConfiguration: If the grid is 1x1
        """
        if len(rows) == 0:
            raise ParseError("Grid input is empty")

        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ParseError(f"Row {r} has length {len(row)}, expected {width}")
            for c, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise ParseError(f"Non-integer value {value!r} at row {r}, col {c}")
                if not 0 <= value <= MAX_CELL_COST:
                    raise ParseError(
                        f"Value {value} at row {r}, col {c} outside [0, {MAX_CELL_COST}]"
                    )

        return cls(costs=np.array(rows, dtype=np.int64))

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return len(self._cost_rows)

    @property
    def cols(self) -> int:
        """Number of columns in the grid."""
        return len(self._cost_rows[0])

    @property
    def source(self) -> Position:
        return (0, 0)

    @property
    def goal(self) -> Position:
        return (self.rows - 1, self.cols - 1)

    @property
    def min_cost(self) -> int:
        """Cheapest cell cost anywhere in the grid."""
        return int(self.costs.min())

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cost(self, position: Position) -> int:
        """Cost paid for entering the cell at position."""
        row, col = position
        return self._cost_rows[row][col]

    def heuristic(self, position: Position) -> int:
        """Admissible estimate of the cost from position to the goal."""
        row, col = position
        return self._heuristic_rows[row][col]

    def neighbors(self, position: Position) -> List[Tuple[Direction, Position]]:
        """
        In-bounds cells one step away from position.

        Returns:
            List of (direction of travel, neighbour position) pairs
        """
        result = []
        for direction in Direction:
            neighbour = direction.step(position)
            if self.in_bounds(neighbour):
                result.append((direction, neighbour))
        return result

    def to_list(self) -> List[List[int]]:
        """Mutable 2D list copy of the costs."""
        return self.costs.tolist()
