"""
Search Context Module - Inputs shared by a single search invocation.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .constraints import MovementConstraints
from .grid import GridModel
from .state import SearchState


@dataclass
class SearchContext:
    """
    Everything a strategy needs to run one search.

    A context is owned by exactly one search; separate searches, including
    ones running on other threads, get their own.

    Attributes:
        grid: Cost grid to search
        constraints: Run-length limits for the mover
        expansion_callback: Optional hook called with every state that is
                            actually expanded (not discarded), in pop order
    """
    grid: GridModel
    constraints: MovementConstraints
    expansion_callback: Optional[Callable[[SearchState], None]] = None

    def report_expansion(self, state: SearchState) -> None:
        """
        Notify the expansion hook, if any.

        Args:
            state: State about to be expanded
        """
        if self.expansion_callback:
            self.expansion_callback(state)
