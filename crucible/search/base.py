"""
Base Strategy Module - Abstract base class for search strategies.
"""

from abc import ABC, abstractmethod

from .context import SearchContext
from .result import SearchResult


class SearchStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SearchContext) -> SearchResult:
        """
        Compute the minimal cost from the grid's source to its goal.

        Args:
            context: Search context with grid, constraints and hooks

        Returns:
            SearchResult, with status UNREACHABLE if no path exists
        """
        pass
