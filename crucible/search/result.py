"""
Search Result Module - Outcome of a search and its statistics.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class SearchStatus(Enum):
    """
    Terminal states of a search.

    States:
        SUCCEEDED: Goal reached; cost holds the minimal total
        UNREACHABLE: Frontier exhausted; no path satisfies the constraints
    """
    SUCCEEDED = auto()
    UNREACHABLE = auto()


@dataclass
class SearchMetrics:
    """
    Performance metrics for a search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_expanded: States popped and expanded
        states_discarded: States popped but already closed
        states_pushed: States inserted into the frontier
        peak_frontier: Largest frontier size reached
        strategy_name: Name of strategy that ran the search
    """
    computation_time_ms: float = 0.0
    states_expanded: int = 0
    states_discarded: int = 0
    states_pushed: int = 0
    peak_frontier: int = 0
    strategy_name: str = ""


@dataclass
class SearchResult:
    """
    Result of a search.

    Attributes:
        status: Whether the goal was reached
        cost: Minimal total cost, or None when unreachable
        constraints_name: Name of the constraint set searched under
        metrics: Performance statistics
    """
    status: SearchStatus
    cost: Optional[int] = None
    constraints_name: str = ""
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @classmethod
    def succeeded(cls, cost: int, constraints_name: str = "",
                  metrics: Optional[SearchMetrics] = None) -> 'SearchResult':
        return cls(status=SearchStatus.SUCCEEDED, cost=cost,
                   constraints_name=constraints_name,
                   metrics=metrics or SearchMetrics())

    @classmethod
    def unreachable(cls, constraints_name: str = "",
                    metrics: Optional[SearchMetrics] = None) -> 'SearchResult':
        return cls(status=SearchStatus.UNREACHABLE, cost=None,
                   constraints_name=constraints_name,
                   metrics=metrics or SearchMetrics())

    @property
    def is_reachable(self) -> bool:
        """True if a path satisfying the constraints was found."""
        return self.status is SearchStatus.SUCCEEDED

    def describe(self) -> str:
        """One-line summary, e.g. 'crucible: 102'."""
        value = str(self.cost) if self.is_reachable else "unreachable"
        return f"{self.constraints_name}: {value}"
