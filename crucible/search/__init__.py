"""
Search Package - Constrained-movement shortest path over a cost grid.

The mover travels from the top-left to the bottom-right cell, paying each
entered cell's cost, and may make at most max_run consecutive moves in one
direction. With min_run > 1 it must also make at least min_run straight
moves before turning or stopping.

Public API:
    - GridModel: Immutable cost grid with heuristic field
    - MovementConstraints: max_run/min_run pair (PRESETS, get_preset())
    - SearchContext: Per-search inputs
    - SearchResult / SearchStatus / SearchMetrics: Outcome of a search
    - SearchStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - find_path_cost(): One-call convenience wrapper
    - ParseError / InvalidConfiguration: Input errors

Usage:
    from crucible.search import GridModel, get_preset, find_path_cost

    grid = GridModel.from_text(text)
    result = find_path_cost(grid, get_preset("crucible"))

    if result.is_reachable:
        print(result.cost)
"""

from typing import Optional

# Core data structures
from .direction import Direction
from .errors import SearchError, ParseError, InvalidConfiguration
from .constraints import MovementConstraints, PRESETS, get_preset, get_preset_names
from .grid import GridModel
from .state import SearchState
from .closed_set import ClosedSet
from .frontier import PriorityFrontier
from .context import SearchContext
from .result import SearchResult, SearchStatus, SearchMetrics

# Strategy framework
from .base import SearchStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies
from .strategies import SearchDriver, DijkstraStrategy


def find_path_cost(
    grid: GridModel,
    constraints: MovementConstraints,
    strategy_name: Optional[str] = None
) -> SearchResult:
    """
    Search grid under constraints with the named strategy.

    Args:
        grid: Cost grid
        constraints: Run-length limits
        strategy_name: Registered strategy to use (registry default if None)

    Returns:
        SearchResult for this single search
    """
    strategy = create_strategy(strategy_name or get_default_strategy_name())
    return strategy.solve(SearchContext(grid=grid, constraints=constraints))


__all__ = [
    # Data structures
    "Direction",
    "GridModel",
    "SearchState",
    "ClosedSet",
    "PriorityFrontier",
    "SearchContext",
    "SearchResult",
    "SearchStatus",
    "SearchMetrics",
    # Configuration
    "MovementConstraints",
    "PRESETS",
    "get_preset",
    "get_preset_names",
    # Errors
    "SearchError",
    "ParseError",
    "InvalidConfiguration",
    # Strategy framework
    "SearchStrategy",
    "SearchDriver",
    "DijkstraStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "find_path_cost",
]
