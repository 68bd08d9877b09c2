"""
Tests for the constrained search

Covers:
1. Small hand-checked scenarios (tiny grids, corridors, forced minimum runs)
2. The two worked puzzle examples
3. Properties: agreement with Dijkstra, monotonicity in min_run,
   determinism and non-decreasing expansion order

Usage:
    python -m pytest tests/test_search.py
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from crucible.search import (
    GridModel,
    MovementConstraints,
    SearchContext,
    SearchStatus,
    create_strategy,
    find_path_cost,
    get_default_strategy_name,
    get_preset,
    get_strategy_info,
    get_strategy_names,
)


EXAMPLE = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

CORRIDOR_EXAMPLE = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""


def _cost_or_inf(result):
    return result.cost if result.is_reachable else math.inf


def _random_grid(seed, rows, cols, low=1):
    rng = np.random.default_rng(seed)
    return GridModel.from_rows(rng.integers(low, 10, size=(rows, cols)).tolist())


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_two_by_two_grid():
    """One move right and one move down."""
    grid = GridModel.from_rows([[1, 1], [1, 1]])
    result = find_path_cost(grid, MovementConstraints(max_run=3, min_run=1))

    assert result.status is SearchStatus.SUCCEEDED
    assert result.cost == 2


def test_source_cost_is_not_paid():
    grid = GridModel.from_rows([[9, 1], [1, 1]])
    assert find_path_cost(grid, get_preset("crucible")).cost == 2


def test_corridor_within_max_run():
    """Three straight moves are allowed when max_run is 3."""
    grid = GridModel.from_text("1111")
    result = find_path_cost(grid, get_preset("crucible"))
    assert result.cost == 3


def test_corridor_longer_than_max_run_is_unreachable():
    """A single row leaves no room to zig-zag around a four-move run."""
    grid = GridModel.from_text("11111")
    result = find_path_cost(grid, get_preset("crucible"))

    assert result.status is SearchStatus.UNREACHABLE
    assert result.cost is None
    assert not result.is_reachable
    assert _cost_or_inf(result) > 4


def test_wide_grid_forces_turns():
    """The cheap top row is too long to use in one run."""
    grid = GridModel.from_text("11111\n99999")
    result = find_path_cost(grid, get_preset("crucible"))

    assert result.is_reachable
    assert result.cost > 5


def test_goal_adjacent_to_source():
    """In a 1x2 grid the first move already reaches the goal."""
    grid = GridModel.from_text("07")

    assert find_path_cost(grid, get_preset("crucible")).cost == 7
    assert find_path_cost(grid, get_preset("ultra_crucible")).status is SearchStatus.UNREACHABLE

    column = GridModel.from_text("0\n7")
    assert find_path_cost(column, get_preset("crucible")).cost == 7


@pytest.mark.parametrize("size", [2, 3, 4])
def test_min_run_larger_than_grid_is_unreachable(size):
    """A minimum run of 4 cannot fit in a grid with fewer than 5 rows and columns."""
    grid = GridModel.from_rows([[1] * size for _ in range(size)])
    result = find_path_cost(grid, get_preset("ultra_crucible"))

    assert result.status is SearchStatus.UNREACHABLE


def test_min_run_just_fits():
    """Four moves right then four moves down."""
    grid = GridModel.from_rows([[1] * 5 for _ in range(5)])
    result = find_path_cost(grid, get_preset("ultra_crucible"))

    assert result.cost == 8


def test_min_run_equal_to_max_run():
    """Every segment must be exactly two moves long."""
    grid = GridModel.from_rows([[1] * 3 for _ in range(3)])
    result = find_path_cost(grid, MovementConstraints(max_run=2, min_run=2))

    assert result.cost == 4


def test_goal_must_be_entered_after_min_run():
    """Turning into the goal after one step does not count."""
    grid = GridModel.from_text("11111\n11111\n11111\n11111\n11111\n11111")
    result = find_path_cost(grid, MovementConstraints(max_run=10, min_run=5))

    # A horizontal run of 5 does not fit in 5 columns, so the last column
    # can never be reached.
    assert result.status is SearchStatus.UNREACHABLE


# ---------------------------------------------------------------------------
# Worked examples
# ---------------------------------------------------------------------------

def test_example_crucible():
    grid = GridModel.from_text(EXAMPLE)
    assert find_path_cost(grid, get_preset("crucible")).cost == 102


def test_example_ultra_crucible():
    grid = GridModel.from_text(EXAMPLE)
    assert find_path_cost(grid, get_preset("ultra_crucible")).cost == 94


def test_corridor_example_ultra_crucible():
    """Long straight runs are required to avoid the expensive cells."""
    grid = GridModel.from_text(CORRIDOR_EXAMPLE)
    assert find_path_cost(grid, get_preset("ultra_crucible")).cost == 71


def test_metrics_populated():
    grid = GridModel.from_text(EXAMPLE)
    result = find_path_cost(grid, get_preset("crucible"))

    assert result.constraints_name == "crucible"
    assert result.metrics.strategy_name == "astar"
    assert result.metrics.states_expanded > 0
    assert result.metrics.states_pushed >= result.metrics.states_expanded
    assert result.metrics.peak_frontier > 0
    assert result.metrics.computation_time_ms >= 0
    assert result.describe() == "crucible: 102"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("seed, rows, cols, low", [
    (1, 6, 6, 1),
    (2, 8, 5, 1),
    (3, 12, 12, 1),
    (4, 7, 9, 0),   # zero-cost cells
    (5, 2, 15, 0),
])
def test_unlimited_runs_match_dijkstra(seed, rows, cols, low):
    """With min_run=1 and a max_run spanning the grid, constraints never bind."""
    grid = _random_grid(seed, rows, cols, low=low)
    loose = MovementConstraints(max_run=rows + cols, min_run=1, name="loose")

    astar = find_path_cost(grid, loose, "astar")
    dijkstra = find_path_cost(grid, loose, "dijkstra")

    assert astar.is_reachable and dijkstra.is_reachable
    assert astar.cost == dijkstra.cost


def test_dijkstra_is_lower_bound():
    grid = GridModel.from_text(EXAMPLE)
    baseline = find_path_cost(grid, get_preset("crucible"), "dijkstra")

    for name in ("crucible", "ultra_crucible"):
        assert baseline.cost <= find_path_cost(grid, get_preset(name)).cost


@pytest.mark.parametrize("text", [EXAMPLE, CORRIDOR_EXAMPLE])
def test_raising_min_run_never_lowers_cost(text):
    grid = GridModel.from_text(text)

    costs = [
        _cost_or_inf(find_path_cost(grid, MovementConstraints(max_run=10, min_run=m)))
        for m in range(1, 8)
    ]

    assert costs == sorted(costs)


def test_search_is_deterministic():
    grid = _random_grid(7, 20, 20)

    for name in ("crucible", "ultra_crucible"):
        first = find_path_cost(grid, get_preset(name))
        second = find_path_cost(grid, get_preset(name))
        assert first.cost == second.cost
        assert first.metrics.states_expanded == second.metrics.states_expanded


@pytest.mark.parametrize("preset", ["crucible", "ultra_crucible"])
def test_expansions_in_non_decreasing_f_order(preset):
    """The heuristic is consistent, so expanded f values never go down."""
    grid = GridModel.from_text(EXAMPLE)
    constraints = get_preset(preset)
    expanded = []
    context = SearchContext(grid=grid, constraints=constraints,
                            expansion_callback=expanded.append)

    result = create_strategy("astar").solve(context)

    assert result.is_reachable
    assert len(expanded) == result.metrics.states_expanded
    f_values = [state.f for state in expanded]
    assert f_values == sorted(f_values)
    assert all(1 <= s.run_length <= constraints.max_run for s in expanded)


def test_each_node_expanded_once():
    grid = _random_grid(11, 15, 15)
    expanded = []
    context = SearchContext(grid=grid, constraints=get_preset("ultra_crucible"),
                            expansion_callback=expanded.append)

    create_strategy("astar").solve(context)

    keys = [state.key for state in expanded]
    assert len(keys) == len(set(keys))


# ---------------------------------------------------------------------------
# Strategy registry
# ---------------------------------------------------------------------------

def test_strategy_registry():
    assert set(get_strategy_names()) == {"astar", "dijkstra"}
    assert get_default_strategy_name() == "astar"
    info = {entry["name"]: entry["description"] for entry in get_strategy_info()}
    assert "Constrained A*" in info["astar"]
    assert get_strategy_info()[0]["name"] == "astar"


def test_default_strategy_used_when_unnamed():
    grid = GridModel.from_text(EXAMPLE)
    result = find_path_cost(grid, get_preset("crucible"))
    assert result.metrics.strategy_name == get_default_strategy_name()


def test_larger_grid_matches_dijkstra():
    """Loose constraints on a bigger grid agree with the unconstrained baseline."""
    grid = _random_grid(13, 60, 60)
    loose = MovementConstraints(max_run=120, min_run=1, name="loose")

    assert find_path_cost(grid, loose).cost == find_path_cost(grid, loose, "dijkstra").cost


def test_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown strategy"):
        create_strategy("greedy")
