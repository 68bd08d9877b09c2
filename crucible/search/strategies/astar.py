"""
Constrained A* Strategy - Minimal-cost path under run-length limits.

The search space is (cell, arrival direction, run length) rather than just
the cell, because the moves still legal from a cell depend on how it was
entered. From any state the mover may continue straight (if the run stays
within max_run) or turn left/right (once the run has reached min_run), but
never reverse. The goal only counts if it is entered with a run of at
least min_run.

Heuristic is the Manhattan distance to the goal (see GridModel), which is
consistent, so states leave the frontier in non-decreasing f order.
"""

import time
import logging
from typing import Optional

from ..base import SearchStrategy
from ..closed_set import ClosedSet
from ..constraints import MovementConstraints
from ..context import SearchContext
from ..direction import Direction
from ..factory import register_strategy
from ..frontier import PriorityFrontier
from ..grid import GridModel, Position
from ..result import SearchMetrics, SearchResult
from ..state import SearchState

logger = logging.getLogger(__name__)

# The only two ways out of the top-left source
SOURCE_EXITS = (Direction.RIGHT, Direction.DOWN)


@register_strategy
class SearchDriver(SearchStrategy):
    """
    A* over (cell, direction, run length) with lazy deletion.

    Duplicate states are allowed in the frontier; whichever copy is popped
    first is expanded and its node closed, later copies are discarded.
    When min_run <= 1, closing a node also closes every longer run at the
    same cell and direction, since a shorter run leaves strictly more
    freedom to continue straight.
    """
    name = "astar"
    description = "Constrained A* - exact cost under max/min run limits"

    def solve(self, context: SearchContext) -> SearchResult:
        """
        Run the search to completion.

        Args:
            context: Grid, constraints and optional expansion hook

        Returns:
            SUCCEEDED result with the minimal cost, or UNREACHABLE
        """
        start_time = time.perf_counter()

        grid = context.grid
        constraints = context.constraints
        closed = ClosedSet(grid, constraints.max_run)
        frontier = PriorityFrontier()
        metrics = SearchMetrics(strategy_name=self.name)
        collapse = constraints.collapses_runs

        logger.debug(
            f"Searching {grid.rows}x{grid.cols} grid under '{constraints.name}' "
            f"(max_run={constraints.max_run}, min_run={constraints.min_run})"
        )

        for direction in SOURCE_EXITS:
            neighbour = direction.step(grid.source)
            if not grid.in_bounds(neighbour):
                continue
            goal_cost = self._advance(grid, constraints, closed, frontier,
                                      0, direction, 1, neighbour)
            if goal_cost is not None:
                return self._build_result(constraints, metrics, frontier, start_time, goal_cost)

        while True:
            current = frontier.pop_min()
            if current is None:
                break

            if closed.is_closed(current.position, current.direction, current.run_length):
                metrics.states_discarded += 1
                continue

            metrics.states_expanded += 1
            context.report_expansion(current)

            reverse = current.direction.opposite()
            for direction, neighbour in grid.neighbors(current.position):
                if direction is reverse:
                    continue

                if direction is current.direction:
                    run_length = current.run_length + 1
                    if run_length > constraints.max_run:
                        continue
                else:
                    if current.run_length < constraints.min_run:
                        continue
                    run_length = 1

                goal_cost = self._advance(grid, constraints, closed, frontier,
                                          current.g, direction, run_length, neighbour)
                if goal_cost is not None:
                    return self._build_result(constraints, metrics, frontier, start_time, goal_cost)

            closed.mark_closed(current.position, current.direction, current.run_length, collapse)

        return self._build_result(constraints, metrics, frontier, start_time, None)

    @staticmethod
    def _advance(
        grid: GridModel,
        constraints: MovementConstraints,
        closed: ClosedSet,
        frontier: PriorityFrontier,
        g: int,
        direction: Direction,
        run_length: int,
        neighbour: Position
    ) -> Optional[int]:
        """
        Handle one legal move into neighbour.

        Returns:
            Total cost if the move completes the search, else None (the
            candidate was pushed or rejected)
        """
        neighbour_g = g + grid.cost(neighbour)

        if neighbour == grid.goal:
            if run_length < constraints.min_run:
                return None
            return neighbour_g

        if closed.is_closed(neighbour, direction, run_length):
            return None

        frontier.push(SearchState(
            position=neighbour,
            direction=direction,
            run_length=run_length,
            g=neighbour_g,
            f=neighbour_g + grid.heuristic(neighbour),
        ))
        return None

    def _build_result(
        self,
        constraints: MovementConstraints,
        metrics: SearchMetrics,
        frontier: PriorityFrontier,
        start_time: float,
        cost: Optional[int]
    ) -> SearchResult:
        """Build SearchResult object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.states_pushed = frontier.pushed
        metrics.peak_frontier = frontier.peak_size

        if cost is None:
            logger.debug(
                f"'{constraints.name}' unreachable after {metrics.states_expanded} expansions"
            )
            return SearchResult.unreachable(constraints.name, metrics)

        logger.debug(
            f"'{constraints.name}' reached goal with cost {cost} "
            f"({metrics.states_expanded} expanded, {metrics.states_discarded} discarded, "
            f"{metrics.computation_time_ms:.1f}ms)"
        )
        return SearchResult.succeeded(cost, constraints.name, metrics)
