"""
Dijkstra Strategy - Unconstrained shortest path baseline.

Ignores run-length limits entirely and searches over cells only. Useful as
a lower bound and as a reference: with min_run=1 and a max_run no shorter
than any useful straight segment, the constrained search must agree with it.
"""

import heapq
import time
import logging
from typing import Dict, List, Tuple

from ..base import SearchStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..grid import Position
from ..result import SearchMetrics, SearchResult

logger = logging.getLogger(__name__)


@register_strategy
class DijkstraStrategy(SearchStrategy):
    """Plain Dijkstra over cells with stale-entry skipping."""
    name = "dijkstra"
    description = "Dijkstra (baseline) - ignores run-length limits"

    def solve(self, context: SearchContext) -> SearchResult:
        start_time = time.perf_counter()
        grid = context.grid
        metrics = SearchMetrics(strategy_name=self.name)

        best: Dict[Position, int] = {grid.source: 0}
        open_pq: List[Tuple[int, Position]] = [(0, grid.source)]
        cost = None

        while open_pq:
            g_u, u = heapq.heappop(open_pq)
            if g_u != best.get(u):
                metrics.states_discarded += 1
                continue
            if u == grid.goal:
                cost = g_u
                break
            metrics.states_expanded += 1

            for _, v in grid.neighbors(u):
                alt = g_u + grid.cost(v)
                if alt < best.get(v, alt + 1):
                    best[v] = alt
                    heapq.heappush(open_pq, (alt, v))
                    metrics.states_pushed += 1
                    metrics.peak_frontier = max(metrics.peak_frontier, len(open_pq))

        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        name = context.constraints.name
        if cost is None:
            return SearchResult.unreachable(name, metrics)
        logger.debug(f"Dijkstra reached goal with cost {cost}")
        return SearchResult.succeeded(cost, name, metrics)
