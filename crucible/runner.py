"""
Runner Module - Runs several constraint sets against one grid.

Each search owns its own closed set and frontier and only reads the
shared GridModel, so independent searches can run on separate threads.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Optional, Sequence

from crucible.search import (
    GridModel,
    MovementConstraints,
    SearchResult,
    find_path_cost,
)

logger = logging.getLogger(__name__)


def load_grid(path: Path) -> GridModel:
    """
    Read and parse a grid file.

    Args:
        path: UTF-8 text file of digit rows

    Returns:
        GridModel instance

    Raises:
        FileNotFoundError: If path does not exist
        ParseError: If the contents are not a valid grid
    """
    text = Path(path).read_text(encoding='utf-8')
    grid = GridModel.from_text(text)
    logger.info(f"Loaded {grid.rows}x{grid.cols} grid from {path}")
    return grid


def run_searches(
    grid: GridModel,
    constraints_list: Sequence[MovementConstraints],
    strategy_name: Optional[str] = None,
    parallel: bool = False,
    max_workers: Optional[int] = None
) -> Dict[str, SearchResult]:
    """
    Search grid once per constraint set.

    Args:
        grid: Cost grid shared (read-only) by every search
        constraints_list: Constraint sets to search under; names must be unique
        strategy_name: Registered strategy to use (registry default if None)
        parallel: Run each search on its own worker thread
        max_workers: Thread cap when parallel (defaults to one per search)

    Returns:
        Results keyed by constraint name, in input order
    """
    names = [c.name for c in constraints_list]
    if len(set(names)) != len(names):
        raise ValueError(f"Constraint names must be unique, got {names}")

    results: Dict[str, SearchResult] = {}

    if parallel and len(constraints_list) > 1:
        workers = max_workers or len(constraints_list)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="search") as pool:
            futures = {
                c.name: pool.submit(find_path_cost, grid, c, strategy_name)
                for c in constraints_list
            }
            for name, future in futures.items():
                results[name] = future.result()
    else:
        for c in constraints_list:
            results[c.name] = find_path_cost(grid, c, strategy_name)

    for result in results.values():
        logger.info(
            f"{result.describe()} ({result.metrics.strategy_name}, "
            f"{result.metrics.computation_time_ms:.1f}ms)"
        )
    return results
