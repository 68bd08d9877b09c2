"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .astar import SearchDriver
from .dijkstra import DijkstraStrategy

__all__ = [
    "SearchDriver",
    "DijkstraStrategy",
]
