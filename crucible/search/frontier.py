"""
Priority Frontier Module - Min-priority queue of open search states.
"""

import heapq
from itertools import count
from typing import List, Optional, Tuple

from .state import SearchState


class PriorityFrontier:
    """
    Open list ordered by estimated total cost f.

    The same logical state may be pushed more than once with different
    costs; stale copies are discarded by the closed-set check when popped
    rather than removed here. Ties on f are broken by insertion order.

    Attributes:
        pushed: Total number of states ever pushed
        peak_size: Largest number of entries held at once
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchState]] = []
        self._sequence = count()
        self.pushed = 0
        self.peak_size = 0

    def push(self, state: SearchState) -> None:
        heapq.heappush(self._heap, (state.f, next(self._sequence), state))
        self.pushed += 1
        if len(self._heap) > self.peak_size:
            self.peak_size = len(self._heap)

    def pop_min(self) -> Optional[SearchState]:
        """Remove and return the state with the lowest f, or None if empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
