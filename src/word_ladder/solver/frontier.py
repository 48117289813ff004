"""
Priority frontier for the search strategies.

Entries pop in ascending priority. Equal priorities pop in insertion order:
every push takes the next value of a counter, and that counter is the second
element of the heap key, so the comparison never reaches the node itself.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class SearchNode:
    """A word together with its path cost from the start and its queue priority."""
    word: str
    cost: int
    priority: int


class Frontier:
    """Min-heap of SearchNodes with first-in-first-out tie-breaking."""

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()
        self.pushes = 0
        self.max_size = 0

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.priority, next(self._counter), node))
        self.pushes += 1
        if len(self._heap) > self.max_size:
            self.max_size = len(self._heap)

    def pop(self) -> SearchNode:
        """Remove and return the lowest-priority node. Raises IndexError when empty."""
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
