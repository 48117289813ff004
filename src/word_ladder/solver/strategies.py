"""
Search strategies over the implicit word graph.

All three strategies share one shape: pop the lowest-priority node, stop if it
is the goal, otherwise expand it and push its neighbors. They differ only in
the priority they assign and in how they avoid re-expansion:

- Uniform-Cost orders by path cost and relaxes cost/predecessor entries when a
  strictly cheaper path is found. Stale heap entries are skipped on pop.
- Greedy Best-First orders by the heuristic alone and keeps a visited set. The
  first predecessor recorded for a word is kept. Paths are not guaranteed to
  be minimal.
- A* orders by cost + heuristic with the same relaxation as Uniform-Cost.

The goal test happens when a node is popped, never when it is pushed.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Set

from .frontier import Frontier, SearchNode
from .models import Strategy
from .path import reconstruct_path

logger = logging.getLogger(__name__)

NeighborFn = Callable[[str], Set[str]]
HeuristicFn = Callable[[str, str], int]


@dataclass
class SearchOutcome:
    """Result of a single strategy run. An empty path means no ladder exists."""
    path: List[str] = field(default_factory=list)
    nodes_expanded: int = 0
    nodes_generated: int = 0
    max_frontier_size: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)


def _finish(strategy: str, frontier: Frontier, expanded: int, path: List[str]) -> SearchOutcome:
    outcome = SearchOutcome(
        path=path,
        nodes_expanded=expanded,
        nodes_generated=frontier.pushes,
        max_frontier_size=frontier.max_size,
    )
    logger.debug(
        f"{strategy}: {'goal reached' if path else 'frontier exhausted'} "
        f"(expanded: {expanded}, generated: {frontier.pushes}, max frontier: {frontier.max_size})"
    )
    return outcome


def _cost_ordered_search(
    name: str,
    start: str,
    goal: str,
    neighbors: NeighborFn,
    priority_of: Callable[[str, int], int],
) -> SearchOutcome:
    """Best-first search with cost relaxation, shared by Uniform-Cost and A*."""
    frontier = Frontier()
    cost_so_far: Dict[str, int] = {start: 0}
    came_from: Dict[str, str] = {}
    expanded = 0

    frontier.push(SearchNode(start, 0, priority_of(start, 0)))

    while frontier:
        current = frontier.pop()

        # Lazy deletion: a cheaper entry for this word was pushed after this one
        if current.cost > cost_so_far[current.word]:
            continue

        if current.word == goal:
            return _finish(name, frontier, expanded, reconstruct_path(came_from, goal))

        expanded += 1
        new_cost = current.cost + 1
        for neighbor in sorted(neighbors(current.word)):
            known = cost_so_far.get(neighbor)
            if known is None or new_cost < known:
                cost_so_far[neighbor] = new_cost
                came_from[neighbor] = current.word
                frontier.push(SearchNode(neighbor, new_cost, priority_of(neighbor, new_cost)))

    return _finish(name, frontier, expanded, [])


def uniform_cost_search(start: str, goal: str, neighbors: NeighborFn, heuristic: HeuristicFn) -> SearchOutcome:
    """Dijkstra-style search; the heuristic is accepted for a uniform signature and ignored."""
    return _cost_ordered_search("UCS", start, goal, neighbors, lambda word, cost: cost)


def a_star_search(start: str, goal: str, neighbors: NeighborFn, heuristic: HeuristicFn) -> SearchOutcome:
    """A* search. Returns a minimal ladder when `heuristic` is admissible."""
    return _cost_ordered_search(
        "A*", start, goal, neighbors, lambda word, cost: cost + heuristic(word, goal)
    )


def greedy_best_first_search(start: str, goal: str, neighbors: NeighborFn, heuristic: HeuristicFn) -> SearchOutcome:
    """Greedy search ordered by heuristic only. May return a longer-than-minimal ladder."""
    frontier = Frontier()
    came_from: Dict[str, str] = {}
    visited: Set[str] = set()
    expanded = 0

    frontier.push(SearchNode(start, 0, heuristic(start, goal)))

    while frontier:
        current = frontier.pop()

        if current.word == goal:
            return _finish("Greedy", frontier, expanded, reconstruct_path(came_from, goal))

        if current.word in visited:
            continue
        visited.add(current.word)
        expanded += 1

        for neighbor in sorted(neighbors(current.word)):
            if neighbor in visited:
                continue
            if neighbor not in came_from:
                came_from[neighbor] = current.word
            frontier.push(SearchNode(neighbor, current.cost + 1, heuristic(neighbor, goal)))

    return _finish("Greedy", frontier, expanded, [])


SearchFn = Callable[[str, str, NeighborFn, HeuristicFn], SearchOutcome]

STRATEGIES: Dict[Strategy, SearchFn] = {
    Strategy.UNIFORM_COST: uniform_cost_search,
    Strategy.GREEDY_BEST_FIRST: greedy_best_first_search,
    Strategy.A_STAR: a_star_search,
}
