import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


def reconstruct_path(came_from: Dict[str, str], goal: str) -> List[str]:
    """
    Walk the predecessor map backward from `goal` to the start word.

    The start is the first word on the walk with no predecessor entry. The
    returned list runs start -> ... -> goal.

    Raises:
        RuntimeError: If the walk is longer than the map allows, which means
            the map contains a cycle.
    """
    path = [goal]
    current = goal
    max_steps = len(came_from) + 1
    while current in came_from:
        current = came_from[current]
        path.append(current)
        if len(path) > max_steps:
            logger.error(f"Predecessor map has a cycle reachable from '{goal}'")
            raise RuntimeError(f"Cannot reconstruct path to '{goal}': predecessor map contains a cycle.")
    path.reverse()
    return path
