"""
WordLadderSolver - Service for finding word ladders between dictionary words.

The solver validates a request up front (strategy, dictionary membership,
equal lengths) so that no search work starts on bad input, then dispatches to
one of the registered strategies and wraps the outcome with timing data.
"""

import logging
import time
from typing import List, Optional, Union

from word_ladder.dictionary import WordDictionary
from word_ladder.exceptions import IncompatibleLengthsError, InvalidWordError

from .heuristics import hamming_distance
from .models import SolverResponse, Strategy
from .neighbors import NeighborGenerator
from .strategies import STRATEGIES, SearchOutcome

logger = logging.getLogger(__name__)


class WordLadderSolver:
    """Service for finding word ladders using UCS, Greedy Best-First or A* search."""

    def __init__(self, dictionary: WordDictionary, use_neighbor_cache: bool = False):
        """
        Initialize the solver.

        Args:
            dictionary: Word list shared read-only by every search.
            use_neighbor_cache: Memoize neighbor sets across searches.
        """
        self.dictionary = dictionary
        self.neighbor_generator = NeighborGenerator(dictionary, cache=use_neighbor_cache)

    def validate_word(self, word: str) -> bool:
        """Check whether a word is in the dictionary."""
        return self.dictionary.contains(word.strip())

    def _validate(self, start: str, goal: str, strategy: Union[Strategy, str]):
        strategy = Strategy.parse(strategy)

        start = start.strip().lower()
        goal = goal.strip().lower()
        if not self.dictionary.contains(start):
            raise InvalidWordError(start, "start")
        if not self.dictionary.contains(goal):
            raise InvalidWordError(goal, "end")
        if len(start) != len(goal):
            raise IncompatibleLengthsError(start, goal)

        return start, goal, strategy

    def find_path(
        self,
        start: str,
        goal: str,
        strategy: Union[Strategy, str] = Strategy.A_STAR,
    ) -> SolverResponse:
        """
        Find a word ladder from `start` to `goal`.

        Args:
            start: Starting word (case-insensitive)
            goal: Target word (case-insensitive)
            strategy: Strategy enum member or selector such as "UCS", "Greedy", "A*"

        Returns:
            SolverResponse. When no ladder exists, `found` is False and `path` is empty.

        Raises:
            InvalidStrategyError: If the strategy selector is not recognized
            InvalidWordError: If either word is not in the dictionary
            IncompatibleLengthsError: If the words differ in length
        """
        start, goal, strategy = self._validate(start, goal, strategy)

        request_start_time = time.perf_counter()
        if start == goal:
            outcome = SearchOutcome(path=[start])
        else:
            search = STRATEGIES[strategy]
            outcome = search(start, goal, self.neighbor_generator.neighbors, hamming_distance)
        computation_time_ms = (time.perf_counter() - request_start_time) * 1000

        if outcome.found:
            logger.info(
                f"SOLVE SUMMARY for {start} -> {goal} ({strategy.display_name}): "
                f"Path length: {len(outcome.path) - 1}, "
                f"Nodes expanded: {outcome.nodes_expanded}, "
                f"Total time: {computation_time_ms:.1f}ms"
            )
        else:
            logger.info(
                f"No ladder between {start} and {goal} ({strategy.display_name}) "
                f"after expanding {outcome.nodes_expanded} nodes in {computation_time_ms:.1f}ms"
            )

        if self.neighbor_generator.cache_enabled:
            logger.debug(f"Neighbor cache: {self.neighbor_generator.cache_info()}")

        return SolverResponse(
            start=start,
            goal=goal,
            strategy=strategy,
            found=outcome.found,
            path=outcome.path,
            path_length=len(outcome.path) - 1 if outcome.found else None,
            word_count=len(outcome.path),
            nodes_expanded=outcome.nodes_expanded,
            computation_time_ms=computation_time_ms,
        )

    def compare(self, start: str, goal: str, strategies: Optional[List[Strategy]] = None) -> List[SolverResponse]:
        """Run several strategies on the same pair, in enum order by default."""
        strategies = list(Strategy) if strategies is None else strategies
        return [self.find_path(start, goal, strategy) for strategy in strategies]
