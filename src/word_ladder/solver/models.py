"""
Solver models for word ladder search.
"""

from enum import Enum
from typing import List, Optional, Annotated, Union

from pydantic import BaseModel, Field

from word_ladder.exceptions import InvalidStrategyError


class Strategy(str, Enum):
    """The interchangeable search strategies."""
    UNIFORM_COST = "ucs"
    GREEDY_BEST_FIRST = "greedy"
    A_STAR = "astar"

    @classmethod
    def parse(cls, selector: Union["Strategy", str]) -> "Strategy":
        """
        Resolve a user-supplied selector such as "UCS", "Greedy" or "A*".

        Raises:
            InvalidStrategyError: If the selector names no known strategy.
        """
        if isinstance(selector, Strategy):
            return selector
        if not isinstance(selector, str):
            raise InvalidStrategyError(str(selector))
        key = selector.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        strategy = _ALIASES.get(key)
        if strategy is None:
            raise InvalidStrategyError(selector)
        return strategy

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_ALIASES = {
    "ucs": Strategy.UNIFORM_COST,
    "uniform": Strategy.UNIFORM_COST,
    "uniformcost": Strategy.UNIFORM_COST,
    "greedy": Strategy.GREEDY_BEST_FIRST,
    "gbfs": Strategy.GREEDY_BEST_FIRST,
    "greedybestfirst": Strategy.GREEDY_BEST_FIRST,
    "a*": Strategy.A_STAR,
    "astar": Strategy.A_STAR,
}

_DISPLAY_NAMES = {
    Strategy.UNIFORM_COST: "UCS",
    Strategy.GREEDY_BEST_FIRST: "Greedy",
    Strategy.A_STAR: "A*",
}


class SolverRequest(BaseModel):
    """Request model for word ladder search."""
    start_word: Annotated[str, Field(min_length=1)] = Field(..., description="Word the ladder starts from")
    end_word: Annotated[str, Field(min_length=1)] = Field(..., description="Word the ladder must reach")
    strategy: str = Field("astar", description="Search strategy: UCS, Greedy or A*")


class SolverResponse(BaseModel):
    """Response model for word ladder search results."""
    start: str = Field(..., description="Normalized start word")
    goal: str = Field(..., description="Normalized end word")
    strategy: Strategy = Field(..., description="Strategy that produced this result")
    found: bool = Field(..., description="Whether a ladder was found")
    path: List[str] = Field(default_factory=list, description="Words from start to goal, empty when no ladder exists")
    path_length: Optional[int] = Field(None, description="Number of substitutions in the path, None when not found")
    word_count: int = Field(0, description="Number of words in the path")
    nodes_expanded: int = Field(0, description="Words popped from the frontier and expanded")
    computation_time_ms: float = Field(..., description="Time taken to compute the path in milliseconds")
