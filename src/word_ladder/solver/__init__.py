# Word ladder solver package

from .solver import WordLadderSolver
from .models import SolverRequest, SolverResponse, Strategy
from .strategies import STRATEGIES, SearchOutcome

__all__ = [
    "WordLadderSolver",
    "SolverRequest",
    "SolverResponse",
    "Strategy",
    "STRATEGIES",
    "SearchOutcome",
]
