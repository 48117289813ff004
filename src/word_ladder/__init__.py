"""
Word Ladder - Core Library

Finds transformation chains between equal-length words, changing one letter
at a time, using uniform-cost, greedy best-first or A* search.
"""

from .dictionary import WordDictionary
from .solver import WordLadderSolver, SolverRequest, SolverResponse, Strategy

__all__ = [
    "WordDictionary",
    "WordLadderSolver",
    "SolverRequest",
    "SolverResponse",
    "Strategy",
]
