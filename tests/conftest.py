"""
Pytest configuration and shared fixtures for word ladder testing.
"""

import logging
from pathlib import Path

import pytest

from word_ladder.dictionary import WordDictionary
from word_ladder.solver import WordLadderSolver

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

EXAMPLE_WORDS = ["cat", "cot", "cog", "dog", "dot", "cag"]

FOUR_LETTER_WORDS = [
    "cold", "cord", "card", "ward", "warm", "word", "worm", "wore", "core",
    "bore", "bold", "bolt", "boat", "coat", "cost", "most", "mist", "must",
    "cast", "form", "farm", "harm", "hard", "herd", "head", "heal", "teal",
    "tell", "tall", "tail", "toil", "coal", "cool", "pool", "poll", "pole",
    "pale", "sale", "sole", "some", "same", "came", "come", "home", "hole",
    "hold", "gold", "good", "goad", "load", "lord", "loan", "lean", "bean",
    "beat", "bear", "dear", "deer", "beer", "been",
    # No single substitution reaches these from the rest of the list
    "quiz", "quip",
]


@pytest.fixture
def example_dictionary() -> WordDictionary:
    """The six-word dictionary from the cat -> dog example."""
    return WordDictionary.from_words(EXAMPLE_WORDS)


@pytest.fixture
def four_letter_dictionary() -> WordDictionary:
    """A larger dictionary with several competing ladders and a disconnected pair."""
    return WordDictionary.from_words(FOUR_LETTER_WORDS)


@pytest.fixture
def example_solver(example_dictionary: WordDictionary) -> WordLadderSolver:
    return WordLadderSolver(example_dictionary)


@pytest.fixture
def four_letter_solver(four_letter_dictionary: WordDictionary) -> WordLadderSolver:
    return WordLadderSolver(four_letter_dictionary)


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    """Example dictionary written to disk with mixed case and blank lines."""
    path = tmp_path / "dict.txt"
    path.write_text("Cat\ncot\n\nCOG\ndog\n  dot  \ncag\n", encoding="utf-8")
    return path
