import logging

import pytest

from word_ladder.dictionary import WordDictionary
from word_ladder.exceptions import (
    IncompatibleLengthsError,
    InvalidStrategyError,
    InvalidWordError,
)
from word_ladder.solver import SolverResponse, Strategy, WordLadderSolver


class TestFindPath:
    """End-to-end behavior of the solver facade."""

    @pytest.mark.parametrize("strategy", ["UCS", "A*", Strategy.UNIFORM_COST, Strategy.A_STAR])
    def test_cat_to_dog(self, example_solver: WordLadderSolver, strategy):
        response = example_solver.find_path("cat", "dog", strategy)

        assert isinstance(response, SolverResponse)
        assert response.found
        assert response.path[0] == "cat"
        assert response.path[-1] == "dog"
        assert response.word_count == 4
        assert response.path_length == 3
        assert response.computation_time_ms >= 0

    def test_greedy_path_is_valid(self, example_solver: WordLadderSolver):
        response = example_solver.find_path("cat", "dog", "Greedy")

        assert response.found
        assert response.strategy == Strategy.GREEDY_BEST_FIRST
        for current, following in zip(response.path, response.path[1:]):
            assert sum(a != b for a, b in zip(current, following)) == 1

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_path_to_self(self, example_solver: WordLadderSolver, strategy: Strategy):
        response = example_solver.find_path("cat", "cat", strategy)

        assert response.found
        assert response.path == ["cat"]
        assert response.path_length == 0
        assert response.word_count == 1
        assert response.nodes_expanded == 0

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_no_bridge_is_not_found(self, strategy: Strategy):
        solver = WordLadderSolver(WordDictionary.from_words(["cat", "dog"]))

        response = solver.find_path("cat", "dog", strategy)

        assert not response.found
        assert response.path == []
        assert response.path_length is None
        assert response.word_count == 0

    def test_not_found_differs_from_trivial_path(self, four_letter_solver: WordLadderSolver):
        missing = four_letter_solver.find_path("cold", "quiz", Strategy.A_STAR)
        trivial = four_letter_solver.find_path("quiz", "quiz", Strategy.A_STAR)

        assert not missing.found and missing.word_count == 0
        assert trivial.found and trivial.word_count == 1

    def test_input_is_normalized(self, example_solver: WordLadderSolver):
        response = example_solver.find_path("  CAT ", "Dog", "astar")

        assert response.start == "cat"
        assert response.goal == "dog"
        assert response.path[0] == "cat"

    def test_ucs_and_astar_agree_on_length(self, four_letter_solver: WordLadderSolver):
        ucs = four_letter_solver.find_path("head", "tail", Strategy.UNIFORM_COST)
        astar = four_letter_solver.find_path("head", "tail", Strategy.A_STAR)

        assert ucs.path_length == astar.path_length == 5

    def test_neighbor_cache_does_not_change_results(self, four_letter_dictionary: WordDictionary):
        plain = WordLadderSolver(four_letter_dictionary)
        cached = WordLadderSolver(four_letter_dictionary, use_neighbor_cache=True)

        for strategy in Strategy:
            for _ in range(2):
                assert cached.find_path("cold", "warm", strategy).path == plain.find_path("cold", "warm", strategy).path

        assert cached.neighbor_generator.cache_info()["hits"] > 0

    def test_summary_is_logged(self, example_solver: WordLadderSolver, caplog):
        with caplog.at_level(logging.INFO, logger="word_ladder.solver.solver"):
            example_solver.find_path("cat", "dog", "UCS")

        assert "SOLVE SUMMARY for cat -> dog (UCS)" in caplog.text


class TestPreconditions:
    """Bad input is rejected before any search runs."""

    def test_invalid_start_word(self, example_solver: WordLadderSolver):
        with pytest.raises(InvalidWordError, match="Invalid start word") as exc_info:
            example_solver.find_path("cab", "dog", "UCS")
        assert exc_info.value.word == "cab"
        assert exc_info.value.role == "start"

    def test_invalid_end_word(self, example_solver: WordLadderSolver):
        with pytest.raises(InvalidWordError, match="Invalid end word"):
            example_solver.find_path("cat", "dug", "UCS")

    def test_incompatible_lengths(self):
        solver = WordLadderSolver(WordDictionary.from_words(["cat", "cats"]))

        with pytest.raises(IncompatibleLengthsError):
            solver.find_path("cat", "cats", "A*")

    def test_invalid_strategy(self, example_solver: WordLadderSolver):
        with pytest.raises(InvalidStrategyError) as exc_info:
            example_solver.find_path("cat", "dog", "dfs")
        assert exc_info.value.selector == "dfs"

    def test_invalid_strategy_checked_before_words(self, example_solver: WordLadderSolver):
        with pytest.raises(InvalidStrategyError):
            example_solver.find_path("zzz", "qqq", "bogus")

    def test_no_search_runs_on_bad_input(self, monkeypatch):
        solver = WordLadderSolver(WordDictionary.from_words(["cat", "cot", "cats"]))
        calls = []
        monkeypatch.setattr(solver.neighbor_generator, "neighbors", lambda word: calls.append(word) or set())

        with pytest.raises(IncompatibleLengthsError):
            solver.find_path("cat", "cats", "UCS")

        assert calls == []


class TestCompareAndValidate:

    def test_compare_runs_every_strategy(self, four_letter_solver: WordLadderSolver):
        responses = four_letter_solver.compare("cold", "warm")

        assert [r.strategy for r in responses] == list(Strategy)
        assert all(r.found for r in responses)

    def test_compare_subset(self, example_solver: WordLadderSolver):
        responses = example_solver.compare("cat", "dog", [Strategy.A_STAR])
        assert len(responses) == 1

    def test_compare_with_no_strategies_runs_nothing(self, example_solver: WordLadderSolver):
        assert example_solver.compare("cat", "dog", []) == []

    def test_validate_word(self, example_solver: WordLadderSolver):
        assert example_solver.validate_word("Cat")
        assert not example_solver.validate_word("cab")
