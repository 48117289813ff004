from word_ladder.exceptions import IncompatibleLengthsError


def hamming_distance(word: str, goal: str) -> int:
    """Number of positions at which `word` and `goal` differ."""
    if len(word) != len(goal):
        raise IncompatibleLengthsError(word, goal)
    return sum(1 for a, b in zip(word, goal) if a != b)
