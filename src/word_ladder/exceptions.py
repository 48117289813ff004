"""
Custom exceptions for the word ladder solver.
"""


class WordLadderException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class DictionaryUnavailableError(WordLadderException):
    """Raised when the dictionary source cannot be loaded or is empty."""
    pass


class InvalidWordError(WordLadderException):
    """Raised when the start or end word is not in the dictionary."""
    def __init__(self, word: str, role: str):
        self.word = word
        self.role = role
        super().__init__(f"Invalid {role} word: '{word}' is not in the dictionary.")


class IncompatibleLengthsError(WordLadderException):
    """Raised when two words that must be compared have different lengths."""
    def __init__(self, first: str, second: str):
        self.first_length = len(first)
        self.second_length = len(second)
        super().__init__(
            f"Words '{first}' ({self.first_length} letters) and '{second}' "
            f"({self.second_length} letters) have different lengths."
        )


class InvalidStrategyError(WordLadderException):
    """Raised when a strategy selector does not name a known search strategy."""
    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Invalid strategy '{selector}'. Choose one of: UCS, Greedy, A*.")
