# Dictionary package: the word list the solver searches over

from .word_dictionary import WordDictionary

__all__ = ["WordDictionary"]
