"""
WordDictionary - The sole gateway to the word list used by the solver.

Words are normalized to lowercase on load. The set is frozen once built, so a
single instance can be shared read-only by every search.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Union

from word_ladder.exceptions import DictionaryUnavailableError

logger = logging.getLogger(__name__)


class WordDictionary:
    """
    Immutable set of lowercase words queried for membership.

    Key methods:
    - from_file(path): load a newline-delimited word list.
    - contains(word): case-insensitive membership test.
    """

    def __init__(self, words: Iterable[str], source: Optional[str] = None):
        self._words: FrozenSet[str] = frozenset(
            word.strip().lower() for word in words if word.strip()
        )
        self.source = source

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "WordDictionary":
        """
        Load a dictionary from a text file with one word per line.

        Raises:
            DictionaryUnavailableError: If the file is missing, unreadable,
                not valid text, or contains no words.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                dictionary = cls(handle, source=str(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load dictionary from {path}: {e}")
            raise DictionaryUnavailableError(f"Dictionary unavailable: could not read '{path}' ({e}).") from e

        if not dictionary:
            logger.error(f"Dictionary at {path} contains no words")
            raise DictionaryUnavailableError(f"Dictionary unavailable: '{path}' contains no words.")

        logger.info(f"Loaded {len(dictionary):,} words from {path}")
        return dictionary

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordDictionary":
        """Build a dictionary from an in-memory word list."""
        dictionary = cls(words, source="<memory>")
        if not dictionary:
            raise DictionaryUnavailableError("Dictionary unavailable: no words supplied.")
        return dictionary

    def contains(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return word.lower() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary(source={self.source!r}, words={len(self._words)})"
