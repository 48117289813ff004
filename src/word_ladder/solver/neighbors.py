"""
Neighbor generation over the implicit word graph.

Two words are adjacent when they have the same length and differ in exactly
one position. Adjacency is computed on demand from the dictionary rather than
built up front. One generator may be shared by concurrent searches, so the
cache and its counters are guarded by a lock.
"""

import logging
import string
import threading
from typing import Dict, FrozenSet, Set

from word_ladder.dictionary import WordDictionary

logger = logging.getLogger(__name__)


class NeighborGenerator:
    """Produces all dictionary words one substitution away from a word."""

    def __init__(
        self,
        dictionary: WordDictionary,
        alphabet: str = string.ascii_lowercase,
        cache: bool = False,
    ):
        """
        Args:
            dictionary: Words that count as valid nodes.
            alphabet: Letters tried at each position.
            cache: Memoize neighbor sets per word. Results are identical either way.
        """
        self.dictionary = dictionary
        self.alphabet = alphabet
        self.cache_enabled = cache
        self._cache: Dict[str, FrozenSet[str]] = {}
        self._hits = 0
        self._misses = 0
        self._lock = threading.Lock()

    def neighbors(self, word: str) -> Set[str]:
        """All dictionary words reachable from `word` by changing one letter."""
        if self.cache_enabled:
            with self._lock:
                cached = self._cache.get(word)
                if cached is not None:
                    self._hits += 1
                    return set(cached)
                self._misses += 1

        result: Set[str] = set()
        letters = list(word)
        for i, original in enumerate(word):
            for char in self.alphabet:
                if char == original:
                    continue
                letters[i] = char
                candidate = "".join(letters)
                if candidate in self.dictionary:
                    result.add(candidate)
            letters[i] = original

        if self.cache_enabled:
            with self._lock:
                self._cache[word] = frozenset(result)
        return result

    __call__ = neighbors

    def cache_info(self) -> Dict[str, int]:
        """Hit/miss counters and current size of the adjacency cache."""
        with self._lock:
            return {"hits": self._hits, "misses": self._misses, "size": len(self._cache)}

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Neighbor cache cleared")
