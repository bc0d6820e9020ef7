# suggester.py
"""
Suggester - application facade over one Trie.

Purpose:
 - Own a Trie instance (passed in or created; no module-level singleton)
 - Build phase: load(words) / insert(word)
 - Query phase: suggest(query) merges prefix + substring hits, ranks them by
   frequency and keeps the top few
 - Small public API for CLI/TUI/tests:
     load(words), insert(word), suggest(query, topn), suggest_scored(query, topn),
     frequency_of(word), stats()

Each suggest() call is independent: callers pass everything typed so far.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from typeahead.core.ranker import FrequencyRanker
from typeahead.core.trie import Trie

logger = logging.getLogger(__name__)

DEFAULT_TOPN = 5


class Suggester:
    """Frequency-ranked type-ahead suggestions over a static vocabulary."""

    def __init__(
        self,
        trie: Optional[Trie] = None,
        ranker: Optional[FrequencyRanker] = None,
        max_suggestions: int = DEFAULT_TOPN,
    ):
        self.trie = trie if trie is not None else Trie()
        self.ranker = ranker or FrequencyRanker()
        self.max_suggestions = max_suggestions
        self._queries = 0

    # Build phase ---------------------------------------------------------
    def insert(self, word: str) -> None:
        self.trie.insert(word)

    def load(self, words: Iterable[str]) -> int:
        """Insert every entry, returns how many were inserted."""
        n = 0
        for w in words:
            self.trie.insert(w)
            n += 1
        if logger.isEnabledFor(logging.INFO):
            logger.info("indexed %d entries (%d distinct)", n, len(self.trie))
        return n

    # Public API ---------------------------------------------------------
    def suggest_scored(
        self, query: str, topn: Optional[int] = None
    ) -> List[Tuple[str, int]]:
        """Top matches for `query` as (word, frequency), most frequent first."""
        topn = self.max_suggestions if topn is None else topn
        self._queries += 1

        prefix_hits = self.trie.search_prefix(query)
        substring_hits = self.trie.search_substring(query)
        ranked = self.ranker.merge_and_rank(
            (prefix_hits, substring_hits), self.trie.frequency_of, topn
        )
        logger.debug(
            "query %r: %d prefix, %d substring -> %d",
            query,
            len(prefix_hits),
            len(substring_hits),
            len(ranked),
        )
        return ranked

    def suggest(self, query: str, topn: Optional[int] = None) -> List[str]:
        """Top matches for `query`, words only."""
        return [w for w, _ in self.suggest_scored(query, topn)]

    def frequency_of(self, word: str) -> int:
        return self.trie.frequency_of(word)

    def stats(self) -> Dict[str, Any]:
        return {
            "distinct_words": len(self.trie),
            "insertions": self.trie.total_insertions(),
            "queries": self._queries,
        }
