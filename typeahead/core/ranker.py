# typeahead/core/ranker.py
"""
FrequencyRanker - merge candidate lists and keep the most popular ones.

Design goals:
 - Merge any number of result lists (prefix hits, substring hits, ...) into one
   candidate list, duplicates removed by exact string equality.
 - Rank by insert frequency, highest first.
 - Deterministic tie-breaking so repeated queries give identical output:
     "encounter": first-seen order across the merged lists (default)
     "alpha":     lexicographic ascending
 - Truncate to topn.

The ranker doesn't know about the trie; it's handed a frequency callable, which
keeps it testable with a plain dict.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Tuple
import logging

logger = logging.getLogger(__name__)

# Types
Candidate = Tuple[str, int]
CandidateList = List[Candidate]
FrequencyFn = Callable[[str], int]

TIE_BREAKS = ("encounter", "alpha")


class RankerError(ValueError):
    """Raised when the ranker is configured with an unknown option."""


class FrequencyRanker:
    """
    Combine result lists and rank them by frequency.

    Entry points:
      - merge(*lists) -> [word, ...]
      - rank(candidates, frequency, topn) -> [(word, freq), ...]
      - merge_and_rank(lists, frequency, topn)
    """

    def __init__(self, tie_break: str = "encounter"):
        if tie_break not in TIE_BREAKS:
            raise RankerError(
                f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}"
            )
        self.tie_break = tie_break

    @staticmethod
    def merge(*result_lists: Iterable[str]) -> List[str]:
        """Union of all lists in first-seen order."""
        merged: Dict[str, None] = {}
        for results in result_lists:
            for w in results:
                merged.setdefault(w, None)
        return list(merged)

    def rank(
        self, candidates: Iterable[str], frequency: FrequencyFn, topn: int = 5
    ) -> CandidateList:
        """
        Score each distinct candidate once and return the top `topn`
        as (word, freq), highest frequency first.
        """
        if topn <= 0:
            return []

        scored = [(w, frequency(w)) for w in self.merge(candidates)]
        if self.tie_break == "alpha":
            scored.sort(key=lambda kv: (-kv[1], kv[0]))
        else:
            # stable sort keeps first-seen order among equal counts
            scored.sort(key=lambda kv: -kv[1])

        logger.debug("ranked %d candidates, keeping %d", len(scored), topn)
        return scored[:topn]

    def merge_and_rank(
        self,
        result_lists: Iterable[Iterable[str]],
        frequency: FrequencyFn,
        topn: int = 5,
    ) -> CandidateList:
        return self.rank(self.merge(*result_lists), frequency, topn)
