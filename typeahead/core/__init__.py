"""
typeahead.core

The search index and the query side built on it:
 - character trie with per-node word lists and insert counts (Trie)
 - merge + frequency ranking of candidate lists (FrequencyRanker)
 - the facade the CLI/TUI talk to (Suggester)
 - incremental "typed so far" buffer (SearchSession)
"""

from .trie import Trie, TrieNode
from .ranker import FrequencyRanker, RankerError
from .suggester import Suggester
from .session import SearchSession

__all__ = [
    "Trie",
    "TrieNode",
    "FrequencyRanker",
    "RankerError",
    "Suggester",
    "SearchSession",
]
