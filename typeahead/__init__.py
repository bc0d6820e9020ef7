"""
typeahead

Frequency-ranked type-ahead suggestions over a static list of search queries.
"""

from .core import FrequencyRanker, SearchSession, Suggester, Trie, TrieNode

__all__ = ["FrequencyRanker", "SearchSession", "Suggester", "Trie", "TrieNode"]

__version__ = "0.1.0"
