# trie.py
# Character trie for prefix and substring lookup over a static vocabulary.
# Every node keeps the full words that pass through it, so a prefix lookup is
# a single walk with no collection step. Substring lookup is an exhaustive DFS
# over every node's word list; fine for small query vocabularies.

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Set


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    words: every inserted word whose path passes through this node (one entry per insert)
    word_freq: word -> insert count, only set on the node where that word ends
    is_word: True if some word ends exactly here
    """

    __slots__ = ("children", "words", "word_freq", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.words: List[str] = []
        self.word_freq: Dict[str, int] = {}
        self.is_word = False


class Trie:
    """
    Trie used by the Suggester for:
     - prefix suggestions (search_prefix)
     - "contains" suggestions (search_substring)
     - popularity lookups for ranking (frequency_of)

    Read-only once the vocabulary has been loaded; no locking.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._inserts = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word and bump its frequency.
        Words are indexed exactly as given (no case folding).
        """
        if not word:
            return

        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
            node.words.append(word)
        node.is_word = True
        node.word_freq[word] = node.word_freq.get(word, 0) + 1
        self._inserts += 1

    # lookups ---------------------------------------------------------
    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def frequency_of(self, word: str) -> int:
        """How many times `word` was inserted (0 if never)."""
        node = self._walk(word)
        if node is None:
            return 0
        return node.word_freq.get(word, 0)

    def search_prefix(self, prefix: str) -> List[str]:
        """
        Return every word starting with `prefix`.
        Order follows insertion; a word inserted n times appears n times.
        Ranking is left to the caller.
        """
        if not prefix:
            # the root keeps no word list, its children together cover every insert
            return [w for child in self._root.children.values() for w in child.words]

        node = self._walk(prefix)
        if node is None:
            return []
        return list(node.words)

    def search_substring(self, needle: str) -> List[str]:
        """
        Return distinct words containing `needle` anywhere, most frequent first.
        Equal frequencies keep traversal order.
        """
        results: List[str] = []
        seen: Set[str] = set()
        for node in self._iter_nodes():
            for w in node.words:
                if w not in seen and needle in w:
                    seen.add(w)
                    results.append(w)
        # list.sort is stable: equal frequencies keep traversal order
        results.sort(key=self.frequency_of, reverse=True)
        return results

    # traversal ---------------------------------------------------------
    def _iter_nodes(self) -> Iterator[TrieNode]:
        """
        Pre-order DFS over every node, children in insertion order.
        Explicit stack, so long words can't hit the recursion limit.
        """
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.children.values())))

    # convenience/debugging -----------------------------------------------------
    def words(self) -> Iterator[str]:
        """Distinct words in depth-first order."""
        for node in self._iter_nodes():
            if node.is_word:
                yield from node.word_freq

    def total_insertions(self) -> int:
        return self._inserts

    def __len__(self) -> int:
        """
        Number of distinct words.
        (Slow: O(N) walk. For inspection, not runtime.)
        """
        return sum(1 for _ in self.words())

    def __contains__(self, word: str) -> bool:
        """Simple membership check."""
        return self.frequency_of(word) > 0
