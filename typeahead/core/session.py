# session.py - one type-ahead search in progress
#
# Holds everything typed so far and re-queries the suggester with the whole
# string on every change. The suggester itself keeps no per-session state.

from __future__ import annotations
from typing import List, Tuple

from typeahead.core.suggester import Suggester


class SearchSession:
    def __init__(self, suggester: Suggester) -> None:
        self.suggester = suggester
        self.query = ""
        self.last: List[str] = []
        self.last_scored: List[Tuple[str, int]] = []

    def type(self, fragment: str) -> List[str]:
        """
        Append `fragment` (a character or more) and return fresh suggestions.
        Empty fragments change nothing and aren't sent to the index.
        """
        if not fragment:
            return self.last
        self.query += fragment
        return self._refresh()

    def backspace(self, n: int = 1) -> List[str]:
        if n <= 0 or not self.query:
            return self.last
        self.query = self.query[:-n]
        return self._refresh()

    def reset(self) -> None:
        self.query = ""
        self.last = []
        self.last_scored = []

    def _refresh(self) -> List[str]:
        # empty query after backspacing: nothing to look up
        self.last_scored = self.suggester.suggest_scored(self.query) if self.query else []
        self.last = [w for w, _ in self.last_scored]
        return self.last
