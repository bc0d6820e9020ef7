# typeahead/vocabulary.py
"""
Vocabulary source: one query string per line (plain text or a one-column CSV).
Lines are trimmed; blank lines are skipped.
"""

from __future__ import annotations

import os
from typing import List

from typeahead.core.suggester import Suggester
from typeahead.utils.logger_utils import Log

DEFAULT_VOCABULARY = "queries.csv"


class VocabularyError(OSError):
    """Vocabulary file missing or unreadable."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def read_vocabulary(path: str = DEFAULT_VOCABULARY) -> List[str]:
    """Return the trimmed, non-blank lines of `path`."""
    if not os.path.isfile(path):
        raise VocabularyError(path, "no such file")
    lines = []
    try:
        with open(path, "r", encoding="utf-8-sig") as fh:
            for ln in fh:
                ln = ln.strip()
                if ln:
                    lines.append(ln)
    except UnicodeDecodeError as e:
        raise VocabularyError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise VocabularyError(path, e.strerror or str(e)) from e
    return lines


def load_vocabulary(suggester: Suggester, path: str = DEFAULT_VOCABULARY) -> int:
    """Read `path` and index every entry. Returns the number of entries loaded."""
    with Log.time_block(f"vocabulary load ({path})"):
        n = suggester.load(read_vocabulary(path))
    Log.info(f"loaded {n} entries from {path}")
    return n
