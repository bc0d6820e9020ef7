# tests/conftest.py - shared fixtures

import logging

import pytest

from typeahead.core.suggester import Suggester
from typeahead.core.trie import Trie


@pytest.fixture(autouse=True)
def _reset_logging():
    # Log.setup() (called by cli.main) detaches the package logger from root;
    # undo that so caplog sees records in every test
    yield
    logger = logging.getLogger("typeahead")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def trie():
    t = Trie()
    for w in ["cat", "car", "cart", "dog"]:
        t.insert(w)
    return t


@pytest.fixture
def suggester(trie):
    return Suggester(trie=trie)


@pytest.fixture
def vocab_file(tmp_path):
    path = tmp_path / "queries.csv"
    path.write_text("cat\ncar\ncart\ndog\ncat\n", encoding="utf8")
    return path
