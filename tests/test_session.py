# tests/test_session.py

from typeahead.core.session import SearchSession


def test_typing_accumulates_the_query(suggester):
    session = SearchSession(suggester)
    session.type("c")
    out = session.type("a")
    assert session.query == "ca"
    assert out == suggester.suggest("ca")
    assert session.last_scored == suggester.suggest_scored("ca")


def test_multi_character_fragments(suggester):
    session = SearchSession(suggester)
    assert session.type("car") == ["car", "cart"]


def test_empty_fragment_is_not_queried(suggester):
    session = SearchSession(suggester)
    session.type("d")
    before = suggester.stats()["queries"]
    assert session.type("") == ["dog"]
    assert suggester.stats()["queries"] == before
    assert session.query == "d"


def test_backspace_and_reset(suggester):
    session = SearchSession(suggester)
    session.type("cart")
    assert session.backspace() == ["car", "cart"]
    assert session.query == "car"
    assert session.backspace(3) == []
    assert session.query == ""

    session.type("do")
    session.reset()
    assert session.query == "" and session.last == [] and session.last_scored == []


def test_no_match(suggester):
    session = SearchSession(suggester)
    assert session.type("zz") == []
