# tests/test_tui.py - headless run of the Textual app
import asyncio

from textual.widgets import Input

from typeahead.tui_app import TypeaheadApp


def run_app(suggester, *keys):
    async def scenario():
        app = TypeaheadApp(suggester)
        async with app.run_test() as pilot:
            await pilot.press(*keys)
            await pilot.pause()
            return list(app.suggestions), app.query_one(Input).value

    return asyncio.run(scenario())


def test_suggestions_follow_the_input(suggester):
    suggester.insert("cart")
    suggestions, value = run_app(suggester, "c", "a")
    assert value == "ca"
    assert suggestions == [("cart", 2), ("cat", 1), ("car", 1)]


def test_tab_accepts_top_suggestion(suggester):
    suggestions, value = run_app(suggester, "d", "tab")
    assert value == "dog"
    assert suggestions == [("dog", 1)]


def test_clearing_the_input_clears_suggestions(suggester):
    suggestions, value = run_app(suggester, "c", "ctrl+r")
    assert value == ""
    assert suggestions == []
