# tui_app.py - Type-ahead TUI
# -------------------------------------------------------
# Full-screen terminal UI over a loaded Suggester.
# Features:
#  - Live suggestions as you type (every change re-queries with the full input)
#  - Numbered suggestion list with frequencies
#  - TAB accepts the top suggestion into the input
#  - Latency readout for the last query
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Tuple

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from typeahead.core.suggester import Suggester
from typeahead.utils.logger_utils import Log


class SuggestionPanel(Static):
    """
    Displays the current suggestions:
     - index (1-5)
     - the suggested query
     - how often it occurs in the vocabulary
    """

    def update_suggestions(self, suggestions: List[Tuple[str, int]]) -> None:
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return
        lines = [
            f"[b]{i}[/b] • [cyan]{escape(word)}[/cyan]  [dim]×{freq}[/dim]"
            for i, (word, freq) in enumerate(suggestions, 1)
        ]
        self.update("\n".join(lines))


class TypingLatency(Static):
    """How long the last lookup took."""

    def set_latency(self, seconds: float) -> None:
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.1f}ms")


# Main Application -----------------------------------------------------------------
class TypeaheadApp(App):
    """
    UI events -> Suggester -> reactive state -> widget updates.
    """

    CSS = """
    #text_input { margin: 1 2; }
    #suggestions { margin: 0 2; height: auto; }
    #bottom { dock: bottom; height: 1; margin: 0 2; }
    """

    BINDINGS = [
        Binding("tab", "accept_top", "Accept top suggestion", priority=True),
        ("ctrl+r", "clear_input", "Clear"),
    ]

    suggestions: reactive[List[Tuple[str, int]]] = reactive(list, init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, suggester: Suggester, show_latency: bool = True):
        super().__init__()
        self.suggester = suggester
        self.show_latency = show_latency

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Start typing…", id="text_input")
        yield SuggestionPanel(id="suggestions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Type-ahead search"
        self.sub_title = f"{self.suggester.stats()['distinct_words']} queries indexed"
        self.query_one(SuggestionPanel).update_suggestions([])
        self.query_one(TypingLatency).display = self.show_latency

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the lookup on every edit."""
        text = event.value
        if not text:
            self.suggestions = []
            return

        start = time.perf_counter()
        found = self.suggester.suggest_scored(text)
        self.latency = time.perf_counter() - start
        self.suggestions = found

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions: List[Tuple[str, int]]) -> None:
        self.query_one(SuggestionPanel).update_suggestions(suggestions)

    def watch_latency(self, latency: float) -> None:
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self) -> None:
        """TAB = put the top suggestion in the input box."""
        if not self.suggestions:
            return
        word, _ = self.suggestions[0]
        Log.debug(f"accepted: {word}")
        box = self.query_one(Input)
        box.value = word
        box.cursor_position = len(word)
        self.query_one("#status", Static).update(f"[green]Selected[/green] {escape(word)}")

    def action_clear_input(self) -> None:
        self.query_one(Input).value = ""
        self.query_one("#status", Static).update("")
