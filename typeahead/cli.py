"""
cli.py - interactive type-ahead search in the terminal
Features:
- Type a search one or more characters at a time; after every entry the top
  suggestions for everything typed so far are shown
- Slash commands for resetting the search, stats and config
- Uses Rich for tables and formatting
- `typeahead` console entry point (argparse), incl. one-shot and TUI modes
"""

import argparse
import sys
import time
from typing import Callable, List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape
from rich.text import Text

from typeahead.core.ranker import FrequencyRanker
from typeahead.core.session import SearchSession
from typeahead.core.suggester import Suggester
from typeahead.utils.config_manager import Config, ConfigError
from typeahead.utils.logger_utils import DEFAULT_LOG_PATH, Log
from typeahead.utils.metrics_tracker import Metrics
from typeahead.vocabulary import VocabularyError, load_vocabulary

PROMPT = "[green]Enter next character[/green] (or type 'exit' to quit): "
COMMANDS = ("/q", "/quit", "/help", "/reset", "/back", "/stats", "/bench", "/config")
HELP = (
    "cmds: /reset (new search), /back [n] (delete chars), /stats, /bench\n"
    "      /config [key val], /help, /quit\n"
    "      //... types a literal /..."
)


def _is_command(line: str) -> bool:
    """Only known command words are commands; anything else is search text."""
    words = line.split(maxsplit=1)
    return bool(words) and words[0].lower() in COMMANDS


class CLI:
    """Console loop feeding typed characters into a SearchSession."""

    def __init__(
        self,
        suggester: Suggester,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        reader: Optional[Callable[[str], str]] = None,
    ):
        self.suggester = suggester
        self.cfg = cfg or Config(path="")
        self.console = console or Console()
        self.session = SearchSession(suggester)
        self.metrics = Metrics()
        self._read = reader or self.console.input
        self.running = True

    def run(self):
        """
        Main loop:
        - 'exit' / EOF / Ctrl-C quits
        - empty input is skipped
        - known /commands are handled, "//" types a literal "/"
        - anything else extends the current query
        """
        self.console.rule("[bold magenta]Type-ahead search[/bold magenta]")
        self.console.print("[cyan]Type a search term:[/cyan]  (/help for commands)")

        while self.running:
            try:
                fragment = self._read(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break

            if fragment.strip().lower() == "exit":
                self.running = False
                break
            if not fragment:
                continue
            if fragment.startswith("//"):
                # escaped: type a literal "/..." even if it names a command
                fragment = fragment[1:]
            elif _is_command(fragment):
                self.cmd(fragment)
                continue

            self._process_input(fragment)

    # COMMAND HANDLING -----------------------------------------------------------
    def cmd(self, line: str):
        p = line.split()
        c = p[0].lower()

        if c in ("/q", "/quit"):
            self.running = False
            self.console.print("bye.")
            return

        if c == "/help":
            self.console.print(HELP, markup=False)
            return

        if c == "/reset":
            self.session.reset()
            self.console.print("[yellow]search cleared[/yellow]")
            return

        if c == "/back":
            n = 1
            if len(p) > 1:
                try:
                    n = int(p[1])
                except ValueError:
                    self.console.print("usage: /back [n]", markup=False)
                    return
            self.session.backspace(n)
            self._display(self.session.last_scored)
            return

        if c == "/stats":
            self.metrics.show(self.console, extra=self.suggester.stats())
            return

        if c == "/bench":
            self._bench()
            return

        if c == "/config":
            self._config(p[1:])
            return

        self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    def _config(self, args: List[str]):
        if not args:
            self.cfg.show(self.console)
            return
        if len(args) != 2:
            self.console.print("usage: /config [key val]", markup=False)
            return
        key, val = args
        try:
            self.cfg.set(key, val, persist=bool(self.cfg.path))
        except ConfigError:
            self.console.print(f"[red]No such option:[/red] {escape(key)}")
            return
        except (OSError, ValueError) as e:
            self.console.print(f"[red]config err:[/red] {escape(str(e))}")
            return
        self._apply_config(key)
        self.console.print(f"{key} = {self.cfg[key]!r}", markup=False)

    def _apply_config(self, key: str):
        """Make a changed option take effect in the running session."""
        if key == "max_suggestions":
            self.suggester.max_suggestions = self.cfg["max_suggestions"]
        elif key == "tie_break":
            self.suggester.ranker = FrequencyRanker(self.cfg["tie_break"])
        elif key in ("log_level", "log_file"):
            try:
                Log.setup(self.cfg["log_level"], self.cfg["log_file"] or None)
            except OSError as e:
                self.console.print(f"[red]log file err:[/red] {escape(str(e))}")
        elif key == "vocabulary":
            self.console.print("[dim]vocabulary applies from the next start[/dim]")

    # CORE INPUT PROCESSING -------------------------------------------------------
    def _process_input(self, fragment: str):
        t0 = time.perf_counter()
        self.session.type(fragment)
        dt = time.perf_counter() - t0
        self.metrics.record("suggest_time", dt)
        self._display(self.session.last_scored, dt)

    def _display(self, suggestions: List[Tuple[str, int]], latency: Optional[float] = None):
        """Suggestions for the current query as a small table."""
        title = f"Top {self.suggester.max_suggestions} suggestions for '{escape(self.session.query)}'"
        if latency is not None and self.cfg.get("show_latency"):
            title += f"  [dim]({latency * 1000:.1f} ms)[/dim]"

        self.console.print(title)
        if not suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
            return

        table = Table(box=box.SIMPLE)
        table.add_column("#", justify="right", style="bold")
        table.add_column("suggestion", style="cyan")
        table.add_column("freq", justify="right", style="dim")
        for i, (word, freq) in enumerate(suggestions, 1):
            table.add_row(str(i), Text(word), str(freq))
        self.console.print(table)

    def _bench(self):
        q = self.session.query
        if not q:
            self.console.print("type something first")
            return
        t0 = time.perf_counter()
        for _ in range(100):
            self.suggester.suggest(q)
        dt = time.perf_counter() - t0
        self.console.print(f"bench: {dt / 100 * 1000:.3f} ms avg per suggest for '{escape(q)}'")


# ENTRY POINT -------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typeahead", description="Frequency-ranked type-ahead search"
    )
    parser.add_argument("--vocab", help="vocabulary file, one query per line")
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument("--top", type=int, help="number of suggestions to show")
    parser.add_argument("--query", help="print suggestions for QUERY and exit")
    parser.add_argument("--tui", action="store_true", help="launch the full-screen UI")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument(
        "--log-file",
        nargs="?",
        const=DEFAULT_LOG_PATH,
        help=f"also log to a file (default {DEFAULT_LOG_PATH})",
    )
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    cfg = Config(args.config)

    try:
        # flags override the file; Config.set rejects bad values
        if args.vocab:
            cfg.set("vocabulary", args.vocab, persist=False)
        if args.top is not None:
            cfg.set("max_suggestions", args.top, persist=False)
        if args.log_level:
            cfg.set("log_level", args.log_level, persist=False)
        if args.log_file:
            cfg.set("log_file", args.log_file, persist=False)
        Log.setup(cfg["log_level"], cfg["log_file"] or None)
        ranker = FrequencyRanker(cfg["tie_break"])
    except ValueError as e:
        console.print(f"[red]Bad config:[/red] {escape(str(e))}")
        return 2

    suggester = Suggester(ranker=ranker, max_suggestions=cfg["max_suggestions"])
    try:
        load_vocabulary(suggester, cfg["vocabulary"])
    except VocabularyError as e:
        console.print(f"[red]Error reading vocabulary file:[/red] {escape(str(e))}")
        return 1

    if args.query is not None:
        for word in suggester.suggest(args.query):
            console.print(word, markup=False, highlight=False, soft_wrap=True)
        return 0

    if args.tui:
        # textual is only imported when the TUI is asked for
        from typeahead.tui_app import TypeaheadApp

        TypeaheadApp(suggester, show_latency=cfg["show_latency"]).run()
        return 0

    CLI(suggester, cfg, console=console).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
