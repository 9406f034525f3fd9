"""
cli.py - command line front end for the vocabulary trie
Features:
- Load a dictionary file (from --dict or the config file)
- One-shot `check` and `strip` commands for scripting
- Interactive shell for poking at the trie
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from vocab_trie.core.errors import TrieError
from vocab_trie.core.trie import Trie
from vocab_trie.utils.config_manager import Config, DEFAULT_CONFIG_PATH
from vocab_trie.utils.logger_utils import Log

# initialise console for rich output
console = Console()

HELP_TEXT = """[bold]add[/bold] WORD      insert a word
[bold]has[/bold] WORD      exact membership
[bold]prefix[/bold] TEXT   does a longer word continue TEXT
[bold]load[/bold] PATH     load a word list
[bold]strip[/bold] TEXT    remove vocabulary tokens from TEXT
[bold]stats[/bold]         node and word counts
[bold]help[/bold]          this text
[bold]exit[/bold]          quit"""


class CLI:
    """Holds the trie and config for one session and dispatches commands."""

    def __init__(self, cfg: Optional[Config] = None, trie: Optional[Trie] = None):
        self.cfg = cfg or Config()
        self.trie = trie if trie is not None else Trie()
        self.running = True

    # loading ---------------------------------------------------------------
    def load(self, path: str) -> int:
        with Log.time_block("cli.load") as timer:
            count = self.trie.load(path)
        msg = f"[green]loaded {count} words[/green] from {escape(str(path))}"
        if self.cfg.get("show_timing"):
            msg += f" [dim]({timer.elapsed}s)[/dim]"
        console.print(msg)
        return count

    # views -------------------------------------------------------------------
    def check_table(self, words: List[str]) -> Table:
        table = Table(title="Lookup", box=box.SIMPLE)
        table.add_column("word", style="cyan")
        table.add_column("exists")
        table.add_column("has prefix")
        for w in words:
            table.add_row(w, _yes_no(self.trie.exists(w)), _yes_no(self.trie.has_prefix(w)))
        return table

    def show_stats(self) -> None:
        console.print(Panel(
            f"words: {self.trie.word_count}\nnodes: {self.trie.node_count}",
            title="Trie", expand=False,
        ))

    # interactive shell -------------------------------------------------------
    def handle(self, line: str) -> bool:
        """Run one shell command. Returns False once the shell should stop."""
        cmd, _, arg = line.strip().partition(" ")
        arg = arg.strip()
        try:
            if cmd in ("exit", "quit"):
                self.running = False
            elif cmd == "add":
                self.trie.insert(arg)
                console.print(f"added [cyan]{escape(arg)}[/cyan]")
            elif cmd == "has":
                console.print(_yes_no(self.trie.exists(arg)))
            elif cmd == "prefix":
                console.print(_yes_no(self.trie.has_prefix(arg)))
            elif cmd == "load":
                self.load(arg)
            elif cmd == "strip":
                console.print(self.trie.strip(arg), markup=False, highlight=False)
            elif cmd == "stats":
                self.show_stats()
            elif cmd in ("help", "?"):
                console.print(Panel(HELP_TEXT, title="Commands", expand=False))
            elif cmd:
                console.print(f"[yellow]unknown command:[/yellow] {escape(cmd)} (try 'help')")
        except TrieError as e:
            console.print(f"[red]error:[/red] {escape(str(e))}")
        return self.running

    def loop(self) -> None:
        console.print("[bold]vocab-trie shell[/bold] - 'help' for commands")
        while self.running:
            try:
                line = Prompt.ask("[bold blue]trie[/bold blue]")
            except (EOFError, KeyboardInterrupt):
                break
            self.handle(line)


def _yes_no(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[red]no[/red]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vocab-trie",
        description="Lowercase word trie: lookups and vocabulary stripping.",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    parser.add_argument("--dict", dest="dictionary", help="word list, one word per line")
    sub = parser.add_subparsers(dest="command")

    check = sub.add_parser("check", help="look words up")
    check.add_argument("words", nargs="+")

    strip = sub.add_parser("strip", help="remove vocabulary tokens from text")
    strip.add_argument("text", nargs="?", help="text to filter (default: stdin)")

    sub.add_parser("shell", help="interactive shell")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    cfg.apply_logging()
    cli = CLI(cfg)

    try:
        dictionary = args.dictionary or cfg.get("dictionary")
        if dictionary:
            cli.load(dictionary)

        if args.command == "check":
            console.print(cli.check_table(args.words))
        elif args.command == "strip":
            text = args.text if args.text is not None else sys.stdin.read()
            # plain write: the result is data, not markup
            sys.stdout.write(cli.trie.strip(text))
            if args.text is not None:
                sys.stdout.write("\n")
        else:
            cli.loop()
    except TrieError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 1
    return 0
