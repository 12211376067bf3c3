from __future__ import annotations

import sys
from typing import Protocol

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from project_bootstrap.errors import SelectionCancelled, SelectionUnavailable


class Selector(Protocol):
    def choose(self, prompt: str, options: list[str]) -> int: ...


def _read_key() -> str:
    key = readchar.readkey()
    if key in (readchar.key.UP, "k"):
        return "up"
    if key in (readchar.key.DOWN, "j"):
        return "down"
    if key in (readchar.key.ENTER, "\r", "\n"):
        return "enter"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    # POSIX readkey swallows the key after a lone Esc and returns both.
    if key in ("q", "Q") or key.startswith(readchar.key.ESC):
        return "escape"
    return key


class ConsoleSelector:
    """Arrow-key list picker drawn with a rich Live panel."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def _panel(self, prompt: str, options: list[str], index: int) -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", width=2)
        table.add_column()
        for i, opt in enumerate(options):
            if i == index:
                table.add_row("▶", f"[bold cyan]{opt}[/bold cyan]")
            else:
                table.add_row(" ", opt)
        table.add_row("", "")
        table.add_row("", "[dim]↑/↓ to move, Enter to select, Esc or q to cancel[/dim]")
        return Panel(table, title=f"[bold]{prompt}[/bold]", border_style="cyan")

    def choose(self, prompt: str, options: list[str]) -> int:
        if not options:
            raise ValueError("no options to choose from")
        if not sys.stdin.isatty():
            raise SelectionUnavailable(prompt, options)

        index = 0
        with Live(
            self._panel(prompt, options, index),
            console=self._console,
            transient=True,
            auto_refresh=False,
        ) as live:
            while True:
                try:
                    key = _read_key()
                except KeyboardInterrupt:
                    raise SelectionCancelled("Selection cancelled") from None
                if key == "up":
                    index = (index - 1) % len(options)
                elif key == "down":
                    index = (index + 1) % len(options)
                elif key == "enter":
                    return index
                elif key == "escape":
                    raise SelectionCancelled("Selection cancelled")
                live.update(self._panel(prompt, options, index), refresh=True)
