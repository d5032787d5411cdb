#!/usr/bin/env python3
"""plaintodo — terminal todo lists as plain text files.

Two front ends over the same shell:
    plaintodo       line-oriented REPL on standard input
    plaintodo-tui   interactive terminal UI powered by Textual
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input, RichLog

from plaintodo import Console, Shell, install_interrupt_handler, workspace_root


def configure_logging() -> None:
    """File-access diagnostics go to stderr as bare messages."""
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)


def _check_root() -> Path:
    root = workspace_root()
    if not root.exists():
        print(f"Workspace not found: {root}", file=sys.stderr)
        print("Set PLAINTODO_ROOT to an existing directory.", file=sys.stderr)
        sys.exit(1)
    return root


# ── TUI ────────────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#output {
    height: 1fr;
    padding: 0 1;
    border: tall $primary-background-darken-2;
}

#command {
    dock: bottom;
    height: 3;
    margin: 0 0 1 0;
}
"""


class LogConsole(Console):
    """Console that writes into the app's output log instead of a stream."""

    def __init__(self, app: App) -> None:
        super().__init__(clear_screen=True)
        self.app = app

    @property
    def log(self) -> RichLog:
        return self.app.query_one("#output", RichLog)

    def print(self, text: str = "", end: str = "\n") -> None:
        self.log.write(Text((text + end).rstrip("\n")))

    def error(self, text: str) -> None:
        self.log.write(Text(text, style="bold red"))

    def clear(self) -> None:
        self.log.clear()


class PlainTodoApp(App):
    """plaintodo — todo lists in the terminal."""

    TITLE = "plaintodo"
    CSS = CSS

    BINDINGS = [
        Binding("ctrl+q", "quit_app", "Quit", priority=True),
    ]

    def __init__(self, root: Path | None = None) -> None:
        super().__init__()
        self.shell = Shell.from_workspace(root, console=LogConsole(self))

    def compose(self) -> ComposeResult:
        yield Header()
        yield RichLog(id="output", wrap=True)
        yield Input(placeholder="command…", id="command")
        yield Footer()

    def on_mount(self) -> None:
        self.shell.start()
        self.query_one("#command", Input).focus()

    @on(Input.Submitted, "#command")
    def _on_command(self, event: Input.Submitted) -> None:
        line = event.value
        event.input.value = ""
        self.query_one("#output", RichLog).write(Text(f"> {line}", style="dim"))
        if not self.shell.handle_line(line):
            self.action_quit_app()
            return
        session = self.shell.session
        self.sub_title = session.name if session is not None else ""

    def action_quit_app(self) -> None:
        self.shell.shutdown()
        self.exit()


# ── Entry points ───────────────────────────────────────────────


def main() -> None:
    configure_logging()
    root = _check_root()
    shell = Shell.from_workspace(root)
    install_interrupt_handler(shell.shutdown)
    sys.exit(shell.run(sys.stdin))


def tui_main() -> None:
    configure_logging()
    root = _check_root()
    app = PlainTodoApp(root)
    try:
        app.run()
    finally:
        app.shell.shutdown()


if __name__ == "__main__":
    main()
