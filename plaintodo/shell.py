"""Top-level menu loop for plaintodo.

The shell is line driven: ``handle_line`` applies one command and reports
whether the program should keep running. ``run`` feeds it from any iterable of
lines (standard input for the REPL); the Textual front end calls
``handle_line`` directly from its input widget.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from plaintodo.console import Console
from plaintodo.registry import ListRegistry
from plaintodo.session import EXIT, ListSession
from plaintodo.tokenizer import next_token
from plaintodo.workspace import index_path, lists_dir, load_settings, workspace_root


MENU_COMMANDS = "Commands: exit list add [name] open [name]"


class Shell:
    def __init__(self, registry: ListRegistry, console: Console | None = None) -> None:
        self.registry = registry
        self.console = console if console is not None else Console()
        self.session: ListSession | None = None
        self.running = True
        self._persisted = False

    @classmethod
    def from_workspace(cls, root: Path | None = None, console: Console | None = None) -> Shell:
        """Build a shell over a workspace and load its registry."""
        if root is None:
            root = workspace_root()
        settings = load_settings(root)
        if console is None:
            console = Console(clear_screen=settings.clear_screen)
        registry = ListRegistry(index_path(root, settings), lists_dir(root, settings))
        registry.load()
        return cls(registry, console)

    def start(self) -> None:
        self.console.print(MENU_COMMANDS)

    # ── Menu commands ─────────────────────────────────────────

    def _show_menu(self) -> None:
        self.console.clear()
        self.console.print(MENU_COMMANDS)

    def _cmd_list(self) -> None:
        self._show_menu()
        for i, name in enumerate(self.registry.list_names(), start=1):
            self.console.print(f"{i} : {name}")

    def _cmd_add(self, argument: str) -> None:
        self._show_menu()
        name, _ = next_token(argument)
        _, errors = self.registry.add_list(name)
        for e in errors:
            self.console.error(e)

    def _cmd_open(self, argument: str) -> None:
        self.console.clear()
        name, _ = next_token(argument)
        if not name:
            self.console.error(f"Failed to open todo list with name[{name}]")
            return

        session = ListSession.open(name, self.registry.path_for(name))
        if session is None:
            self._show_menu()
            self.console.error(f"Failed to open list with name[{name}]. This list doesn't exist")
            return

        self.session = session
        session.render(self.console)

    def _session_line(self, line: str) -> None:
        outcome = self.session.handle(line, self.console)
        if not self.session.closed:
            return
        self.session = None
        if outcome == EXIT:
            self.running = False
        else:
            self._show_menu()

    # ── Dispatch ──────────────────────────────────────────────

    def handle_line(self, line: str) -> bool:
        """Apply one input line. Returns False once the program should end."""
        if not self.running:
            return False
        line = line.rstrip("\r\n")

        if self.session is not None:
            self._session_line(line)
            return self.running

        command, argument = next_token(line)
        if command == "exit":
            self.running = False
        elif command == "list":
            self._cmd_list()
        elif command == "add":
            self._cmd_add(argument)
        elif command == "open":
            self._cmd_open(argument)
        else:
            self.console.clear()
            self.console.print(f"Unknown command[{command}]\n{MENU_COMMANDS}")
        return self.running

    def shutdown(self) -> bool:
        """Persist the registry index. Safe to call more than once."""
        self.running = False
        self.session = None
        if self._persisted:
            return True
        self._persisted = self.registry.persist()
        return self._persisted

    def run(self, lines: Iterable[str]) -> int:
        """Drive the shell until ``exit`` or end of input. Returns the exit code."""
        self.start()
        try:
            for line in lines:
                if not self.handle_line(line):
                    break
        finally:
            self.shutdown()
        return 0
