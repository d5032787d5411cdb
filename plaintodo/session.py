"""Interactive session over one open todo list."""

from __future__ import annotations

import re
from pathlib import Path

from plaintodo.console import Console
from plaintodo.fileio import read_lines, write_file
from plaintodo.models import Entry, TodoList
from plaintodo.tokenizer import next_token


LIST_COMMANDS = "Commands: add [description] done [index] close exit"

# Outcomes of handling one session line
CONTINUE = "continue"
CLOSE = "close"
EXIT = "exit"

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class ListSession:
    """Owns the entries of one list while it is open.

    Every mutation is flushed before returning: ``add`` appends one line,
    ``done`` rewrites the whole file from the in-memory entries.
    """

    def __init__(self, todo: TodoList) -> None:
        self.todo = todo
        self.closed = False

    @classmethod
    def open(cls, name: str, path: Path) -> ListSession | None:
        """Load a list from disk. None if the file cannot be read."""
        lines = read_lines(path)
        if lines is None:
            return None
        return cls(TodoList.from_lines(name, path, lines))

    @property
    def name(self) -> str:
        return self.todo.name

    @property
    def entries(self) -> list[Entry]:
        return self.todo.entries

    # ── Mutations ─────────────────────────────────────────────

    def add(self, description: str) -> tuple[Entry | None, list[str]]:
        """Append an open entry and its line to the file. Returns (entry, errors)."""
        if not description:
            return None, ["Failed to add an entry!\nUse of add: add [description]"]

        entry = Entry(description=description)
        self.todo.entries.append(entry)
        line = entry.to_line(len(self.todo.entries))
        if not write_file(self.todo.path, line, append=True):
            self.todo.entries.pop()
            return None, [f"Failed to add an entry to list[{self.name}]"]
        return entry, []

    def mark_done(self, argument: str) -> tuple[Entry | None, list[str]]:
        """Mark the entry at a 1-based index done and rewrite the file."""
        if not argument:
            return None, ["Failed to mark an entry as done!\nUse of done: done [index]"]

        m = _LEADING_INT_RE.match(argument)
        if not m:
            return None, [f"failed to mark entry as done! invalid index[{argument}]"]

        number = int(m.group(1))
        index = number - 1
        if not 0 <= index < len(self.todo.entries):
            return None, [f"failed to mark entry as done! no entry with index[{number}]"]

        entry = self.todo.entries[index]
        previous = entry.done
        entry.done = True
        if not write_file(self.todo.path, self.todo.to_text()):
            entry.done = previous
            return None, [f"Failed to save list[{self.name}]"]
        return entry, []

    # ── Rendering & dispatch ──────────────────────────────────

    def render(self, console: Console) -> None:
        console.print(f"Todo list: {self.name}")
        console.print(LIST_COMMANDS)
        for line in self.todo.lines():
            console.print(line if line.endswith("\n") else line + "\n", end="")

    def handle(self, line: str, console: Console) -> str:
        """Apply one session command line. Returns CONTINUE, CLOSE or EXIT."""
        command, argument = next_token(line)

        if command == "close":
            self.closed = True
            return CLOSE
        if command == "exit":
            self.closed = True
            return EXIT

        if command == "add":
            _, errors = self.add(argument)
        elif command == "done":
            _, errors = self.mark_done(argument)
        else:
            console.print(f"Unknown command[{command}]\n{LIST_COMMANDS}")
            return CONTINUE

        if errors:
            for e in errors:
                console.error(e)
            return CONTINUE

        console.clear()
        self.render(console)
        return CONTINUE
