"""Typed dataclasses for the plaintodo data model.

Entries are kept structured in memory and their text lines are regenerated on
every write. The display index is positional and never parsed back as data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path


OPEN_MARK = "[ ]"
DONE_MARK = "[X]"

ENTRY_RE = re.compile(r"^\d+\t\[([ xX])\] - (.*)$")


@dataclass
class Entry:
    description: str = ""
    done: bool = False

    @property
    def marker(self) -> str:
        return DONE_MARK if self.done else OPEN_MARK

    def to_line(self, index: int) -> str:
        """Encode as ``<index>\\t[ ] - <description>\\n`` (index is 1-based)."""
        return f"{index}\t{self.marker} - {self.description}\n"

    @classmethod
    def from_line(cls, line: str) -> Entry | None:
        """Decode one persisted line. Blank lines give None."""
        line = line.rstrip("\r\n")
        if not line.strip():
            return None
        m = ENTRY_RE.match(line)
        if not m:
            return cls(description=line.strip())
        return cls(description=m.group(2), done=m.group(1) in ("x", "X"))


@dataclass
class TodoList:
    name: str
    path: Path
    entries: list[Entry] = field(default_factory=list)

    @classmethod
    def from_lines(cls, name: str, path: Path, lines: list[str]) -> TodoList:
        entries = []
        for line in lines:
            entry = Entry.from_line(line)
            if entry is not None:
                entries.append(entry)
        return cls(name=name, path=path, entries=entries)

    def lines(self) -> list[str]:
        return [e.to_line(i) for i, e in enumerate(self.entries, start=1)]

    def to_text(self) -> str:
        return "".join(self.lines())

    def __len__(self) -> int:
        return len(self.entries)
