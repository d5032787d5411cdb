"""List registry: the set of known todo-list files and its index file."""

from __future__ import annotations

from pathlib import Path

from plaintodo.fileio import create_file, read_lines, write_file
from plaintodo.workspace import list_name, list_path


class ListRegistry:
    """Known todo lists, in the order they were added.

    The in-memory paths are only written back by ``persist()``; adding a list
    creates its file but leaves the index untouched until shutdown.
    """

    def __init__(self, index_file: Path, lists_dir: Path) -> None:
        self.index_file = index_file
        self.lists_dir = lists_dir
        self.paths: list[Path] = []

    def load(self) -> list[Path]:
        """Read the index file, creating it empty if absent."""
        create_file(self.index_file)
        lines = read_lines(self.index_file) or []
        self.paths = [Path(line) for line in lines if line.strip()]
        return self.paths

    def path_for(self, name: str) -> Path:
        return list_path(self.lists_dir, name)

    def list_names(self) -> list[str]:
        return [list_name(p) for p in self.paths]

    def add_list(self, name: str) -> tuple[Path | None, list[str]]:
        """Create a new list file and register it. Returns (path, errors)."""
        if not name:
            return None, ["No name for the todo list was given!\nUse of add: add [name]"]

        path = self.path_for(name)
        if path.exists():
            return None, [
                f"Failed to create new todo list with name[{name}]. this list already exist"
            ]

        if not create_file(path):
            return None, [f"Failed to create new todo list with name[{name}]"]

        self.paths.append(path)
        return path, []

    def to_text(self) -> str:
        return "".join(f"{p}\n" for p in self.paths)

    def persist(self) -> bool:
        """Overwrite the index file with every known path, one per line."""
        return write_file(self.index_file, self.to_text())
