"""Shared test fixtures for plaintodo tests."""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from plaintodo.console import Console
from plaintodo.registry import ListRegistry


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with one list and an index file."""
    root = tmp_path / "workspace"
    (root / "data").mkdir(parents=True)
    (root / "todo_lists").mkdir(parents=True)

    chores = root / "todo_lists" / "chores.txt"
    chores.write_text(
        "1\t[X] - take out trash\n"
        "2\t[ ] - water plants\n",
        encoding="utf-8",
    )
    (root / "data" / "paths.txt").write_text(f"{chores}\n", encoding="utf-8")

    os.environ["PLAINTODO_ROOT"] = str(root)
    yield root
    # Cleanup
    if "PLAINTODO_ROOT" in os.environ:
        del os.environ["PLAINTODO_ROOT"]


@pytest.fixture
def registry(workspace: Path) -> ListRegistry:
    reg = ListRegistry(workspace / "data" / "paths.txt", workspace / "todo_lists")
    reg.load()
    return reg


class BufferConsole(Console):
    """Console writing into StringIO buffers."""

    def __init__(self) -> None:
        super().__init__(out=io.StringIO(), err=io.StringIO(), clear_screen=True)
        self.clears = 0

    def clear(self) -> None:
        self.clears += 1

    @property
    def output(self) -> str:
        return self.out.getvalue()

    @property
    def errors(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def console() -> BufferConsole:
    return BufferConsole()
