"""Console output for plaintodo: a standard stream, an error stream, clearing."""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console as RichConsole


class Console:
    """Writes shell output. Subclassed by front ends that are not a terminal."""

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        clear_screen: bool = True,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.clear_screen = clear_screen

    def print(self, text: str = "", end: str = "\n") -> None:
        self.out.write(text + end)
        self.out.flush()

    def error(self, text: str) -> None:
        self.err.write(text + "\n")
        self.err.flush()

    def clear(self) -> None:
        # Only clear a real terminal; piped or captured output is left alone.
        if not self.clear_screen or not self.out.isatty():
            return
        RichConsole(file=self.out).clear()
