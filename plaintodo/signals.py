"""Interrupt handling: flush the registry index, then exit with the signal number."""

from __future__ import annotations

import signal
import sys
from typing import Any, Callable


def interrupt_signals() -> list[signal.Signals]:
    """SIGINT, plus SIGBREAK on platforms that define it (Windows)."""
    signums = [signal.SIGINT]
    if hasattr(signal, "SIGBREAK"):
        signums.append(signal.SIGBREAK)
    return signums


def make_interrupt_handler(flush: Callable[[], Any]) -> Callable[[int, Any], None]:
    def _handler(signum: int, frame: Any) -> None:
        flush()
        sys.exit(signum)

    return _handler


def install_interrupt_handler(flush: Callable[[], Any]) -> Callable[[int, Any], None]:
    """Arm the interrupt signals with a handler that calls *flush* first.

    Must only be called once whatever *flush* writes has been loaded; the
    handler does not touch the currently open list, which is already on disk.
    """
    handler = make_interrupt_handler(flush)
    for signum in interrupt_signals():
        signal.signal(signum, handler)
    return handler
