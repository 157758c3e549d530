"""Shared state every editor action operates on."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from tedit.buffer import Buffer, Cursor

ENV_TAB_WIDTH = "TEDIT_TAB_WIDTH"


def default_tab_width() -> int:
    raw = os.environ.get(ENV_TAB_WIDTH)
    if raw is None:
        return 4
    try:
        return max(1, int(raw))
    except ValueError:
        return 4


@dataclass(slots=True)
class CommandResult:
    """Outcome of dispatching one command."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


class EditorBus:
    """Minimal event bus letting hosts observe editor signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Buffer, cursor, and services owned by one editing session."""

    buffer: Buffer
    cursor: Cursor = field(default_factory=Cursor)
    bus: EditorBus = field(default_factory=EditorBus)
    tab_width: int = field(default_factory=default_tab_width)


__all__ = [
    "CommandResult",
    "EditorBus",
    "EditorContext",
    "default_tab_width",
]
