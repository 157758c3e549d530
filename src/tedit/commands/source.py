"""Command producers the controller pulls from."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Protocol

from .models import Command


class CommandSource(Protocol):
    """Anything that can hand the controller its next command."""

    def next_command(self) -> Optional[Command]:
        """Return the next command, or ``None`` once input is exhausted."""
        ...


class IterableCommandSource:
    """Replays commands from any iterable (scripts, tests, recorded input)."""

    def __init__(self, commands: Iterable[Command]) -> None:
        self._commands: Iterator[Command] = iter(commands)

    def next_command(self) -> Optional[Command]:
        return next(self._commands, None)


__all__ = ["CommandSource", "IterableCommandSource"]
