"""Closed set of logical edit commands produced by input collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class MoveUp:
    pass


@dataclass(frozen=True, slots=True)
class MoveDown:
    pass


@dataclass(frozen=True, slots=True)
class MoveLeft:
    pass


@dataclass(frozen=True, slots=True)
class MoveRight:
    pass


@dataclass(frozen=True, slots=True)
class InsertChar:
    """Insert one printable character at the cursor."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"InsertChar expects one character, got {self.char!r}")
        if self.char in ("\n", "\r"):
            raise ValueError(
                "InsertChar cannot carry a line terminator; use InsertNewline"
            )


@dataclass(frozen=True, slots=True)
class InsertNewline:
    pass


@dataclass(frozen=True, slots=True)
class InsertTab:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class DeleteForward:
    pass


@dataclass(frozen=True, slots=True)
class Save:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Command = Union[
    MoveUp,
    MoveDown,
    MoveLeft,
    MoveRight,
    InsertChar,
    InsertNewline,
    InsertTab,
    Backspace,
    DeleteForward,
    Save,
    Quit,
]


__all__ = [
    "Backspace",
    "Command",
    "DeleteForward",
    "InsertChar",
    "InsertNewline",
    "InsertTab",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "Quit",
    "Save",
]
