"""Logical edit commands and the keymaps that produce them."""

from .defaults import DEFAULT_BINDINGS, load_default_keymaps
from .keymap import KeyBinding, KeymapConflictError, KeymapRegistry, KeyStroke
from .models import (
    Backspace,
    Command,
    DeleteForward,
    InsertChar,
    InsertNewline,
    InsertTab,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Quit,
    Save,
)
from .source import CommandSource, IterableCommandSource

__all__ = [
    "Backspace",
    "Command",
    "CommandSource",
    "DEFAULT_BINDINGS",
    "DeleteForward",
    "InsertChar",
    "InsertNewline",
    "InsertTab",
    "IterableCommandSource",
    "KeyBinding",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "Quit",
    "Save",
    "load_default_keymaps",
]
