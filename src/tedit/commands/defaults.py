"""Built-in key bindings for the plain editing surface."""

from __future__ import annotations

from .keymap import KeyBinding, KeymapRegistry, KeyStroke
from .models import (
    Backspace,
    DeleteForward,
    InsertNewline,
    InsertTab,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Quit,
    Save,
)

DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding("move.up", KeyStroke("up"), MoveUp, "Cursor up"),
    KeyBinding("move.down", KeyStroke("down"), MoveDown, "Cursor down"),
    KeyBinding("move.left", KeyStroke("left"), MoveLeft, "Cursor left"),
    KeyBinding("move.right", KeyStroke("right"), MoveRight, "Cursor right"),
    KeyBinding("edit.newline", KeyStroke("enter"), InsertNewline, "Split line"),
    KeyBinding("edit.tab", KeyStroke("tab"), InsertTab, "Indent with spaces"),
    KeyBinding("edit.backspace", KeyStroke("backspace"), Backspace, "Delete left"),
    KeyBinding("edit.delete", KeyStroke("delete"), DeleteForward, "Delete right"),
    KeyBinding("file.save", KeyStroke.parse("ctrl+s"), Save, "Save buffer"),
    KeyBinding("editor.quit", KeyStroke.parse("ctrl+q"), Quit, "Quit"),
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)
    return registry


__all__ = ["DEFAULT_BINDINGS", "load_default_keymaps"]
