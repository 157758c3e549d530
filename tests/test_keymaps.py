from __future__ import annotations

import pytest

from tedit.commands import (
    Backspace,
    DeleteForward,
    InsertChar,
    InsertNewline,
    InsertTab,
    KeyBinding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Quit,
    Save,
    load_default_keymaps,
)


def make_registry() -> KeymapRegistry:
    return load_default_keymaps(KeymapRegistry())


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("up", MoveUp()),
        ("down", MoveDown()),
        ("left", MoveLeft()),
        ("right", MoveRight()),
        ("enter", InsertNewline()),
        ("tab", InsertTab()),
        ("backspace", Backspace()),
        ("delete", DeleteForward()),
        ("ctrl+s", Save()),
        ("ctrl+q", Quit()),
    ],
)
def test_default_bindings_resolve(key: str, expected: object) -> None:
    registry = make_registry()

    assert registry.resolve(key) == expected


def test_printable_text_becomes_insert_char() -> None:
    registry = make_registry()

    assert registry.resolve("a", text="a") == InsertChar("a")
    assert registry.resolve("space", text=" ") == InsertChar(" ")


def test_unbound_control_keys_are_ignored() -> None:
    registry = make_registry()

    assert registry.resolve("ctrl+x", text="x") is None
    assert registry.resolve("f5") is None
    assert registry.resolve("escape", text="\x1b") is None


def test_modifiers_can_be_passed_separately() -> None:
    registry = make_registry()

    assert registry.resolve("S", modifiers=("CTRL",)) == Save()


def test_stroke_tokens_are_normalized() -> None:
    stroke = KeyStroke("S", ("shift", "ctrl", "ctrl"))

    assert stroke.token == "ctrl+shift+s"
    assert KeyStroke.parse("ctrl+shift+s") == stroke
    with pytest.raises(ValueError):
        KeyStroke("")


def test_conflicting_binding_is_rejected() -> None:
    registry = make_registry()
    binding = KeyBinding("custom.save", KeyStroke.parse("ctrl+s"), Quit)

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(binding)

    assert info.value.existing.id == "file.save"
    registry.register_binding(binding, replace=True)
    assert registry.resolve("ctrl+s") == Quit()


def test_unregister_frees_stroke() -> None:
    registry = make_registry()

    removed = registry.unregister(KeyStroke("tab"))

    assert removed is not None and removed.id == "edit.tab"
    assert registry.resolve("tab") is None
    assert len(registry) == 9


def test_insert_char_requires_single_character() -> None:
    with pytest.raises(ValueError):
        InsertChar("ab")


@pytest.mark.parametrize("terminator", ["\n", "\r"])
def test_insert_char_rejects_line_terminators(terminator: str) -> None:
    with pytest.raises(ValueError):
        InsertChar(terminator)
