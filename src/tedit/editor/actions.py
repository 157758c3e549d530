"""Command handlers composing cursor position with buffer mutations."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Type

from tedit.buffer import BufferIOError, Direction, save
from tedit.commands import (
    Backspace,
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
from tedit.runtime import telemetry

from .context import CommandResult, EditorContext

CommandHandler = Callable[[EditorContext, object], CommandResult]

NOOP = "noop"


def _changed(context: EditorContext, label: str) -> CommandResult:
    context.bus.emit("buffer.changed", label)
    return CommandResult(consumed=True)


def move_cursor(
    context: EditorContext, command: object, *, direction: Direction
) -> CommandResult:
    del command
    if context.cursor.move(direction, context.buffer):
        return CommandResult(consumed=True)
    return CommandResult(consumed=True, status=NOOP)


def insert_char(context: EditorContext, command: InsertChar) -> CommandResult:
    offset, line_num = context.cursor.position()
    context.buffer.insert_char(command.char, offset, line_num)
    context.cursor.set_position(offset + 1, line_num)
    return _changed(context, "insert_char")


def insert_tab(context: EditorContext, command: InsertTab) -> CommandResult:
    del command
    offset, line_num = context.cursor.position()
    context.buffer.insert_text(" " * context.tab_width, offset, line_num)
    context.cursor.set_position(offset + context.tab_width, line_num)
    return _changed(context, "insert_tab")


def insert_newline(context: EditorContext, command: InsertNewline) -> CommandResult:
    del command
    offset, line_num = context.cursor.position()
    context.buffer.insert_line(offset, line_num)
    context.cursor.set_position(0, line_num + 1)
    return _changed(context, "insert_newline")


def backspace(context: EditorContext, command: Backspace) -> CommandResult:
    del command
    offset, line_num = context.cursor.position()
    if offset > 0:
        context.buffer.delete_char(offset, line_num)
        context.cursor.set_position(offset - 1, line_num)
        return _changed(context, "delete_char")
    if line_num == 0:
        return CommandResult(consumed=True, status=NOOP)
    join_at = context.buffer.join_line_with_previous(offset, line_num)
    context.cursor.set_position(join_at, line_num - 1)
    return _changed(context, "join_line_with_previous")


def delete_forward(context: EditorContext, command: DeleteForward) -> CommandResult:
    del command
    offset, line_num = context.cursor.position()
    line = context.buffer.get_line(line_num)
    if line is not None and offset < len(line):
        context.buffer.delete_forward_char(offset, line_num)
        return _changed(context, "delete_forward_char")
    if context.buffer.join_line_with_next(line_num):
        return _changed(context, "join_line_with_next")
    return CommandResult(consumed=True, status=NOOP)


def save_buffer(context: EditorContext, command: Save) -> CommandResult:
    del command
    buffer = context.buffer
    try:
        written = save(buffer)
    except BufferIOError as exc:
        telemetry.record_event(
            "editor.save_failed",
            level="warning",
            data={"buffer": buffer.source_identifier, "error": str(exc)},
        )
        context.bus.emit("buffer.save_failed", str(exc))
        return CommandResult(consumed=True, status="save_failed", message=str(exc))

    message = f"wrote {written} lines to {buffer.source_identifier}"
    telemetry.record_event(
        "editor.save",
        data={"buffer": buffer.source_identifier, "lines": written},
    )
    context.bus.emit("buffer.saved", buffer.source_identifier)
    return CommandResult(consumed=True, status="saved", message=message)


def quit_editor(context: EditorContext, command: Quit) -> CommandResult:
    del command
    telemetry.record_event(
        "editor.quit",
        data={
            "buffer": context.buffer.source_identifier,
            "dirty": context.buffer.dirty,
        },
    )
    context.bus.emit("editor.quit", None)
    return CommandResult(consumed=True, status="quit", quit=True)


COMMAND_HANDLERS: Dict[Type[object], CommandHandler] = {
    MoveUp: partial(move_cursor, direction=Direction.UP),
    MoveDown: partial(move_cursor, direction=Direction.DOWN),
    MoveLeft: partial(move_cursor, direction=Direction.LEFT),
    MoveRight: partial(move_cursor, direction=Direction.RIGHT),
    InsertChar: insert_char,
    InsertTab: insert_tab,
    InsertNewline: insert_newline,
    Backspace: backspace,
    DeleteForward: delete_forward,
    Save: save_buffer,
    Quit: quit_editor,
}


__all__ = [
    "COMMAND_HANDLERS",
    "CommandHandler",
    "backspace",
    "delete_forward",
    "insert_char",
    "insert_newline",
    "insert_tab",
    "move_cursor",
    "quit_editor",
    "save_buffer",
]
