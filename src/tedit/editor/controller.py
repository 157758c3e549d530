"""Editor controller: owns one buffer + cursor and dispatches commands."""

from __future__ import annotations

from typing import Optional

from tedit.buffer import Buffer, BufferMirror, Cursor, RenderSink, load
from tedit.buffer.storage import PathLike
from tedit.commands import Command, CommandSource
from tedit.runtime import telemetry

from .actions import COMMAND_HANDLERS
from .context import CommandResult, EditorBus, EditorContext, default_tab_width


class EditorController:
    """Translates logical commands into buffer and cursor updates."""

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        cursor: Optional[Cursor] = None,
        bus: Optional[EditorBus] = None,
        tab_width: Optional[int] = None,
    ) -> None:
        self.context = EditorContext(
            buffer=buffer or Buffer.untitled(),
            cursor=cursor or Cursor(),
            bus=bus or EditorBus(),
            tab_width=tab_width if tab_width is not None else default_tab_width(),
        )
        self.context.cursor.clamp_to(self.context.buffer)
        self.logger = telemetry.get_logger("tedit.editor")
        self.last_result: Optional[CommandResult] = None

    @classmethod
    def open(
        cls, source: Optional[PathLike] = None, **kwargs: object
    ) -> "EditorController":
        """Load ``source`` (or start untitled) and wrap it in a controller."""

        return cls(load(source), **kwargs)  # type: ignore[arg-type]

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def cursor(self) -> Cursor:
        return self.context.cursor

    @property
    def bus(self) -> EditorBus:
        return self.context.bus

    def frame(self) -> BufferMirror:
        mirror = self.buffer.mirror(self.cursor)
        if self.last_result and self.last_result.message:
            mirror.attributes["message"] = self.last_result.message
        return mirror

    def dispatch(self, command: Command) -> CommandResult:
        handler = COMMAND_HANDLERS.get(type(command))
        if handler is None:
            self.logger.warning("unhandled command %r", command)
            result = CommandResult(consumed=False, status="unhandled")
        else:
            with telemetry.span(
                name=f"editor::{type(command).__name__}",
                logger_name=self.logger.name,
                component="editor",
                metadata={"position": self.cursor.position()},
            ):
                result = handler(self.context, command)
        self.last_result = result
        return result

    def run(
        self, source: CommandSource, sink: Optional[RenderSink] = None
    ) -> int:
        """Pull commands until ``Quit`` or exhaustion; return how many ran."""

        handled = 0
        self._render(sink)
        while True:
            command = source.next_command()
            if command is None:
                break
            result = self.dispatch(command)
            handled += 1
            if result.quit:
                break
            self._render(sink)
        return handled

    def _render(self, sink: Optional[RenderSink]) -> None:
        if sink is not None:
            sink.render(self.frame())


__all__ = ["EditorController"]
