"""Textual adapter that turns key presses into editor commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from tedit.buffer import BufferMirror
from tedit.commands import KeymapRegistry, load_default_keymaps
from tedit.editor import CommandResult, EditorController


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


def format_status(frame: BufferMirror) -> str:
    offset, line_num = frame.cursor
    modified = " [+]" if frame.dirty else ""
    status = f"{frame.status}{modified}, cursor: {offset}-{line_num}"
    message = frame.attributes.get("message")
    if message:
        status = f"{status} | {message}"
    return status


class TextualEditorAdapter:
    """Bridges an EditorController to a Textual-friendly surface."""

    def __init__(
        self,
        controller: EditorController,
        hooks: TextualUIHooks,
        *,
        keymaps: Optional[KeymapRegistry] = None,
    ) -> None:
        self.controller = controller
        self.hooks = hooks
        self.keymaps = keymaps or load_default_keymaps(KeymapRegistry())
        self._subscribe_events()
        self._refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[CommandResult]:
        """Decode a Textual key event and dispatch the resulting command."""

        command = self.keymaps.resolve(key, text=text, modifiers=modifiers)
        if command is None:
            self._log_state("key ignored", key=key, text=text)
            return None
        self._log_state("key ->", key=key, command=type(command).__name__)
        result = self.controller.dispatch(command)
        self._log_state("result <-", status=result.status, message=result.message)
        self._refresh()
        return result

    def _subscribe_events(self) -> None:
        bus = self.controller.bus
        for event in (
            "buffer.saved",
            "buffer.save_failed",
            "editor.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh(self) -> None:
        frame = self.controller.frame()
        self.hooks.update_buffer(frame)
        self.hooks.update_status(format_status(frame))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "cursor": self.controller.cursor.position(),
            "buffer": self.controller.buffer.source_identifier,
            "version": self.controller.buffer.version,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "format_status"]
