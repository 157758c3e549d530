from __future__ import annotations

from pathlib import Path
from typing import List

from tedit.adapters.textual import TextualEditorAdapter, TextualUIHooks, format_status
from tedit.adapters.textual.app import render_frame
from tedit.buffer import Buffer, BufferMirror
from tedit.editor import EditorController


def make_controller(path: str = "/some/file.txt") -> EditorController:
    buffer = Buffer.from_lines(
        ["test", "", "text file", "content"], source_identifier=path
    )
    return EditorController(buffer)


def test_adapter_pushes_initial_frame_and_status() -> None:
    frames: List[BufferMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(update_buffer=frames.append, update_status=statuses.append)

    TextualEditorAdapter(make_controller(), hooks)

    assert frames[-1].lines == ("test", "", "text file", "content")
    assert statuses[-1] == "/some/file.txt, lines: 4, cursor: 0-0"


def test_adapter_translates_keys_into_edits() -> None:
    controller = make_controller()
    frames: List[BufferMirror] = []
    hooks = TextualUIHooks(update_buffer=frames.append)
    adapter = TextualEditorAdapter(controller, hooks)

    adapter.handle_textual_key("right")
    adapter.handle_textual_key("x", text="x")
    adapter.handle_textual_key("enter")

    assert frames[-1].lines[:2] == ("tx", "est")
    assert frames[-1].cursor == (0, 1)
    assert frames[-1].dirty is True


def test_adapter_ignores_unbound_keys() -> None:
    controller = make_controller()
    frames: List[BufferMirror] = []
    hooks = TextualUIHooks(update_buffer=frames.append)
    adapter = TextualEditorAdapter(controller, hooks)

    assert adapter.handle_textual_key("f5") is None
    assert len(frames) == 1


def test_adapter_relays_save_events(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    events: List[tuple[str, object | None]] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda frame: None,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualEditorAdapter(make_controller(str(path)), hooks)

    result = adapter.handle_textual_key("ctrl+s")

    assert result is not None and result.status == "saved"
    assert ("buffer.saved", str(path)) in events
    assert statuses[-1].endswith(f"| wrote 4 lines to {path}")


def test_adapter_reports_quit() -> None:
    adapter = TextualEditorAdapter(
        make_controller(), TextualUIHooks(update_buffer=lambda frame: None)
    )

    result = adapter.handle_textual_key("ctrl+q")

    assert result is not None and result.quit is True


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda frame: None, log=logs.append)
    adapter = TextualEditorAdapter(make_controller(), hooks)

    adapter.handle_textual_key("down")

    assert any(line.startswith("key ->") for line in logs)
    assert any("command='MoveDown'" in line for line in logs)


def test_format_status_marks_modified_buffers() -> None:
    frame = BufferMirror(
        lines=("a",), cursor=(1, 0), source_identifier="notes.txt", dirty=True
    )

    assert format_status(frame) == "notes.txt, lines: 1 [+], cursor: 1-0"


def test_render_frame_highlights_cursor_cell() -> None:
    frame = BufferMirror(lines=("ab", "cd"), cursor=(2, 0), source_identifier="x")

    text = render_frame(frame)

    assert text.plain == "ab \ncd"
    assert any(span.style == "reverse" for span in text.spans)
