"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from tedit.buffer import BufferIOError, BufferMirror, load
from tedit.editor import EditorController
from tedit.editor.context import default_tab_width
from tedit.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

CURSOR_STYLE = "reverse"


def render_frame(frame: BufferMirror) -> Text:
    """Lay out the buffer lines with the cursor cell highlighted."""

    offset, line_num = frame.cursor
    text = Text(no_wrap=True, end="")
    for index, line in enumerate(frame.lines):
        if index:
            text.append("\n")
        if index != line_num:
            text.append(line)
            continue
        text.append(line[:offset])
        text.append(line[offset : offset + 1] or " ", style=CURSOR_STYLE)
        text.append(line[offset + 1 :])
    return text


class TeditApp(App[None]):
    """Minimal Textual UI embedding the editor controller."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-area {
		height: 1fr;
	}

	#buffer-view {
		padding: 0 1;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, controller: EditorController) -> None:
        super().__init__()
        self.controller = controller
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("tedit.app")

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.controller, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text = normalized
        result = self.adapter.handle_textual_key(key, text=text)
        if result is None:
            return
        event.stop()
        event.prevent_default()
        if result.quit:
            self.exit()

    def _update_buffer(self, frame: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_frame(frame))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[Tuple[str, Optional[str]]]:
        if event.key == "ctrl+c":
            return None
        character = event.character
        if character is not None and not character.isprintable():
            character = None
        return (event.key, character)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a plain text file.")
    parser.add_argument(
        "path",
        nargs="?",
        help="File to open; created on first save if missing",
    )
    parser.add_argument(
        "--log-file",
        default=telemetry.DEFAULT_LOG_FILE,
        help="Write logs to this file (default: $TEDIT_LOG_FILE, else no logs)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level (default: $TEDIT_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=default_tab_width(),
        help="Spaces inserted by Tab (default: $TEDIT_TAB_WIDTH or 4)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = telemetry.active_config()
    # stderr belongs to the terminal UI while the app runs
    telemetry.configure(
        config=telemetry.TelemetryConfig(
            min_level=args.log_level or config.min_level,
            console=False,
            json_format=config.json_format,
            file_path=args.log_file,
        )
    )

    try:
        buffer = load(args.path)
    except BufferIOError as exc:
        print(f"tedit: {exc}", file=sys.stderr)
        return 1

    controller = EditorController(buffer, tab_width=max(1, args.tab_width))
    TeditApp(controller).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual launch
    sys.exit(main())
