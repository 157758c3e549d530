"""Line-sequence buffer: structural edits, renumbering, and render frames."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from typing import Iterable, Iterator, List, Optional, Tuple

from tedit.runtime import telemetry

from .cursor import Cursor
from .line import Line
from .sync import BufferMirror, BufferValidationError
from .validation import ensure_inline_text, ensure_line, ensure_position

UNTITLED = "untitled"


class Buffer:
    """Ordered, never-empty sequence of :class:`Line` values.

    Lines are immutable; every edit swaps the addressed slot for a new value,
    so no caller ever holds a mutable view of a line.
    """

    def __init__(
        self,
        *,
        source_identifier: str = "",
        lines: Optional[Iterable[str]] = None,
    ) -> None:
        self.source_identifier = source_identifier
        self._lines: List[Line] = [
            Line(data=data, index=index) for index, data in enumerate(lines or ())
        ]
        if not self._lines:
            self._lines.append(Line())
        self.version = 0
        self.dirty = False

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, source_identifier: str = ""
    ) -> "Buffer":
        return cls(source_identifier=source_identifier, lines=list(lines))

    @classmethod
    def untitled(cls) -> "Buffer":
        return cls(source_identifier=UNTITLED)

    @property
    def lines(self) -> Tuple[Line, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(tuple(self._lines))

    def get_line(self, line_num: int) -> Optional[Line]:
        if 0 <= line_num < len(self._lines):
            return self._lines[line_num]
        return None

    def text(self) -> str:
        return "\n".join(line.data for line in self._lines)

    def status_text(self) -> str:
        return f"{self.source_identifier}, lines: {len(self._lines)}"

    def mirror(self, cursor: Optional[Cursor] = None) -> BufferMirror:
        return BufferMirror(
            lines=tuple(line.data for line in self._lines),
            cursor=cursor.position() if cursor else (0, 0),
            source_identifier=self.source_identifier,
            version=self.version,
            dirty=self.dirty,
        )

    def mark_clean(self) -> None:
        self.dirty = False

    def split_line(self, offset: int, line_num: int) -> Tuple[str, str]:
        """Return ``(data[:offset], data[offset:])`` without mutating."""

        ensure_position(self, offset, line_num)
        data = self._lines[line_num].data
        return data[:offset], data[offset:]

    def insert_line(self, offset: int, line_num: int) -> None:
        """Break ``line_num`` at ``offset``; the tail becomes a new line below."""

        left, right = self.split_line(offset, line_num)
        with self._mutation("insert_line", offset=offset, line_num=line_num):
            self._set_data(line_num, left)
            self._lines.insert(line_num + 1, Line(data=right, index=line_num + 1))
            self.renumber()

    def join_line_with_previous(self, offset: int, line_num: int) -> int:
        """Append ``line_num`` to its predecessor and return the join column.

        On the first line there is nothing to join into, so ``offset`` comes
        back unchanged.
        """

        ensure_line(self, line_num)
        if line_num == 0:
            return offset
        previous = self._lines[line_num - 1]
        join_at = len(previous)
        with self._mutation("join_line_with_previous", line_num=line_num):
            self._set_data(line_num - 1, previous.data + self._lines[line_num].data)
            del self._lines[line_num]
            self.renumber()
        return join_at

    def join_line_with_next(self, line_num: int) -> bool:
        """Pull the following line up onto ``line_num``; ``False`` on the last line."""

        ensure_line(self, line_num)
        if line_num + 1 >= len(self._lines):
            return False
        self.join_line_with_previous(0, line_num + 1)
        return True

    def insert_text(self, text: str, offset: int, line_num: int) -> None:
        ensure_inline_text(text)
        left, right = self.split_line(offset, line_num)
        with self._mutation("insert_text", offset=offset, line_num=line_num):
            self._set_data(line_num, left + text + right)

    def insert_char(self, ch: str, offset: int, line_num: int) -> None:
        if len(ch) != 1:
            raise BufferValidationError(
                f"insert_char expects a single character, got {ch!r}",
                line_num=line_num,
                offset=offset,
            )
        self.insert_text(ch, offset, line_num)

    def delete_char(self, offset: int, line_num: int) -> None:
        """Backspace: drop the character before ``offset``.

        At column zero the caller must join lines instead.
        """

        ensure_position(self, offset, line_num)
        if offset == 0:
            raise BufferValidationError(
                "delete_char at offset 0; join with the previous line instead",
                line_num=line_num,
                offset=offset,
            )
        data = self._lines[line_num].data
        with self._mutation("delete_char", offset=offset, line_num=line_num):
            self._set_data(line_num, data[: offset - 1] + data[offset:])

    def delete_forward_char(self, offset: int, line_num: int) -> None:
        """Delete: drop the character at ``offset``.

        At end of line the caller must join with the next line instead.
        """

        ensure_position(self, offset, line_num)
        data = self._lines[line_num].data
        if offset == len(data):
            raise BufferValidationError(
                "delete_forward_char at end of line; join with the next line instead",
                line_num=line_num,
                offset=offset,
            )
        with self._mutation("delete_forward_char", offset=offset, line_num=line_num):
            self._set_data(line_num, data[:offset] + data[offset + 1 :])

    def renumber(self) -> None:
        """Restore ``line.index == position`` for every line."""

        for position, line in enumerate(self._lines):
            if line.index != position:
                self._lines[position] = replace(line, index=position)

    def _set_data(self, line_num: int, data: str) -> None:
        self._lines[line_num] = replace(self._lines[line_num], data=data)

    @contextmanager
    def _mutation(self, label: str, **metadata: int) -> Iterator[None]:
        with telemetry.span(
            f"buffer::{label}",
            logger_name="tedit.buffer",
            component="buffer",
            metadata={"buffer": self.source_identifier, **metadata},
        ):
            yield
        self.version += 1
        self.dirty = True


__all__ = ["Buffer", "UNTITLED"]
