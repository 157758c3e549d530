"""Cursor position and movement clamping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .sync import BufferValidationError, Position

if TYPE_CHECKING:
    from .buffer import Buffer


class Direction(str, Enum):
    """Cursor movement directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(slots=True)
class Cursor:
    """Edit position as ``(offset, line_num)``.

    The cursor knows nothing about buffer contents; every move re-reads the
    line lengths it needs from the buffer it is given.
    """

    offset: int = 0
    line_num: int = 0

    def position(self) -> Position:
        return (self.offset, self.line_num)

    def set_position(self, offset: int, line_num: int) -> None:
        if offset < 0 or line_num < 0:
            raise BufferValidationError(
                "Cursor position cannot be negative",
                line_num=line_num,
                offset=offset,
            )
        self.offset = offset
        self.line_num = line_num

    def move(self, direction: Direction, buffer: "Buffer") -> bool:
        """Move one step; return ``False`` when clamped in place."""

        direction = Direction(direction)
        if direction in (Direction.UP, Direction.DOWN):
            step = -1 if direction is Direction.UP else 1
            target = buffer.get_line(self.line_num + step)
            if target is None:
                return False
            self.line_num += step
            # keep the column unless the new line is shorter
            self.offset = min(self.offset, len(target))
            return True

        current = buffer.get_line(self.line_num)
        if current is None:
            return False
        if direction is Direction.LEFT:
            if self.offset > 0:
                self.offset -= 1
                return True
            return False
        if self.offset < len(current):
            self.offset += 1
            return True
        return False

    def clamp_to(self, buffer: "Buffer") -> None:
        """Pull the cursor back inside ``buffer`` after an external reload."""

        self.line_num = max(0, min(self.line_num, buffer.line_count - 1))
        line = buffer.get_line(self.line_num) or ""
        self.offset = max(0, min(self.offset, len(line)))


__all__ = ["Cursor", "Direction"]
