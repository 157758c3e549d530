"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .sync import BufferValidationError

if TYPE_CHECKING:
    from .buffer import Buffer


def ensure_line(buffer: "Buffer", line_num: int) -> int:
    if line_num < 0 or line_num >= buffer.line_count:
        raise BufferValidationError(
            f"Line {line_num} out of range (0..{buffer.line_count - 1})",
            line_num=line_num,
        )
    return line_num


def ensure_position(buffer: "Buffer", offset: int, line_num: int) -> int:
    ensure_line(buffer, line_num)
    length = len(buffer.get_line(line_num) or "")
    if offset < 0 or offset > length:
        raise BufferValidationError(
            f"Offset {offset} out of range for line {line_num} (0..{length})",
            line_num=line_num,
            offset=offset,
        )
    return offset


def ensure_inline_text(text: str) -> str:
    if "\n" in text or "\r" in text:
        raise BufferValidationError("Inline text cannot contain line terminators")
    return text


__all__ = ["ensure_inline_text", "ensure_line", "ensure_position"]
