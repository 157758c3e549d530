"""Adapter boundary types for handing buffer state to renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple

Position = Tuple[int, int]  # (offset, line_num)


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Read-only frame: everything a renderer needs for one draw pass."""

    lines: Tuple[str, ...]
    cursor: Position
    source_identifier: str
    version: int = 0
    dirty: bool = False
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def status(self) -> str:
        return f"{self.source_identifier}, lines: {len(self.lines)}"


class RenderSink(Protocol):
    """Protocol describing how hosts receive frames to draw."""

    def render(self, frame: BufferMirror) -> None:
        """Draw ``frame``; called between commands, never mid-mutation."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller addresses a row or column outside the buffer."""

    def __init__(
        self,
        message: str,
        *,
        line_num: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.line_num = line_num
        self.offset = offset


__all__ = ["BufferMirror", "BufferValidationError", "Position", "RenderSink"]
