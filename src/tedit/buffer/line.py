"""Single row of document text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Line:
    """Immutable row value; ``index`` mirrors its position in the owning buffer.

    Lengths and offsets are counted in code points.
    """

    data: str = ""
    index: int = 0

    @property
    def value(self) -> str:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return self.data


__all__ = ["Line"]
