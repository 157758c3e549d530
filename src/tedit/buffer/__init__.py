"""Buffer, line, and cursor data model plus plain-text storage."""

from .buffer import UNTITLED, Buffer
from .cursor import Cursor, Direction
from .line import Line
from .storage import BufferIOError, load, read_lines, save
from .sync import BufferMirror, BufferValidationError, Position, RenderSink
from .validation import ensure_line, ensure_position

__all__ = [
    "Buffer",
    "BufferIOError",
    "BufferMirror",
    "BufferValidationError",
    "Cursor",
    "Direction",
    "Line",
    "Position",
    "RenderSink",
    "UNTITLED",
    "ensure_line",
    "ensure_position",
    "load",
    "read_lines",
    "save",
]
