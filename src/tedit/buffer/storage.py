"""Plain-text load/save for buffers (newline-delimited UTF-8)."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

from tedit.runtime import telemetry

from .buffer import UNTITLED, Buffer

PathLike = Union[str, "os.PathLike[str]"]
ENCODING = "utf-8"
TERMINATOR = "\n"

logger = telemetry.get_logger("tedit.storage")


class BufferIOError(OSError):
    """Raised when a buffer cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


def read_lines(handle: IO[str]) -> Iterator[str]:
    """Yield each record of ``handle`` with its line terminator stripped."""

    for record in handle:
        if record.endswith("\n"):
            record = record[:-1]
        if record.endswith("\r"):
            record = record[:-1]
        yield record


def load(source: Optional[PathLike] = None) -> Buffer:
    """Read ``source`` into a new buffer.

    ``None`` gives an untitled buffer and a missing file gives a single empty
    line; an existing file that cannot be read raises :class:`BufferIOError`.
    """

    if source is None:
        return Buffer.untitled()

    path = os.fspath(source)
    with telemetry.span(
        "storage::load", logger_name=logger.name, metadata={"path": path}
    ):
        try:
            with open(path, "r", encoding=ENCODING) as handle:
                lines = list(read_lines(handle))
        except FileNotFoundError:
            telemetry.record_event(
                "storage.load_missing", data={"path": path}, logger_name=logger.name
            )
            return Buffer(source_identifier=path)
        except (OSError, UnicodeDecodeError) as exc:
            raise BufferIOError(f"Cannot read {path}: {exc}", path=path) from exc

    return Buffer.from_lines(lines, source_identifier=path)


def save(buffer: Buffer, destination: Optional[PathLike] = None) -> int:
    """Write every line plus one terminator; return the number of lines written.

    A failure part-way through leaves the lines already written in place.
    """

    if destination is not None:
        path = os.fspath(destination)
    elif buffer.source_identifier and buffer.source_identifier != UNTITLED:
        path = buffer.source_identifier
    else:
        raise BufferIOError("Buffer has no file name to save to")

    written = 0
    with telemetry.span(
        "storage::save",
        logger_name=logger.name,
        metadata={"path": path, "lines": buffer.line_count},
    ):
        try:
            with open(path, "w", encoding=ENCODING, newline=TERMINATOR) as handle:
                for line in buffer:
                    handle.write(line.data + TERMINATOR)
                    written += 1
        except OSError as exc:
            raise BufferIOError(f"Cannot write {path}: {exc}", path=path) from exc

    buffer.mark_clean()
    return written


__all__ = ["BufferIOError", "load", "read_lines", "save"]
