"""Text and binary readers.

Line sequences are single-pass: once consumed, reading again re-opens the
file. Line terminators (``\\n``, ``\\r\\n``, ``\\r``) are stripped.
"""

from __future__ import annotations

import contextlib
import errno
import os
from pathlib import Path
from typing import IO, TYPE_CHECKING

from filekit.errors import FileIOError, OutOfResourcesError, translated_errors
from filekit.infrastructure.logger import logger
from filekit.types import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_BUFFER_SIZE

if TYPE_CHECKING:
    from collections.abc import Iterator


def _strip_terminator(line: str) -> str:
    # Universal newlines mode has already folded \r\n and \r into \n
    return line[:-1] if line.endswith("\n") else line


def _iter_lines(handle: IO[str], path: Path) -> Iterator[str]:
    with translated_errors(path):
        while True:
            if handle.closed:
                raise FileIOError(errno.EBADF, "Line sequence is closed", str(path))
            line = handle.readline()
            if not line:
                return
            yield _strip_terminator(line)


@contextlib.contextmanager
def read_lines(path: str | os.PathLike[str], encoding: str = "utf-8") -> Iterator[Iterator[str]]:
    """Open ``path`` and yield a lazy iterator over its lines.

    The file is closed when the ``with`` block exits, whether or not the
    iterator was exhausted.
    """
    target = Path(path)
    with translated_errors(target):
        handle = target.open("r", encoding=encoding)
    try:
        logger.debug("read_lines: opened", path=str(target))
        yield _iter_lines(handle, target)
    finally:
        handle.close()


def read_all_lines(path: str | os.PathLike[str], encoding: str = "utf-8") -> list[str]:
    """Read every line of ``path`` into a list."""
    with read_lines(path, encoding) as lines:
        return list(lines)


class LineCursor:
    """Explicit incremental reader: call read_line() until it returns None."""

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        with translated_errors(self.path):
            self._handle: IO[str] | None = self.path.open("r", encoding=encoding)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def read_line(self) -> str | None:
        """Advance one line. Returns None at end of file."""
        if self._handle is None:
            raise FileIOError(errno.EBADF, "Cursor is closed", str(self.path))
        with translated_errors(self.path):
            line = self._handle.readline()
        if not line:
            return None
        return _strip_terminator(line)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> LineCursor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_line_cursor(path: str | os.PathLike[str], encoding: str = "utf-8") -> LineCursor:
    return LineCursor(path, encoding)


def read_all_bytes(path: str | os.PathLike[str], *, max_size: int = DEFAULT_MAX_BUFFER_SIZE) -> bytes:
    """Read the whole of ``path`` into memory.

    Raises OutOfResourcesError if the file is larger than ``max_size``.
    """
    target = Path(path)
    with translated_errors(target), target.open("rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        if size > max_size:
            raise OutOfResourcesError(
                errno.EFBIG,
                f"File is {size} bytes, larger than the {max_size} byte buffer limit",
                str(target),
            )
        data = handle.read()

    logger.debug("read_all_bytes", path=str(target), size=len(data))
    return data


def read_chunked(path: str | os.PathLike[str], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the content of ``path`` in chunks of at most ``chunk_size`` bytes.

    An empty file yields no chunks.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    return _iter_chunks(Path(path), chunk_size)


def _iter_chunks(path: Path, chunk_size: int) -> Iterator[bytes]:
    with translated_errors(path), path.open("rb") as handle:
        while chunk := handle.read(chunk_size):
            yield chunk
