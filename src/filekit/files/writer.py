"""Writing and appending to files.

Appends add no separator of their own: after ``write_lines(p, ["a", "b"])``
and ``append_text(p, "c")`` the file holds ``a\\nb\\nc``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from filekit.errors import translated_errors
from filekit.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Iterable


def write_lines(
    path: str | os.PathLike[str],
    lines: Iterable[str],
    encoding: str = "utf-8",
    *,
    line_separator: str = "\n",
) -> None:
    """Create or truncate ``path`` and write each line followed by ``line_separator``."""
    target = Path(path)
    count = 0
    with translated_errors(target), target.open("w", encoding=encoding, newline="") as handle:
        for line in lines:
            handle.write(line)
            handle.write(line_separator)
            count += 1
    logger.debug("write_lines", path=str(target), lines=count)


def _open_append(path: Path, create: bool) -> int:
    flags = os.O_WRONLY | os.O_APPEND
    if create:
        flags |= os.O_CREAT
    return os.open(path, flags, 0o666)


def append_bytes(path: str | os.PathLike[str], data: bytes, *, create: bool = False) -> None:
    """Append raw bytes to ``path``.

    The file must already exist unless ``create`` is set.
    """
    target = Path(path)
    with translated_errors(target):
        fd = _open_append(target, create)
        try:
            view = memoryview(data)
            while view:
                written = os.write(fd, view)
                view = view[written:]
        finally:
            os.close(fd)
    logger.debug("append_bytes", path=str(target), size=len(data))


def append_text(path: str | os.PathLike[str], text: str, encoding: str = "utf-8", *, create: bool = False) -> None:
    """Append ``text`` through a buffered writer.

    The buffer is flushed and the handle closed before returning, on success
    and on failure alike. The file must already exist unless ``create`` is set.
    """
    target = Path(path)
    with translated_errors(target):
        fd = _open_append(target, create)
        with open(fd, "a", encoding=encoding, newline="") as writer:
            writer.write(text)
    logger.debug("append_text", path=str(target), chars=len(text))
