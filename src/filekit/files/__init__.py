"""Filesystem procedures: inspect, walk, read, write, copy."""

from __future__ import annotations

from filekit.files.copier import copy
from filekit.files.inspector import inspect
from filekit.files.reader import (
    LineCursor,
    open_line_cursor,
    read_all_bytes,
    read_all_lines,
    read_chunked,
    read_lines,
)
from filekit.files.walker import walk
from filekit.files.writer import append_bytes, append_text, write_lines

__all__ = [
    "LineCursor",
    "append_bytes",
    "append_text",
    "copy",
    "inspect",
    "open_line_cursor",
    "read_all_bytes",
    "read_all_lines",
    "read_chunked",
    "read_lines",
    "walk",
    "write_lines",
]
