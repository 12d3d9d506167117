"""File inspection and transfer toolkit."""

from __future__ import annotations

from filekit.errors import (
    AccessDeniedError,
    AlreadyExistsError,
    FileIOError,
    FileKitError,
    NotFoundError,
    OutOfResourcesError,
    attempt,
)
from filekit.files import (
    LineCursor,
    append_bytes,
    append_text,
    copy,
    inspect,
    open_line_cursor,
    read_all_bytes,
    read_all_lines,
    read_chunked,
    read_lines,
    walk,
    write_lines,
)
from filekit.types import DemoConfig, DemoResult, Err, FileMetadata, Ok, StepResult

__all__ = [
    # errors
    "AccessDeniedError",
    "AlreadyExistsError",
    "FileIOError",
    "FileKitError",
    "NotFoundError",
    "OutOfResourcesError",
    "attempt",
    # files
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
    # types
    "DemoConfig",
    "DemoResult",
    "Err",
    "FileMetadata",
    "Ok",
    "StepResult",
]
