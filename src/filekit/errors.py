"""Error taxonomy for filesystem operations.

Every toolkit error is an ``OSError`` so callers that already catch the
built-in family keep working. The specific classes also inherit from the
matching built-in (``FileNotFoundError``, ``FileExistsError``,
``PermissionError``) where one exists.
"""

from __future__ import annotations

import contextlib
import errno
import os
from typing import TYPE_CHECKING, ClassVar, TypeVar

from filekit.types import Err, ErrorKind, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

T = TypeVar("T")


class FileKitError(OSError):
    kind: ClassVar[ErrorKind] = "io"


class NotFoundError(FileKitError, FileNotFoundError):
    kind: ClassVar[ErrorKind] = "not_found"


class AlreadyExistsError(FileKitError, FileExistsError):
    kind: ClassVar[ErrorKind] = "already_exists"


class AccessDeniedError(FileKitError, PermissionError):
    kind: ClassVar[ErrorKind] = "permission"


class FileIOError(FileKitError):
    kind: ClassVar[ErrorKind] = "io"


class OutOfResourcesError(FileKitError):
    kind: ClassVar[ErrorKind] = "out_of_resources"


def _make(cls: type[FileKitError], code: int, message: str, path: str | os.PathLike[str] | None) -> FileKitError:
    if path is None:
        return cls(code, message)
    return cls(code, message, os.fspath(path))


def not_found(path: str | os.PathLike[str], message: str = "No such file or directory") -> NotFoundError:
    return _make(NotFoundError, errno.ENOENT, message, path)  # type: ignore[return-value]


def already_exists(path: str | os.PathLike[str], message: str = "File exists") -> AlreadyExistsError:
    return _make(AlreadyExistsError, errno.EEXIST, message, path)  # type: ignore[return-value]


def translate_os_error(err: BaseException, path: str | os.PathLike[str] | None = None) -> FileKitError:
    """Map a built-in error onto the toolkit taxonomy.

    Encode and decode failures become a ``FileIOError`` and ``MemoryError`` an
    ``OutOfResourcesError``. Errors that are already ``FileKitError`` are
    returned unchanged.
    """
    if isinstance(err, FileKitError):
        return err

    if isinstance(err, UnicodeDecodeError):
        return _make(FileIOError, errno.EILSEQ, f"Cannot decode content: {err.reason}", path)
    if isinstance(err, UnicodeError):
        reason = getattr(err, "reason", str(err))
        return _make(FileIOError, errno.EILSEQ, f"Cannot encode content: {reason}", path)
    if isinstance(err, MemoryError):
        return _make(OutOfResourcesError, errno.ENOMEM, "Not enough memory to buffer content", path)
    if not isinstance(err, OSError):
        return _make(FileIOError, errno.EIO, str(err), path)

    target = err.filename if err.filename is not None else path
    code = err.errno if err.errno is not None else errno.EIO
    message = err.strerror or str(err)

    if isinstance(err, FileNotFoundError):
        cls: type[FileKitError] = NotFoundError
    elif isinstance(err, FileExistsError):
        cls = AlreadyExistsError
    elif isinstance(err, PermissionError):
        cls = AccessDeniedError
    elif code in (errno.ENOMEM, errno.ENOSPC, errno.EFBIG):
        cls = OutOfResourcesError
    else:
        cls = FileIOError

    translated = _make(cls, code, message, target)
    if err.filename2 is not None:
        translated.filename2 = err.filename2
    return translated


@contextlib.contextmanager
def translated_errors(path: str | os.PathLike[str] | None = None) -> Iterator[None]:
    """Re-raise built-in I/O failures inside the block as toolkit errors."""
    try:
        yield
    except FileKitError:
        raise
    except (OSError, UnicodeError, MemoryError) as err:
        raise translate_os_error(err, path) from err


def describe(err: FileKitError) -> str:
    """Single-line, human-readable description of an error."""
    message = err.strerror or str(err)
    if err.filename is not None and err.filename2 is not None:
        return f"{message}: {err.filename} -> {err.filename2}"
    if err.filename is not None:
        return f"{message}: {err.filename}"
    return message


def attempt(fn: Callable[..., T], *args: object, **kwargs: object) -> Result[T]:
    """Call ``fn`` and return its outcome as ``Ok`` or ``Err``.

    Only toolkit errors are captured; anything else propagates.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except FileKitError as err:
        return Err(kind=err.kind, message=describe(err))
