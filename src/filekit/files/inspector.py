"""Metadata snapshots for a single path."""

from __future__ import annotations

import errno
import mimetypes
import os
import stat
from datetime import UTC, datetime
from pathlib import Path

from filekit.errors import translate_os_error
from filekit.infrastructure.logger import logger
from filekit.types import FileMetadata

# stat failures that mean "nothing is there" rather than "could not look"
_ABSENT_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


def probe_content_type(path: str | os.PathLike[str]) -> str | None:
    """Best-effort MIME type guess from the file name. None when unknown."""
    content_type, _encoding = mimetypes.guess_type(os.fspath(path), strict=False)
    return content_type


def inspect(path: str | os.PathLike[str]) -> FileMetadata:
    """Return a metadata snapshot for ``path``.

    A missing path is reported with ``exists=False``; any other stat
    failure is raised as a toolkit error.
    """
    target = Path(path)

    try:
        link_st = os.lstat(target)
    except OSError as err:
        if err.errno in _ABSENT_ERRNOS:
            logger.debug("inspect: path does not exist", path=str(target))
            return FileMetadata(path=target, exists=False)
        raise translate_os_error(err, target) from err

    is_link = stat.S_ISLNK(link_st.st_mode)
    if is_link:
        try:
            st = os.stat(target)
        except OSError as err:
            if err.errno not in _ABSENT_ERRNOS:
                raise translate_os_error(err, target) from err
            # Dangling link: only the link itself is there
            logger.debug("inspect: dangling symlink", path=str(target))
            return FileMetadata(path=target, exists=False, is_symbolic_link=True)
    else:
        st = link_st

    is_dir = stat.S_ISDIR(st.st_mode)
    metadata = FileMetadata(
        path=target,
        exists=True,
        is_directory=is_dir,
        is_regular_file=stat.S_ISREG(st.st_mode),
        is_symbolic_link=is_link,
        readable=os.access(target, os.R_OK),
        writable=os.access(target, os.W_OK),
        executable=os.access(target, os.X_OK),
        last_modified=datetime.fromtimestamp(st.st_mtime, tz=UTC),
        size_bytes=st.st_size,
        content_type=None if is_dir else probe_content_type(target),
    )
    logger.debug("inspect", path=str(target), size=metadata.size_bytes, content_type=metadata.content_type)
    return metadata
