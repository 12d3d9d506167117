"""Lazy depth-first traversal of a directory tree."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import TYPE_CHECKING

from filekit.errors import FileIOError, not_found, translated_errors
from filekit.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Iterator


def walk(
    root: str | os.PathLike[str],
    *,
    max_depth: int | None = None,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """Yield ``root`` and every path below it, depth-first pre-order.

    The root is validated immediately; directory listings are only read as
    the iterator advances. Symlinked directories are not descended into
    unless ``follow_symlinks`` is set, in which case each directory is
    entered at most once.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError("max_depth must be >= 0")

    root_path = Path(root)
    with translated_errors(root_path):
        if not root_path.exists():
            raise not_found(root_path)
        if not root_path.is_dir():
            raise FileIOError(errno.ENOTDIR, "Not a directory", str(root_path))
        root_st = root_path.stat()

    logger.debug("walk", root=str(root_path), max_depth=max_depth, follow_symlinks=follow_symlinks)
    visited = {(root_st.st_dev, root_st.st_ino)}
    return _walk(root_path, max_depth, follow_symlinks, visited)


def _list_dir(dir_path: Path) -> Iterator[os.DirEntry[str]]:
    with translated_errors(dir_path), os.scandir(dir_path) as it:
        return iter(sorted(it, key=lambda e: e.name))


def _walk(
    root: Path,
    max_depth: int | None,
    follow_symlinks: bool,
    visited: set[tuple[int, int]],
) -> Iterator[Path]:
    yield root
    if max_depth == 0:
        return

    # (directory, depth of its entries, remaining entries); deepest on top
    stack = [(root, 1, _list_dir(root))]
    while stack:
        dir_path, depth, entries = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        child = dir_path / entry.name
        yield child

        if max_depth is not None and depth >= max_depth:
            continue
        with translated_errors(child):
            if not entry.is_dir(follow_symlinks=follow_symlinks):
                continue
            if follow_symlinks:
                st = entry.stat(follow_symlinks=True)
                key = (st.st_dev, st.st_ino)
                if key in visited:
                    continue
                visited.add(key)

        stack.append((child, depth + 1, _list_dir(child)))
