"""Single-entry copy with explicit overwrite control."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path

from filekit.errors import already_exists, not_found, translated_errors
from filekit.infrastructure.logger import logger


def _remove_existing(dest: Path) -> None:
    if dest.is_dir() and not dest.is_symlink():
        # Only an empty directory may be replaced; rmdir fails otherwise
        dest.rmdir()
    else:
        dest.unlink()


def copy(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    *,
    overwrite: bool = False,
    preserve_attributes: bool = True,
) -> Path:
    """Copy ``source`` to ``destination`` and return the resolved destination.

    Raises NotFoundError if ``source`` is missing and AlreadyExistsError if
    ``destination`` exists while ``overwrite`` is False. A directory source
    is copied as an empty directory; its entries are not copied.
    """
    src = Path(source)
    dest = Path(destination)

    with translated_errors(src):
        try:
            src_st = src.stat()
        except FileNotFoundError:
            raise not_found(src) from None

    with translated_errors(dest):
        dest_exists = dest.exists() or dest.is_symlink()
        if dest_exists:
            if dest.exists() and os.path.samefile(src, dest):
                logger.debug("copy: source and destination are the same file", path=str(dest))
                return dest.resolve()
            if not overwrite:
                raise already_exists(dest)
            _remove_existing(dest)

        if stat.S_ISDIR(src_st.st_mode):
            dest.mkdir()
            if preserve_attributes:
                shutil.copystat(src, dest)
        elif preserve_attributes:
            shutil.copy2(src, dest)
        else:
            shutil.copyfile(src, dest)

    resolved = dest.resolve()
    logger.debug("copy", source=str(src), destination=str(resolved), size=src_st.st_size)
    return resolved
