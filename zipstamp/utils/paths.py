"""Helpers for validating input paths and reserving archive destinations.

These utilities centralise the "does it exist / is it the right kind"
checks so every pipeline raises the same error classes for the same
situations.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from .errors import ArchiveIOError, NotAFileError, NotAFolderError, NotFoundError

ZIP_SUFFIX = ".zip"


def require_file(path: Path) -> Path:
    """Return *path* when it is an existing regular file.

    Raises:
        NotFoundError: If *path* does not exist.
        NotAFileError: If *path* is a directory.
    """
    if not path.exists():
        raise NotFoundError(path.absolute())
    if path.is_dir():
        raise NotAFileError(path.absolute())
    return path


def require_folder(path: Path) -> Path:
    """Return *path* when it is an existing directory.

    Raises:
        NotAFolderError: If *path* is missing or not a directory.
    """
    if not path.is_dir():
        raise NotAFolderError(path.absolute())
    return path


def temp_archive_path(prefix: str, directory: Optional[Path] = None) -> Path:
    """Reserve a fresh ``<directory>/<prefix><random>.zip`` and return it.

    Args:
        prefix: Leading part of the file name (the archive base name).
        directory: Folder that receives the archive.  ``None`` uses the
            system temporary directory.

    Raises:
        NotFoundError: If *directory* does not exist.
        ArchiveIOError: If the file cannot be created for any other reason.
    """
    try:
        fd, name = tempfile.mkstemp(
            prefix=prefix,
            suffix=ZIP_SUFFIX,
            dir=str(directory) if directory is not None else None,
        )
    except FileNotFoundError as exc:
        raise NotFoundError(directory or tempfile.gettempdir(), exc.strerror) from exc
    except OSError as exc:
        raise ArchiveIOError(directory or tempfile.gettempdir(), str(exc)) from exc
    os.close(fd)
    return Path(name)


__all__ = ["ZIP_SUFFIX", "require_file", "require_folder", "temp_archive_path"]
