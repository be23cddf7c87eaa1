"""
Folder archiver: archive every direct child file of a flat directory.

The folder is **not** traversed recursively.  Child directories are skipped
with a warning; a folder that holds nothing but directories is treated as
empty.  The archive itself is reserved inside the folder *after* the listing
has been taken, so it never ends up inside itself.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from zipstamp.utils.errors import EmptyFolderError
from zipstamp.utils.lock import exclusive
from zipstamp.utils.naming import build_pattern
from zipstamp.utils.paths import require_folder, temp_archive_path
from .archive import DEFAULT_CHUNK_SIZE, _rename_or_release, write_archive
from .rename import check_targets_free, plan_names
from .types import ArchiveResult

log = logging.getLogger(__name__)


def _direct_files(folder: Path, logger: logging.Logger) -> List[Path]:
    """Return the regular files directly under *folder*, sorted by name."""
    children = sorted(folder.iterdir())
    if not children:
        raise EmptyFolderError(folder.absolute())

    files: list[Path] = []
    for child in children:
        if child.is_dir():
            logger.warning("Skipping sub-directory %s (not recursive)", child)
            continue
        files.append(child)

    if not files:
        raise EmptyFolderError(folder.absolute(), "only sub-directories found")
    return files


@exclusive
def zip_folder(
    folder: Path,
    name: str,
    *,
    today: Optional[date] = None,
    compression: str = "deflated",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    strict_rename: bool = True,
    logger: logging.Logger | None = None,
) -> ArchiveResult:
    """Rename and archive every file directly under *folder*.

    Parameters
    ----------
    folder
        Flat source directory.  Renamed files stay inside it until stored.
    name
        Base name for the renamed files and prefix of the archive name.
    today
        Date stamp override; defaults to the current date.
    compression, chunk_size, strict_rename, logger
        See :func:`zipstamp.pipelines.archive.create_archive`.

    Returns
    -------
    ArchiveResult
        The archive lives at ``<folder>/<name><random>.zip``.

    Raises
    ------
    NotAFolderError
        *folder* is not a directory.
    EmptyFolderError
        *folder* has no file to archive.
    AlreadyExistsError
        A planned name is taken by another file of *folder*.  Nothing is
        renamed and no archive is reserved.
    """
    logger = logger or log
    folder = require_folder(Path(folder))

    files = _direct_files(folder, logger)
    logger.info("Found %d file(s) under %s", len(files), folder)

    pattern = build_pattern(folder, name, today=today)
    check_targets_free(files, plan_names(files, pattern, 1))
    destination = temp_archive_path(name, folder.expanduser().resolve())
    renamed = _rename_or_release(files, pattern, destination, strict_rename, logger)

    return write_archive(
        renamed,
        destination,
        compression=compression,
        chunk_size=chunk_size,
        logger=logger,
    )


__all__ = ["zip_folder"]
