"""
Archive appender: merge new files into an existing ZIP.

ZIP archives cannot be grown in place safely by every tool, so the archive
is rewritten instead:

1. the entry count seeds the sequence number (``count + 1``);
2. the archive is moved aside to a backup in the same directory;
3. the incoming files are renamed with the archive's own base name;
4. a fresh archive is written at the original path – new entries first,
   then every entry of the backup with its metadata intact.

If the backup move fails nothing on disk has changed.  If a rename fails
nothing has been written yet, so the backup is moved back into place.  The
backup is removed after a successful rewrite unless ``keep_backup`` is set;
when the rewrite itself fails it is left on disk and its path is logged,
because the archive at the original path may then be missing or truncated.
"""

from __future__ import annotations

import logging
import os
import tempfile
import zipfile
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from zipstamp.utils.errors import (
    AlreadyExistsError,
    ArchiveIOError,
    NotFoundError,
    RenameError,
    ZipperError,
)
from zipstamp.utils.lock import exclusive
from zipstamp.utils.naming import archive_base_name, build_pattern
from zipstamp.utils.paths import require_file
from .archive import (
    DEFAULT_CHUNK_SIZE,
    ZIP_ERRORS,
    compression_type,
    copy_entry,
    stream_file,
)
from .rename import check_targets_free, plan_names, rename_files
from .types import ArchiveResult

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 0 – backup handling
# ---------------------------------------------------------------------------


def _move_to_backup(archive: Path, logger: logging.Logger) -> Path:
    """Move *archive* to a unique hidden ``.bak`` file next to it."""
    try:
        fd, name = tempfile.mkstemp(
            prefix=f".{archive.name}.", suffix=".bak", dir=str(archive.parent)
        )
        os.close(fd)
        backup = Path(name)
        backup.unlink()
        archive.rename(backup)
    except OSError as exc:
        logger.error("Could not move %s aside: %s", archive, exc)
        raise RenameError(archive, str(exc)) from exc
    logger.debug("Backed up %s → %s", archive, backup)
    return backup


def _restore_backup(backup: Path, archive: Path, logger: logging.Logger) -> None:
    """Move *backup* back to *archive*; used before anything was written."""
    try:
        backup.rename(archive)
    except OSError as exc:
        logger.error("Could not restore %s from %s: %s", archive, backup, exc)
        return
    logger.debug("Restored %s from %s", archive, backup)


def _discard_backup(backup: Path, logger: logging.Logger) -> Optional[Path]:
    """Delete *backup*; return it when it could not be removed."""
    try:
        backup.unlink()
    except OSError as exc:
        logger.warning("Could not delete backup %s: %s", backup, exc)
        return backup
    logger.debug("Deleted backup %s", backup)
    return None


# ---------------------------------------------------------------------------
# 1 – rewrite worker
# ---------------------------------------------------------------------------


def _rewrite(
    archive: Path,
    backup: Path,
    new_files: List[Path],
    *,
    compression: str,
    chunk_size: int,
    logger: logging.Logger,
) -> tuple[list[str], int]:
    """Write new files then every backup entry into a fresh *archive*."""
    added: list[str] = []
    try:
        with zipfile.ZipFile(backup) as zin, zipfile.ZipFile(
            archive, "w", compression=compression_type(compression)
        ) as zout:
            for src in new_files:
                logger.info("Adding %s to %s", src, archive)
                stream_file(zout, src, src.name, chunk_size=chunk_size)
                added.append(src.name)
                src.unlink()

            for info in zin.infolist():
                logger.debug("Carrying over %s", info.filename)
                copy_entry(zin, info, zout, chunk_size=chunk_size)

            total = len(zout.infolist())
    except FileNotFoundError as exc:
        raise NotFoundError(exc.filename or archive, exc.strerror) from exc
    except ZIP_ERRORS as exc:
        raise ArchiveIOError(archive, str(exc)) from exc
    return added, total


# ---------------------------------------------------------------------------
# 2 – public entry points
# ---------------------------------------------------------------------------


@exclusive
def append_to_archive(
    files: Sequence[Path],
    archive: Path,
    *,
    today: Optional[date] = None,
    compression: str = "deflated",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    strict_rename: bool = True,
    keep_backup: bool = False,
    logger: logging.Logger | None = None,
) -> ArchiveResult:
    """Add *files* to *archive*, numbering them after the existing entries.

    Parameters
    ----------
    files
        New files.  They are moved next to the archive, renamed to
        ``<archive-stem>#<date>#<n><ext>`` and deleted once stored.
    archive
        Existing ZIP archive, rewritten in place.
    today
        Date stamp override; defaults to the current date.
    compression
        ``"deflated"`` or ``"stored"`` for the new entries.  Carried-over
        entries keep their own compression.
    chunk_size
        Streaming buffer size in bytes.
    strict_rename
        Raise :class:`RenameError` when a file cannot be renamed.
    keep_backup
        Leave the pre-append archive on disk after success.
    logger
        Existing logger to attach messages to.

    Returns
    -------
    ArchiveResult
        ``backup`` is set only when the backup is still on disk.

    Raises
    ------
    NotFoundError
        *archive* or one of *files* is missing.
    NotAFileError
        *archive* or one of *files* is a directory.
    AlreadyExistsError
        A computed entry name is already used inside *archive*, or the
        renamed file would land on an existing file next to it.
    RenameError
        The backup move (or, in strict mode, a file rename) failed.
    ArchiveIOError
        Any other read/write failure.
    """
    logger = logger or log
    archive = Path(archive)
    files = [Path(f) for f in files]

    require_file(archive)
    if not files:
        raise ValueError("append_to_archive() needs at least one file")
    for f in files:
        require_file(f)

    # ------------------------ plan the new names --------------------------
    try:
        with zipfile.ZipFile(archive) as zf:
            existing = zf.namelist()
    except (OSError, zipfile.BadZipFile) as exc:
        logger.error("Could not read %s: %s", archive, exc)
        raise ArchiveIOError(archive, str(exc)) from exc

    seq = len(existing) + 1
    pattern = build_pattern(archive, archive_base_name(archive), today=today)
    targets = plan_names(files, pattern, seq)
    clash = sorted({t.name for t in targets} & set(existing))
    if clash:
        raise AlreadyExistsError(archive, f"entry {clash[0]} is already stored")
    check_targets_free(files, targets)

    logger.info("Appending %d file(s) to %s starting at #%d", len(files), archive, seq)

    # ------------------------ backup + rename + rewrite ------------------
    backup = _move_to_backup(archive, logger)
    try:
        renamed = rename_files(files, pattern, seq, strict=strict_rename, logger=logger)
    except RenameError:
        _restore_backup(backup, archive, logger)
        raise

    try:
        added, total = _rewrite(
            archive,
            backup,
            renamed,
            compression=compression,
            chunk_size=chunk_size,
            logger=logger,
        )
    except ZipperError as exc:
        logger.error(
            "Append to %s failed (%s); previous archive kept at %s", archive, exc, backup
        )
        raise

    kept: Optional[Path] = backup if keep_backup else _discard_backup(backup, logger)
    return ArchiveResult(archive=archive, entries=total, added=added, backup=kept)


def append_file_to_archive(file: Path, archive: Path, **kwargs) -> ArchiveResult:
    """Single-file form of :func:`append_to_archive`."""
    return append_to_archive([Path(file)], archive, **kwargs)


__all__ = ["append_to_archive", "append_file_to_archive"]
