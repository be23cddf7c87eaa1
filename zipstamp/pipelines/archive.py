"""
Archive writer: build a fresh ZIP from a list of files.

:func:`write_archive` is the low-level worker; it streams each file into the
destination under its current name and deletes the file once its entry is
complete.  :func:`create_archive` and :func:`create_archive_from_file` add the
rename step in front and pick a temp-style destination.

The destination is never cleaned up on failure.  It is a freshly reserved
file, so a half-written archive there is harmless to the caller.
"""

from __future__ import annotations

import logging
import shutil
import struct
import zipfile
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Sequence

from zipstamp.utils.errors import ArchiveIOError, NotFoundError, RenameError
from zipstamp.utils.lock import exclusive
from zipstamp.utils.naming import NamingPattern, build_pattern
from zipstamp.utils.paths import require_file, temp_archive_path
from .rename import check_targets_free, plan_names, rename_files
from .types import ArchiveResult

log = logging.getLogger(__name__)

#: Bytes copied per read while streaming into or out of an archive.
DEFAULT_CHUNK_SIZE = 64 * 1024

COMPRESSION = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}

# Failures that all map onto ArchiveIOError.
ZIP_ERRORS = (OSError, zipfile.BadZipFile, zipfile.LargeZipFile, NotImplementedError)


def compression_type(name: str) -> int:
    """Translate a configuration name (``deflated`` / ``stored``) to zipfile."""
    try:
        return COMPRESSION[name]
    except KeyError:
        raise ValueError(
            f"Unknown compression {name!r}; expected one of {sorted(COMPRESSION)}"
        ) from None


# ---------------------------------------------------------------------------
# streaming primitives (shared with the appender)
# ---------------------------------------------------------------------------


def stream_file(
    zf: zipfile.ZipFile,
    src: Path,
    arcname: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Copy *src* into *zf* as *arcname* without loading it whole."""
    info = zipfile.ZipInfo.from_file(src, arcname, strict_timestamps=False)
    info.compress_type = zf.compression
    with src.open("rb") as fin, zf.open(info, "w") as fout:
        shutil.copyfileobj(fin, fout, chunk_size)


def _without_zip64(extra: bytes) -> bytes:
    """Drop ZIP64 extra blocks; zipfile re-adds them when needed."""
    out = bytearray()
    pos = 0
    while pos + 4 <= len(extra):
        tag, size = struct.unpack("<HH", extra[pos:pos + 4])
        if tag != 0x0001:
            out += extra[pos:pos + 4 + size]
        pos += 4 + size
    return bytes(out)


def _clone_info(info: zipfile.ZipInfo) -> zipfile.ZipInfo:
    """Return a detached copy of *info* suitable for writing elsewhere."""
    clone = zipfile.ZipInfo(info.filename, info.date_time)
    clone.compress_type = info.compress_type
    clone.comment = info.comment
    clone.extra = _without_zip64(info.extra)
    clone.create_system = info.create_system
    clone.external_attr = info.external_attr
    clone.internal_attr = info.internal_attr
    clone.file_size = info.file_size
    return clone


def copy_entry(
    src: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    dst: zipfile.ZipFile,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Stream member *info* of *src* into *dst*, keeping its metadata."""
    clone = _clone_info(info)
    if info.is_dir():
        dst.writestr(clone, b"")
        return
    with src.open(info, "r") as fin, dst.open(clone, "w") as fout:
        shutil.copyfileobj(fin, fout, chunk_size)


def _rename_or_release(
    files: Sequence[Path],
    pattern: NamingPattern,
    destination: Path,
    strict: bool,
    logger: logging.Logger | None,
) -> list[Path]:
    """Run the rename step; drop the still-empty *destination* if it fails."""
    try:
        return rename_files(files, pattern, 1, strict=strict, logger=logger)
    except RenameError:
        destination.unlink(missing_ok=True)
        raise


# ---------------------------------------------------------------------------
# public entry points
# ---------------------------------------------------------------------------


@exclusive
def write_archive(
    files: Iterable[Path],
    destination: Path,
    *,
    compression: str = "deflated",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    logger: logging.Logger | None = None,
) -> ArchiveResult:
    """Create *destination* with one entry per file, then delete the files.

    Parameters
    ----------
    files
        Files to store, in entry order.  Each entry is named after the file.
    destination
        Archive path.  An existing file is overwritten.
    compression
        ``"deflated"`` or ``"stored"``.
    chunk_size
        Streaming buffer size in bytes.
    logger
        Existing logger to attach messages to.

    Raises
    ------
    NotFoundError
        A file vanished before it could be read.
    ArchiveIOError
        Any other read/write failure.
    """
    logger = logger or log
    destination = Path(destination)
    added: list[str] = []

    try:
        with zipfile.ZipFile(destination, "w", compression=compression_type(compression)) as zf:
            for src in files:
                src = Path(src)
                logger.info("Adding %s to %s", src, destination)
                stream_file(zf, src, src.name, chunk_size=chunk_size)
                added.append(src.name)
                src.unlink()
    except FileNotFoundError as exc:
        logger.error("Missing input while writing %s: %s", destination, exc)
        raise NotFoundError(exc.filename or destination, exc.strerror) from exc
    except ZIP_ERRORS as exc:
        logger.error("Failed to write %s: %s", destination, exc)
        raise ArchiveIOError(destination, str(exc)) from exc

    logger.info("Wrote %d entr%s to %s", len(added), "y" if len(added) == 1 else "ies", destination)
    return ArchiveResult(archive=destination, entries=len(added), added=added)


@exclusive
def create_archive(
    files: Sequence[Path],
    name: str,
    *,
    output_dir: Optional[Path] = None,
    today: Optional[date] = None,
    compression: str = "deflated",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    strict_rename: bool = True,
    logger: logging.Logger | None = None,
) -> ArchiveResult:
    """Rename *files* to ``<name>#<date>#<n><ext>`` and archive them.

    The files are moved next to the first one before compression and are
    deleted once stored.  The archive lands at
    ``<output_dir>/<name><random>.zip`` (system temp dir by default).

    Raises:
        ValueError: If *files* is empty.
        NotFoundError: If a file is missing.
        NotAFileError: If a file is a directory.
        AlreadyExistsError: If a planned name is already taken on disk.
        RenameError: If a rename fails and *strict_rename* is set.
        ArchiveIOError: On any write failure.
    """
    files = [Path(f) for f in files]
    if not files:
        raise ValueError("create_archive() needs at least one file")
    for f in files:
        require_file(f)

    pattern = build_pattern(files[0], name, today=today)
    check_targets_free(files, plan_names(files, pattern, 1))
    destination = temp_archive_path(name, output_dir)
    renamed = _rename_or_release(files, pattern, destination, strict_rename, logger)
    return write_archive(
        renamed,
        destination,
        compression=compression,
        chunk_size=chunk_size,
        logger=logger,
    )


def create_archive_from_file(file: Path, name: str, **kwargs) -> ArchiveResult:
    """Single-file form of :func:`create_archive`."""
    return create_archive([Path(file)], name, **kwargs)


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "COMPRESSION",
    "compression_type",
    "stream_file",
    "copy_entry",
    "write_archive",
    "create_archive",
    "create_archive_from_file",
]
