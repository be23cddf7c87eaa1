"""Read-only helpers for looking inside an existing archive."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List

from zipstamp.utils.errors import ArchiveIOError
from zipstamp.utils.paths import require_file
from .types import ArchiveEntry

log = logging.getLogger(__name__)


def _open(archive: Path) -> zipfile.ZipFile:
    require_file(archive)
    try:
        return zipfile.ZipFile(archive)
    except (OSError, zipfile.BadZipFile) as exc:
        log.error("Could not read %s: %s", archive, exc)
        raise ArchiveIOError(archive, str(exc)) from exc


def list_entries(archive: Path) -> List[ArchiveEntry]:
    """Return the entries of *archive* in stored order.

    Raises:
        NotFoundError: If *archive* does not exist.
        NotAFileError: If *archive* is a directory.
        ArchiveIOError: If *archive* is not a readable ZIP.
    """
    with _open(Path(archive)) as zf:
        return [
            ArchiveEntry(
                name=i.filename,
                size=i.file_size,
                compressed_size=i.compress_size,
                date_time=i.date_time,
                is_dir=i.is_dir(),
            )
            for i in zf.infolist()
        ]


def count_entries(archive: Path) -> int:
    """Return how many entries *archive* holds (directories included)."""
    with _open(Path(archive)) as zf:
        return len(zf.infolist())


__all__ = ["list_entries", "count_entries"]
