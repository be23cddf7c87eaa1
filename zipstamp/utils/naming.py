"""Naming policy for files entering an archive.

Every file is renamed to ``<base>#<yyyyMMdd>#<seq><ext>`` before it is
compressed.  The helpers here only *compute* names; the actual moves happen in
:mod:`zipstamp.pipelines.rename`.

Notes:
    * The date is captured once per call to :func:`build_pattern`, so a batch
      that straddles midnight still shares one stamp.
    * A name whose only dot is the leading one (``.bashrc``) has no extension.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

__all__ = [
    "DATE_FORMAT",
    "SEPARATOR",
    "NamingPattern",
    "build_pattern",
    "original_extension",
    "archive_base_name",
]

log = logging.getLogger(__name__)

DATE_FORMAT = "%Y%m%d"

#: Separator between the base name, the date stamp and the sequence number.
SEPARATOR = "#"


class NamingPattern(BaseModel, frozen=True):
    """Rename scheme shared by every file of one archiving call.

    Attributes:
        folder: Directory the renamed files are moved into.  ``None`` keeps
            them relative to the current working directory.
        base_name: Leading part of every new name (usually the archive name).
        date_stamp: ``yyyyMMdd`` string captured once when the pattern was
            built.
    """

    folder: Optional[Path] = None
    base_name: str
    date_stamp: str = Field(..., pattern=r"^\d{8}$")

    @property
    def prefix(self) -> str:
        """Return ``<folder>/<base_name>#<date_stamp>#``."""
        stem = f"{self.base_name}{SEPARATOR}{self.date_stamp}{SEPARATOR}"
        if self.folder is None:
            return stem
        return str(self.folder / stem)

    def name_for(self, seq: int, extension: str = "") -> Path:
        """Return the renamed path for sequence number *seq*."""
        return Path(f"{self.prefix}{seq}{extension}")


def original_extension(name: str) -> str:
    """Return the extension of *name* including the dot, or ``""``.

    Examples:
        >>> original_extension("report.tar.gz")
        '.gz'
        >>> original_extension("README")
        ''
        >>> original_extension(".bashrc")
        ''
    """
    idx = name.rfind(".")
    return name[idx:] if idx > 0 else ""


def archive_base_name(archive: Path) -> str:
    """Return the archive file name without its last extension."""
    name = archive.name
    idx = name.rfind(".")
    return name[:idx] if idx > 0 else name


def build_pattern(
    source: Path,
    base_name: str,
    *,
    today: Optional[date] = None,
) -> NamingPattern:
    """Build the :class:`NamingPattern` for one archiving call.

    Args:
        source: Representative location.  A directory is used as the target
            folder itself; for a file its parent directory is used.
        base_name: Leading part of every new file name.
        today: Date to stamp.  Defaults to the current local date.

    Returns:
        Frozen pattern whose :pyattr:`~NamingPattern.prefix` is
        ``<folder>/<base_name>#<yyyyMMdd>#``.
    """
    stamp = (today or date.today()).strftime(DATE_FORMAT)

    if source.is_dir():
        folder: Optional[Path] = source.expanduser().resolve()
    else:
        parent = source.parent
        # Bare relative names ("a.txt") have no usable parent.
        folder = None if str(parent) in ("", ".") else parent

    pattern = NamingPattern(folder=folder, base_name=base_name, date_stamp=stamp)
    log.debug("[naming] pattern for %s → %s", source, pattern.prefix)
    return pattern
