"""
Typed, immutable value objects that circulate between pipeline stages.

The module depends only on the Python standard library and *pydantic* so that
it can be imported early by the CLI without pulling in the archive code.

Every class inherits from :class:`pydantic.BaseModel` with ``frozen=True``
to guarantee hash-ability and prevent accidental mutation once the objects
have been created.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel


class ArchiveEntry(BaseModel, frozen=True):
    """Metadata of one member stored in a ZIP archive."""

    name: str
    size: int
    compressed_size: int
    date_time: Tuple[int, int, int, int, int, int]
    is_dir: bool = False


class ArchiveResult(BaseModel, frozen=True):
    """Outcome of a create / append / folder call.

    Attributes
    ----------
    archive
        Path of the archive that was written.
    entries
        Total number of entries in the archive after the call.
    added
        Entry names written by this call, in write order.
    backup
        Backup of the previous archive left on disk (append only), else
        ``None``.
    """

    archive: Path
    entries: int
    added: List[str]
    backup: Optional[Path] = None


__all__ = ["ArchiveEntry", "ArchiveResult"]
