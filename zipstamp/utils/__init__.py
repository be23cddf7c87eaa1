"""
Public façade for the *utils* package.

Anything imported here becomes part of the *stable* public API.
Internal helpers live in their own modules and are **not** re-exported.
"""

from __future__ import annotations

# ─── errors ──────────────────────────────────────────────────────────────
from .errors import (
    ZipError,
    ZipperError,
    NotFoundError,
    NotAFileError,
    NotAFolderError,
    EmptyFolderError,
    CannotDeleteFolderError,
    RenameError,
    AlreadyExistsError,
    ArchiveIOError,
)

# ─── naming ──────────────────────────────────────────────────────────────
from .naming import build_pattern, original_extension

# ─── cleanup ─────────────────────────────────────────────────────────────
from .cleanup import clean_folder

# ─── concurrency ─────────────────────────────────────────────────────────
from .lock import ARCHIVE_LOCK, exclusive

# ------------------------------------------------------------------------
__all__: list[str] = [
    "ZipError",
    "ZipperError",
    "NotFoundError",
    "NotAFileError",
    "NotAFolderError",
    "EmptyFolderError",
    "CannotDeleteFolderError",
    "RenameError",
    "AlreadyExistsError",
    "ArchiveIOError",
    "build_pattern",
    "original_extension",
    "clean_folder",
    "ARCHIVE_LOCK",
    "exclusive",
]
