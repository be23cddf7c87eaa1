"""Exceptions raised by the archiving pipelines.

Every error carries the offending ``target`` path and a :class:`ZipError`
kind so callers can log and react without parsing messages.  The string form
mirrors the classic ``"<target> NOT FOUND"`` layout, optionally followed by
the underlying reason.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class ZipError(str, Enum):
    """Failure categories shared by all archive operations."""

    FOLDER_IS_EMPTY = "FOLDER_IS_EMPTY"
    FILE_ALREADY_EXISTS = "FILE_ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    IO_EXCEPTION = "IO_EXCEPTION"
    IS_NOT_A_FOLDER = "IS_NOT_A_FOLDER"
    IS_NOT_A_FILE = "IS_NOT_A_FILE"
    CANT_DELETE_FOLDER = "CANT_DELETE_FOLDER"
    CANT_RENAME = "CANT_RENAME"

    @property
    def label(self) -> str:
        """Human-readable form (``NOT_FOUND`` → ``NOT FOUND``)."""
        return self.value.replace("_", " ")


class ZipperError(RuntimeError):
    """Base class for every archive failure.

    Attributes:
        target: Path (as text) of the file, folder or archive involved.
        kind:   Failure category.
        reason: Optional detail from the underlying OS / zipfile error.
    """

    kind: ZipError = ZipError.IO_EXCEPTION

    def __init__(self, target: str | Path, reason: Optional[str] = None) -> None:
        self.target = str(target)
        self.reason = reason
        msg = f"{self.target} {self.kind.label}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class NotFoundError(ZipperError):
    """An expected file or archive is missing."""

    kind = ZipError.NOT_FOUND


class NotAFileError(ZipperError):
    """A path expected to be a regular file is a directory."""

    kind = ZipError.IS_NOT_A_FILE


class NotAFolderError(ZipperError):
    """A path expected to be a directory is not one."""

    kind = ZipError.IS_NOT_A_FOLDER


class EmptyFolderError(ZipperError):
    """A folder has nothing to archive."""

    kind = ZipError.FOLDER_IS_EMPTY


class CannotDeleteFolderError(ZipperError):
    """Folder cleanup refused because a child is itself a directory."""

    kind = ZipError.CANT_DELETE_FOLDER


class RenameError(ZipperError):
    """A staging or backup move failed."""

    kind = ZipError.CANT_RENAME


class AlreadyExistsError(ZipperError):
    """An entry or file with the computed name already exists."""

    kind = ZipError.FILE_ALREADY_EXISTS


class ArchiveIOError(ZipperError):
    """Any other read/write failure while building an archive."""

    kind = ZipError.IO_EXCEPTION


__all__ = [
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
]
