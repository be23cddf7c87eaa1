"""Delete a flat folder once its files have been archived.

Nothing here recurses.  A folder that still holds a sub-directory is refused
before any file is touched, and a failed unlink is logged and reported
through the return value rather than raised.  ``dry=True`` only logs what
would be deleted.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import CannotDeleteFolderError

log = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# _rm_file / _rm_empty_dir – internal primitives
# ─────────────────────────────────────────────────────────────────────────────

def _rm_file(path: Path, *, dry: bool) -> bool:
    """Attempt to unlink *path* and report the outcome through *log*.

    Returns:
        *True* when the file really vanished, *False* otherwise (including
        dry-run mode and any error raised by :py:meth:`Path.unlink`).
    """
    if dry:
        log.info("[dry-run] would delete %s", path)
        return False

    try:
        path.unlink()
        log.info("Deleted %s", path)
        return True
    except OSError as exc:
        log.error("Could not delete %s: %s", path, exc)
        return False


def _rm_empty_dir(path: Path, *, dry: bool) -> bool:
    """Remove the (already emptied) directory *path*."""
    if dry:
        log.info("[dry-run] would delete directory %s", path)
        return False

    try:
        path.rmdir()
        log.info("Deleted directory %s", path)
        return True
    except OSError as exc:
        log.error("Could not delete %s: %s", path, exc)
        return False

# ─────────────────────────────────────────────────────────────────────────────
# Public helper
# ─────────────────────────────────────────────────────────────────────────────

def clean_folder(folder: Path, *, dry: bool = False) -> bool:
    """Delete every file directly inside *folder*, then *folder* itself.

    Args:
        folder: Flat directory to remove.
        dry:    When *True* nothing is deleted; the planned deletions are
                logged and the function returns *False*.

    Returns:
        *True* when the folder no longer exists afterwards.  *False* when it
        was missing to begin with, a file could not be deleted (remaining
        files are left alone) or the folder itself could not be removed.

    Raises:
        CannotDeleteFolderError: If any child is a directory.  Nothing is
            deleted in that case.
    """
    folder = Path(folder)
    if not folder.is_dir():
        log.warning("Nothing to clean: %s is not a directory", folder)
        return False

    children = sorted(folder.iterdir())
    for child in children:
        if child.is_dir():
            raise CannotDeleteFolderError(child.absolute())

    for child in children:
        if not _rm_file(child, dry=dry) and not dry:
            return False

    return _rm_empty_dir(folder, dry=dry)


__all__ = ["clean_folder"]
