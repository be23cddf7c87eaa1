"""
Rename a batch of source files according to a :class:`NamingPattern`.

File *i* of the batch is moved to ``pattern.name_for(start + i, ext)`` where
*ext* is the original extension.  Sequence numbers therefore increase by one
per file in input order, without gaps.

Callers plan the targets with :func:`plan_names` and refuse taken names with
:func:`check_targets_free` before anything moves.  :func:`rename_files` then
applies one of two failure policies:

* ``strict=True`` (default) raises :class:`RenameError` on the first move
  that fails.  Files moved earlier in the batch stay moved.
* ``strict=False`` keeps the legacy best-effort behaviour: the failure is
  logged and the returned list still points at the intended target, which
  may not exist.  The archive writer then reports it as missing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from zipstamp.utils.errors import AlreadyExistsError, RenameError
from zipstamp.utils.naming import NamingPattern, original_extension

log = logging.getLogger(__name__)


def _same_path(a: Path, b: Path) -> bool:
    return a.absolute().resolve() == b.absolute().resolve()


def _move(src: Path, dst: Path) -> None:
    """Move *src* to *dst* without ever replacing an existing file."""
    if _same_path(src, dst):
        return
    # Path.rename silently replaces on POSIX but raises on Windows.
    if dst.exists():
        raise FileExistsError(f"{dst} already exists")
    src.rename(dst)


def plan_names(files: Iterable[Path], pattern: NamingPattern, start: int) -> List[Path]:
    """Return the target of every file in *files*, numbered from *start*."""
    return [
        pattern.name_for(seq, original_extension(src.name))
        for seq, src in enumerate(files, start=start)
    ]


def check_targets_free(files: Sequence[Path], targets: Sequence[Path]) -> None:
    """Raise :class:`AlreadyExistsError` if a target is taken on disk.

    A file whose target is its own current path counts as free.
    """
    for src, dst in zip(files, targets):
        if dst.exists() and not _same_path(src, dst):
            log.error("Target %s for %s already exists", dst, src)
            raise AlreadyExistsError(dst.absolute())


def rename_files(
    files: Iterable[Path],
    pattern: NamingPattern,
    start: int,
    *,
    strict: bool = True,
    logger: logging.Logger | None = None,
) -> List[Path]:
    """Rename *files* in place and return their new paths.

    Parameters
    ----------
    files
        Source files in the order they should be numbered.
    pattern
        Naming pattern computed once for the whole call.
    start
        Sequence number given to the first file.
    strict
        Raise :class:`RenameError` on failure instead of logging it.
    logger
        Existing logger to attach messages to.  When *None* the module-level
        logger is used.

    Returns
    -------
    list[Path]
        New paths, same length and order as *files*.
    """
    logger = logger or log
    files = list(files)
    renamed: list[Path] = []

    for src, target in zip(files, plan_names(files, pattern, start)):
        try:
            _move(src, target)
        except OSError as exc:
            if strict:
                logger.error("Could not rename %s → %s: %s", src, target, exc)
                raise RenameError(src, str(exc)) from exc
            logger.warning("Rename skipped for %s → %s: %s", src, target, exc)
        else:
            logger.info("Renamed %s → %s", src, target)
        renamed.append(target)

    return renamed


__all__ = ["rename_files", "plan_names", "check_targets_free"]
