"""Process-wide critical section for archive-mutating operations.

Appending reads the entry count, moves the archive aside and rewrites it.
None of that is atomic, so create, append and folder-archive all run under
one re-entrant lock.  The lock is re-entrant because the public helpers
nest (``create_archive`` → ``write_archive``).
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Callable, TypeVar

__all__ = ["ARCHIVE_LOCK", "exclusive"]

log = logging.getLogger(__name__)

ARCHIVE_LOCK = threading.RLock()

F = TypeVar("F", bound=Callable)


def exclusive(func: F) -> F:
    """Run *func* while holding :data:`ARCHIVE_LOCK`."""

    @functools.wraps(func)
    def _wrapper(*args, **kwargs):
        with ARCHIVE_LOCK:
            log.debug("[lock] acquired for %s", func.__name__)
            return func(*args, **kwargs)

    return _wrapper  # type: ignore[return-value]
