"""
Logging wiring for the ``zipstamp-cli`` process.

Three sinks are attached to the root logger:

* the console, through :class:`rich.logging.RichHandler` or, for the archive
  commands run without ``-v``/``--debug``, a bare ``[LEVEL] message`` stream;
* ``zipstamp.log``, a size-rotated file with one JSON object per record;
* an optional plain-text copy of the console (``--save-logfile``).

Library modules only ever call ``logging.getLogger(__name__)``.
:func:`setup_logging` is called once by the CLI group before any command
runs.
"""

from __future__ import annotations

import atexit
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

import structlog
from rich.logging import RichHandler

__all__ = ["setup_logging", "LOG_FILENAME", "LOG_DIR_ENV"]

LOG_FILENAME = "zipstamp.log"
LOG_DIR_ENV = "ZIPSTAMP_LOG_DIR"

_PLAIN_FORMAT = "[%(levelname)s] %(message)s"
_ROTATE_BYTES = 5_000_000
_ROTATE_KEEP = 3


def _resolve_log_dir(fallback: Path | None) -> Path:
    """Pick the JSON log directory: env var, then *fallback*, then home."""
    if os.environ.get(LOG_DIR_ENV):
        target = Path(os.environ[LOG_DIR_ENV])
    elif fallback is not None:
        target = fallback
    else:
        target = Path.home() / ".zipstamp" / "logs"
    target = target.expanduser()
    target.mkdir(parents=True, exist_ok=True)
    return target


def _json_handler(log_dir: Path | None, level: int) -> logging.Handler:
    path = _resolve_log_dir(log_dir) / LOG_FILENAME
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=_ROTATE_BYTES, backupCount=_ROTATE_KEEP, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )
    return handler


def _mirror_handler(path: Path, level: int) -> logging.Handler:
    """Append console-level records to *path* as plain text."""
    path = path.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    atexit.register(handler.close)
    return handler


def _console_handler(level: int, *, plain: bool) -> logging.Handler:
    if plain:
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    else:
        handler = RichHandler(rich_tracebacks=True, markup=False)
    handler.setLevel(level)
    return handler


def setup_logging(
    *,
    verbose: bool = False,
    debug: bool = False,
    force_info: bool = False,
    extra_text_log: Optional[Path] = None,
    log_dir: Optional[Path] = None,
) -> None:
    """Attach console and file handlers and configure structlog.

    Args:
        verbose: Show INFO records on the console.
        debug: Show DEBUG records and rich tracebacks.
        force_info: Show INFO records through the plain ``[LEVEL]`` stream
            when neither *verbose* nor *debug* is set.
        extra_text_log: Plain-text copy of the console output.
        log_dir: JSON log directory used when ``$ZIPSTAMP_LOG_DIR`` is unset.
    """
    plain = force_info and not (verbose or debug)
    if debug:
        console_lvl = logging.DEBUG
    elif verbose or force_info:
        console_lvl = logging.INFO
    else:
        console_lvl = logging.WARNING

    handlers = [
        _console_handler(console_lvl, plain=plain),
        _json_handler(log_dir, logging.DEBUG if debug else logging.INFO),
    ]
    if extra_text_log is not None:
        handlers.append(_mirror_handler(extra_text_log, console_lvl))

    # force=True: CliRunner calls this once per invocation in the same process.
    logging.basicConfig(
        level=logging.DEBUG, handlers=handlers, format="%(message)s", force=True
    )

    processors: list = [] if plain else [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    processors.append(structlog.dev.ConsoleRenderer(colors=not plain))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(console_lvl),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
