"""Append files to an existing archive.

Exposed as ``zipstamp-cli append``.  New entries are numbered after the
entries already stored; the previous archive is kept as a hidden ``.bak``
file only when ``--keep-backup`` (or ``archive.keep_backup``) is set.
"""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from zipstamp.pipelines.append import append_to_archive
from zipstamp.utils.display import echo_banner
from ._shared import report, reporting_errors

log = structlog.get_logger()


@click.command(
    name="append",
    help="Rename FILES and append them to ARCHIVE.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.argument("archive", type=click.Path(path_type=Path))
@click.argument(
    "files",
    type=click.Path(path_type=Path),
    nargs=-1,
    required=True,
)
@click.option(
    "--keep-backup",
    is_flag=True,
    help="Leave the pre-append archive on disk after success.",
)
@click.pass_obj
def cli(  # noqa: D401 – Click callback naming rule
    ctx_obj,
    archive: Path,
    files: tuple[Path, ...],
    keep_backup: bool,
) -> None:
    """Entry-point for ``zipstamp-cli append``."""
    cfg = ctx_obj["cfg"]
    echo_banner("Append to archive")
    log.info("Appending %d file(s) to %s", len(files), archive)

    with reporting_errors():
        result = append_to_archive(
            list(files),
            archive,
            keep_backup=keep_backup or cfg.archive.keep_backup,
            **cfg.pipeline_kwargs(),
        )
    report(result)
