"""Rename loose files and bundle them into a new archive.

Exposed as ``zipstamp-cli create``.  Every file is moved next to the first
one as ``<name>#<yyyyMMdd>#<n><ext>``, stored, then deleted.
"""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from zipstamp.pipelines.archive import create_archive
from zipstamp.utils.display import echo_banner
from ._shared import report, reporting_errors

log = structlog.get_logger()


@click.command(
    name="create",
    help="Rename FILES and bundle them into a new ZIP archive.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.argument(
    "files",
    type=click.Path(path_type=Path),
    nargs=-1,
    required=True,
)
@click.option("-n", "--name", required=True, help="Base name for entries and archive.")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Folder receiving the archive (overrides archive.output_dir).",
)
@click.pass_obj
def cli(  # noqa: D401 – Click callback naming rule
    ctx_obj,
    files: tuple[Path, ...],
    name: str,
    output_dir: Path | None,
) -> None:
    """Entry-point for ``zipstamp-cli create``."""
    cfg = ctx_obj["cfg"]
    echo_banner("Create archive")
    log.info("Creating archive %s from %d file(s)", name, len(files))

    with reporting_errors():
        result = create_archive(
            list(files),
            name,
            output_dir=output_dir or cfg.archive.output_dir,
            **cfg.pipeline_kwargs(),
        )
    report(result)
