"""Archive every file of a flat folder, optionally removing the folder.

Exposed as ``zipstamp-cli folder``.  With ``--clean`` the archive is first
moved out of the folder (next to it) and the emptied folder is deleted.
A confirmation prompt guards the deletion unless ``--yes`` is passed.
"""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from zipstamp.pipelines.folder import zip_folder
from zipstamp.utils.cleanup import clean_folder
from zipstamp.utils.display import echo_banner, echo_success
from ._shared import ask_yes_no, report, reporting_errors

log = structlog.get_logger()


@click.command(
    name="folder",
    help="Rename and archive every file directly inside FOLDER.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.argument("folder", type=click.Path(path_type=Path))
@click.option("-n", "--name", required=True, help="Base name for entries and archive.")
@click.option(
    "--clean",
    is_flag=True,
    help="Move the archive next to FOLDER and delete the emptied folder.",
)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def cli(  # noqa: D401 – Click callback naming rule
    ctx_obj,
    folder: Path,
    name: str,
    clean: bool,
    yes: bool,
) -> None:
    """Entry-point for ``zipstamp-cli folder``."""
    cfg = ctx_obj["cfg"]
    echo_banner("Archive folder")
    log.info("Archiving folder %s", folder)

    with reporting_errors():
        result = zip_folder(folder, name, **cfg.pipeline_kwargs())
    report(result)

    if not clean:
        return
    if not yes and not ask_yes_no(f"\nDelete {folder}?"):
        raise click.Abort()

    target = folder.expanduser().resolve().parent / result.archive.name
    if target.exists():
        raise click.ClickException(f"{target} already exists – not moving the archive")
    try:
        result.archive.rename(target)
    except OSError as exc:
        raise click.ClickException(f"Could not move {result.archive}: {exc}") from exc

    with reporting_errors():
        removed = clean_folder(folder)
    if not removed:
        raise click.ClickException(f"Could not delete {folder}")
    echo_success(f"Archive moved to {target}; {folder} deleted")
