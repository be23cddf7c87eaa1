"""Delete a flat folder and the files inside it.

Exposed as ``zipstamp-cli clean``.  Folders containing sub-directories are
refused.  A confirmation prompt is displayed unless ``--yes`` or
``--dry-run`` is passed.
"""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from zipstamp.utils.cleanup import clean_folder
from zipstamp.utils.display import echo_banner, echo_success
from ._shared import ask_yes_no, reporting_errors

log = structlog.get_logger()


@click.command(
    name="clean",
    help="Delete FOLDER and the files directly inside it (never recursive).",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.argument("folder", type=click.Path(path_type=Path, exists=True, file_okay=False))
@click.option("--dry-run", is_flag=True,
              help="Only show what would be deleted; do not modify the file-system.")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def cli(  # noqa: D401 – Click callback naming rule
    ctx_obj,
    folder: Path,
    dry_run: bool,
    yes: bool,
) -> None:
    """Entry-point for ``zipstamp-cli clean``."""
    echo_banner("Clean folder")

    if not yes and not dry_run:
        if not ask_yes_no(f"\nDelete {folder} and its files?"):
            raise click.Abort()

    with reporting_errors():
        removed = clean_folder(folder, dry=dry_run)

    if dry_run:
        click.echo("Dry run – nothing deleted.")
    elif removed:
        echo_success(f"{folder} deleted")
    else:
        raise click.ClickException(f"Could not delete {folder}")
