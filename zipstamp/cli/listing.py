"""Print the entries stored in an archive (``zipstamp-cli list``)."""

from __future__ import annotations

from pathlib import Path

import click

from zipstamp.pipelines.listing import list_entries
from zipstamp.utils.display import echo_banner, echo_entry
from ._shared import reporting_errors


@click.command(
    name="list",
    help="List the entries of ARCHIVE in stored order.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.argument("archive", type=click.Path(path_type=Path))
@click.pass_obj
def cli(ctx_obj, archive: Path) -> None:  # noqa: D401 – Click callback naming rule
    """Entry-point for ``zipstamp-cli list``."""
    echo_banner(f"Entries of {archive}")
    with reporting_errors():
        entries = list_entries(archive)
    for e in entries:
        echo_entry(e.name, "dir" if e.is_dir else f"{e.size} bytes")
    click.echo(f"{len(entries)} entr{'y' if len(entries) == 1 else 'ies'}")
