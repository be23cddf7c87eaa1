"""Helpers shared by the archive sub-commands."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click
import structlog

from zipstamp.pipelines.types import ArchiveResult
from zipstamp.utils.display import echo_entry, echo_success
from zipstamp.utils.errors import ZipperError

log = structlog.get_logger()


def ask_yes_no(msg: str) -> bool:
    """Interactive *Y/N* prompt.

    Args:
        msg: Prompt displayed before the ``[Y/N]`` suffix.

    Returns:
        ``True`` for an affirmative answer; ``False`` otherwise.
    """
    while True:
        ans = click.prompt(f"{msg} [Y/N]", default="", show_default=False).strip().lower()
        if ans in {"y", "yes"}:
            return True
        if ans in {"n", "no"}:
            return False
        click.echo("Please answer Y or N.", err=True)


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn :class:`ZipperError` into a clean ``click`` failure (exit code 1)."""
    try:
        yield
    except ZipperError as exc:
        log.error("operation failed", kind=exc.kind.value, target=exc.target)
        raise click.ClickException(str(exc)) from exc


def report(result: ArchiveResult) -> None:
    """Print the outcome of a create / append / folder call."""
    for name in result.added:
        echo_entry(name)
    if result.backup is not None:
        click.echo(f"Backup kept at {result.backup}")
    echo_success(f"{result.archive} ({result.entries} entries)")
