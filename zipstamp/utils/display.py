"""Utility functions to print formatted CLI messages for progress updates."""

from __future__ import annotations

import click

__all__ = ["echo_banner", "echo_entry", "echo_success"]


def echo_banner(text: str) -> None:
    """Print a colourful banner announcing a processing step.

    Args:
        text: Banner text.
    """
    click.secho(f"\n=== {text} ===", fg="cyan")


def echo_entry(name: str, detail: str | None = None) -> None:
    """Echo a bullet for one archive entry, optionally with a detail column."""
    if detail:
        click.echo(f"  • {name}  ({detail})")
    else:
        click.echo(f"  • {name}")


def echo_success(text: str) -> None:
    """Echo a green success message prefixed with a tick.

    Args:
        text: Message to display.
    """
    click.secho(f"✓ {text}", fg="green")
