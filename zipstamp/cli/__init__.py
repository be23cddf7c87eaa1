"""Click entry point for ``zipstamp-cli``.

The group callback configures logging, loads the YAML settings and stores
them in ``ctx.obj``.  Sub-commands are imported only when invoked, so
``zipstamp-cli --help`` stays fast and a broken command module cannot take
the others down.
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Dict

import click

from zipstamp import __version__
from zipstamp.config import load_config
from zipstamp.utils.logging import setup_logging

#: ``command name -> "module:attribute"`` resolved on first use.
COMMANDS: Dict[str, str] = {
    "create": "zipstamp.cli.create:cli",
    "append": "zipstamp.cli.append:cli",
    "folder": "zipstamp.cli.folder:cli",
    "clean": "zipstamp.cli.clean:cli",
    "list": "zipstamp.cli.listing:cli",
}

# Commands that print the plain "[INFO] ..." progress stream by default.
_PROGRESS_COMMANDS = {"create", "append", "folder", "clean"}


class LazyGroup(click.Group):
    """Group whose sub-commands are imported from a name table on demand."""

    def __init__(self, *args, lazy: Dict[str, str] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._lazy: Dict[str, str] = dict(lazy or {})

    def list_commands(self, ctx):  # noqa: D401 - Click signature
        return sorted(set(super().list_commands(ctx)) | set(self._lazy))

    def get_command(self, ctx, cmd_name):  # noqa: D401 - Click signature
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None or cmd_name not in self._lazy:
            return cmd
        module_name, attr = self._lazy[cmd_name].split(":", 1)
        cmd = getattr(importlib.import_module(module_name), attr)
        self.add_command(cmd, name=cmd_name)
        return cmd


_CTX: Dict[str, Any] = dict(
    help_option_names=["-h", "--help"],
    show_default=True,
    max_content_width=120,
)


@click.group(
    cls=LazyGroup,
    lazy=COMMANDS,
    context_settings=_CTX,
    help="""\b
zipstamp-cli – rename files to <name>#<yyyyMMdd>#<n> and bundle them into ZIP archives.
""",
)
@click.version_option(__version__)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML configuration (default: $ZIPSTAMP_CONFIG, ./zipstamp.yaml, packaged).",
)
@click.option("-v", "--verbose", is_flag=True, help="INFO-level console output.")
@click.option("--debug", is_flag=True, help="DEBUG console output.")
@click.option(
    "--save-logfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Mirror console output into this plain-text file.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    verbose: bool,
    debug: bool,
    save_logfile: Path | None,
) -> None:
    """Configure logging and settings shared by every sub-command.

    Raises:
        click.ClickException: When the configuration cannot be loaded.
    """
    setup_logging(
        verbose=verbose,
        debug=debug,
        force_info=ctx.invoked_subcommand in _PROGRESS_COMMANDS,
        extra_text_log=save_logfile,
    )

    try:
        cfg = load_config(config_path=config_path)
    except (FileNotFoundError, RuntimeError) as exc:
        raise click.ClickException(str(exc)) from exc

    ctx.obj = {"cfg": cfg, "verbose": verbose, "debug": debug}


cli = main
__all__: list[str] = ["main", "COMMANDS"]
