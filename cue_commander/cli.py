"""Command-line interface for cue-commander."""

from __future__ import annotations

import os
from pathlib import Path

import click
from rich.markup import escape

from cue_commander import __version__
from cue_commander.config import Config, load_config
from cue_commander.exceptions import ConfigError
from cue_commander.utils.output import (
    error,
    set_color,
    set_verbosity,
    warning,
)


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.quiet: bool = False

    def get_config(self) -> Config:
        """Return the loaded config, or defaults when run outside the group."""
        if self.config is None:
            self.config = Config()
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/cue-commander/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.version_option(version=__version__, prog_name="cue-commander")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """Parse, validate and inspect CD cue sheets.

    Parser defaults (strict mode, file encoding) come from the TOML config,
    ~/.config/cue-commander/config.toml unless --config points elsewhere.
    Command-line options of each command override them.

    Examples:

    \b
      # Tracks, times and metadata of one album
      cue-commander cue show album.cue

    \b
      # Every malformed line of a batch, errors only
      cue-commander --quiet cue check *.cue
    """
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.quiet = quiet

    set_verbosity(verbose=verbose, debug=debug)

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
        app_ctx.config = loaded_config

        if not disable_color and not loaded_config.colored_output:
            set_color(False)

        if not quiet:
            for warn in warnings:
                warning(warn)

    except (ConfigError, OSError) as e:
        error(escape(str(e)), hint="Fix the file or pass another one with --config")
        ctx.exit(1)


@cli.command("help")
@click.argument("names", nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Show the help of cue-commander or of one of its commands.

    \b
      cue-commander help cue check
    """
    target: click.Command = cli
    for name in names:
        sub = target.get_command(ctx, name) if isinstance(target, click.Group) else None
        if sub is None:
            error(f"No such command: {' '.join(names)}")
            ctx.exit(1)
        target = sub
    prog = " ".join(["cue-commander", *names])
    click.echo(target.get_help(click.Context(target, info_name=prog)))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from cue_commander.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


def main() -> None:
    """Console script entry point."""
    cli()


# Register commands on import
register_commands()
