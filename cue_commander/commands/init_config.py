"""Initialize configuration file for cue-commander."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import click

from cue_commander.cli import Context, pass_context
from cue_commander.config import get_default_config_path
from cue_commander.utils.output import error, info, success


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("cue_commander").joinpath("config.example.toml").read_text()


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/cue-commander/config.toml)",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None) -> None:
    """Create a new configuration file with default settings.

    Creates a configuration file at the default location
    (~/.config/cue-commander/config.toml) or at a custom path
    specified with --output.

    Examples:

    \b
      # Create config at default location
      cue-commander init-config

    \b
      # Overwrite existing config
      cue-commander init-config --force
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(_load_example_config())
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1)

    success(f"Created config file: {config_path}")
    info("Edit this file to customize your settings.")
