"""CUE sheet inspection commands."""

from __future__ import annotations

import click

# Exit codes
EXIT_SUCCESS = 0
EXIT_PARSE_ERROR = 1


@click.group("cue")
def cli() -> None:
    """CUE sheet inspection commands.

    Commands for parsing, validating and displaying
    CD cue sheets.
    """
    pass


# Import submodules to register their commands with the cli group
from cue_commander.commands.cue import check as _check  # noqa: E402, F401
from cue_commander.commands.cue import show as _show  # noqa: E402, F401
