"""CUE check command: report every malformed line of cue sheets."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from cue_commander.cli import Context, pass_context
from cue_commander.commands.cue import EXIT_PARSE_ERROR, EXIT_SUCCESS, cli
from cue_commander.cue.parser import CueParser, open_cue
from cue_commander.exceptions import CueIoError, CueLineError
from cue_commander.utils.output import console, error, success, verbose


def check_file(path: Path, encoding: str) -> list[CueLineError]:
    """Parse ``path`` line by line and collect the error of every bad line.

    Raises:
        CueIoError: If the file cannot be opened or decoded.
    """
    errors: list[CueLineError] = []
    with open_cue(path, encoding) as f:
        for result in CueParser(f):
            if isinstance(result, CueLineError):
                errors.append(result)
            else:
                verbose(f"  {result.number}: {escape(str(result.command))}")
    return errors


@cli.command("check")
@click.argument(
    "cue_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Character encoding of the cue files (default: from config).",
)
@pass_context
def check(ctx: Context, cue_files: tuple[str, ...], encoding: str | None) -> None:
    """Validate cue sheets and list every malformed line.

    Unlike 'show', checking does not stop at the first error: each bad
    line is reported with its line number.

    Exits with status 1 if any file has errors. The global --quiet
    flag hides the OK line of clean files.
    """
    if encoding is None:
        encoding = ctx.get_config().encoding

    bad_files = 0
    for cue_file in cue_files:
        path = Path(cue_file)
        try:
            errors = check_file(path, encoding)
        except CueIoError as e:
            error(escape(str(e)))
            bad_files += 1
            continue

        if not errors:
            if not ctx.quiet:
                success(f"{escape(str(path))}: OK")
            continue

        bad_files += 1
        for line_error in errors:
            console.print(
                f"[path]{escape(str(path))}[/path]:[cue.line]{line_error.line}[/cue.line]: "
                f"{escape(str(line_error.error))}"
            )

    if bad_files:
        error(f"{bad_files} of {len(cue_files)} cue sheet(s) have errors")
    sys.exit(EXIT_PARSE_ERROR if bad_files else EXIT_SUCCESS)
