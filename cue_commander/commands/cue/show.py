"""CUE show command: display the parsed contents of cue sheets."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from cue_commander.cli import Context, pass_context
from cue_commander.commands.cue import EXIT_PARSE_ERROR, EXIT_SUCCESS, cli
from cue_commander.cue.models import CueSheet, TrackInfo
from cue_commander.cue.parser import parse_cue
from cue_commander.exceptions import CueParseError
from cue_commander.utils.output import console, create_table, error, print_path, verbose


def _join(values: list[str] | None) -> str:
    return escape(" / ".join(values)) if values else ""


def _print_header(sheet: CueSheet) -> None:
    header = sheet.header
    fields = [
        ("TITLE", _join(header.title)),
        ("PERFORMER", _join(header.performer)),
        ("SONGWRITER", _join(header.songwriter)),
        ("CATALOG", header.catalog_code or ""),
        ("CDTEXTFILE", escape(header.cdtextfile or "")),
    ]
    for name, value in fields:
        if value:
            console.print(f"[cue.keyword]{name:<10}[/cue.keyword] {value}")
    for comment in sheet.comments:
        console.print(f"[cue.keyword]{'REM':<10}[/cue.keyword] {escape(comment)}")


def _print_file(track_info: TrackInfo) -> None:
    table = create_table(
        title=f"{escape(track_info.name)} ({escape(track_info.format)})",
        title_justify="left",
    )
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Title", style="track.title")
    table.add_column("Performer", style="track.artist")
    table.add_column("Start", justify="right", no_wrap=True)
    table.add_column("Pregap", justify="right", no_wrap=True)
    table.add_column("Postgap", justify="right", no_wrap=True)
    table.add_column("ISRC")
    table.add_column("Flags")

    for track in track_info:
        begin = track.begin_time
        table.add_row(
            f"{track.id:02d}",
            _join(track.title),
            _join(track.performer),
            str(begin) if begin is not None else "",
            str(track.pregap) if track.pregap is not None else "",
            str(track.postgap) if track.postgap is not None else "",
            escape(track.isrc or ""),
            escape(" ".join(track.flags or [])),
        )
    console.print(table)


@cli.command("show")
@click.argument(
    "cue_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Stop at the first bad line, or skip bad lines (default: from config).",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Character encoding of the cue files (default: from config).",
)
@pass_context
def show(ctx: Context, cue_files: tuple[str, ...], strict: bool | None, encoding: str | None) -> None:
    """Show the header, comments and tracks of each cue sheet.

    Examples:

    \b
      # Show a single cue sheet
      cue-commander cue show album.cue

    \b
      # Ignore malformed lines
      cue-commander cue show --lenient broken.cue
    """
    config = ctx.get_config()
    if strict is None:
        strict = config.strict
    if encoding is None:
        encoding = config.encoding

    failed = 0
    for cue_file in cue_files:
        path = Path(cue_file)
        verbose(f"Parsing {path} (strict={strict}, encoding={encoding})")
        try:
            sheet = parse_cue(path, encoding=encoding, strict=strict)
        except CueParseError as e:
            error(f"{escape(str(path))}: {escape(str(e))}")
            failed += 1
            continue

        print_path(escape(str(path)))
        _print_header(sheet)
        for track_info in sheet.files:
            _print_file(track_info)

    sys.exit(EXIT_PARSE_ERROR if failed else EXIT_SUCCESS)
