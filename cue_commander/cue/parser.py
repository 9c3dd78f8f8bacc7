"""CUE sheet parser.

Reads cue sheet lines, tokenizes each one into a directive and applies it
to a :class:`CueSheet` through :class:`CueBuilder`. Errors are reported as
:class:`CueLineError` carrying the 1-based line number.

Two policies are available on top of the same line processing:

* strict (fail-fast): the first bad line raises.
* lenient: bad lines are skipped; only read failures raise.

:class:`CueParser` exposes the line-by-line interface for callers that want
to inspect each error and keep going.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from cue_commander.cue.builder import CueBuilder
from cue_commander.cue.command import Command, Empty, parse_command
from cue_commander.cue.models import CueSheet
from cue_commander.exceptions import CueIoError, CueLineError, CueParseError

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Remove a leading UTF-8 byte-order mark."""
    return text[1:] if text.startswith(UTF8_BOM) else text


@dataclass(frozen=True)
class ParsedLine:
    """A successfully applied line."""

    number: int
    command: Command


class CueParser:
    """Incremental cue sheet parser.

    Usage::

        parser = CueParser(lines)
        while True:
            try:
                parsed = parser.parse_next_line()
            except CueLineError as e:
                report(e)
                continue
            if parsed is None:
                break
        sheet = parser.sheet

    A failing line is consumed before its error is raised, so the next call
    continues with the following line.
    """

    def __init__(self, lines: Iterable[str], sheet: CueSheet | None = None) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._builder = CueBuilder(sheet)
        self._line_number = 0

    @property
    def sheet(self) -> CueSheet:
        """The document built so far."""
        return self._builder.sheet

    @property
    def line_number(self) -> int:
        """Number of the last line read (0 before the first)."""
        return self._line_number

    def _read_line(self) -> str | None:
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise CueIoError(str(e), self._line_number + 1) from e
        self._line_number += 1
        if self._line_number == 1:
            line = strip_bom(line)
        return line

    def parse_next_line(self) -> ParsedLine | None:
        """Parse and apply the next non-blank line.

        Returns:
            The applied line, or None once the input is exhausted.

        Raises:
            CueLineError: The line could not be tokenized or applied.
            CueIoError: Reading the next line failed.
        """
        while True:
            line = self._read_line()
            if line is None:
                return None
            try:
                command = parse_command(line)
                if isinstance(command, Empty):
                    continue
                self._builder.apply(command)
            except CueParseError as e:
                raise CueLineError(e, self._line_number) from e
            return ParsedLine(self._line_number, command)

    def parse_to_end(self) -> CueSheet:
        """Apply all remaining lines, stopping at the first error."""
        while self.parse_next_line() is not None:
            pass
        return self.sheet

    def parse_lenient(self) -> CueSheet:
        """Apply all remaining lines, skipping the ones that fail."""
        while True:
            try:
                if self.parse_next_line() is None:
                    return self.sheet
            except CueLineError as e:
                logger.debug("Skipping bad line: %s", e)

    def __iter__(self) -> Iterator[ParsedLine | CueLineError]:
        """Yield each applied line, or the error of each failing line."""
        while True:
            try:
                parsed = self.parse_next_line()
            except CueLineError as e:
                yield e
                continue
            if parsed is None:
                return
            yield parsed


def parse_cue_lines(lines: Iterable[str], *, strict: bool = True) -> CueSheet:
    """Parse cue sheet lines.

    Args:
        lines: Lines of text, with or without line terminators.
        strict: Stop at the first bad line when True, skip bad lines otherwise.

    Raises:
        CueLineError: First bad line (strict mode only).
        CueIoError: Reading the lines failed.
    """
    parser = CueParser(lines)
    return parser.parse_to_end() if strict else parser.parse_lenient()


def parse_cue_text(text: str, *, strict: bool = True) -> CueSheet:
    """Parse a whole cue sheet held in a string.

    Lines end with LF or CRLF. Other Unicode line separators are kept as
    ordinary text.
    """
    return parse_cue_lines(strip_bom(text).split("\n"), strict=strict)


def read_cue(stream: TextIO, *, strict: bool = True) -> CueSheet:
    """Parse a cue sheet from an open text stream, line by line."""
    return parse_cue_lines(stream, strict=strict)


def parse_cue(path: str | Path, encoding: str = "utf-8", *, strict: bool = True) -> CueSheet:
    """Parse a .cue file and return a CueSheet.

    Args:
        path: Path to the .cue file.
        encoding: Character encoding; a UTF-8 BOM is always removed.
        strict: Stop at the first bad line when True, skip bad lines otherwise.

    Returns:
        The parsed cue sheet.

    Raises:
        CueIoError: If the file cannot be opened or decoded.
        CueLineError: First bad line (strict mode only).
    """
    with open_cue(path, encoding) as f:
        return read_cue(f, strict=strict)


@contextmanager
def open_cue(path: str | Path, encoding: str = "utf-8") -> Iterator[TextIO]:
    """Open a .cue file for line-by-line reading.

    Decoding errors surface later, while the lines are read, and are
    reported by :class:`CueParser` with their line number.

    Raises:
        CueIoError: If the file cannot be opened or the encoding is unknown.
    """
    path = Path(path)
    try:
        f = open(path, encoding=encoding, newline=None)
    except (OSError, LookupError) as e:
        raise CueIoError(f"Cannot read {path}: {e}") from e
    with f:
        yield f
