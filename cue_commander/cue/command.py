"""Tokenizer turning one cue sheet line into a typed directive.

Each directive is a small frozen dataclass. ``str(command)`` gives back the
directive text (quoting normalized), so ``parse_command(str(cmd)) == cmd``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from cue_commander.cue.lexer import (
    fixed_digits,
    keyword,
    quoted_or_bare,
    quoted_with_tail,
    require,
    token,
)
from cue_commander.cue.models import CATALOG_DIGITS
from cue_commander.cue.timestamp import TimeStamp
from cue_commander.exceptions import (
    InvalidIdError,
    MissingArgumentError,
    UnexpectedTokenError,
)

logger = logging.getLogger(__name__)

ID_DIGITS = 2


@dataclass(frozen=True)
class Command:
    """Base class of all directives."""

    keyword = ""


@dataclass(frozen=True)
class Empty(Command):
    """A blank line. Ignored when applied."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class Rem(Command):
    text: str
    keyword = "REM"

    def __str__(self) -> str:
        return f"REM {self.text}"


@dataclass(frozen=True)
class Title(Command):
    text: str
    keyword = "TITLE"

    def __str__(self) -> str:
        return f'TITLE "{self.text}"'


@dataclass(frozen=True)
class Performer(Command):
    text: str
    keyword = "PERFORMER"

    def __str__(self) -> str:
        return f'PERFORMER "{self.text}"'


@dataclass(frozen=True)
class Songwriter(Command):
    text: str
    keyword = "SONGWRITER"

    def __str__(self) -> str:
        return f'SONGWRITER "{self.text}"'


@dataclass(frozen=True)
class Catalog(Command):
    number: int
    keyword = "CATALOG"

    def __str__(self) -> str:
        return f"CATALOG {self.number:0{CATALOG_DIGITS}d}"


@dataclass(frozen=True)
class CdTextFile(Command):
    name: str
    keyword = "CDTEXTFILE"

    def __str__(self) -> str:
        return f'CDTEXTFILE "{self.name}"'


@dataclass(frozen=True)
class File(Command):
    name: str
    format: str
    keyword = "FILE"

    def __str__(self) -> str:
        return f'FILE "{self.name}" {self.format}'


@dataclass(frozen=True)
class Track(Command):
    id: int
    format: str
    keyword = "TRACK"

    def __str__(self) -> str:
        return f"TRACK {self.id:02d} {self.format}"


@dataclass(frozen=True)
class Index(Command):
    id: int
    timestamp: TimeStamp
    keyword = "INDEX"

    def __str__(self) -> str:
        return f"INDEX {self.id:02d} {self.timestamp}"


@dataclass(frozen=True)
class Pregap(Command):
    text: str
    keyword = "PREGAP"

    def __str__(self) -> str:
        return f"PREGAP {self.text}"


@dataclass(frozen=True)
class Postgap(Command):
    text: str
    keyword = "POSTGAP"

    def __str__(self) -> str:
        return f"POSTGAP {self.text}"


@dataclass(frozen=True)
class Isrc(Command):
    text: str
    keyword = "ISRC"

    def __str__(self) -> str:
        return f"ISRC {self.text}"


@dataclass(frozen=True)
class Flags(Command):
    flags: tuple[str, ...]
    keyword = "FLAGS"

    def __str__(self) -> str:
        return "FLAGS " + " ".join(self.flags)


EMPTY = Empty()


def _parse_catalog(content: str) -> Command:
    try:
        return Catalog(fixed_digits(CATALOG_DIGITS, content))
    except InvalidIdError as e:
        raise InvalidIdError(content, "catalog must be exactly 13 digits") from e


def _parse_file(content: str) -> Command:
    file_format, name = quoted_with_tail(content)
    if not name or not file_format:
        raise MissingArgumentError(File.keyword)
    return File(name, file_format)


def _parse_track(content: str) -> Command:
    track_format, track_id = token(content)
    return Track(fixed_digits(ID_DIGITS, track_id), require(Track.keyword, track_format))


def _parse_index(content: str) -> Command:
    timestamp, index_id = token(content)
    number = fixed_digits(ID_DIGITS, index_id)
    return Index(number, TimeStamp.parse(require(Index.keyword, timestamp)))


def _parse_flags(content: str) -> Command:
    return Flags(tuple(flag for flag in content.split(" ") if flag))


_PARSERS: dict[str, Callable[[str], Command]] = {
    "REM": Rem,
    "TITLE": lambda content: Title(quoted_or_bare(content)),
    "PERFORMER": lambda content: Performer(quoted_or_bare(content)),
    "SONGWRITER": lambda content: Songwriter(quoted_or_bare(content)),
    "CATALOG": _parse_catalog,
    "CDTEXTFILE": lambda content: CdTextFile(quoted_or_bare(content)),
    "FILE": _parse_file,
    "TRACK": _parse_track,
    "INDEX": _parse_index,
    "PREGAP": lambda content: Pregap(quoted_or_bare(content)),
    "POSTGAP": lambda content: Postgap(quoted_or_bare(content)),
    "ISRC": lambda content: Isrc(quoted_or_bare(content)),
    "FLAGS": _parse_flags,
}


def parse_command(line: str) -> Command:
    """Classify one cue sheet line.

    Args:
        line: A single line; surrounding whitespace is ignored.

    Returns:
        The matching :class:`Command`, or :data:`EMPTY` for a blank line.

    Raises:
        UnexpectedTokenError: Unknown directive keyword.
        MissingArgumentError: Keyword without its argument.
        InvalidArgumentError: Malformed id, catalog or timestamp.
        CueSyntaxError: Unmatched quotes.
    """
    line = line.strip()
    if not line:
        return EMPTY

    rest, head = token(line)
    name = head.upper()
    parser = _PARSERS.get(name)
    if parser is None:
        raise UnexpectedTokenError(head)
    if not rest:
        raise MissingArgumentError(name)

    content = keyword(name, line).lstrip(" ")
    command = parser(content)
    logger.debug("Command `%s`. Args: %s", name, content)
    return command
