"""Unit tests for the cue directive tokenizer."""

from __future__ import annotations

import pytest

from cue_commander.cue import command as cmd
from cue_commander.cue.command import EMPTY, parse_command
from cue_commander.cue.timestamp import TimeStamp
from cue_commander.exceptions import (
    CueSyntaxError,
    InvalidArgumentError,
    InvalidIdError,
    InvalidTimestampError,
    MissingArgumentError,
    UnexpectedTokenError,
)

# --- Classification ---


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("REM GENRE Pop", cmd.Rem("GENRE Pop")),
        ('REM COMMENT "ExactAudioCopy"', cmd.Rem('COMMENT "ExactAudioCopy"')),
        ('TITLE "My Dearest"', cmd.Title("My Dearest")),
        ("TITLE My Dearest", cmd.Title("My Dearest")),
        ('PERFORMER "Supercell"', cmd.Performer("Supercell")),
        ("SONGWRITER ryo", cmd.Songwriter("ryo")),
        ("CATALOG 4988009045123", cmd.Catalog(4988009045123)),
        ('CDTEXTFILE "disc.cdt"', cmd.CdTextFile("disc.cdt")),
        ('FILE "Supercell - My Dearest.flac" WAVE', cmd.File("Supercell - My Dearest.flac", "WAVE")),
        ("FILE image.bin BINARY", cmd.File("image.bin", "BINARY")),
        ("TRACK 01 AUDIO", cmd.Track(1, "AUDIO")),
        ("TRACK 12 MODE1/2352", cmd.Track(12, "MODE1/2352")),
        ("INDEX 01 03:45:00", cmd.Index(1, TimeStamp(3, 45, 0))),
        ("PREGAP 00:02:00", cmd.Pregap("00:02:00")),
        ("POSTGAP 00:01:00", cmd.Postgap("00:01:00")),
        ("ISRC JPB601104502", cmd.Isrc("JPB601104502")),
        ("FLAGS DCP PRE", cmd.Flags(("DCP", "PRE"))),
        ("FLAGS 4CH", cmd.Flags(("4CH",))),
    ],
)
def test_parse_command(line: str, expected: cmd.Command) -> None:
    assert parse_command(line) == expected


def test_keyword_is_case_insensitive() -> None:
    assert parse_command("track 01 audio") == cmd.Track(1, "audio")
    assert parse_command('Title "x"') == cmd.Title("x")


def test_payload_is_case_sensitive() -> None:
    assert parse_command("PERFORMER MiXeD").text == "MiXeD"


def test_surrounding_whitespace_ignored() -> None:
    assert parse_command("    INDEX 01 00:00:00\r\n") == cmd.Index(1, TimeStamp(0, 0, 0))


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_blank_line_is_empty(line: str) -> None:
    assert parse_command(line) is EMPTY
    assert isinstance(parse_command(line), cmd.Empty)


# --- Errors ---


def test_unknown_keyword() -> None:
    with pytest.raises(UnexpectedTokenError) as exc_info:
        parse_command("BOGUS LINE")
    assert exc_info.value.keyword == "BOGUS"


def test_unknown_keyword_without_argument() -> None:
    with pytest.raises(UnexpectedTokenError):
        parse_command("BOGUS")


@pytest.mark.parametrize("line", ["REM", "TITLE", "FLAGS ", "TRACK 01", "INDEX 01", "FILE", "FILE x.wav"])
def test_missing_argument(line: str) -> None:
    with pytest.raises(MissingArgumentError):
        parse_command(line)


@pytest.mark.parametrize("line", ["CATALOG 123", "CATALOG 12345678901234", "CATALOG 123456789012a"])
def test_invalid_catalog(line: str) -> None:
    with pytest.raises(InvalidIdError) as exc_info:
        parse_command(line)
    assert "13 digits" in exc_info.value.reason


def test_catalog_keeps_leading_zeros_on_format() -> None:
    command = parse_command("CATALOG 0000000000042")
    assert command == cmd.Catalog(42)
    assert str(command) == "CATALOG 0000000000042"


@pytest.mark.parametrize("line", ["TRACK 1 AUDIO", "TRACK 001 AUDIO", "INDEX 1 00:00:00", "INDEX xx 00:00:00"])
def test_ids_must_be_two_digits(line: str) -> None:
    with pytest.raises(InvalidIdError):
        parse_command(line)


@pytest.mark.parametrize("line", ["INDEX 01 00:60:00", "INDEX 01 00:00:75", "INDEX 01 later"])
def test_index_timestamp_is_strict(line: str) -> None:
    with pytest.raises(InvalidTimestampError):
        parse_command(line)


def test_argument_errors_share_a_base() -> None:
    for line in ("CATALOG 1", "INDEX 01 x", "TITLE"):
        with pytest.raises(InvalidArgumentError):
            parse_command(line)


def test_unmatched_quote() -> None:
    with pytest.raises(CueSyntaxError):
        parse_command('TITLE "unterminated')


# --- Formatting ---


@pytest.mark.parametrize(
    "line",
    [
        "REM COMMENT ExactAudioCopy v0.99pb5",
        'PERFORMER "Supercell"',
        'TITLE "My Dearest"',
        'SONGWRITER "ryo"',
        "CATALOG 4988009045123",
        'CDTEXTFILE "disc.cdt"',
        'FILE "Supercell - My Dearest.flac" WAVE',
        "TRACK 01 AUDIO",
        "INDEX 01 03:45:00",
        "PREGAP 00:02:00",
        "POSTGAP 00:01:00",
        "ISRC JPB601104502",
        "FLAGS DCP PRE",
    ],
)
def test_format_reproduces_directive(line: str) -> None:
    assert str(parse_command(line)) == line


def test_format_normalizes_quotes() -> None:
    assert str(parse_command("title  My Dearest")) == 'TITLE "My Dearest"'
    assert str(parse_command("FILE a.wav WAVE")) == 'FILE "a.wav" WAVE'


def test_reparse_formatted_command() -> None:
    for line in ('TITLE "a "quoted" word"', "INDEX 00 00:00:00", "FLAGS DCP  PRE"):
        command = parse_command(line)
        assert parse_command(str(command)) == command
