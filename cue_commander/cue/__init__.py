"""CUE sheet tokenizer, document model and parser."""

from cue_commander.cue.builder import CueBuilder
from cue_commander.cue.command import Command, parse_command
from cue_commander.cue.models import CueSheet, Header, Index, Track, TrackInfo
from cue_commander.cue.parser import (
    CueParser,
    ParsedLine,
    open_cue,
    parse_cue,
    parse_cue_lines,
    parse_cue_text,
    read_cue,
)
from cue_commander.cue.timestamp import TimeStamp

__all__ = [
    "Command",
    "CueBuilder",
    "CueParser",
    "CueSheet",
    "Header",
    "Index",
    "ParsedLine",
    "TimeStamp",
    "Track",
    "TrackInfo",
    "open_cue",
    "parse_command",
    "parse_cue",
    "parse_cue_lines",
    "parse_cue_text",
    "read_cue",
]
