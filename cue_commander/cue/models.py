"""Owned document model for a parsed cue sheet.

The tree is built append-only by :class:`~cue_commander.cue.builder.CueBuilder`
and holds no back-references; the "current file/track" cursor lives in the
builder only.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from cue_commander.cue.timestamp import TimeStamp

CATALOG_DIGITS = 13
MAX_TRACK_ID = 99
MAX_INDEX_ID = 99


@dataclass
class Index:
    """An index point inside a track. Index 01 marks the track start."""

    id: int
    begin_time: TimeStamp


@dataclass
class Track:
    """A logical track inside a FILE."""

    id: int
    format: str
    title: list[str] = field(default_factory=list)
    performer: list[str] = field(default_factory=list)
    songwriter: list[str] = field(default_factory=list)
    indexes: list[Index] = field(default_factory=list)
    pregap: TimeStamp | None = None
    postgap: TimeStamp | None = None
    isrc: str | None = None
    flags: list[str] | None = None

    def index_by_id(self, index_id: int) -> Index | None:
        """Return the first index with ``index_id``, if any."""
        for index in self.indexes:
            if index.id == index_id:
                return index
        return None

    @property
    def begin_time(self) -> TimeStamp | None:
        """Start of the track proper (INDEX 01)."""
        index = self.index_by_id(1)
        return index.begin_time if index is not None else None


@dataclass
class TrackInfo:
    """One physical file referenced by a FILE directive, with its tracks."""

    name: str
    format: str
    tracks: list[Track] = field(default_factory=list)

    @property
    def last_track(self) -> Track | None:
        return self.tracks[-1] if self.tracks else None

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __getitem__(self, position: int) -> Track:
        return self.tracks[position]

    def __len__(self) -> int:
        return len(self.tracks)


@dataclass
class Header:
    """Disc-level metadata (directives seen before the first TRACK)."""

    title: list[str] = field(default_factory=list)
    performer: list[str] = field(default_factory=list)
    songwriter: list[str] = field(default_factory=list)
    catalog: int | None = None
    cdtextfile: str | None = None

    @property
    def catalog_code(self) -> str | None:
        """The catalog as its 13-digit string form (leading zeros kept)."""
        if self.catalog is None:
            return None
        return f"{self.catalog:0{CATALOG_DIGITS}d}"


@dataclass
class CueSheet:
    """A whole parsed cue sheet.

    Attributes:
        header: Disc-level metadata.
        files: FILE entries in input order.
        comments: Raw text of every REM line in input order.
    """

    header: Header = field(default_factory=Header)
    files: list[TrackInfo] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    @property
    def title(self) -> list[str]:
        return self.header.title

    @property
    def performer(self) -> list[str]:
        return self.header.performer

    @property
    def songwriter(self) -> list[str]:
        return self.header.songwriter

    @property
    def catalog(self) -> int | None:
        return self.header.catalog

    @property
    def first_file(self) -> TrackInfo | None:
        """The first, usually the only, FILE of the sheet."""
        return self.files[0] if self.files else None

    @property
    def last_file(self) -> TrackInfo | None:
        return self.files[-1] if self.files else None

    @property
    def last_track(self) -> Track | None:
        """The last TRACK of the last FILE."""
        last_file = self.last_file
        return last_file.last_track if last_file is not None else None

    def tracks(self) -> Iterator[Track]:
        """Iterate over the tracks of all files in order."""
        for track_info in self.files:
            yield from track_info.tracks

    def __getitem__(self, position: int) -> TrackInfo:
        return self.files[position]
