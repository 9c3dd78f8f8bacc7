"""Stateful builder folding directives into a :class:`CueSheet`.

The builder tracks which section of the sheet it is in through an explicit
cursor (current FILE, current TRACK):

* global  -- no FILE seen yet
* in file -- FILE seen, no TRACK in it yet
* in track -- a TRACK of the current FILE is open

TITLE, PERFORMER and SONGWRITER go to the open track when there is one and
to the header otherwise. A new FILE closes the open track.
"""

from __future__ import annotations

import logging

from cue_commander.cue import command as cmd
from cue_commander.cue.models import (
    MAX_INDEX_ID,
    MAX_TRACK_ID,
    CueSheet,
    Index,
    Track,
    TrackInfo,
)
from cue_commander.cue.timestamp import TimeStamp
from cue_commander.exceptions import CueSyntaxError, InvalidIdError

logger = logging.getLogger(__name__)


class CueBuilder:
    """Applies parsed commands, in order, to a cue sheet.

    Each :meth:`apply` either mutates the sheet or raises without touching
    it; applied directives are never undone.
    """

    def __init__(self, sheet: CueSheet | None = None) -> None:
        self.sheet = sheet if sheet is not None else CueSheet()
        # Resume after the last file/track of a pre-populated sheet.
        self.current_file: TrackInfo | None = self.sheet.last_file
        self.current_track: Track | None = self.sheet.last_track

    def apply(self, command: cmd.Command) -> None:
        """Apply one directive.

        Raises:
            CueSyntaxError: Ordering or cardinality rule violated.
            InvalidIdError: TRACK/INDEX id out of range.
            InvalidTimestampError: Malformed PREGAP/POSTGAP time.
        """
        if isinstance(command, cmd.Empty):
            return
        method = getattr(self, "_apply_%s" % command.keyword.lower())
        method(command)

    def _require_file(self, command: cmd.Command) -> TrackInfo:
        if self.current_file is None:
            raise CueSyntaxError(str(command), "no current file")
        return self.current_file

    def _require_track(self, command: cmd.Command) -> Track:
        if self.current_track is None:
            raise CueSyntaxError(str(command), "no current track")
        return self.current_track

    def _apply_rem(self, command: cmd.Rem) -> None:
        self.sheet.comments.append(command.text)

    def _apply_title(self, command: cmd.Title) -> None:
        target = self.current_track if self.current_track is not None else self.sheet.header
        target.title.append(command.text)

    def _apply_performer(self, command: cmd.Performer) -> None:
        target = self.current_track if self.current_track is not None else self.sheet.header
        target.performer.append(command.text)

    def _apply_songwriter(self, command: cmd.Songwriter) -> None:
        target = self.current_track if self.current_track is not None else self.sheet.header
        target.songwriter.append(command.text)

    def _apply_catalog(self, command: cmd.Catalog) -> None:
        if self.sheet.header.catalog is not None:
            raise CueSyntaxError(str(command), "multiple CATALOG commands are not allowed")
        self.sheet.header.catalog = command.number

    def _apply_cdtextfile(self, command: cmd.CdTextFile) -> None:
        if self.sheet.header.cdtextfile is not None:
            logger.debug("CDTEXTFILE replaced: %s", self.sheet.header.cdtextfile)
        self.sheet.header.cdtextfile = command.name

    def _apply_file(self, command: cmd.File) -> None:
        track_info = TrackInfo(command.name, command.format)
        self.sheet.files.append(track_info)
        self.current_file = track_info
        self.current_track = None

    def _apply_track(self, command: cmd.Track) -> None:
        track_info = self._require_file(command)
        if not 1 <= command.id <= MAX_TRACK_ID:
            raise InvalidIdError(command.id, f"track id must be between 1 and {MAX_TRACK_ID}")
        track = Track(command.id, command.format)
        track_info.tracks.append(track)
        self.current_track = track

    def _apply_index(self, command: cmd.Index) -> None:
        track = self._require_track(command)
        if track.postgap is not None:
            raise CueSyntaxError(str(command), "INDEX must precede POSTGAP")
        if not 0 <= command.id <= MAX_INDEX_ID:
            raise InvalidIdError(command.id, f"index id must be between 0 and {MAX_INDEX_ID}")
        track.indexes.append(Index(command.id, command.timestamp))

    def _apply_pregap(self, command: cmd.Pregap) -> None:
        track = self._require_track(command)
        if track.pregap is not None:
            raise CueSyntaxError(
                str(command), "multiple PREGAP commands are not allowed in one TRACK"
            )
        if track.indexes:
            raise CueSyntaxError(str(command), "PREGAP must precede INDEX")
        track.pregap = TimeStamp.parse(command.text)

    def _apply_postgap(self, command: cmd.Postgap) -> None:
        track = self._require_track(command)
        if track.postgap is not None:
            raise CueSyntaxError(
                str(command), "multiple POSTGAP commands are not allowed in one TRACK"
            )
        track.postgap = TimeStamp.parse(command.text)

    def _apply_isrc(self, command: cmd.Isrc) -> None:
        track = self._require_track(command)
        if track.isrc is not None:
            raise CueSyntaxError(str(command), "multiple ISRC commands are not allowed in one TRACK")
        track.isrc = command.text

    def _apply_flags(self, command: cmd.Flags) -> None:
        track = self._require_track(command)
        if track.flags is not None:
            raise CueSyntaxError(
                str(command), "multiple FLAGS commands are not allowed in one TRACK"
            )
        track.flags = list(command.flags)
