"""Frame-accurate CD positions (``MM:SS:FF``, 75 frames per second)."""

from __future__ import annotations

import functools
import re
from datetime import timedelta

from cue_commander.exceptions import InvalidTimestampError

# CD audio constants
FRAMES_PER_SECOND = 75
SECONDS_PER_MINUTE = 60

_TIMESTAMP_RE = re.compile(r"([0-9]+):([0-9]{2}):([0-9]{2})")
_MICROSECONDS = 1_000_000


@functools.total_ordering
class TimeStamp:
    """A position on a CD in minutes, seconds and frames.

    Minutes are unbounded. Seconds and frames are stored as total seconds
    plus a frame count below 75. Instances are immutable and hashable.
    """

    __slots__ = ("_seconds", "_frames")

    def __init__(self, minutes: int = 0, seconds: int = 0, frames: int = 0) -> None:
        if minutes < 0 or seconds < 0 or frames < 0:
            raise InvalidTimestampError(
                f"{minutes}:{seconds}:{frames}", "components must not be negative"
            )
        if seconds >= SECONDS_PER_MINUTE:
            raise InvalidTimestampError(f"{minutes}:{seconds}:{frames}", "seconds must be < 60")
        if frames >= FRAMES_PER_SECOND:
            raise InvalidTimestampError(f"{minutes}:{seconds}:{frames}", "frames must be < 75")
        self._seconds = minutes * SECONDS_PER_MINUTE + seconds
        self._frames = frames

    @classmethod
    def normalized(cls, minutes: int = 0, seconds: int = 0, frames: int = 0) -> TimeStamp:
        """Build a timestamp, carrying frame and second overflow upwards.

        ``normalized(61, 28, 148)`` equals ``TimeStamp(61, 29, 73)``.
        """
        seconds += frames // FRAMES_PER_SECOND
        frames %= FRAMES_PER_SECOND
        minutes += seconds // SECONDS_PER_MINUTE
        seconds %= SECONDS_PER_MINUTE
        return cls(minutes, seconds, frames)

    @classmethod
    def from_frames(cls, total_frames: int) -> TimeStamp:
        """Build a timestamp from an absolute frame count."""
        if total_frames < 0:
            raise InvalidTimestampError(str(total_frames), "frame count must not be negative")
        return cls.normalized(0, 0, total_frames)

    @classmethod
    def from_timedelta(cls, duration: timedelta) -> TimeStamp:
        """Convert a wall-clock duration, truncating any sub-frame remainder."""
        microseconds = duration // timedelta(microseconds=1)
        return cls.from_frames(microseconds * FRAMES_PER_SECOND // _MICROSECONDS)

    @classmethod
    def parse(cls, text: str) -> TimeStamp:
        """Parse ``<minutes>:<SS>:<FF>``.

        Seconds and frames must be exactly two digits each and in range;
        there is no normalization of parsed input.

        Raises:
            InvalidTimestampError: If ``text`` is malformed or out of range.
        """
        match = _TIMESTAMP_RE.fullmatch(text)
        if match is None:
            raise InvalidTimestampError(text)
        minutes, seconds, frames = (int(part) for part in match.groups())
        try:
            return cls(minutes, seconds, frames)
        except InvalidTimestampError as e:
            raise InvalidTimestampError(text, e.reason) from e

    @property
    def minutes(self) -> int:
        return self._seconds // SECONDS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return self._seconds % SECONDS_PER_MINUTE

    @property
    def frames(self) -> int:
        return self._frames

    def as_frames(self) -> int:
        """Absolute position in frames."""
        return self._seconds * FRAMES_PER_SECOND + self._frames

    def as_seconds(self) -> float:
        """Absolute position in seconds, including the fractional frame part."""
        return self._seconds + self._frames / FRAMES_PER_SECOND

    def to_timedelta(self) -> timedelta:
        """Wall-clock duration of this position.

        Frames are rounded up to the next microsecond so that
        ``from_timedelta(ts.to_timedelta()) == ts``.
        """
        microseconds = -(-self._frames * _MICROSECONDS // FRAMES_PER_SECOND)
        return timedelta(seconds=self._seconds, microseconds=microseconds)

    def with_minutes(self, minutes: int) -> TimeStamp:
        return TimeStamp(minutes, self.seconds, self.frames)

    def with_seconds(self, seconds: int) -> TimeStamp:
        return TimeStamp(self.minutes, seconds, self.frames)

    def with_frames(self, frames: int) -> TimeStamp:
        return TimeStamp(self.minutes, self.seconds, frames)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeStamp):
            return NotImplemented
        return self.as_frames() == other.as_frames()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeStamp):
            return NotImplemented
        return self.as_frames() < other.as_frames()

    def __hash__(self) -> int:
        return hash(self.as_frames())

    def __str__(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}:{self.frames:02d}"

    def __repr__(self) -> str:
        return f"TimeStamp({self.minutes}, {self.seconds}, {self.frames})"
