"""Time of day domain model."""

import re
from dataclasses import dataclass

from rail_schedule.domain.errors import InvalidTimeError

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A wall-clock time without date or timezone.

    Ordering follows the minute of the day, which is the same as comparing
    ``(hour, minute)`` field by field.
    """

    hour: int
    minute: int

    def __post_init__(self) -> None:
        """Reject components outside 00:00-23:59."""
        for value in (self.hour, self.minute):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidTimeError(f"Time components must be integers, got {value!r}")
        if not 0 <= self.hour < HOURS_PER_DAY:
            raise InvalidTimeError(f"Hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute < MINUTES_PER_HOUR:
            raise InvalidTimeError(f"Minute must be between 0 and 59, got {self.minute}")

    @classmethod
    def parse(cls, text: str) -> "TimeOfDay":
        """Parse an ``HH:MM`` string (e.g. "9:05" or "09:05")."""
        match = _TIME_PATTERN.match(text) if isinstance(text, str) else None
        if not match:
            raise InvalidTimeError(f"Invalid time format: {text!r} (expected HH:MM)")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def minute_of_day(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    def difference(self, other: "TimeOfDay") -> int:
        """Absolute number of minutes between two times on the same day."""
        return abs(self.minute_of_day - other.minute_of_day)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
