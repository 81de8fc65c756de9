"""Domain errors for the railway model."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rail_schedule.domain.models.schedule_entry import ScheduleEntry


class ErrorKind(str, Enum):
    """Category of a rejected operation."""

    INVALID_ARGUMENT = "invalid_argument"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    TIME_CONFLICT = "time_conflict"


class RailwayError(Exception):
    """Base class for every validation failure raised by the domain."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class InvalidArgumentError(RailwayError, ValueError):
    """Malformed or out-of-domain input."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidTimeError(InvalidArgumentError):
    """Hour or minute outside the valid range, or unparsable time text."""


class DuplicateKeyError(RailwayError):
    """An id or number is already present in its parent collection."""

    kind = ErrorKind.DUPLICATE_KEY


class NotFoundError(RailwayError, LookupError):
    """A required station, platform or line does not exist."""

    kind = ErrorKind.NOT_FOUND


class TimeConflictError(RailwayError):
    """A new train is too close to existing trains on the same line."""

    kind = ErrorKind.TIME_CONFLICT

    def __init__(self, message: str, conflicts: tuple[ScheduleEntry, ...] = ()) -> None:
        super().__init__(message)
        self.conflicts = conflicts
