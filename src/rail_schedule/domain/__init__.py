"""Domain layer - railway model, errors and contracts."""

from rail_schedule.domain.errors import (
    DuplicateKeyError,
    ErrorKind,
    InvalidArgumentError,
    InvalidTimeError,
    NotFoundError,
    RailwayError,
    TimeConflictError,
)
from rail_schedule.domain.models import (
    Line,
    Platform,
    RailwaySystem,
    ScheduleEntry,
    Station,
    TimeOfDay,
)

__all__ = [
    "DuplicateKeyError",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidTimeError",
    "Line",
    "NotFoundError",
    "Platform",
    "RailwayError",
    "RailwaySystem",
    "ScheduleEntry",
    "Station",
    "TimeConflictError",
    "TimeOfDay",
]
