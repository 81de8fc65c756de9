"""Read-only snapshot of the whole railway system."""

from collections.abc import Hashable
from dataclasses import dataclass

from rail_schedule.domain.models.schedule_entry import ScheduleEntry


@dataclass(frozen=True)
class LineReport:
    """Schedule of one line, in insertion order."""

    number: int
    entries: tuple[ScheduleEntry, ...]


@dataclass(frozen=True)
class PlatformReport:
    number: int
    lines: tuple[LineReport, ...]


@dataclass(frozen=True)
class StationReport:
    station_id: Hashable
    name: str
    platforms: tuple[PlatformReport, ...]


@dataclass(frozen=True)
class SystemReport:
    """Every station, platform, line and train, in insertion order at each level."""

    stations: tuple[StationReport, ...]

    @property
    def is_empty(self) -> bool:
        return not self.stations
