"""Seed configuration domain models."""

from dataclasses import dataclass

from rail_schedule.domain.models.time_of_day import TimeOfDay


@dataclass(frozen=True)
class PlatformConfiguration:
    """A platform and the line numbers to create on it."""

    number: int
    lines: tuple[int, ...] = ()


@dataclass(frozen=True)
class TrainConfiguration:
    """A train to schedule once platforms and lines exist."""

    platform_number: int
    line_number: int
    time: TimeOfDay
    is_stopping: bool = True


@dataclass(frozen=True)
class StationConfiguration:
    """Configuration for a station to create at startup."""

    station_id: str
    station_name: str
    platforms: tuple[PlatformConfiguration, ...] = ()
    trains: tuple[TrainConfiguration, ...] = ()
