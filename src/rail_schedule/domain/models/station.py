"""Station domain model."""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from rail_schedule.domain.errors import (
    DuplicateKeyError,
    InvalidArgumentError,
    NotFoundError,
)
from rail_schedule.domain.models.platform import Platform
from rail_schedule.domain.models.schedule_entry import ScheduleEntry
from rail_schedule.domain.models.separation_rules import SeparationRules
from rail_schedule.domain.models.time_of_day import TimeOfDay

StationId = TypeVar("StationId", bound=Hashable)


class Station(Generic[StationId]):
    """A station identified by a hashable key, owning its platforms."""

    def __init__(
        self, station_id: StationId, name: str, rules: SeparationRules | None = None
    ) -> None:
        self.id = station_id
        self.name = name
        self.rules = rules or SeparationRules()
        self._platforms: dict[int, Platform] = {}

    @property
    def platforms(self) -> tuple[Platform, ...]:
        return tuple(self._platforms.values())

    def add_platform(self, number: int) -> Platform:
        """Create a new platform in this station.

        Raises:
            InvalidArgumentError: If the number is not positive.
            DuplicateKeyError: If the platform already exists.
        """
        if number <= 0:
            raise InvalidArgumentError(f"Platform number must be positive, got {number}")
        if number in self._platforms:
            raise DuplicateKeyError(f"Platform {number} already exists in station {self.id}")
        platform = Platform(number, self.rules)
        self._platforms[number] = platform
        return platform

    def add_platforms(self, numbers: Iterable[int]) -> list[Platform]:
        """Add several platforms in order, keeping those added before a failure."""
        numbers = list(numbers)
        if not numbers:
            raise InvalidArgumentError("No platform numbers provided")
        return [self.add_platform(number) for number in numbers]

    def find_platform(self, number: int) -> Platform | None:
        return self._platforms.get(number)

    def get_platform(self, number: int) -> Platform:
        """Return the platform or raise NotFoundError."""
        platform = self.find_platform(number)
        if platform is None:
            raise NotFoundError(f"Platform {number} not found in station {self.id}")
        return platform

    def add_train_schedule(
        self, platform_number: int, line_number: int, time: TimeOfDay, is_stopping: bool
    ) -> ScheduleEntry:
        """Schedule a train on a line of one of this station's platforms.

        Raises:
            NotFoundError: If the platform or the line does not exist.
            TimeConflictError: If the train is too close to an existing one.
        """
        platform = self.get_platform(platform_number)
        line = platform.find_line(line_number)
        if line is None:
            raise NotFoundError(
                f"Line {line_number} not found on platform {platform_number}"
            )
        return line.add_train(time, is_stopping)

    def __repr__(self) -> str:
        return f"Station(id={self.id!r}, name={self.name!r})"
