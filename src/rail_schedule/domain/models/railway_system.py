"""Railway system root aggregate."""

from typing import Generic

from rail_schedule.domain.errors import DuplicateKeyError, NotFoundError
from rail_schedule.domain.models.report import (
    LineReport,
    PlatformReport,
    StationReport,
    SystemReport,
)
from rail_schedule.domain.models.separation_rules import SeparationRules
from rail_schedule.domain.models.station import Station, StationId


class RailwaySystem(Generic[StationId]):
    """All stations of the network, keyed by station id."""

    def __init__(self, rules: SeparationRules | None = None) -> None:
        """Initialize an empty system.

        Args:
            rules: Separation rules handed down to every line. Defaults to 30/10 minutes.
        """
        self.rules = rules or SeparationRules()
        self._stations: dict[StationId, Station[StationId]] = {}

    @property
    def stations(self) -> tuple[Station[StationId], ...]:
        return tuple(self._stations.values())

    def add_station(self, station_id: StationId, name: str) -> Station[StationId]:
        """Register a new station.

        Raises:
            DuplicateKeyError: If a station with this id already exists.
        """
        if station_id in self._stations:
            raise DuplicateKeyError(f"Station ID already exists: {station_id}")
        station = Station(station_id, name, self.rules)
        self._stations[station_id] = station
        return station

    def find_station(self, station_id: StationId) -> Station[StationId] | None:
        return self._stations.get(station_id)

    def get_station(self, station_id: StationId) -> Station[StationId]:
        """Return the station or raise NotFoundError."""
        station = self.find_station(station_id)
        if station is None:
            raise NotFoundError(f"Station not found: {station_id}")
        return station

    def report(self) -> SystemReport:
        """Build an immutable snapshot of the network and its schedules."""
        return SystemReport(
            stations=tuple(
                StationReport(
                    station_id=station.id,
                    name=station.name,
                    platforms=tuple(
                        PlatformReport(
                            number=platform.number,
                            lines=tuple(
                                LineReport(number=line.number, entries=line.schedules)
                                for line in platform.lines
                            ),
                        )
                        for platform in station.platforms
                    ),
                )
                for station in self._stations.values()
            )
        )
