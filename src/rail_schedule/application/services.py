"""Railway service used by the interactive menu."""

import logging
from collections.abc import Callable, Sequence

from rail_schedule.domain.errors import RailwayError
from rail_schedule.domain.models.error_details import ErrorDetails
from rail_schedule.domain.models.operation_result import OperationResult
from rail_schedule.domain.models.railway_system import RailwaySystem
from rail_schedule.domain.models.report import SystemReport
from rail_schedule.domain.models.station_configuration import StationConfiguration
from rail_schedule.domain.models.time_of_day import TimeOfDay

logger = logging.getLogger(__name__)


class RailwayService:
    """Entry point for creating stations and scheduling trains.

    Domain errors are turned into ``OperationResult`` failures here so callers
    never need to catch them for expected validation problems.
    """

    def __init__(self, system: RailwaySystem[str] | None = None) -> None:
        """Initialize with an existing system or a new empty one."""
        self._system: RailwaySystem[str] = system if system is not None else RailwaySystem()

    @property
    def system(self) -> RailwaySystem[str]:
        return self._system

    def add_station(self, station_id: str, name: str) -> OperationResult:
        """Register a new station."""
        return self._run(
            f"add station {station_id!r}",
            lambda: self._system.add_station(station_id, name),
        )

    def add_platforms(self, station_id: str, numbers: Sequence[int]) -> OperationResult:
        """Add platforms to a station. Platforms added before a failure are kept."""

        def action() -> None:
            self._system.get_station(station_id).add_platforms(numbers)

        return self._run(f"add platforms {list(numbers)} to station {station_id!r}", action)

    def add_lines(
        self, station_id: str, platform_number: int, numbers: Sequence[int]
    ) -> OperationResult:
        """Add lines to a platform. Lines added before a failure are kept."""

        def action() -> None:
            station = self._system.get_station(station_id)
            station.get_platform(platform_number).add_lines(numbers)

        return self._run(
            f"add lines {list(numbers)} to station {station_id!r} platform {platform_number}",
            action,
        )

    def add_train_schedule(
        self,
        station_id: str,
        platform_number: int,
        line_number: int,
        hour: int,
        minute: int,
        is_stopping: bool,
    ) -> OperationResult:
        """Schedule a stopping or through train."""

        def action() -> None:
            time = TimeOfDay(hour, minute)
            self._system.get_station(station_id).add_train_schedule(
                platform_number, line_number, time, is_stopping
            )

        kind = "stopping" if is_stopping else "through"
        return self._run(
            f"schedule {kind} train at {hour:02d}:{minute:02d} on station {station_id!r} "
            f"platform {platform_number} line {line_number}",
            action,
        )

    def report(self) -> SystemReport:
        """Return a read-only snapshot of the network."""
        report = self._system.report()
        logger.debug(f"Built report for {len(report.stations)} station(s)")
        return report

    def load_network(
        self, station_configs: Sequence[StationConfiguration]
    ) -> list[OperationResult]:
        """Apply seed configurations step by step.

        Returns one result per step. A failed step does not stop later steps,
        except that a rejected station skips the rest of its configuration so an
        existing station with the same id is left unchanged.
        """
        results: list[OperationResult] = []
        for config in station_configs:
            station_result = self.add_station(config.station_id, config.station_name)
            results.append(station_result)
            if not station_result.ok:
                continue
            if config.platforms:
                results.append(
                    self.add_platforms(config.station_id, [p.number for p in config.platforms])
                )
            for platform_config in config.platforms:
                if platform_config.lines:
                    results.append(
                        self.add_lines(
                            config.station_id, platform_config.number, platform_config.lines
                        )
                    )
            for train in config.trains:
                results.append(
                    self.add_train_schedule(
                        config.station_id,
                        train.platform_number,
                        train.line_number,
                        train.time.hour,
                        train.time.minute,
                        train.is_stopping,
                    )
                )
        failed = sum(1 for result in results if not result.ok)
        logger.info(
            f"Loaded {len(station_configs)} station configuration(s), {failed} step(s) failed"
        )
        return results

    def _run(self, description: str, action: Callable[[], object]) -> OperationResult:
        try:
            action()
        except RailwayError as e:
            logger.info(f"Rejected: {description}: {e}")
            return OperationResult.failure(ErrorDetails.from_error(e))
        logger.info(f"Done: {description}")
        return OperationResult.success()
