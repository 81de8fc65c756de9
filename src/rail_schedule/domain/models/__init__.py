"""Domain models for the railway network."""

from rail_schedule.domain.models.error_details import ErrorDetails
from rail_schedule.domain.models.line import Line
from rail_schedule.domain.models.operation_result import OperationResult
from rail_schedule.domain.models.platform import Platform
from rail_schedule.domain.models.railway_system import RailwaySystem
from rail_schedule.domain.models.report import (
    LineReport,
    PlatformReport,
    StationReport,
    SystemReport,
)
from rail_schedule.domain.models.schedule_entry import ScheduleEntry
from rail_schedule.domain.models.separation_rules import SeparationRules
from rail_schedule.domain.models.station import Station
from rail_schedule.domain.models.station_configuration import (
    PlatformConfiguration,
    StationConfiguration,
    TrainConfiguration,
)
from rail_schedule.domain.models.time_of_day import TimeOfDay

__all__ = [
    "ErrorDetails",
    "Line",
    "LineReport",
    "OperationResult",
    "Platform",
    "PlatformConfiguration",
    "PlatformReport",
    "RailwaySystem",
    "ScheduleEntry",
    "SeparationRules",
    "Station",
    "StationConfiguration",
    "StationReport",
    "SystemReport",
    "TimeOfDay",
    "TrainConfiguration",
]
