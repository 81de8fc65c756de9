"""Schedule entry domain model."""

from dataclasses import dataclass

from rail_schedule.domain.models.time_of_day import TimeOfDay

STOPPING_LABEL = "Stopping"
THROUGH_LABEL = "Through"


@dataclass(frozen=True)
class ScheduleEntry:
    """A single train occupying a line at a given time."""

    time: TimeOfDay
    is_stopping: bool

    @property
    def train_kind(self) -> str:
        return STOPPING_LABEL if self.is_stopping else THROUGH_LABEL
