"""Line domain model and train conflict detection."""

from rail_schedule.domain.errors import InvalidArgumentError, TimeConflictError
from rail_schedule.domain.models.schedule_entry import ScheduleEntry
from rail_schedule.domain.models.separation_rules import SeparationRules
from rail_schedule.domain.models.time_of_day import TimeOfDay


class Line:
    """A numbered line on a platform holding its trains in insertion order."""

    def __init__(self, number: int, rules: SeparationRules | None = None) -> None:
        """Initialize an empty line.

        Args:
            number: Line number, unique within its platform. Must be positive.
            rules: Separation rules for conflict checks. Defaults to 30/10 minutes.
        """
        if number <= 0:
            raise InvalidArgumentError(f"Line number must be positive, got {number}")
        self.number = number
        self.rules = rules or SeparationRules()
        self._schedules: list[ScheduleEntry] = []

    @property
    def schedules(self) -> tuple[ScheduleEntry, ...]:
        return tuple(self._schedules)

    def find_conflicts(self, time: TimeOfDay, is_stopping: bool) -> list[ScheduleEntry]:
        """Return every existing entry that is too close to the candidate train.

        Each existing entry is checked on its own, not only the nearest one.
        """
        return [
            entry
            for entry in self._schedules
            if entry.time.difference(time)
            < self.rules.minimum_separation(entry.is_stopping, is_stopping)
        ]

    def can_add(self, time: TimeOfDay, is_stopping: bool) -> bool:
        """Check whether a train at ``time`` keeps the minimum separation."""
        return not self.find_conflicts(time, is_stopping)

    def add_train(self, time: TimeOfDay, is_stopping: bool) -> ScheduleEntry:
        """Append a train to the schedule.

        Raises:
            TimeConflictError: If the train is too close to an existing one.
        """
        conflicts = self.find_conflicts(time, is_stopping)
        if conflicts:
            blocking = ", ".join(f"{c.time} {c.train_kind}" for c in conflicts)
            raise TimeConflictError(
                f"Time slot {time} conflicts with existing schedule on line "
                f"{self.number} ({blocking})",
                tuple(conflicts),
            )
        entry = ScheduleEntry(time=time, is_stopping=is_stopping)
        self._schedules.append(entry)
        return entry

    def __repr__(self) -> str:
        return f"Line(number={self.number}, trains={len(self._schedules)})"
