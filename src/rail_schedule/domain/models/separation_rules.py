"""Minimum separation rules between trains on one line."""

from dataclasses import dataclass

from rail_schedule.domain.errors import InvalidArgumentError

DEFAULT_STOPPING_SEPARATION_MINUTES = 30
DEFAULT_THROUGH_SEPARATION_MINUTES = 10


@dataclass(frozen=True)
class SeparationRules:
    """Minimum minutes required between two trains on the same line.

    The stopping separation applies whenever at least one of the two trains
    stops; two through trains only need the through separation.
    """

    stopping_minutes: int = DEFAULT_STOPPING_SEPARATION_MINUTES
    through_minutes: int = DEFAULT_THROUGH_SEPARATION_MINUTES

    def __post_init__(self) -> None:
        if self.stopping_minutes <= 0 or self.through_minutes <= 0:
            raise InvalidArgumentError("Separation minutes must be positive")

    def minimum_separation(self, first_is_stopping: bool, second_is_stopping: bool) -> int:
        """Return the required gap in minutes for a pair of trains."""
        if first_is_stopping or second_is_stopping:
            return self.stopping_minutes
        return self.through_minutes
