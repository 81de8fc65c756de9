"""Platform domain model."""

from collections.abc import Iterable

from rail_schedule.domain.errors import DuplicateKeyError, InvalidArgumentError
from rail_schedule.domain.models.line import Line
from rail_schedule.domain.models.separation_rules import SeparationRules


class Platform:
    """A numbered platform owning its lines."""

    def __init__(self, number: int, rules: SeparationRules | None = None) -> None:
        if number <= 0:
            raise InvalidArgumentError(f"Platform number must be positive, got {number}")
        self.number = number
        self.rules = rules or SeparationRules()
        self._lines: dict[int, Line] = {}

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(self._lines.values())

    def add_line(self, number: int) -> Line:
        """Create a new line on this platform.

        Raises:
            InvalidArgumentError: If the number is not positive.
            DuplicateKeyError: If the line already exists on this platform.
        """
        if number <= 0:
            raise InvalidArgumentError(f"Line number must be positive, got {number}")
        if number in self._lines:
            raise DuplicateKeyError(
                f"Line {number} already exists on platform {self.number}"
            )
        line = Line(number, self.rules)
        self._lines[number] = line
        return line

    def add_lines(self, numbers: Iterable[int]) -> list[Line]:
        """Add several lines in order.

        Lines added before a failing number are kept.
        """
        numbers = list(numbers)
        if not numbers:
            raise InvalidArgumentError("No line numbers provided")
        return [self.add_line(number) for number in numbers]

    def find_line(self, number: int) -> Line | None:
        return self._lines.get(number)

    def __repr__(self) -> str:
        return f"Platform(number={self.number}, lines={list(self._lines)})"
