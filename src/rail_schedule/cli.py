"""Interactive menu for managing stations, platforms, lines and train schedules."""

import sys
from collections.abc import Callable
from typing import TextIO

from rail_schedule.application.services import RailwayService
from rail_schedule.domain.contracts.report_formatter import ReportFormatterProtocol
from rail_schedule.domain.errors import InvalidArgumentError, NotFoundError, RailwayError
from rail_schedule.domain.models.operation_result import OperationResult

MENU = """
=== Railway Management System ===
1. Add a station
2. Add platforms to station
3. Add lines to platform
4. Add train schedule
5. View entire system
6. Exit"""

EXIT_CHOICE = "6"

SUCCESS_MESSAGES = {
    "1": "Station added successfully!",
    "2": "Platforms added successfully!",
    "3": "Lines added successfully!",
    "4": "Train schedule added successfully!",
}


def parse_int(text: str, label: str) -> int:
    """Parse a whole number typed by the user."""
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidArgumentError(f"Invalid input for {label}: {text.strip()!r}") from None


def parse_number_list(text: str) -> list[int]:
    """Parse space-separated positive numbers (e.g. "1 2 3")."""
    numbers = [parse_int(part, "number list") for part in text.split()]
    if any(number <= 0 for number in numbers):
        raise InvalidArgumentError("Numbers must be positive")
    if not numbers:
        raise InvalidArgumentError("At least one number must be provided")
    return numbers


def is_stopping_train(train_type: str) -> bool:
    """Return True for "S"/"s"; every other answer means a through train."""
    return train_type.strip().lower() == "s"


class RailwayMenu:
    """Reads menu choices and forwards them to the railway service."""

    def __init__(
        self,
        service: RailwayService,
        formatter: ReportFormatterProtocol,
        input_func: Callable[[str], str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """Initialize the menu.

        Args:
            service: Service holding the railway system.
            formatter: Renders the report for option 5.
            input_func: Prompt function, ``input`` by default.
            stdout: Stream for menu and success messages (default sys.stdout).
            stderr: Stream for error messages (default sys.stderr).
        """
        self.service = service
        self.formatter = formatter
        self._input = input_func or input
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._handlers: dict[str, Callable[[], OperationResult | None]] = {
            "1": self.add_station,
            "2": self.add_platforms,
            "3": self.add_lines,
            "4": self.add_train_schedule,
            "5": self.view_system,
        }

    def run(self) -> None:
        """Loop until the user picks Exit or input ends."""
        while True:
            self._print(MENU)
            try:
                choice = self._input("Enter your choice: ").strip()
                if choice == EXIT_CHOICE:
                    self._print("Thank you for using Railway Management System!")
                    return
                self.handle_choice(choice)
            except EOFError:
                return
            except RailwayError as e:
                self._error(str(e))

    def handle_choice(self, choice: str) -> None:
        """Dispatch one menu choice and report its outcome."""
        handler = self._handlers.get(choice)
        if handler is None:
            raise InvalidArgumentError("Invalid choice")
        result = handler()
        if result is None:
            return
        if result.ok:
            self._print(SUCCESS_MESSAGES[choice])
        elif result.error is not None:
            self._error(result.error.reason)

    def add_station(self) -> OperationResult:
        station_id = self._input("Enter station ID: ").strip()
        name = self._input("Enter station name: ").strip()
        return self.service.add_station(station_id, name)

    def add_platforms(self) -> OperationResult:
        station_id = self._prompt_station_id()
        numbers = parse_number_list(
            self._input("Enter platform numbers (space-separated): ")
        )
        return self.service.add_platforms(station_id, numbers)

    def add_lines(self) -> OperationResult:
        station_id = self._prompt_station_id()
        platform_number = parse_int(self._input("Enter platform number: "), "platform number")
        # Unknown platforms are rejected before asking for line numbers
        self.service.system.get_station(station_id).get_platform(platform_number)
        numbers = parse_number_list(self._input("Enter line numbers (space-separated): "))
        return self.service.add_lines(station_id, platform_number, numbers)

    def add_train_schedule(self) -> OperationResult:
        station_id = self._prompt_station_id()
        platform_number = parse_int(self._input("Enter platform number: "), "platform number")
        line_number = parse_int(self._input("Enter line number: "), "line number")
        hour = parse_int(self._input("Enter hours (0-23): "), "hours")
        minute = parse_int(self._input("Enter minutes (0-59): "), "minutes")
        train_type = self._input("Enter train type (S for Stopping, T for Through): ")
        return self.service.add_train_schedule(
            station_id,
            platform_number,
            line_number,
            hour,
            minute,
            is_stopping_train(train_type),
        )

    def _prompt_station_id(self) -> str:
        """Ask for a station id and reject unknown stations before further prompts."""
        station_id = self._input("Enter station ID: ").strip()
        if self.service.system.find_station(station_id) is None:
            raise NotFoundError(f"Station not found: {station_id}")
        return station_id

    def view_system(self) -> None:
        self._stdout.write(self.formatter.format_report(self.service.report()))

    def _print(self, message: str) -> None:
        print(message, file=self._stdout)

    def _error(self, message: str) -> None:
        print(f"Error: {message}", file=self._stderr)
