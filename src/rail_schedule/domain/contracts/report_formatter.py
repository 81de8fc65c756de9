"""Protocol for rendering the system report."""

from typing import Protocol

from rail_schedule.domain.models.report import SystemReport


class ReportFormatterProtocol(Protocol):
    """Protocol for turning a system report into display text."""

    def format_report(self, report: SystemReport) -> str:
        """Render the whole report.

        Args:
            report: Snapshot of stations, platforms, lines and trains.

        Returns:
            Human-readable multi-line text.
        """
        ...
