"""Plain-text formatter for the system report."""

from rail_schedule.domain.contracts.report_formatter import ReportFormatterProtocol
from rail_schedule.domain.models.report import LineReport, StationReport, SystemReport

TIME_COLUMN_WIDTH = 10
KIND_COLUMN_WIDTH = 15
RULE = "-" * (TIME_COLUMN_WIDTH + KIND_COLUMN_WIDTH)


class TextReportFormatter(ReportFormatterProtocol):
    """Renders the report as the fixed-width text shown by the menu."""

    def format_report(self, report: SystemReport) -> str:
        """Render every station, platform and line schedule."""
        lines = ["", "=== Railway System Status ==="]
        if report.is_empty:
            lines.append("No stations in the system.")
            return "\n".join(lines) + "\n"

        for station in report.stations:
            lines.extend(self.format_station(station))
        return "\n".join(lines) + "\n"

    def format_station(self, station: StationReport) -> list[str]:
        lines = ["", f"Station ID: {station.station_id}", f"Name: {station.name}"]
        if not station.platforms:
            lines.append("No platforms in this station.")
            return lines

        for platform in station.platforms:
            lines.extend(["", f"Platform {platform.number}:"])
            if not platform.lines:
                lines.append("No lines on this platform.")
                continue
            for line in platform.lines:
                lines.extend(self.format_line(line))
        return lines

    def format_line(self, line: LineReport) -> list[str]:
        """Render one line as a Time / Train Type table."""
        rows = [
            "",
            f"Line {line.number} Schedule:",
            f"{'Time':>{TIME_COLUMN_WIDTH}}{'Train Type':>{KIND_COLUMN_WIDTH}}",
            RULE,
        ]
        rows.extend(
            f"{str(entry.time):>{TIME_COLUMN_WIDTH}}{entry.train_kind:>{KIND_COLUMN_WIDTH}}"
            for entry in line.entries
        )
        rows.append(RULE)
        return rows
