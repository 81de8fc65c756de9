"""Report formatters."""

from rail_schedule.adapters.formatters.report_formatter import TextReportFormatter

__all__ = ["TextReportFormatter"]
