"""Protocols implemented by adapters."""

from rail_schedule.domain.contracts.report_formatter import ReportFormatterProtocol

__all__ = ["ReportFormatterProtocol"]
