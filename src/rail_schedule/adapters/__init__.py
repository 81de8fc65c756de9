"""Adapters layer - configuration and presentation."""

from rail_schedule.adapters.config import AppConfig, NetworkConfigurationLoader
from rail_schedule.adapters.formatters import TextReportFormatter

__all__ = [
    "AppConfig",
    "NetworkConfigurationLoader",
    "TextReportFormatter",
]
