"""Configuration adapters."""

from rail_schedule.adapters.config.app_config import AppConfig
from rail_schedule.adapters.config.network_configuration_loader import (
    NetworkConfigurationLoader,
)

__all__ = ["AppConfig", "NetworkConfigurationLoader"]
