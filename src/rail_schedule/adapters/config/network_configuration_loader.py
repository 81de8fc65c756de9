"""Network configuration loader."""

import logging
from typing import Any

from rail_schedule.adapters.config.app_config import AppConfig
from rail_schedule.domain.models.station_configuration import (
    PlatformConfiguration,
    StationConfiguration,
    TrainConfiguration,
)
from rail_schedule.domain.models.time_of_day import TimeOfDay

logger = logging.getLogger(__name__)


def _require_int(value: Any, field_name: str) -> int:
    """Return ``value`` if it is a TOML integer, else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"TOML config '{field_name}' must be an integer, got {value!r}")
    return value


def _require_list(value: Any, field_name: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"TOML config '{field_name}' must be a list, got {value!r}")
    return value


class NetworkConfigurationLoader:
    """Loads station configurations from app config.

    Entries missing their key field are skipped; entries with wrongly typed
    values raise ValueError.
    """

    @staticmethod
    def load_platform_config_from_data(platform_data: Any) -> PlatformConfiguration | None:
        """Load a single platform configuration from data dict."""
        if not isinstance(platform_data, dict) or "number" not in platform_data:
            return None

        lines = _require_list(platform_data.get("lines", []), "lines")
        return PlatformConfiguration(
            number=_require_int(platform_data["number"], "number"),
            lines=tuple(_require_int(line, "lines") for line in lines),
        )

    @staticmethod
    def load_train_config_from_data(train_data: Any) -> TrainConfiguration | None:
        """Load a single train configuration from data dict.

        Raises:
            InvalidTimeError: If the time is not a valid ``HH:MM`` string.
            ValueError: If platform, line or stopping have the wrong type.
        """
        if not isinstance(train_data, dict):
            return None

        platform = train_data.get("platform")
        line = train_data.get("line")
        time_text = train_data.get("time")
        if platform is None or line is None or time_text is None:
            return None

        is_stopping = train_data.get("stopping", True)
        if not isinstance(is_stopping, bool):
            raise ValueError(f"TOML config 'stopping' must be true or false, got {is_stopping!r}")

        return TrainConfiguration(
            platform_number=_require_int(platform, "platform"),
            line_number=_require_int(line, "line"),
            time=TimeOfDay.parse(str(time_text)),
            is_stopping=is_stopping,
        )

    @staticmethod
    def load_station_config_from_data(station_data: Any) -> StationConfiguration | None:
        """Load a single station configuration from data dict."""
        if not isinstance(station_data, dict):
            return None

        station_id = station_data.get("station_id")
        if not station_id:
            return None
        station_id = str(station_id)
        station_name = station_data.get("station_name", station_id) or station_id

        platforms = tuple(
            platform
            for platform in (
                NetworkConfigurationLoader.load_platform_config_from_data(p)
                for p in _require_list(station_data.get("platforms", []), "platforms")
            )
            if platform is not None
        )
        trains = tuple(
            train
            for train in (
                NetworkConfigurationLoader.load_train_config_from_data(t)
                for t in _require_list(station_data.get("trains", []), "trains")
            )
            if train is not None
        )

        return StationConfiguration(
            station_id=station_id,
            station_name=str(station_name),
            platforms=platforms,
            trains=trains,
        )

    @staticmethod
    def load(config: AppConfig) -> list[StationConfiguration]:
        """Load station configurations from app config.

        Raises:
            ValueError: If a value in the file has the wrong type.
        """
        stations_data = config.get_stations_config()
        station_configs: list[StationConfiguration] = []

        for station_data in stations_data:
            station_config = NetworkConfigurationLoader.load_station_config_from_data(
                station_data
            )
            if station_config is None:
                logger.warning(f"Skipping station entry without station_id: {station_data!r}")
                continue
            station_configs.append(station_config)

        return station_configs
