"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rail_schedule.domain.models.separation_rules import (
    DEFAULT_STOPPING_SEPARATION_MINUTES,
    DEFAULT_THROUGH_SEPARATION_MINUTES,
    SeparationRules,
)


def _positive_minutes(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"separation minutes must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError("separation minutes must be positive")
    return value


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAIL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Scheduling rules
    stopping_separation_minutes: int = Field(
        default=DEFAULT_STOPPING_SEPARATION_MINUTES,
        description="Minimum minutes between two trains on a line when either one stops",
    )
    through_separation_minutes: int = Field(
        default=DEFAULT_THROUGH_SEPARATION_MINUTES,
        description="Minimum minutes between two through trains on a line",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level (e.g. DEBUG, INFO)")

    # TOML seed file with stations, platforms, lines and trains to create at startup
    config_file: str | None = Field(
        default=None,
        description="Path to TOML file describing the initial network",
    )

    @field_validator("stopping_separation_minutes", "through_separation_minutes")
    @classmethod
    def validate_separation(cls, v: int) -> int:
        """Validate separations are strictly positive."""
        return _positive_minutes(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def separation_rules(self) -> SeparationRules:
        """Build the domain separation rules from the current settings."""
        return SeparationRules(
            stopping_minutes=self.stopping_separation_minutes,
            through_minutes=self.through_separation_minutes,
        )

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating scheduling rules."""
        if not self.config_file:
            raise ValueError("config_file must be set to load stations configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update scheduling rules from TOML if present
        if "rules" in toml_data:
            rules = toml_data["rules"]
            if not isinstance(rules, dict):
                raise ValueError("TOML config 'rules' must be a table")
            if "stopping_separation_minutes" in rules:
                self.stopping_separation_minutes = _positive_minutes(
                    rules["stopping_separation_minutes"]
                )
            if "through_separation_minutes" in rules:
                self.through_separation_minutes = _positive_minutes(
                    rules["through_separation_minutes"]
                )

        return toml_data

    def get_stations_config(self) -> list[dict[str, Any]]:
        """Parse and return stations configuration as a list of dicts from TOML file."""
        toml_data = self._load_toml_data()

        stations = toml_data.get("stations", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        return stations
