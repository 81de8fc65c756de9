"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from rail_schedule.adapters.config import AppConfig
from rail_schedule.domain.models import SeparationRules


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    monkeypatch.delenv("RAIL_LOG_LEVEL", raising=False)
    config = AppConfig(_env_file=None)

    assert config.stopping_separation_minutes == 30
    assert config.through_separation_minutes == 10
    assert config.log_level == "WARNING"
    assert config.config_file is None
    assert config.separation_rules() == SeparationRules()


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("RAIL_STOPPING_SEPARATION_MINUTES", "20")
    monkeypatch.setenv("RAIL_THROUGH_SEPARATION_MINUTES", "5")
    monkeypatch.setenv("RAIL_LOG_LEVEL", "debug")

    config = AppConfig(_env_file=None)

    assert config.separation_rules() == SeparationRules(stopping_minutes=20, through_minutes=5)
    assert config.log_level == "DEBUG"


def test_config_validates_separation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a zero separation, when loading config, then validation error is raised."""
    monkeypatch.setenv("RAIL_THROUGH_SEPARATION_MINUTES", "0")

    with pytest.raises(ValueError, match="separation minutes must be positive"):
        AppConfig(_env_file=None)


def test_config_validates_log_level() -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="log_level must be a logging level name"):
        AppConfig(log_level="chatty", _env_file=None)


def test_config_parses_stations_from_toml(tmp_path: Path) -> None:
    """Given valid TOML config file, when loading config, then stations can be parsed."""
    config_path = tmp_path / "network.toml"
    config_path.write_text(
        """
[[stations]]
station_id = "S1"
station_name = "Central"

[[stations.platforms]]
number = 1
lines = [1]
""",
        encoding="utf-8",
    )

    config = AppConfig(config_file=str(config_path), _env_file=None)
    stations = config.get_stations_config()

    assert len(stations) == 1
    assert stations[0]["station_id"] == "S1"
    assert stations[0]["platforms"][0]["lines"] == [1]


def test_config_rules_table_overrides_separations(tmp_path: Path) -> None:
    """Given a [rules] table, when loading stations, then the separations are updated."""
    config_path = tmp_path / "network.toml"
    config_path.write_text(
        """
[rules]
stopping_separation_minutes = 45
through_separation_minutes = 15
""",
        encoding="utf-8",
    )
    config = AppConfig(config_file=str(config_path), _env_file=None)

    assert config.get_stations_config() == []
    assert config.separation_rules() == SeparationRules(stopping_minutes=45, through_minutes=15)


def test_config_rules_table_rejects_non_positive(tmp_path: Path) -> None:
    """Given a negative separation in [rules], when loading, then ValueError is raised."""
    config_path = tmp_path / "network.toml"
    config_path.write_text("[rules]\nthrough_separation_minutes = -1\n", encoding="utf-8")
    config = AppConfig(config_file=str(config_path), _env_file=None)

    with pytest.raises(ValueError, match="separation minutes must be positive"):
        config.get_stations_config()


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading config, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml", _env_file=None)

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.get_stations_config()


def test_config_raises_error_when_config_file_not_set() -> None:
    """Given config_file is None, when loading config, then ValueError is raised."""
    config = AppConfig(config_file=None, _env_file=None)

    with pytest.raises(ValueError, match="config_file must be set"):
        config.get_stations_config()


def test_config_rejects_stations_that_are_not_a_list(tmp_path: Path) -> None:
    """Given a [stations] table instead of an array, when loading, then ValueError is raised."""
    config_path = tmp_path / "network.toml"
    config_path.write_text('[stations]\nstation_id = "S1"\n', encoding="utf-8")
    config = AppConfig(config_file=str(config_path), _env_file=None)

    with pytest.raises(ValueError, match="'stations' must be a list"):
        config.get_stations_config()


@pytest.mark.parametrize(
    ("rules_toml", "message"),
    [
        ("rules = 5\n", "'rules' must be a table"),
        ("[rules]\nstopping_separation_minutes = [30]\n", "must be an integer"),
        ('[rules]\nthrough_separation_minutes = "10"\n', "must be an integer"),
    ],
)
def test_config_rules_with_wrong_types_raise_value_error(
    tmp_path: Path, rules_toml: str, message: str
) -> None:
    """Given a malformed rules entry, when loading stations, then ValueError is raised."""
    config_path = tmp_path / "network.toml"
    config_path.write_text(rules_toml, encoding="utf-8")
    config = AppConfig(config_file=str(config_path), _env_file=None)

    with pytest.raises(ValueError, match=message):
        config.get_stations_config()
