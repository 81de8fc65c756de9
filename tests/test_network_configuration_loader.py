"""Tests for NetworkConfigurationLoader."""

from pathlib import Path

import pytest

from rail_schedule.adapters.config import AppConfig, NetworkConfigurationLoader
from rail_schedule.domain.errors import InvalidTimeError
from rail_schedule.domain.models import (
    PlatformConfiguration,
    StationConfiguration,
    TimeOfDay,
    TrainConfiguration,
)

PROJECT_ROOT = Path(__file__).parent.parent


def _write_config(tmp_path: Path, content: str) -> AppConfig:
    config_path = tmp_path / "network.toml"
    config_path.write_text(content, encoding="utf-8")
    return AppConfig(config_file=str(config_path), _env_file=None)


def test_load_full_station(tmp_path: Path) -> None:
    """Given a station with platforms and trains, when loading, then all parts are parsed."""
    config = _write_config(
        tmp_path,
        """
[[stations]]
station_id = "S1"
station_name = "Central"

[[stations.platforms]]
number = 1
lines = [1, 2]

[[stations.trains]]
platform = 1
line = 2
time = "7:05"
stopping = false
""",
    )

    stations = NetworkConfigurationLoader.load(config)

    assert stations == [
        StationConfiguration(
            station_id="S1",
            station_name="Central",
            platforms=(PlatformConfiguration(number=1, lines=(1, 2)),),
            trains=(TrainConfiguration(1, 2, TimeOfDay(7, 5), False),),
        )
    ]


def test_station_name_defaults_to_id(tmp_path: Path) -> None:
    """Given a station without a name, when loading, then the id is used as name."""
    config = _write_config(tmp_path, '[[stations]]\nstation_id = "S9"\n')

    stations = NetworkConfigurationLoader.load(config)

    assert stations[0].station_name == "S9"
    assert stations[0].platforms == ()
    assert stations[0].trains == ()


def test_station_without_id_is_skipped(tmp_path: Path) -> None:
    """Given a station entry without station_id, when loading, then it is skipped."""
    config = _write_config(
        tmp_path,
        """
[[stations]]
station_name = "Nowhere"

[[stations]]
station_id = "S1"
""",
    )

    stations = NetworkConfigurationLoader.load(config)

    assert [s.station_id for s in stations] == ["S1"]


def test_trains_default_to_stopping() -> None:
    """Given a train without a stopping flag, when loading, then it is a stopping train."""
    train = NetworkConfigurationLoader.load_train_config_from_data(
        {"platform": 1, "line": 1, "time": "12:00"}
    )

    assert train == TrainConfiguration(1, 1, TimeOfDay(12, 0), True)


def test_incomplete_train_is_ignored() -> None:
    """Given a train without a time, when loading, then None is returned."""
    train = NetworkConfigurationLoader.load_train_config_from_data({"platform": 1, "line": 1})

    assert train is None


def test_platform_without_number_is_ignored() -> None:
    """Given a platform entry without a number, when loading, then None is returned."""
    assert NetworkConfigurationLoader.load_platform_config_from_data({"lines": [1]}) is None


def test_malformed_train_time_raises(tmp_path: Path) -> None:
    """Given a train time that is not HH:MM, when loading, then InvalidTimeError is raised."""
    config = _write_config(
        tmp_path,
        """
[[stations]]
station_id = "S1"

[[stations.trains]]
platform = 1
line = 1
time = "25:00"
""",
    )

    with pytest.raises(InvalidTimeError):
        NetworkConfigurationLoader.load(config)


def test_example_network_file_loads() -> None:
    """Given the bundled example file, when loading, then two stations are returned."""
    config = AppConfig(config_file=str(PROJECT_ROOT / "network.example.toml"), _env_file=None)

    stations = NetworkConfigurationLoader.load(config)

    assert [s.station_id for s in stations] == ["S1", "S2"]
    assert len(stations[0].trains) == 2


@pytest.mark.parametrize(
    "platform_toml",
    [
        "number = [1]\nlines = [1]",
        'number = "1"',
        "number = 1\nlines = [[1]]",
        "number = 1\nlines = 1",
    ],
)
def test_wrongly_typed_platform_values_raise(tmp_path: Path, platform_toml: str) -> None:
    """Given a platform number or lines of the wrong type, when loading, then ValueError is raised."""
    config = _write_config(
        tmp_path,
        f'[[stations]]\nstation_id = "S1"\n\n[[stations.platforms]]\n{platform_toml}\n',
    )

    with pytest.raises(ValueError, match="must be"):
        NetworkConfigurationLoader.load(config)


@pytest.mark.parametrize("field_name", ["platform", "line"])
def test_wrongly_typed_train_numbers_raise(field_name: str) -> None:
    """Given a train platform or line that is not an integer, when loading, then ValueError is raised."""
    data = {"platform": 1, "line": 1, "time": "10:00", field_name: [1]}

    with pytest.raises(ValueError, match=f"'{field_name}' must be an integer"):
        NetworkConfigurationLoader.load_train_config_from_data(data)


@pytest.mark.parametrize("stopping", ["false", 0, 1])
def test_non_boolean_stopping_flag_raises(stopping: object) -> None:
    """Given a stopping flag that is not true or false, when loading, then ValueError is raised."""
    data = {"platform": 1, "line": 1, "time": "10:00", "stopping": stopping}

    with pytest.raises(ValueError, match="'stopping' must be true or false"):
        NetworkConfigurationLoader.load_train_config_from_data(data)


def test_loaded_configuration_is_immutable(tmp_path: Path) -> None:
    """Given a loaded station, when reading its parts, then they are tuples."""
    config = _write_config(
        tmp_path,
        '[[stations]]\nstation_id = "S1"\n\n[[stations.platforms]]\nnumber = 1\nlines = [1, 2]\n',
    )

    station = NetworkConfigurationLoader.load(config)[0]

    assert isinstance(station.platforms, tuple)
    assert isinstance(station.trains, tuple)
    assert station.platforms[0].lines == (1, 2)
