# tests/test_configuration.py

from __future__ import annotations

from pathlib import Path

import pytest

from eyehabit import configuration
from eyehabit.repository.configuration import ConfigurationRepository


def test_defaults_without_config_file(isolated_paths: Path) -> None:
    repo = ConfigurationRepository()

    assert repo.get_config() == configuration.get_default_configuration()
    assert repo.flush() is False
    assert not configuration.APP_CONFIG_PATH.exists()


def test_update_and_flush(isolated_paths: Path) -> None:
    repo = ConfigurationRepository()
    repo.update_config(log_level="debug", coach_model="local-model")

    assert repo.flush() is True
    assert configuration.APP_CONFIG_PATH.is_file()

    reloaded = ConfigurationRepository().get_config()
    assert reloaded["log_level"] == "DEBUG"
    assert reloaded["coach_model"] == "local-model"
    assert reloaded["show_header"] is True


def test_remove_flags(isolated_paths: Path) -> None:
    repo = ConfigurationRepository()
    repo.update_config(coach_base_url="http://localhost:11434/v1")
    repo.update_config(remove_coach_base_url=True)

    assert repo.get_config()["coach_base_url"] is None


def test_unknown_log_level_is_rejected(isolated_paths: Path) -> None:
    repo = ConfigurationRepository()

    with pytest.raises(ValueError):
        repo.update_config(log_level="LOUD")
    assert repo.has_changes is False


def test_partial_file_is_back_filled(isolated_paths: Path) -> None:
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("show_header: false\nunknown: 1\n")

    config = ConfigurationRepository().get_config()

    assert config["show_header"] is False
    assert config["coach_model"] == "gpt-4o-mini"
    assert "unknown" not in config


def test_unreadable_file_gives_defaults(isolated_paths: Path) -> None:
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("show_header: [oops\n")

    assert ConfigurationRepository().get_config() == (
        configuration.get_default_configuration()
    )


@pytest.mark.parametrize(
    ("stored", "key"),
    [
        ("log_level: 5\n", "log_level"),
        ("log_level: LOUD\n", "log_level"),
        ("data_path: 5\n", "data_path"),
        ("show_header: maybe\n", "show_header"),
        ("coach_model: null\n", "coach_model"),
        ("coach_base_url: [a, b]\n", "coach_base_url"),
    ],
)
def test_wrongly_typed_settings_keep_defaults(
    isolated_paths: Path, stored: str, key: str
) -> None:
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text(stored)

    config = ConfigurationRepository().get_config()

    assert config[key] == configuration.get_default_configuration()[key]  # type: ignore[literal-required]


def test_valid_settings_are_kept(isolated_paths: Path) -> None:
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text(
        "log_level: debug\ndata_path: ~/eyes\ncoach_base_url: null\n"
    )

    config = ConfigurationRepository().get_config()

    assert config["log_level"] == "debug"
    assert config["data_path"] == "~/eyes"
    assert config["coach_base_url"] is None
