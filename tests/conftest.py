# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from eyehabit import configuration
from eyehabit.context import AppContext, set_app_context
from eyehabit.repository.configuration import CONFIGURATION_REPO
from eyehabit.repository.persistence import MemoryPersistence


@pytest.fixture()
def persistence() -> MemoryPersistence:
    return MemoryPersistence()


@pytest.fixture()
def app_context(persistence: MemoryPersistence) -> AppContext:
    """Context on in-memory persistence, loaded with the default tasks."""
    context = AppContext(persistence)
    context.load()
    return context


@pytest.fixture()
def isolated_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data paths at a temp directory."""
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(configuration, "DATA_LOG_PATH", tmp_path / "data" / "logs")
    for name in configuration.API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture()
def cli_context(app_context: AppContext, isolated_paths: Path) -> Iterator[AppContext]:
    """Install the in-memory context as the process-wide one for CLI tests."""
    CONFIGURATION_REPO.reset()
    set_app_context(app_context)
    yield app_context
    set_app_context(None)
    CONFIGURATION_REPO.reset()
