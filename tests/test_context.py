# tests/test_context.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pendulum
import pytest

from eyehabit import configuration
from eyehabit.context import AppContext
from eyehabit.repository.persistence import FilePersistence, MemoryPersistence
from eyehabit.repository.profile import DEFAULT_SLOGAN, DEFAULT_USER_NAME
from eyehabit.repository.record import RecordStore
from eyehabit.repository.task import TaskNotFoundError, TaskRegistry

from .fakes import FailingPersistence

DAY = pendulum.date(2024, 6, 5)


def test_load_migrates_legacy_history() -> None:
    persistence = MemoryPersistence(
        {
            configuration.HISTORY_KEY: json.dumps(
                [{"date": "2024-06-04", "completedTaskIds": ["outdoor"]}]
            ),
        }
    )
    app_context = AppContext(persistence)
    app_context.load()

    assert app_context.records.get_count("2024-06-04", "outdoor") == 1
    assert app_context.get_profile() == {
        "userName": DEFAULT_USER_NAME,
        "slogan": DEFAULT_SLOGAN,
    }


def test_corrupt_state_loads_defaults() -> None:
    persistence = MemoryPersistence(
        {
            configuration.HISTORY_KEY: "{{{",
            configuration.TASKS_KEY: "- not: [valid",
        }
    )
    app_context = AppContext(persistence)
    app_context.load()

    assert len(app_context.records) == 0
    assert [task["id"] for task in app_context.get_tasks()] == ["outdoor", "distant"]


def test_increment_publishes_and_persists(
    app_context: AppContext, persistence: MemoryPersistence
) -> None:
    assert app_context.increment_task("distant", DAY) == 1
    assert app_context.increment_task("distant", DAY) == 2

    stored = RecordStore.load(persistence.get(configuration.HISTORY_KEY))
    assert stored.get_count(DAY, "distant") == 2
    assert stored == app_context.records


def test_increment_unknown_task_changes_nothing(
    app_context: AppContext, persistence: MemoryPersistence
) -> None:
    with pytest.raises(TaskNotFoundError):
        app_context.increment_task("nope", DAY)

    assert len(app_context.records) == 0
    assert persistence.get(configuration.HISTORY_KEY) is None


def test_note_and_mood(app_context: AppContext) -> None:
    app_context.increment_task("outdoor", DAY)
    app_context.update_note("eyes felt dry", DAY)
    app_context.update_mood("tired", DAY)

    assert app_context.get_record(DAY) == {
        "date": "2024-06-05",
        "progress": {"outdoor": 1},
        "notes": "eyes felt dry",
        "mood": "tired",
    }


def test_reset_history(app_context: AppContext, persistence: MemoryPersistence) -> None:
    app_context.increment_task("outdoor", DAY)
    app_context.reset_history()

    assert len(app_context.records) == 0
    assert len(RecordStore.load(persistence.get(configuration.HISTORY_KEY))) == 0


def test_task_edits_are_persisted(
    app_context: AppContext, persistence: MemoryPersistence
) -> None:
    task = app_context.add_task("Blink breaks", target_count=4)
    app_context.modify_task("outdoor", target_count=2)
    app_context.delete_task("distant")

    stored = TaskRegistry.load(persistence.get(configuration.TASKS_KEY))
    assert [t["id"] for t in stored.get_all_tasks()] == ["outdoor", task["id"]]
    assert stored.get_task("outdoor")["targetCount"] == 2


def test_profile_is_persisted(
    app_context: AppContext, persistence: MemoryPersistence
) -> None:
    app_context.set_user_name("Sam")
    app_context.set_slogan("")

    assert persistence.get(configuration.USER_NAME_KEY) == "Sam"
    assert persistence.get(configuration.SLOGAN_KEY) == DEFAULT_SLOGAN

    reloaded = AppContext(persistence)
    reloaded.load()
    assert reloaded.get_profile()["userName"] == "Sam"


def test_failed_write_keeps_memory_state(caplog: pytest.LogCaptureFixture) -> None:
    persistence = FailingPersistence()
    app_context = AppContext(persistence)
    app_context.load()

    with caplog.at_level(logging.ERROR, logger="eyehabit"):
        count = app_context.increment_task("outdoor", DAY)

    assert count == 1
    assert app_context.records.get_count(DAY, "outdoor") == 1
    assert persistence.write_attempts == 1
    assert "failed to persist state" in caplog.text
    assert app_context.save() is False


def test_file_persistence_round_trip(tmp_path: Path) -> None:
    persistence = FilePersistence(tmp_path / "data")
    assert persistence.get(configuration.HISTORY_KEY) is None

    app_context = AppContext(persistence)
    app_context.load()
    app_context.increment_task("outdoor", DAY)
    app_context.update_note("ünïcode note", DAY)

    assert (tmp_path / "data" / "history.yaml").is_file()
    assert not list((tmp_path / "data").glob("*.tmp"))

    reloaded = AppContext(FilePersistence(tmp_path / "data"))
    reloaded.load()
    assert reloaded.records == app_context.records


def test_file_persistence_rejects_path_like_keys(tmp_path: Path) -> None:
    persistence = FilePersistence(tmp_path)

    with pytest.raises(ValueError):
        persistence.set("../escape", "x")


def test_undecodable_file_loads_as_missing(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (tmp_path / "history.yaml").write_bytes(b"\xff\xfe- date: '2024-06-01'\n")
    (tmp_path / "tasks.yaml").write_bytes(b"\xff\xfe[]\n")
    persistence = FilePersistence(tmp_path)

    with caplog.at_level(logging.WARNING, logger="eyehabit"):
        assert persistence.get(configuration.HISTORY_KEY) is None

        app_context = AppContext(persistence)
        app_context.load()

    assert len(app_context.records) == 0
    assert [task["id"] for task in app_context.get_tasks()] == ["outdoor", "distant"]
    assert "ignoring unreadable" in caplog.text
