# tests/test_cli.py

from __future__ import annotations

import importlib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from eyehabit import configuration
from eyehabit.context import AppContext
from eyehabit.service.coach import NOT_CONFIGURED_TIP
from eyehabit.terminal.app import app

runner = CliRunner()


def test_done_records_a_completion(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["--no-header", "done", "distant", "--date", "2024-06-05"])

    assert result.exit_code == 0, result.output
    assert "Distance gazing: 1 on 2024-06-05" in result.output
    assert cli_context.records.get_count("2024-06-05", "distant") == 1


def test_done_alias(cli_context: AppContext) -> None:
    runner.invoke(app, ["d", "outdoor", "-dt", "2024-06-05"])
    result = runner.invoke(app, ["d", "outdoor", "-dt", "2024-06-05"])

    assert result.exit_code == 0, result.output
    assert cli_context.records.get_count("2024-06-05", "outdoor") == 2


def test_done_unknown_task(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["done", "nope"])

    assert result.exit_code == 1
    assert "no task with id 'nope'" in result.output
    assert len(cli_context.records) == 0


def test_invalid_date_is_a_usage_error(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["done", "outdoor", "--date", "2024-02-30"])

    assert result.exit_code == 2
    assert len(cli_context.records) == 0


def test_today(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["today"])

    assert result.exit_code == 0, result.output
    assert "Outdoor daylight" in result.output
    assert "Distance gazing" in result.output


def test_task_add_and_list(cli_context: AppContext) -> None:
    result = runner.invoke(
        app, ["task", "add", "Blink breaks", "--target", "4", "--frequency", "weekly"]
    )
    assert result.exit_code == 0, result.output

    titles = [task["title"] for task in cli_context.get_tasks()]
    assert titles == ["Outdoor daylight", "Distance gazing", "Blink breaks"]

    result = runner.invoke(app, ["tk", "ls"])
    assert "Blink breaks" in result.output


def test_task_add_rejects_invalid_target(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["task", "add", "Blink breaks", "--target", "0"])

    assert result.exit_code == 1
    assert "Invalid task" in result.output
    assert len(cli_context.get_tasks()) == 2


def test_task_modify(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["task", "modify", "distant", "--target", "5"])

    assert result.exit_code == 0, result.output
    assert cli_context.tasks.get_task("distant")["targetCount"] == 5


def test_task_delete_needs_confirmation(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["task", "delete", "distant"], input="n\n")

    assert result.exit_code == 1
    assert cli_context.tasks.has_task("distant")

    result = runner.invoke(app, ["task", "rm", "distant", "--yes"])

    assert result.exit_code == 0, result.output
    assert not cli_context.tasks.has_task("distant")


def test_note_set_and_show(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["note", "set", "eyes felt dry", "--date", "2024-06-05"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["n", "show", "--date", "2024-06-05"])
    assert result.output.strip() == "eyes felt dry"

    result = runner.invoke(app, ["n", "show", "--date", "2024-06-06"])
    assert "no note for 2024-06-06" in result.output


def test_note_mood_rejects_unknown_value(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["note", "mood", "grumpy"])

    assert result.exit_code == 2
    assert len(cli_context.records) == 0


def test_stats_calendar_rejects_bad_month(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["stats", "calendar", "--month", "2024-13"])

    assert result.exit_code == 2


def test_stats_commands(cli_context: AppContext) -> None:
    runner.invoke(app, ["done", "outdoor"])

    for command in (["stats", "summary"], ["s", "c", "-m", "2024-06"], ["s", "t"], ["s", "h"]):
        result = runner.invoke(app, command)
        assert result.exit_code == 0, result.output


def test_profile_name(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["profile", "name", "Sam"])

    assert result.exit_code == 0, result.output
    assert cli_context.get_profile()["userName"] == "Sam"


def test_coach_tip_without_key(cli_context: AppContext) -> None:
    result = runner.invoke(app, ["coach", "tip"])

    assert result.exit_code == 0, result.output
    assert NOT_CONFIGURED_TIP in result.output


def test_data_path_option_moves_log_directory(
    cli_context: AppContext, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    log_dirs: list[Path] = []
    monkeypatch.setattr(
        importlib.import_module("eyehabit.initialize"),
        "setup_logging",
        lambda log_dir, console_level: log_dirs.append(log_dir),
    )
    other = tmp_path / "elsewhere"

    result = runner.invoke(app, ["--data-path", str(other), "today"])

    assert result.exit_code == 0, result.output
    assert configuration.DATA_PATH == other
    assert other.is_dir()
    assert log_dirs == [other / "logs"]
