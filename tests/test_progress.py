# tests/test_progress.py

from __future__ import annotations

import pendulum
import pytest

from eyehabit.repository.record import RecordStore
from eyehabit.service.progress import (
    completed_task_count,
    completion_percent,
    completion_ratio,
    get_aggregation_window,
    get_week_start,
    is_satisfied,
    progress_for,
)

from .fakes import make_task, store_with

# 2024-06-03 is a Monday, 2024-06-09 the following Sunday
MONDAY = pendulum.date(2024, 6, 3)


@pytest.mark.parametrize("offset", range(7))
def test_week_start_is_monday(offset: int) -> None:
    assert get_week_start(MONDAY.add(days=offset)) == MONDAY


def test_sunday_belongs_to_previous_week() -> None:
    sunday = pendulum.date(2024, 6, 9)
    assert get_week_start(sunday) == pendulum.date(2024, 6, 3)
    assert get_week_start(sunday.add(days=1)) == pendulum.date(2024, 6, 10)


def test_week_start_across_month_boundary() -> None:
    assert get_week_start(pendulum.date(2024, 6, 1)) == pendulum.date(2024, 5, 27)


def test_aggregation_window() -> None:
    wednesday = pendulum.date(2024, 6, 5)

    assert get_aggregation_window(make_task("a"), wednesday) == (wednesday, wednesday)
    assert get_aggregation_window(make_task("b", frequency="weekly"), wednesday) == (
        MONDAY,
        wednesday,
    )


def test_daily_progress_reads_only_that_day() -> None:
    task = make_task("distant", target_count=3)
    store = store_with(
        {
            "2024-06-04": {"distant": 2},
            "2024-06-05": {"distant": 1, "outdoor": 1},
        }
    )

    assert progress_for(task, pendulum.date(2024, 6, 5), store) == 1
    assert progress_for(task, pendulum.date(2024, 6, 4), store) == 2
    assert progress_for(task, pendulum.date(2024, 6, 6), store) == 0


def test_weekly_progress_sums_monday_through_reference_date() -> None:
    task = make_task("reading", target_count=5, frequency="weekly")
    store = store_with(
        {
            "2024-06-02": {"reading": 10},  # previous Sunday
            "2024-06-03": {"reading": 1},
            "2024-06-05": {"reading": 2, "outdoor": 4},
            "2024-06-06": {"reading": 3},
            "2024-06-10": {"reading": 7},  # next Monday
        }
    )

    assert progress_for(task, pendulum.date(2024, 6, 3), store) == 1
    assert progress_for(task, pendulum.date(2024, 6, 5), store) == 3
    assert progress_for(task, pendulum.date(2024, 6, 9), store) == 6
    assert progress_for(task, pendulum.date(2024, 6, 10), store) == 7


def test_weekly_progress_ignores_records_outside_window() -> None:
    task = make_task("reading", frequency="weekly")
    inside = store_with({"2024-06-04": {"reading": 2}})
    with_outside = store_with(
        {
            "2024-05-31": {"reading": 5},
            "2024-06-04": {"reading": 2},
            "2024-06-07": {"reading": 5},
        }
    )
    as_of = pendulum.date(2024, 6, 5)

    assert progress_for(task, as_of, with_outside) == progress_for(task, as_of, inside) == 2


def test_is_satisfied() -> None:
    task = make_task("distant", target_count=3)
    store = RecordStore.empty()
    day = pendulum.date(2024, 6, 5)
    for expected in [False, False, True]:
        store = store.increment_task(day, "distant")
        assert is_satisfied(task, day, store) is expected


def test_completion_percent_mixed_targets() -> None:
    tasks = [make_task("outdoor", target_count=1), make_task("distant", target_count=3)]
    store = store_with({"2024-06-05": {"outdoor": 1, "distant": 1}})
    day = pendulum.date(2024, 6, 5)

    assert completion_ratio(tasks, day, store) == pytest.approx(2 / 3)
    assert completion_percent(tasks, day, store) == pytest.approx(66.6667, abs=1e-3)
    assert round(completion_percent(tasks, day, store), 2) == 66.67


def test_completion_ratio_is_capped_per_task() -> None:
    tasks = [make_task("outdoor", target_count=1), make_task("distant", target_count=3)]
    store = store_with({"2024-06-05": {"outdoor": 5}})

    assert completion_percent(tasks, pendulum.date(2024, 6, 5), store) == pytest.approx(50.0)


def test_completion_of_empty_task_set_is_zero() -> None:
    store = store_with({"2024-06-05": {"outdoor": 5}})
    assert completion_percent([], pendulum.date(2024, 6, 5), store) == 0


def test_completed_task_count_uses_weekly_windows() -> None:
    tasks = [
        make_task("outdoor"),
        make_task("distant", target_count=3),
        make_task("reading", target_count=2, frequency="weekly"),
    ]
    store = store_with(
        {
            "2024-06-03": {"reading": 1},
            "2024-06-05": {"outdoor": 1, "reading": 1},
        }
    )

    assert completed_task_count(tasks, pendulum.date(2024, 6, 5), store) == 2
