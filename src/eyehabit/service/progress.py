# SPDX-License-Identifier: MIT

import datetime

import pendulum

from eyehabit.model.task import Task
from eyehabit.repository.record import RecordStore
from eyehabit.time import date_to_str, to_pendulum_date


def get_week_start(date: datetime.date) -> pendulum.Date:
    """
    Monday of the calendar week containing `date`.

    Sunday belongs to the week that started six days earlier.
    """
    local_date = to_pendulum_date(date)
    return local_date.subtract(days=local_date.isoweekday() - 1)


def get_aggregation_window(
    task: Task, as_of_date: datetime.date
) -> tuple[pendulum.Date, pendulum.Date]:
    """Inclusive (start, end) dates over which the task's progress is summed."""
    end = to_pendulum_date(as_of_date)
    if task["frequency"] == "weekly":
        return get_week_start(end), end
    return end, end


def progress_for(task: Task, as_of_date: datetime.date, store: RecordStore) -> int:
    if task["frequency"] == "weekly":
        start, end = get_aggregation_window(task, as_of_date)
        return sum(
            record["progress"].get(task["id"], 0)
            for record in store.records_between(date_to_str(start), date_to_str(end))
        )
    return store.get_count(as_of_date, task["id"])


def is_satisfied(task: Task, as_of_date: datetime.date, store: RecordStore) -> bool:
    return progress_for(task, as_of_date, store) >= task["targetCount"]


def completion_ratio(
    tasks: list[Task], as_of_date: datetime.date, store: RecordStore
) -> float:
    """Mean of each task's progress over target, capped at 1.0 per task."""
    if len(tasks) == 0:
        return 0.0
    total = sum(
        min(progress_for(task, as_of_date, store) / task["targetCount"], 1.0)
        for task in tasks
    )
    return total / len(tasks)


def completion_percent(
    tasks: list[Task], as_of_date: datetime.date, store: RecordStore
) -> float:
    return completion_ratio(tasks, as_of_date, store) * 100


def completed_task_count(
    tasks: list[Task], as_of_date: datetime.date, store: RecordStore
) -> int:
    return len([task for task in tasks if is_satisfied(task, as_of_date, store)])
