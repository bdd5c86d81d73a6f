# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum

from eyehabit.model.record import DailyRecord
from eyehabit.model.statistics import CalendarDay, CalendarWeek, DayStatus, TrendPoint
from eyehabit.model.task import Task
from eyehabit.repository.record import RecordStore
from eyehabit.time import date_to_str, to_pendulum_date

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def is_active(record: Optional[DailyRecord]) -> bool:
    if record is None:
        return False
    return any(count > 0 for count in record["progress"].values())


def total_progress(record: Optional[DailyRecord]) -> int:
    if record is None:
        return 0
    return sum(record["progress"].values())


def total_target(tasks: list[Task]) -> int:
    return sum(task["targetCount"] for task in tasks)


def current_streak(store: RecordStore, reference_date: datetime.date) -> int:
    """
    Number of consecutive active days ending at the reference date.

    An inactive reference date does not end the streak; the day may still be
    in progress, so counting starts from the day before instead.
    """
    check_date = to_pendulum_date(reference_date)
    if not is_active(store.get_record(check_date)):
        check_date = check_date.subtract(days=1)

    streak = 0
    while is_active(store.get_record(check_date)):
        streak += 1
        check_date = check_date.subtract(days=1)
    return streak


def day_status(
    store: RecordStore, date: datetime.date, total_target: int
) -> DayStatus:
    completed = total_progress(store.get_record(date))
    if completed == 0:
        return "none"
    # Activity against an empty plan is never a complete day
    if total_target > 0 and completed >= total_target:
        return "full"
    return "partial"


def month_calendar(
    store: RecordStore, year: int, month: int, total_target: int
) -> list[CalendarWeek]:
    """
    Day statuses for one month, as Sunday-first weeks.

    Slots before the first and after the last day of the month are None.
    """
    first = pendulum.date(year, month, 1)
    days: list[Optional[CalendarDay]] = [None] * (first.isoweekday() % 7)
    for offset in range(first.days_in_month):
        date = first.add(days=offset)
        days.append(
            {
                "date": date_to_str(date),
                "status": day_status(store, date, total_target),
            }
        )
    while len(days) % 7 != 0:
        days.append(None)

    return [days[i : i + 7] for i in range(0, len(days), 7)]


def last_7_days(
    store: RecordStore, total_target: int, today: datetime.date
) -> list[TrendPoint]:
    """Daily totals for the seven days ending today, oldest first."""
    end = to_pendulum_date(today)
    points: list[TrendPoint] = []
    for days_back in range(6, -1, -1):
        date = end.subtract(days=days_back)
        completed = total_progress(store.get_record(date))
        points.append(
            {
                "date": date_to_str(date),
                "weekday": WEEKDAY_NAMES[date.isoweekday() - 1],
                "completed": completed,
                "total": total_target,
                "score": (completed / total_target) * 100 if total_target > 0 else 0.0,
            }
        )
    return points


def total_days_active(store: RecordStore) -> int:
    return len(store)
