# SPDX-License-Identifier: MIT

import datetime
import re

import pendulum

DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_str(date: datetime.date) -> str:
    """Format a date as a 'YYYY-MM-DD' record key."""
    return date.strftime("%Y-%m-%d")


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' record key. Raises ValueError on anything else."""
    if not DATE_KEY_PATTERN.match(date_str):
        raise ValueError(f"not a YYYY-MM-DD date: {date_str!r}")
    year, month, day = map(int, date_str.split("-"))
    return pendulum.date(year, month, day)


def is_date_str(value: str) -> bool:
    try:
        date_from_str(value)
    except ValueError:
        return False
    return True


def to_pendulum_date(date: datetime.date) -> pendulum.Date:
    return pendulum.date(date.year, date.month, date.day)


def timestamp_ms() -> int:
    return int(now_utc().timestamp() * 1000)
