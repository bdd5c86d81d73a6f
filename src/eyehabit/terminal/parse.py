# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from eyehabit.time import date_from_str, today_local


def parse_date(date_param: Optional[str]) -> pendulum.Date:
    """
    Resolve a CLI date argument to a local date.

    Accepts YYYY-MM-DD, `today`/`t`, `yesterday`/`y`, or a relative day
    offset such as `-1`. None means today.
    """
    today = today_local()
    if date_param is None:
        return today

    value = date_param.strip().lower()
    if value in ("today", "t"):
        return today
    if value in ("yesterday", "y"):
        return today.subtract(days=1)
    if re.match(r"^-?\d+$", value):
        return today.add(days=int(value))
    try:
        return date_from_str(value)
    except ValueError:
        raise typer.BadParameter(
            f"expected YYYY-MM-DD, today, yesterday or a day offset, got {date_param!r}"
        )


def parse_month(month_param: Optional[str]) -> tuple[int, int]:
    """Resolve YYYY-MM (None means the current month) to (year, month)."""
    if month_param is None:
        today = today_local()
        return today.year, today.month

    match = re.match(r"^(\d{4})-(\d{1,2})$", month_param.strip())
    if match is None:
        raise typer.BadParameter(f"expected YYYY-MM, got {month_param!r}")
    year, month = int(match.group(1)), int(match.group(2))
    if month < 1 or month > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")
    return year, month
