# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

DayStatus = Literal["none", "partial", "full"]


class CalendarDay(TypedDict):
    date: str
    status: DayStatus


CalendarWeek = list[Optional[CalendarDay]]


class TrendPoint(TypedDict):
    date: str
    weekday: str
    completed: int
    total: int
    score: float
