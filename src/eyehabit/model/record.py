# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, TypedDict

Mood = Literal["happy", "neutral", "tired"]

MOODS: tuple[Mood, ...] = ("happy", "neutral", "tired")


class DailyRecord(TypedDict):
    date: str  # YYYY-MM-DD
    progress: dict[str, int]  # task id -> count on this date
    notes: NotRequired[str]
    mood: NotRequired[Mood]
