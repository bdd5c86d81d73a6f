# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Literal, Optional, TypedDict

from eyehabit.model.task_id import TaskId

Frequency = Literal["daily", "weekly"]

FREQUENCIES: tuple[Frequency, ...] = ("daily", "weekly")


class TaskIcon(str, Enum):
    EYE = "Eye"
    SUN = "Sun"
    ACTIVITY = "Activity"
    DROPLETS = "Droplets"
    PHONE_OFF = "PhoneOff"
    MOON = "Moon"
    BOOK_OPEN = "BookOpen"
    MONITOR = "Monitor"


class Task(TypedDict):
    id: TaskId
    title: str
    description: str
    icon: TaskIcon
    duration: int  # minutes
    targetCount: int  # completions per day or per week
    frequency: Frequency
    videoUrl: Optional[str]
