# SPDX-License-Identifier: MIT

from eyehabit.model.statistics import DayStatus

COMPLETED_COLOR = "green"
PARTIAL_COLOR = "yellow"
EMPTY_COLOR = "grey50"


def progress_bar(ratio: float, width: int = 20) -> str:
    filled = round(min(max(ratio, 0.0), 1.0) * width)
    return "█" * filled + "░" * (width - filled)


def status_color(status: DayStatus) -> str:
    if status == "full":
        return COMPLETED_COLOR
    if status == "partial":
        return PARTIAL_COLOR
    return EMPTY_COLOR


def format_percent(value: float) -> str:
    return f"{value:.2f}%"
