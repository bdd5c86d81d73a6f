# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from eyehabit.model.profile import Profile
from eyehabit.model.statistics import CalendarWeek, TrendPoint
from eyehabit.model.task import Task
from eyehabit.repository.record import RecordStore
from eyehabit.view.views.header import header
from eyehabit.view.views.util import format_percent, progress_bar, status_color


def summary_view(
    profile: Profile,
    streak: int,
    days_active: int,
    today_percent: float,
) -> None:
    header(profile, "statistics")

    summary_table = Table(box=box.SIMPLE)
    summary_table.add_column("metric")
    summary_table.add_column("value")
    summary_table.add_row("current streak", f"{streak} days")
    summary_table.add_row("days recorded", str(days_active))
    summary_table.add_row("today", format_percent(today_percent))

    console = Console()
    console.print(summary_table)


def calendar_view(
    profile: Profile,
    year: int,
    month: int,
    weeks: list[CalendarWeek],
) -> None:
    """Month grid, Sunday first; full days green, partial days yellow."""
    header(profile, f"calendar {year:04d}-{month:02d}")

    calendar_table = Table(box=box.SIMPLE)
    for day_name in ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]:
        calendar_table.add_column(day_name, justify="right")

    for week in weeks:
        row = []
        for day in week:
            if day is None:
                row.append(Text(""))
                continue
            day_number = str(int(day["date"][-2:]))
            row.append(Text(day_number, style=status_color(day["status"])))
        calendar_table.add_row(*row)

    console = Console()
    console.print(calendar_table)
    console.print(
        "  [green]■[/green] complete  [yellow]■[/yellow] in progress  [grey50]■[/grey50] none"
    )


def trend_view(profile: Profile, points: list[TrendPoint]) -> None:
    header(profile, "last 7 days")

    trend_table = Table(box=box.SIMPLE)
    trend_table.add_column("day")
    trend_table.add_column("date")
    trend_table.add_column("completed")
    trend_table.add_column("score")
    trend_table.add_column("")

    for point in points:
        trend_table.add_row(
            point["weekday"],
            point["date"],
            f"{point['completed']}/{point['total']}",
            format_percent(point["score"]),
            progress_bar(point["score"] / 100, width=14),
        )

    console = Console()
    console.print(trend_table)


def history_view(profile: Profile, store: RecordStore, tasks: list[Task]) -> None:
    """All records, newest first, with task titles where the task still exists."""
    header(profile, "history")

    titles = {task["id"]: task["title"] for task in tasks}

    history_table = Table(box=box.SIMPLE)
    history_table.add_column("date")
    history_table.add_column("progress")
    history_table.add_column("mood")
    history_table.add_column("note")

    for record in reversed(store.records):
        progress = ", ".join(
            f"{titles.get(task_id, task_id)}: {count}"
            for task_id, count in record["progress"].items()
        )
        history_table.add_row(
            record["date"],
            progress or "-",
            record.get("mood", ""),
            record.get("notes", ""),
        )

    console = Console()
    console.print(history_table)
