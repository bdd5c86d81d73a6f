# SPDX-License-Identifier: MIT

import datetime

from rich import box
from rich.console import Console
from rich.table import Table

from eyehabit.model.profile import Profile
from eyehabit.model.task import Task
from eyehabit.repository.record import RecordStore
from eyehabit.service.progress import (
    completed_task_count,
    completion_percent,
    progress_for,
)
from eyehabit.service.statistics import current_streak
from eyehabit.time import date_to_str
from eyehabit.view.views.header import header
from eyehabit.view.views.icon import icon_glyph
from eyehabit.view.views.util import (
    COMPLETED_COLOR,
    EMPTY_COLOR,
    format_percent,
    progress_bar,
)


def today_view(
    profile: Profile,
    tasks: list[Task],
    store: RecordStore,
    date: datetime.date,
) -> None:
    """
    Display progress for every task on one date.

    id        task                 window  progress  done
    ───────────────────────────────────────────────────────
    outdoor   ☀ Outdoor daylight   daily   1/1       ✓
    distant   👁 Distance gazing    daily   1/3
    """
    header(profile, f"today {date_to_str(date)}")

    console = Console()
    percent = completion_percent(tasks, date, store)
    completed = completed_task_count(tasks, date, store)

    console.print(
        f"  {progress_bar(percent / 100)} {format_percent(percent)}"
        f"  [bold]{completed}/{len(tasks)}[/bold] done"
        f"  streak: [bold]{current_streak(store, date)}[/bold] days"
    )

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("id")
    task_table.add_column("task")
    task_table.add_column("window")
    task_table.add_column("progress")
    task_table.add_column("done")

    for task in tasks:
        count = progress_for(task, date, store)
        satisfied = count >= task["targetCount"]
        color = COMPLETED_COLOR if satisfied else EMPTY_COLOR
        task_table.add_row(
            task["id"],
            f"{icon_glyph(task['icon'])} {task['title']}",
            "this week" if task["frequency"] == "weekly" else "today",
            f"[{color}]{count}/{task['targetCount']}[/{color}]",
            f"[{COMPLETED_COLOR}]✓[/{COMPLETED_COLOR}]" if satisfied else "",
        )
    console.print(task_table)

    record = store.get_record(date)
    if record is not None and record.get("mood") is not None:
        console.print(f"  mood: {record['mood']}")
    if record is not None and record.get("notes"):
        console.print(f"  note: {record['notes']}")
