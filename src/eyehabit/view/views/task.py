# SPDX-License-Identifier: MIT

from typing import Callable

from rich import box
from rich.console import Console
from rich.table import Table

from eyehabit.model.profile import Profile
from eyehabit.model.task import Task
from eyehabit.view.views.header import header
from eyehabit.view.views.icon import icon_glyph

_CELL: dict[str, Callable[[Task], str]] = {
    "id": lambda task: task["id"],
    "task": lambda task: f"{icon_glyph(task['icon'])} {task['title']}",
    "target": lambda task: str(task["targetCount"]),
    "per": lambda task: "week" if task["frequency"] == "weekly" else "day",
    "duration": lambda task: f"{task['duration']} min",
    "video": lambda task: "▶" if task["videoUrl"] else "",
}


def tasks_view(
    profile: Profile,
    report_name: str,
    tasks: list[Task],
    columns: tuple[str, ...] = ("id", "task", "target", "per", "duration", "video"),
) -> None:
    """
    Display the task list.

    id       task                 target  per  duration  video
    ─────────────────────────────────────────────────────────────
    outdoor  ☀ Outdoor daylight   1       day  120 min
    distant  👁 Distance gazing    3       day  10 min
    """
    header(profile, report_name)

    console = Console()
    if len(tasks) == 0:
        console.print("  no tasks configured, add one with `eyehabit task add`")
        return

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)
    for task in tasks:
        tasks_table.add_row(*(_CELL[column](task) for column in columns))
    console.print(tasks_table)


def single_task_view(profile: Profile, task: Task) -> None:
    header(profile, f"task {task['id']}")

    details = Table(box=box.SIMPLE, show_header=False)
    details.add_column(style="cyan")
    details.add_column()
    details.add_row("title", f"{icon_glyph(task['icon'])} {task['title']}")
    details.add_row("description", task["description"])
    details.add_row("icon", task["icon"].value)
    details.add_row(
        "target",
        f"{task['targetCount']} per {'week' if task['frequency'] == 'weekly' else 'day'}",
    )
    details.add_row("duration", f"{task['duration']} min")
    if task["videoUrl"]:
        details.add_row("video", task["videoUrl"])

    Console().print(details)
