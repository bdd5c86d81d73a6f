# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from eyehabit.context import get_app_context
from eyehabit.service.progress import completion_percent
from eyehabit.service.statistics import (
    current_streak,
    last_7_days,
    month_calendar,
    total_days_active,
    total_target,
)
from eyehabit.terminal.custom_typer import AliasedTyperGroup
from eyehabit.terminal.parse import parse_month
from eyehabit.time import today_local
from eyehabit.view.views import statistics as statistics_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("summary, s")
def summary() -> None:
    """Streak, recorded days and today's completion."""
    app_context = get_app_context()
    today = today_local()
    statistics_report.summary_view(
        app_context.get_profile(),
        current_streak(app_context.records, today),
        total_days_active(app_context.records),
        completion_percent(app_context.get_tasks(), today, app_context.records),
    )


@app.command("calendar, c")
def calendar(
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", help="YYYY-MM, default current")
    ] = None,
) -> None:
    """Month calendar of complete and partial days."""
    year, month_number = parse_month(month)
    app_context = get_app_context()
    weeks = month_calendar(
        app_context.records,
        year,
        month_number,
        total_target(app_context.get_tasks()),
    )
    statistics_report.calendar_view(
        app_context.get_profile(), year, month_number, weeks
    )


@app.command("trend, t")
def trend() -> None:
    """Completed steps for each of the last seven days."""
    app_context = get_app_context()
    points = last_7_days(
        app_context.records,
        total_target(app_context.get_tasks()),
        today_local(),
    )
    statistics_report.trend_view(app_context.get_profile(), points)


@app.command("history, h")
def history() -> None:
    """Every recorded day, newest first."""
    app_context = get_app_context()
    statistics_report.history_view(
        app_context.get_profile(), app_context.records, app_context.get_tasks()
    )


@app.command("reset")
def reset(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Erase the whole history."""
    if not yes:
        typer.confirm("Erase all recorded days?", abort=True)
    get_app_context().reset_history()
    typer.echo("history erased")
