# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from eyehabit.context import get_app_context
from eyehabit.initialize import use_data_path
from eyehabit.repository.task import TaskNotFoundError
from eyehabit.terminal import coach, configuration, note, profile, stats, task
from eyehabit.terminal.custom_typer import OrderedAliasedTyperGroup
from eyehabit.terminal.parse import parse_date
from eyehabit.time import date_to_str
from eyehabit.view import state as view_state
from eyehabit.view.views import dashboard as dashboard_report

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="eyehabit - Eye-care habit tracking in the CLI",
    no_args_is_help=True,
)
app.add_typer(note.app, name="note, n", help="Daily journal notes and mood")
app.add_typer(task.app, name="task, tk", help="Manage the task list")
app.add_typer(stats.app, name="stats, s", help="Streaks, calendar and trends")
app.add_typer(profile.app, name="profile, p", help="Display name and slogan")
app.add_typer(coach.app, name="coach, co", help="Ask the eye-care coach")
app.add_typer(configuration.app, name="config, c", help="Application settings")

DateOption = Annotated[
    Optional[str],
    typer.Option("--date", "-dt", help="YYYY-MM-DD, today, yesterday or day offset"),
]


@app.command("today, t")
def today(date: DateOption = None) -> None:
    """Progress of every task for today."""
    day = parse_date(date)
    app_context = get_app_context()
    dashboard_report.today_view(
        app_context.get_profile(),
        app_context.get_tasks(),
        app_context.records,
        day,
    )


@app.command("done, d", no_args_is_help=True)
def done(task_id: str, date: DateOption = None) -> None:
    """Record one completion of a task."""
    day = parse_date(date)
    app_context = get_app_context()
    try:
        count = app_context.increment_task(task_id, day)
    except TaskNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    task_definition = app_context.tasks.get_task(task_id)
    typer.echo(
        f"{task_definition['title']}: {count} on {date_to_str(day)}"
    )
    dashboard_report.today_view(
        app_context.get_profile(),
        app_context.get_tasks(),
        app_context.records,
        day,
    )


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    data_path: Annotated[
        Optional[Path],
        typer.Option(
            "--data-path",
            help="Use this data directory for this invocation",
        ),
    ] = None,
) -> None:
    """
    eyehabit - Eye-care habit tracking in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if data_path is not None:
        use_data_path(data_path.expanduser())


def run() -> None:
    app()
