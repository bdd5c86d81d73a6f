# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from eyehabit.context import get_app_context
from eyehabit.model.task import TaskIcon
from eyehabit.repository.task import TaskNotFoundError, TaskValidationError
from eyehabit.terminal.custom_typer import AliasedTyperGroup
from eyehabit.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_tasks() -> None:
    """List the configured tasks."""
    app_context = get_app_context()
    task_report.tasks_view(app_context.get_profile(), "tasks", app_context.get_tasks())


@app.command("show, s", no_args_is_help=True)
def show(id: str) -> None:
    """Show one task."""
    app_context = get_app_context()
    try:
        task = app_context.tasks.get_task(id)
    except TaskNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    task_report.single_task_view(app_context.get_profile(), task)


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    target_count: Annotated[
        int,
        typer.Option("--target", "-c", help="completions per day or per week"),
    ] = 1,
    frequency: Annotated[
        str, typer.Option("--frequency", "-f", help="daily, weekly")
    ] = "daily",
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
    icon: Annotated[
        TaskIcon, typer.Option("--icon", "-i", case_sensitive=False)
    ] = TaskIcon.EYE,
    duration: Annotated[
        int, typer.Option("--duration", "-m", help="minutes per session")
    ] = 10,
    video_url: Annotated[
        Optional[str], typer.Option("--video", "-v", help="link to a guide video")
    ] = None,
) -> None:
    """Create a new task."""
    app_context = get_app_context()
    try:
        task = app_context.add_task(
            title,
            target_count=target_count,
            frequency=frequency,
            description=description,
            icon=icon,
            duration=duration,
            video_url=video_url,
        )
    except TaskValidationError as e:
        typer.echo(f"Invalid task: {e}")
        raise typer.Exit(1)

    task_report.single_task_view(app_context.get_profile(), task)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    target_count: Annotated[Optional[int], typer.Option("--target", "-c")] = None,
    frequency: Annotated[
        Optional[str], typer.Option("--frequency", "-f", help="daily, weekly")
    ] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
    icon: Annotated[
        Optional[TaskIcon], typer.Option("--icon", "-i", case_sensitive=False)
    ] = None,
    duration: Annotated[Optional[int], typer.Option("--duration", "-m")] = None,
    video_url: Annotated[Optional[str], typer.Option("--video", "-v")] = None,
    remove_video_url: Annotated[
        bool, typer.Option("--remove-video", "-rv")
    ] = False,
) -> None:
    """Modify a task. Past records are re-read against the new target."""
    app_context = get_app_context()
    try:
        task = app_context.modify_task(
            id,
            title=title,
            target_count=target_count,
            frequency=frequency,
            description=description,
            icon=icon,
            duration=duration,
            video_url=video_url,
            remove_video_url=remove_video_url,
        )
    except (TaskNotFoundError, TaskValidationError) as e:
        typer.echo(f"Task not changed: {e}")
        raise typer.Exit(1)

    task_report.single_task_view(app_context.get_profile(), task)


@app.command("delete, rm", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Delete a task. Its counts stay in the history."""
    app_context = get_app_context()
    if not app_context.tasks.has_task(id):
        typer.echo(str(TaskNotFoundError(id)))
        raise typer.Exit(1)
    if not yes:
        typer.confirm(f"Delete task {id}?", abort=True)

    task = app_context.delete_task(id)
    typer.echo(f"deleted task {task['id']}: {task['title']}")


@app.command("reset")
def reset(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Restore the default task list."""
    if not yes:
        typer.confirm("Replace the task list with the defaults?", abort=True)
    app_context = get_app_context()
    app_context.reset_tasks()
    task_report.tasks_view(app_context.get_profile(), "tasks", app_context.get_tasks())


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Remove every task."""
    if not yes:
        typer.confirm("Remove all tasks?", abort=True)
    get_app_context().clear_tasks()
    typer.echo("all tasks removed")
