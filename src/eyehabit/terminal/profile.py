# SPDX-License-Identifier: MIT

import typer
from rich.console import Console
from rich.table import Table

from eyehabit.context import get_app_context
from eyehabit.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, v")
def show() -> None:
    """Display the profile."""
    profile = get_app_context().get_profile()

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("name", profile["userName"])
    table.add_row("slogan", profile["slogan"])

    console = Console()
    console.print(table)


@app.command("name, n", no_args_is_help=True)
def name(value: str) -> None:
    """Set the display name. An empty name restores the default."""
    app_context = get_app_context()
    app_context.set_user_name(value)
    typer.echo(f"name: {app_context.get_profile()['userName']}")


@app.command("slogan, s", no_args_is_help=True)
def slogan(value: str) -> None:
    """Set the motivational slogan. An empty slogan restores the default."""
    app_context = get_app_context()
    app_context.set_slogan(value)
    typer.echo(f"slogan: {app_context.get_profile()['slogan']}")
