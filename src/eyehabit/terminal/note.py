# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from eyehabit.context import get_app_context
from eyehabit.model.record import MOODS, Mood
from eyehabit.terminal.custom_typer import AliasedTyperGroup
from eyehabit.terminal.parse import parse_date
from eyehabit.time import date_to_str

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[str],
    typer.Option("--date", "-dt", help="YYYY-MM-DD, today, yesterday or day offset"),
]


@app.command("set, s", no_args_is_help=True)
def set_note(text: str, date: DateOption = None) -> None:
    """Write the journal note for a day, replacing any previous note."""
    day = parse_date(date)
    get_app_context().update_note(text, day)
    typer.echo(f"note saved for {date_to_str(day)}")


@app.command("show, v")
def show(date: DateOption = None) -> None:
    """Print the journal note for a day."""
    day = parse_date(date)
    record = get_app_context().get_record(day)
    if record is None or not record.get("notes"):
        typer.echo(f"no note for {date_to_str(day)}")
        return
    typer.echo(record["notes"])


@app.command("mood, m", no_args_is_help=True)
def mood(value: str, date: DateOption = None) -> None:
    """Record how your eyes felt: happy, neutral or tired."""
    if value not in MOODS:
        raise typer.BadParameter(f"mood must be one of: {', '.join(MOODS)}")
    day = parse_date(date)
    get_app_context().update_mood(cast(Mood, value), day)
    typer.echo(f"mood saved for {date_to_str(day)}")
