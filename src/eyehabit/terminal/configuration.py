# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from eyehabit import configuration
from eyehabit.repository.configuration import CONFIGURATION_REPO
from eyehabit.service.coach import get_api_key_from_env
from eyehabit.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _flag(enabled: bool, on: str = "✓ Enabled", off: str = "✗ Disabled") -> str:
    return on if enabled else off


@app.command("view, v")
def view() -> None:
    """Print the effective settings and where they come from."""
    config = CONFIGURATION_REPO.get_config()

    settings = Table(title="settings", title_justify="left")
    settings.add_column("name", style="cyan")
    settings.add_column("value", style="magenta")
    for name, value in (
        ("config file", str(configuration.APP_CONFIG_PATH)),
        ("data directory", str(configuration.DATA_PATH)),
        ("log directory", str(configuration.DATA_LOG_PATH)),
        ("show_header", _flag(config["show_header"])),
        ("log_level", config["log_level"]),
        ("coach_base_url", config["coach_base_url"] or "(OpenAI default)"),
        ("coach_model", config["coach_model"]),
        ("coach api key", _flag(get_api_key_from_env() is not None, "✓ Set", "✗ Missing")),
    ):
        settings.add_row(name, value)

    Console().print(settings)


@app.command("set, s")
def set_options(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory for history, tasks and profile"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the platform data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Header above reports"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Console log level: DEBUG, INFO, WARNING, ERROR"),
    ] = None,
    coach_base_url: Annotated[
        Optional[str],
        typer.Option("--coach-base-url", help="OpenAI-compatible endpoint for the coach"),
    ] = None,
    remove_coach_base_url: Annotated[
        bool,
        typer.Option("--remove-coach-base-url", help="Use the default endpoint"),
    ] = False,
    coach_model: Annotated[
        Optional[str], typer.Option("--coach-model", help="Model name for the coach")
    ] = None,
) -> None:
    """Change settings and save them to the config file."""
    try:
        CONFIGURATION_REPO.update_config(
            data_path=data_path,
            remove_data_path=remove_data_path,
            show_header=show_header,
            log_level=log_level,
            coach_base_url=coach_base_url,
            remove_coach_base_url=remove_coach_base_url,
            coach_model=coach_model,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    CONFIGURATION_REPO.flush()
    view()
