# SPDX-License-Identifier: MIT

import typer
from rich.console import Console
from rich.padding import Padding

from eyehabit.model.chat import ChatMessage
from eyehabit.repository.configuration import CONFIGURATION_REPO
from eyehabit.service.coach import CoachClient, get_coach_client, new_chat_message
from eyehabit.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()


def _coach() -> CoachClient:
    config = CONFIGURATION_REPO.get_config()
    return get_coach_client(config["coach_model"], config["coach_base_url"])


def _print_reply(text: str) -> None:
    console.print(Padding(f"[spring_green3]Dr. Vision:[/spring_green3] {text}", (0, 1)))


@app.command("ask, a", no_args_is_help=True)
def ask(message: str) -> None:
    """Ask the eye-care coach a single question."""
    _print_reply(_coach().send_message([], message))


@app.command("chat, c")
def chat() -> None:
    """Talk with the coach until an empty line."""
    coach = _coach()
    history: list[ChatMessage] = []
    while True:
        message = typer.prompt("you", default="", show_default=False)
        if message.strip() == "":
            break
        reply = coach.send_message(history, message)
        history.append(new_chat_message("user", message))
        history.append(new_chat_message("model", reply))
        _print_reply(reply)


@app.command("tip, t")
def tip() -> None:
    """One short eye-care tip."""
    _print_reply(_coach().generate_tip())
