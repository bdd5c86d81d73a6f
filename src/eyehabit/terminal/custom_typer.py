# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR = re.compile(r"\s*,\s*")


def command_aliases(registered_name: str) -> list[str]:
    """`"done, d"` is registered once and answers to both `done` and `d`."""
    return [alias for alias in _ALIAS_SEPARATOR.split(registered_name) if alias]


class AliasedTyperGroup(typer.core.TyperGroup):
    """Group whose command names may list comma-separated aliases."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        for registered_name, command in self.commands.items():
            if cmd_name == registered_name or cmd_name in command_aliases(registered_name):
                return command
        return None


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Top-level group; daily commands are listed first in --help."""

    COMMAND_ORDER = (
        "today, t",
        "done, d",
        "note, n",
        "task, tk",
        "stats, s",
        "profile, p",
        "coach, co",
        "config, c",
    )

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
