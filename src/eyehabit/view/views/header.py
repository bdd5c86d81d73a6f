# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from eyehabit.model.profile import Profile
from eyehabit.view.state import get_show_header


def header(profile: Profile, sub_header: Optional[str] = None) -> None:
    """
    Print the report banner: app name, report name and the user's profile.

    Nothing is printed while headers are switched off.
    """
    if not get_show_header():
        return

    title = "[spring_green3]eyehabit[/spring_green3]"
    if sub_header is not None:
        title += f" [sandy_brown]{sub_header}[/sandy_brown]"

    console = Console()
    console.print(Padding(title, (1, 0, 0, 1)))
    console.print(
        Padding(
            f"[plum1]{profile['userName']}[/plum1] [grey62]{profile['slogan']}[/grey62]",
            (0, 1, 1, 1),
        )
    )
