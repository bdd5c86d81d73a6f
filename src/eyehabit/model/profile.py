# SPDX-License-Identifier: MIT

from typing import TypedDict


class Profile(TypedDict):
    userName: str
    slogan: str
