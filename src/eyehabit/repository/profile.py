# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from eyehabit.model.profile import Profile

DEFAULT_USER_NAME = "Eye Care Champion"
DEFAULT_SLOGAN = "Keep protecting your eyes today."


def get_default_profile() -> Profile:
    return {"userName": DEFAULT_USER_NAME, "slogan": DEFAULT_SLOGAN}


class ProfileRepository:
    def __init__(
        self, user_name: Optional[str] = None, slogan: Optional[str] = None
    ) -> None:
        self._profile = get_default_profile()
        if user_name:
            self._profile["userName"] = user_name
        if slogan:
            self._profile["slogan"] = slogan

    def get_profile(self) -> Profile:
        return deepcopy(self._profile)

    def set_user_name(self, user_name: str) -> None:
        self._profile["userName"] = user_name.strip() or DEFAULT_USER_NAME

    def set_slogan(self, slogan: str) -> None:
        self._profile["slogan"] = slogan.strip() or DEFAULT_SLOGAN
