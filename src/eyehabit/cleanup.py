# SPDX-License-Identifier: MIT

import atexit

from eyehabit.context import peek_app_context
from eyehabit.repository.configuration import CONFIGURATION_REPO


def flush_and_save() -> None:
    CONFIGURATION_REPO.flush()

    app_context = peek_app_context()
    if app_context is not None and app_context.is_loaded:
        app_context.save()


def register_cleanup() -> None:
    atexit.register(flush_and_save)
