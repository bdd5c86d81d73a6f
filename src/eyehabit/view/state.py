# SPDX-License-Identifier: MIT

"""Per-invocation display switches shared by all report views."""

from contextvars import ContextVar

_show_header: ContextVar[bool] = ContextVar("eyehabit_show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    """True unless headers were switched off in config or by --no-header."""
    return _show_header.get()
