# SPDX-License-Identifier: MIT

from typing import assert_never

from eyehabit.model.task import TaskIcon


def icon_glyph(icon: TaskIcon) -> str:
    match icon:
        case TaskIcon.EYE:
            return "👁"
        case TaskIcon.SUN:
            return "☀"
        case TaskIcon.ACTIVITY:
            return "⚡"
        case TaskIcon.DROPLETS:
            return "💧"
        case TaskIcon.PHONE_OFF:
            return "📵"
        case TaskIcon.MOON:
            return "☾"
        case TaskIcon.BOOK_OPEN:
            return "📖"
        case TaskIcon.MONITOR:
            return "🖥"
        case _:
            assert_never(icon)
