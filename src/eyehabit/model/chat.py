# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

ChatRole = Literal["user", "model"]


class ChatMessage(TypedDict):
    id: str
    role: ChatRole
    text: str
    timestamp: int  # epoch milliseconds
