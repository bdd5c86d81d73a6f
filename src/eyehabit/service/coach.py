# SPDX-License-Identifier: MIT

import logging
import os
import uuid
from typing import Any, Optional

import openai
from openai import OpenAI

from eyehabit import configuration
from eyehabit.model.chat import ChatMessage, ChatRole
from eyehabit.time import timestamp_ms

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are Dr. Vision, a friendly eye-care coach. Help the user build "
    "healthy screen and reading habits, prevent digital eye strain and stay "
    "motivated. Keep answers short, practical and empathetic. Never give a "
    "medical diagnosis; for serious symptoms always recommend seeing a doctor."
)
TIP_PROMPT = (
    "Give me one short, single-sentence eye-care or digital wellbeing tip, "
    "under 20 words, without Markdown."
)

NOT_CONFIGURED_REPLY = "I can't connect right now. Please check your API key."
UNAVAILABLE_REPLY = "Sorry, I can't handle your request at the moment. Please try again later."
NOT_CONFIGURED_TIP = "Remember to blink often and keep your eyes moist!"
UNAVAILABLE_TIP = "Take a break and look out of the window!"

_ROLE_MAP: dict[ChatRole, str] = {"user": "user", "model": "assistant"}


def get_api_key_from_env() -> Optional[str]:
    for name in configuration.API_KEY_ENV_VARS:
        value = os.getenv(name)
        if value is not None and value.strip() != "":
            return value.strip()
    return None


def new_chat_message(role: ChatRole, text: str) -> ChatMessage:
    return {
        "id": str(uuid.uuid4()),
        "role": role,
        "text": text,
        "timestamp": timestamp_ms(),
    }


class CoachClient:
    """
    Eye-care coach on an OpenAI-compatible chat completions endpoint.

    Never raises to the caller: a missing key or a failed request turns into
    a canned reply, and no habit data is read or written.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        client: Optional[Any] = None,
        timeout: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def __get_client(self) -> Any:
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def __complete(self, messages: list[dict[str, str]]) -> str:
        response = self.__get_client().chat.completions.create(
            model=self.model,
            messages=[{"role": "system", "content": SYSTEM_PROMPT}, *messages],
        )
        if not response.choices:
            raise ValueError(f"model {self.model} returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise ValueError(f"model {self.model} returned no content")
        return str(content).strip()

    def send_message(self, history: list[ChatMessage], message: str) -> str:
        if not self.is_configured:
            logger.warning("coach API key is missing; returning canned reply")
            return NOT_CONFIGURED_REPLY

        messages = [
            {"role": _ROLE_MAP[item["role"]], "content": item["text"]}
            for item in history
        ]
        messages.append({"role": "user", "content": message})

        try:
            return self.__complete(messages)
        except (openai.OpenAIError, ValueError) as e:
            logger.error("coach chat failed: %s: %s", e.__class__.__name__, e)
            return UNAVAILABLE_REPLY

    def generate_tip(self) -> str:
        if not self.is_configured:
            logger.warning("coach API key is missing; returning canned tip")
            return NOT_CONFIGURED_TIP

        try:
            return self.__complete([{"role": "user", "content": TIP_PROMPT}])
        except (openai.OpenAIError, ValueError) as e:
            logger.error("coach tip failed: %s: %s", e.__class__.__name__, e)
            return UNAVAILABLE_TIP


def get_coach_client(model: str, base_url: Optional[str]) -> CoachClient:
    return CoachClient(api_key=get_api_key_from_env(), model=model, base_url=base_url)
