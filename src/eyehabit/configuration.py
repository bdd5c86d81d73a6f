# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "eyehabit"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Replaced by set_data_path() when the config file or --data-path names one
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_LOG_PATH: Path = DATA_PATH / "logs"

# Keys understood by the persistence adapter
HISTORY_KEY = "history"
TASKS_KEY = "tasks"
USER_NAME_KEY = "user_name"
SLOGAN_KEY = "slogan"

# Checked in order; the first non-empty value is the coach API key
API_KEY_ENV_VARS = ("EYEHABIT_API_KEY", "OPENAI_API_KEY")


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    log_level: str
    coach_base_url: Optional[str]
    coach_model: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "log_level": "WARNING",
        "coach_base_url": None,
        "coach_model": "gpt-4o-mini",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_LOG_PATH

    DATA_PATH = data_path
    DATA_LOG_PATH = DATA_PATH / "logs"
