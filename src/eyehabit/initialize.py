# SPDX-License-Identifier: MIT

from pathlib import Path

from eyehabit import configuration
from eyehabit.logging_setup import parse_log_level, setup_logging
from eyehabit.repository.configuration import CONFIGURATION_REPO
from eyehabit.view import state as view_state


def initialize() -> None:
    """
    Prepare directories, logging and view state before any command runs.

    A first run writes the default settings to the config file. A data_path
    setting moves the data directory; --data-path can still override it
    for one invocation through use_data_path().
    """
    if not configuration.APP_CONFIG_PATH.is_file():
        CONFIGURATION_REPO.update_config(show_header=True)
        CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()
    if config["data_path"] is not None:
        configuration.set_data_path(Path(config["data_path"]).expanduser())
    __prepare_data_path()
    view_state.set_show_header(config["show_header"])


def use_data_path(data_path: Path) -> None:
    """Switch data and log files to another directory for this process."""
    configuration.set_data_path(data_path)
    __prepare_data_path()


def __prepare_data_path() -> None:
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    setup_logging(
        configuration.DATA_LOG_PATH,
        console_level=parse_log_level(CONFIGURATION_REPO.get_config()["log_level"]),
    )
