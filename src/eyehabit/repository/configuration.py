# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CSafeDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeDumper as Dumper  # type: ignore[assignment]
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from eyehabit import configuration

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Settings that a `remove_*` flag resets to None
_NULLABLE_SETTINGS = ("data_path", "coach_base_url")


def _is_valid_setting(key: str, value: Any, default: Any) -> bool:
    if value is None:
        return key in _NULLABLE_SETTINGS
    if key == "log_level":
        return isinstance(value, str) and value.upper() in LOG_LEVELS
    if key in _NULLABLE_SETTINGS:
        return isinstance(value, str)
    return type(value) is type(default)


def read_configuration_file() -> configuration.Configuration:
    """
    Settings from the config file, with defaults for anything missing.

    A missing or unreadable file yields the defaults.
    """
    settings = cast(dict[str, Any], configuration.get_default_configuration())
    path = configuration.APP_CONFIG_PATH
    if not path.is_file():
        return cast(configuration.Configuration, settings)

    try:
        stored = load(path.read_text(encoding="utf-8"), Loader=Loader)
    except (YAMLError, ValueError, OSError) as e:
        logger.warning("ignoring unreadable config file %s: %s", path, e)
        return cast(configuration.Configuration, settings)

    if isinstance(stored, dict):
        for key, value in stored.items():
            if key not in settings:
                continue
            if _is_valid_setting(key, value, settings[key]):
                settings[key] = value
            else:
                logger.warning("ignoring invalid %s in %s: %r", key, path, value)
    elif stored is not None:
        logger.warning("ignoring config file %s: not a mapping", path)
    return cast(configuration.Configuration, settings)


class ConfigurationRepository:
    """Application settings, read on first access and written back by flush()."""

    def __init__(self) -> None:
        self.__settings: Optional[configuration.Configuration] = None
        self.has_changes = False

    def __current(self) -> configuration.Configuration:
        if self.__settings is None:
            self.__settings = read_configuration_file()
        return self.__settings

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.__current())

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
        coach_base_url: Optional[str] = None,
        remove_coach_base_url: bool = False,
        coach_model: Optional[str] = None,
    ) -> None:
        if log_level is not None and log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log level must be one of: {', '.join(LOG_LEVELS)}")

        changes: dict[str, Any] = {
            "data_path": data_path,
            "show_header": show_header,
            "log_level": log_level.upper() if log_level is not None else None,
            "coach_base_url": coach_base_url,
            "coach_model": coach_model,
        }
        removals = {
            "data_path": remove_data_path,
            "coach_base_url": remove_coach_base_url,
        }

        settings = cast(dict[str, Any], self.__current())
        for key, value in changes.items():
            if value is not None:
                settings[key] = value
                self.has_changes = True
        for key in _NULLABLE_SETTINGS:
            if removals[key]:
                settings[key] = None
                self.has_changes = True

    def flush(self) -> bool:
        """Write pending changes; returns whether anything was written."""
        if self.__settings is None or not self.has_changes:
            return False

        path = configuration.APP_CONFIG_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            dump(dict(self.__settings), Dumper=Dumper, sort_keys=False),
            encoding="utf-8",
        )
        self.has_changes = False
        return True

    def reset(self) -> None:
        """Forget cached settings; the next access re-reads the file."""
        self.__settings = None
        self.has_changes = False


CONFIGURATION_REPO = ConfigurationRepository()
