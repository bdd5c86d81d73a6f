# SPDX-License-Identifier: MIT

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the terminal readable:
    - eyehabit logs pass through at the configured console level
    - third-party libraries (openai, httpx) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("eyehabit"):
            return True
        return record.levelno >= logging.ERROR


def parse_log_level(level_name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    if isinstance(level, int):
        return level
    return default


def setup_logging(
    log_dir: Path,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with a filtered stderr handler and a full file log.

    Call this once, before the first command runs.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "eyehabit.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(fmt)
    console_handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
