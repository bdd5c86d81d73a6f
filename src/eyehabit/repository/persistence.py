# SPDX-License-Identifier: MIT

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


class PersistenceAdapter(Protocol):
    """Durable string key-value storage."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class FilePersistence:
    """Stores each key as its own file, `<directory>/<key>.yaml`."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"invalid persistence key: {key!r}")
        return self.directory / f"{key}.yaml"

    def get(self, key: str) -> Optional[str]:
        path = self.__path_for(key)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            # Unreadable counts as missing, so the app still starts
            logger.warning("ignoring unreadable %s: %s", path, e)
            return None

    def set(self, key: str, value: str) -> None:
        path = self.__path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)

        # Write next to the target and swap, so readers never see half a file
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class MemoryPersistence:
    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
