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

from eyehabit.model.task import FREQUENCIES, Frequency, Task, TaskIcon
from eyehabit.model.task_id import TaskId, generate_task_id
from eyehabit.template.task import get_default_tasks, get_task_template

logger = logging.getLogger(__name__)


class TaskParseError(ValueError):
    """Raised when a persisted task list cannot be read."""

    pass


class TaskValidationError(ValueError):
    """Raised when a task definition is rejected; nothing is stored."""

    pass


class TaskNotFoundError(KeyError):
    def __init__(self, task_id: str) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"no task with id {self.task_id!r}"


def parse_icon(raw_icon: Any) -> TaskIcon:
    if isinstance(raw_icon, TaskIcon):
        return raw_icon
    try:
        return TaskIcon(raw_icon)
    except ValueError:
        logger.warning("unknown task icon %r, using %s", raw_icon, TaskIcon.EYE.value)
        return TaskIcon.EYE


def __require_int(raw_task: dict[str, Any], field: str, default: Optional[int]) -> int:
    value = raw_task.get(field, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TaskParseError(f"task {raw_task.get('id')!r}: {field} is not an integer")
    return value


def _parse_task(raw_task: Any, index: int) -> Task:
    if not isinstance(raw_task, dict):
        raise TaskParseError(f"task {index}: expected a mapping")

    task_id = raw_task.get("id")
    if not isinstance(task_id, (str, int)) or isinstance(task_id, bool):
        raise TaskParseError(f"task {index}: missing id")

    title = raw_task.get("title")
    if not isinstance(title, str):
        raise TaskParseError(f"task {task_id!r}: missing title")

    frequency = raw_task.get("frequency") or "daily"
    if frequency not in FREQUENCIES:
        raise TaskParseError(f"task {task_id!r}: unknown frequency {frequency!r}")

    target_count = __require_int(raw_task, "targetCount", None)
    if target_count < 1:
        raise TaskParseError(f"task {task_id!r}: targetCount must be positive")

    video_url = raw_task.get("videoUrl")

    return {
        "id": str(task_id),
        "title": title,
        "description": str(raw_task.get("description") or ""),
        "icon": parse_icon(raw_task.get("icon")),
        "duration": __require_int(raw_task, "duration", 0),
        "targetCount": target_count,
        "frequency": cast(Frequency, frequency),
        "videoUrl": str(video_url) if video_url else None,
    }


def parse_tasks(raw: str) -> list[Task]:
    try:
        data = load(raw, Loader=Loader)
    except (YAMLError, ValueError) as e:
        raise TaskParseError(f"task list is not valid YAML/JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskParseError("task list is not a list")

    tasks = [_parse_task(raw_task, index) for index, raw_task in enumerate(data)]
    ids = [task["id"] for task in tasks]
    if len(set(ids)) != len(ids):
        raise TaskParseError("task list contains duplicate ids")
    return tasks


def validate_task(task: Task) -> None:
    if task["title"].strip() == "":
        raise TaskValidationError("a task needs a title")
    if task["targetCount"] < 1:
        raise TaskValidationError("target count must be at least 1")
    if task["duration"] < 0:
        raise TaskValidationError("duration cannot be negative")
    if task["frequency"] not in FREQUENCIES:
        raise TaskValidationError(
            f"frequency must be one of: {', '.join(FREQUENCIES)}"
        )


class TaskRegistry:
    """
    The configured task list.

    Ids handed out or loaded by a registry are remembered even after the
    task is deleted, and are never accepted for a new task again.
    """

    def __init__(self, tasks: Optional[list[Task]] = None) -> None:
        self._tasks: list[Task] = deepcopy(tasks) if tasks is not None else get_default_tasks()
        self._used_ids: set[TaskId] = {task["id"] for task in self._tasks}

    @classmethod
    def load(cls, raw: Optional[str]) -> "TaskRegistry":
        """Build a registry from persisted text; falls back to the default tasks."""
        if raw is None or raw.strip() == "":
            return cls()
        try:
            return cls(parse_tasks(raw))
        except TaskParseError as e:
            logger.warning("failed to parse tasks, using defaults: %s", e)
            return cls()

    def serialize(self) -> str:
        serializable_tasks = []
        for task in self._tasks:
            serializable_task = cast(dict[str, Any], deepcopy(task))
            serializable_task["icon"] = task["icon"].value
            serializable_tasks.append(serializable_task)
        return cast(
            str,
            dump(serializable_tasks, Dumper=Dumper, allow_unicode=True, sort_keys=False),
        )

    def __index_of(self, id: TaskId) -> int:
        for index, task in enumerate(self._tasks):
            if task["id"] == id:
                return index
        raise TaskNotFoundError(id)

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self._tasks)

    def get_task(self, id: TaskId) -> Task:
        return deepcopy(self._tasks[self.__index_of(id)])

    def has_task(self, id: TaskId) -> bool:
        return any(task["id"] == id for task in self._tasks)

    def add_task(
        self,
        title: str,
        target_count: int = 1,
        frequency: str = "daily",
        description: Optional[str] = None,
        icon: TaskIcon = TaskIcon.EYE,
        duration: int = 10,
        video_url: Optional[str] = None,
        id: Optional[TaskId] = None,
    ) -> Task:
        if id is not None and id in self._used_ids:
            raise TaskValidationError(f"task id {id!r} has already been used")

        task = get_task_template()
        task["id"] = id if id is not None else generate_task_id()
        task["title"] = title.strip()
        task["description"] = description or task["title"]
        task["icon"] = icon
        task["duration"] = duration
        task["targetCount"] = target_count
        task["frequency"] = cast(Frequency, frequency)
        task["videoUrl"] = video_url
        validate_task(task)

        self._tasks.append(task)
        self._used_ids.add(task["id"])
        return deepcopy(task)

    def modify_task(
        self,
        id: TaskId,
        title: Optional[str] = None,
        target_count: Optional[int] = None,
        frequency: Optional[str] = None,
        description: Optional[str] = None,
        icon: Optional[TaskIcon] = None,
        duration: Optional[int] = None,
        video_url: Optional[str] = None,
        remove_video_url: bool = False,
    ) -> Task:
        index = self.__index_of(id)
        task = deepcopy(self._tasks[index])

        if title is not None:
            task["title"] = title.strip()
        if target_count is not None:
            task["targetCount"] = target_count
        if frequency is not None:
            task["frequency"] = cast(Frequency, frequency)
        if description is not None:
            task["description"] = description
        if icon is not None:
            task["icon"] = icon
        if duration is not None:
            task["duration"] = duration
        if video_url is not None:
            task["videoUrl"] = video_url
        if remove_video_url:
            task["videoUrl"] = None
        validate_task(task)

        self._tasks[index] = task
        return deepcopy(task)

    def delete_task(self, id: TaskId) -> Task:
        return self._tasks.pop(self.__index_of(id))

    def reset_to_defaults(self) -> None:
        # The default ids name the same built-in tasks, so they may come back
        # even after being deleted; add_task still refuses them.
        self._tasks = get_default_tasks()
        self._used_ids.update(task["id"] for task in self._tasks)

    def clear(self) -> None:
        self._tasks = []

    def __len__(self) -> int:
        return len(self._tasks)
