# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional

from yaml import YAMLError

from eyehabit import configuration
from eyehabit.model.profile import Profile
from eyehabit.model.record import DailyRecord, Mood
from eyehabit.model.task import Task, TaskIcon
from eyehabit.model.task_id import TaskId
from eyehabit.repository.persistence import FilePersistence, PersistenceAdapter
from eyehabit.repository.profile import ProfileRepository
from eyehabit.repository.record import RecordStore
from eyehabit.repository.task import TaskNotFoundError, TaskRegistry
from eyehabit.time import today_local

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application state with an explicit load/save lifecycle.

    The record store is replaced wholesale on every mutation; the new value
    is published first and then persisted. A failed write is logged and the
    in-memory state is kept.
    """

    def __init__(self, persistence: PersistenceAdapter) -> None:
        self.persistence = persistence
        self.records = RecordStore.empty()
        self.tasks = TaskRegistry()
        self.profile = ProfileRepository()
        self.is_loaded = False

    def load(self) -> None:
        self.records = RecordStore.load(self.persistence.get(configuration.HISTORY_KEY))
        self.tasks = TaskRegistry.load(self.persistence.get(configuration.TASKS_KEY))
        self.profile = ProfileRepository(
            self.persistence.get(configuration.USER_NAME_KEY),
            self.persistence.get(configuration.SLOGAN_KEY),
        )
        self.is_loaded = True
        logger.debug(
            "loaded %d records and %d tasks", len(self.records), len(self.tasks)
        )

    def save(self) -> bool:
        profile = self.profile.get_profile()
        try:
            self.persistence.set(configuration.HISTORY_KEY, self.records.serialize())
            self.persistence.set(configuration.TASKS_KEY, self.tasks.serialize())
            self.persistence.set(configuration.USER_NAME_KEY, profile["userName"])
            self.persistence.set(configuration.SLOGAN_KEY, profile["slogan"])
        except (OSError, YAMLError) as e:
            logger.error("failed to persist state: %s", e)
            return False
        return True

    def __publish(self, records: RecordStore) -> None:
        self.records = records
        self.save()

    # Records

    def get_record(self, date: Optional[datetime.date] = None) -> Optional[DailyRecord]:
        return self.records.get_record(date or today_local())

    def increment_task(
        self, task_id: TaskId, date: Optional[datetime.date] = None
    ) -> int:
        """Record one completion of a task; returns that date's new count."""
        if not self.tasks.has_task(task_id):
            raise TaskNotFoundError(task_id)
        day = date or today_local()
        self.__publish(self.records.increment_task(day, task_id))
        return self.records.get_count(day, task_id)

    def update_note(self, text: str, date: Optional[datetime.date] = None) -> None:
        self.__publish(self.records.update_note(date or today_local(), text))

    def update_mood(self, mood: Mood, date: Optional[datetime.date] = None) -> None:
        self.__publish(self.records.update_mood(date or today_local(), mood))

    def reset_history(self) -> None:
        self.__publish(RecordStore.empty())

    # Tasks

    def get_tasks(self) -> list[Task]:
        return self.tasks.get_all_tasks()

    def add_task(
        self,
        title: str,
        target_count: int = 1,
        frequency: str = "daily",
        description: Optional[str] = None,
        icon: TaskIcon = TaskIcon.EYE,
        duration: int = 10,
        video_url: Optional[str] = None,
    ) -> Task:
        task = self.tasks.add_task(
            title,
            target_count=target_count,
            frequency=frequency,
            description=description,
            icon=icon,
            duration=duration,
            video_url=video_url,
        )
        self.save()
        return task

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
        task = self.tasks.modify_task(
            id,
            title=title,
            target_count=target_count,
            frequency=frequency,
            description=description,
            icon=icon,
            duration=duration,
            video_url=video_url,
            remove_video_url=remove_video_url,
        )
        self.save()
        return task

    def delete_task(self, id: TaskId) -> Task:
        task = self.tasks.delete_task(id)
        self.save()
        return task

    def reset_tasks(self) -> None:
        self.tasks.reset_to_defaults()
        self.save()

    def clear_tasks(self) -> None:
        self.tasks.clear()
        self.save()

    # Profile

    def get_profile(self) -> Profile:
        return self.profile.get_profile()

    def set_user_name(self, user_name: str) -> None:
        self.profile.set_user_name(user_name)
        self.save()

    def set_slogan(self, slogan: str) -> None:
        self.profile.set_slogan(slogan)
        self.save()


_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Process-wide context on the configured data directory, loaded on first use."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext(FilePersistence(configuration.DATA_PATH))
        _app_context.load()
    return _app_context


def set_app_context(app_context: Optional[AppContext]) -> None:
    global _app_context
    _app_context = app_context


def peek_app_context() -> Optional[AppContext]:
    return _app_context
