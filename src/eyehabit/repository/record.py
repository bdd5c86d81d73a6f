# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Iterable, Optional, TypeAlias, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CSafeDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeDumper as Dumper  # type: ignore[assignment]
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from eyehabit.model.record import MOODS, DailyRecord, Mood
from eyehabit.time import date_to_str, is_date_str

logger = logging.getLogger(__name__)

DateLike: TypeAlias = str | datetime.date


class RecordParseError(ValueError):
    """Raised when persisted history cannot be read."""

    pass


def migrate_legacy_record(record: dict[str, Any]) -> dict[str, Any]:
    """
    Convert a record from the completed-id-list shape to per-task counts.

    Older histories stored `completedTaskIds: [...]` instead of a `progress`
    map. Every completed id becomes a count of 1. A record that already has a
    `progress` map is returned unchanged, so the migration is idempotent.
    """
    if record.get("progress") is not None:
        return record

    completed = record.get("completedTaskIds")
    if completed is None:
        completed = []
    if not isinstance(completed, list):
        raise RecordParseError(
            f"completedTaskIds for {record.get('date')!r} is not a list"
        )

    migrated = {key: value for key, value in record.items() if key != "completedTaskIds"}
    migrated["progress"] = {str(task_id): 1 for task_id in completed}
    return migrated


def _date_key(date: DateLike) -> str:
    if isinstance(date, datetime.date):
        return date_to_str(date)
    if not is_date_str(date):
        raise ValueError(f"not a YYYY-MM-DD date: {date!r}")
    return date


def __parse_date(raw_date: Any, index: int) -> str:
    # Hand-edited YAML may carry unquoted dates, which load as date objects
    if isinstance(raw_date, datetime.date):
        return date_to_str(raw_date)
    if not isinstance(raw_date, str) or not is_date_str(raw_date):
        raise RecordParseError(f"record {index}: invalid date {raw_date!r}")
    return raw_date


def __parse_progress(raw_progress: Any, date: str) -> dict[str, int]:
    if not isinstance(raw_progress, dict):
        raise RecordParseError(f"record {date}: progress is not a mapping")

    progress: dict[str, int] = {}
    for task_id, count in raw_progress.items():
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise RecordParseError(
                f"record {date}: count for {task_id!r} is not a non-negative integer"
            )
        progress[str(task_id)] = count
    return progress


def _parse_record(raw_record: Any, index: int) -> DailyRecord:
    if not isinstance(raw_record, dict):
        raise RecordParseError(f"record {index}: expected a mapping")

    migrated = migrate_legacy_record(raw_record)
    date = __parse_date(migrated.get("date"), index)
    record: DailyRecord = {
        "date": date,
        "progress": __parse_progress(migrated["progress"], date),
    }

    notes = migrated.get("notes")
    if notes is not None:
        if not isinstance(notes, str):
            raise RecordParseError(f"record {date}: notes is not text")
        record["notes"] = notes

    mood = migrated.get("mood")
    if mood is not None:
        if mood in MOODS:
            record["mood"] = cast(Mood, mood)
        else:
            logger.warning("record %s: dropping unknown mood %r", date, mood)

    return record


def _merge_records(first: DailyRecord, second: DailyRecord) -> DailyRecord:
    merged = deepcopy(first)
    for task_id, count in second["progress"].items():
        merged["progress"][task_id] = merged["progress"].get(task_id, 0) + count
    if second.get("notes"):
        merged["notes"] = second["notes"]
    if "mood" in second:
        merged["mood"] = second["mood"]
    return merged


def parse_history(raw: Optional[str]) -> list[DailyRecord]:
    """
    Parse persisted history text into records, migrating legacy records.

    Accepts YAML and therefore also the JSON written by earlier versions.
    Raises RecordParseError when the text is not a list of valid records.
    Records sharing a date are merged into one.
    """
    if raw is None or raw.strip() == "":
        return []

    try:
        data = load(raw, Loader=Loader)
    # Unquoted impossible dates such as 2024-13-45 fail as ValueError
    except (YAMLError, ValueError) as e:
        raise RecordParseError(f"history is not valid YAML/JSON: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise RecordParseError("history is not a list of records")

    records: dict[str, DailyRecord] = {}
    for index, raw_record in enumerate(data):
        record = _parse_record(raw_record, index)
        existing = records.get(record["date"])
        if existing is not None:
            logger.warning("merging duplicate records for %s", record["date"])
            record = _merge_records(existing, record)
        records[record["date"]] = record

    return list(records.values())


class RecordStore:
    """
    Daily records keyed by date.

    A store is never changed in place: every mutation returns a new store in
    which exactly one date's record has been replaced.
    """

    def __init__(self, records: Iterable[DailyRecord] = ()) -> None:
        self._records: dict[str, DailyRecord] = {}
        for record in records:
            date = _date_key(record["date"])
            if date in self._records:
                raise ValueError(f"more than one record for {date}")
            self._records[date] = deepcopy(record)

    @classmethod
    def empty(cls) -> "RecordStore":
        return cls()

    @classmethod
    def load(cls, raw: Optional[str]) -> "RecordStore":
        """
        Build a store from persisted text.

        Malformed input is logged and yields an empty store, so the
        application stays usable without its history.
        """
        try:
            return cls(parse_history(raw))
        except RecordParseError as e:
            logger.warning("failed to parse history, starting empty: %s", e)
            return cls.empty()

    def __with_record(self, record: DailyRecord) -> "RecordStore":
        store = RecordStore()
        store._records = {**self._records, record["date"]: record}
        return store

    def serialize(self) -> str:
        return cast(
            str,
            dump(
                self.records,
                Dumper=Dumper,
                allow_unicode=True,
                sort_keys=False,
            ),
        )

    @property
    def records(self) -> list[DailyRecord]:
        return [deepcopy(self._records[date]) for date in self.dates]

    @property
    def dates(self) -> list[str]:
        return sorted(self._records)

    def get_record(self, date: DateLike) -> Optional[DailyRecord]:
        record = self._records.get(_date_key(date))
        if record is None:
            return None
        return deepcopy(record)

    def get_count(self, date: DateLike, task_id: str) -> int:
        record = self._records.get(_date_key(date))
        if record is None:
            return 0
        return record["progress"].get(task_id, 0)

    def records_between(self, start: DateLike, end: DateLike) -> list[DailyRecord]:
        """Records with start <= date <= end, oldest first."""
        start_key = _date_key(start)
        end_key = _date_key(end)
        return [
            deepcopy(self._records[date])
            for date in self.dates
            if start_key <= date <= end_key
        ]

    def increment_task(self, date: DateLike, task_id: str) -> "RecordStore":
        key = _date_key(date)
        existing = self._records.get(key)
        if existing is None:
            record: DailyRecord = {"date": key, "progress": {task_id: 1}}
        else:
            record = deepcopy(existing)
            record["progress"][task_id] = record["progress"].get(task_id, 0) + 1
        return self.__with_record(record)

    def update_note(self, date: DateLike, text: str) -> "RecordStore":
        key = _date_key(date)
        existing = self._records.get(key)
        if existing is None:
            record: DailyRecord = {"date": key, "progress": {}, "notes": text}
        else:
            record = deepcopy(existing)
            record["notes"] = text
        return self.__with_record(record)

    def update_mood(self, date: DateLike, mood: Mood) -> "RecordStore":
        if mood not in MOODS:
            raise ValueError(f"unknown mood: {mood!r}")
        key = _date_key(date)
        existing = self._records.get(key)
        if existing is None:
            record: DailyRecord = {"date": key, "progress": {}, "mood": mood}
        else:
            record = deepcopy(existing)
            record["mood"] = mood
        return self.__with_record(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, date: object) -> bool:
        if not isinstance(date, (str, datetime.date)):
            return False
        try:
            return _date_key(date) in self._records
        except ValueError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordStore):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records)"
