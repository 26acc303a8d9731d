from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Protocol

from taskdesk.domain import classifier, reminders, views
from taskdesk.domain.clock import Clock
from taskdesk.domain.dates import parse_instant
from taskdesk.domain.entities import TaskEntity
from taskdesk.domain.enums import Priority, TaskStatus
from taskdesk.domain.filters import TaskFilters
from taskdesk.domain.sorting import sorted_view


class TaskStore(Protocol):
    def list_tasks(self) -> list[TaskEntity]: ...

    def get_task(self, task_id: str) -> TaskEntity | None: ...

    def create_task(self, data: dict) -> TaskEntity: ...

    def update_task(self, task_id: str, data: dict) -> TaskEntity | None: ...

    def delete_task(self, task_id: str) -> None: ...


class TaskService:
    def __init__(self, repo: TaskStore, clock: Clock) -> None:
        self._repo = repo
        self._clock = clock

    def snapshot(self) -> list[TaskEntity]:
        return self._repo.list_tasks()

    def list_tasks(self, filters: TaskFilters | None = None) -> list[TaskEntity]:
        now = self._clock.now()
        filtered = views.filter_tasks(self.snapshot(), filters or TaskFilters(), now)
        return sorted_view(filtered, now.tzinfo)

    def get_task(self, task_id: str) -> TaskEntity | None:
        return self._repo.get_task(task_id)

    def create_task(self, data: dict) -> TaskEntity:
        return self._repo.create_task(self._normalize_data(data))

    def update_task(self, task_id: str, data: dict) -> TaskEntity | None:
        return self._repo.update_task(task_id, self._normalize_data(data))

    def delete_task(self, task_id: str) -> None:
        self._repo.delete_task(task_id)

    def mark_done(self, task_id: str) -> TaskEntity | None:
        return self.update_task(task_id, {"completed": True})

    def reopen(self, task_id: str) -> TaskEntity | None:
        return self.update_task(task_id, {"completed": False})

    def classify(self, task: TaskEntity) -> TaskStatus:
        return classifier.classify(task, self._clock.now())

    def reminder_count(self) -> int:
        return reminders.reminder_count(self.snapshot(), self._clock.now())

    def list_reminders(self, limit: int | None = None) -> list[TaskEntity]:
        due = reminders.list_reminders(self.snapshot(), self._clock.now())
        return due if limit is None else due[:limit]

    def get_stats(self) -> dict[str, int]:
        return views.task_counts(self.snapshot(), self._clock.now())

    def list_assignees(self) -> list[str]:
        return views.list_assignees(self.snapshot())

    def _normalize_data(self, data: dict) -> dict:
        normalized = dict(data)
        if "priority" in normalized and isinstance(normalized["priority"], Priority):
            normalized["priority"] = normalized["priority"].value
        if "due_date" in normalized:
            normalized["due_date"] = _to_naive_utc(
                parse_instant(normalized["due_date"]), self._clock.now().tzinfo
            )
        return normalized


def _to_naive_utc(value: datetime | None, tz: tzinfo | None) -> datetime | None:
    # naive input is wall time in the clock's zone
    if value is None:
        return None
    if value.tzinfo is None:
        if tz is None:
            return value
        value = value.replace(tzinfo=tz)
    return value.astimezone(timezone.utc).replace(tzinfo=None)
