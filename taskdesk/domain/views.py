from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from datetime import datetime

from .classifier import classify
from .dates import calendar_day
from .entities import TaskEntity
from .enums import Priority, REMINDER_STATUSES, TaskStatus, TaskView
from .filters import UNASSIGNED, TaskFilters

Predicate = Callable[[TaskEntity, datetime], bool]


def _overdue(task: TaskEntity, now: datetime) -> bool:
    return classify(task, now) is TaskStatus.OVERDUE


def _due_soon(task: TaskEntity, now: datetime) -> bool:
    return classify(task, now) in (TaskStatus.DUE_TODAY, TaskStatus.DUE_TOMORROW)


def _open_high_priority(task: TaskEntity, now: datetime) -> bool:
    return not task.completed and task.priority == Priority.HIGH


def _completed_today(task: TaskEntity, now: datetime) -> bool:
    # tasks carry no completion stamp; creation day stands in for it
    if not task.completed:
        return False
    return calendar_day(task.created_at, now.tzinfo) == calendar_day(now)


_VIEW_PREDICATES: dict[TaskView, Predicate] = {
    TaskView.ALL: lambda task, now: True,
    TaskView.ACTIVE: lambda task, now: not task.completed,
    TaskView.COMPLETED: lambda task, now: bool(task.completed),
    TaskView.OVERDUE: _overdue,
    TaskView.DUE_SOON: _due_soon,
    TaskView.HIGH_PRIORITY: _open_high_priority,
    TaskView.COMPLETED_TODAY: _completed_today,
}


def _view_predicate(filter_key: str) -> Predicate:
    try:
        return _VIEW_PREDICATES[TaskView(filter_key.replace("-", "_"))]
    except ValueError:
        return _VIEW_PREDICATES[TaskView.ALL]


def _matches_assignee(task: TaskEntity, assignee: str | None) -> bool:
    if not assignee:
        return True
    if assignee == UNASSIGNED:
        return task.assigned_to_id is None
    return task.assigned_to_id == assignee


def _matches_search(task: TaskEntity, search: str | None) -> bool:
    if not search:
        return True
    needle = search.casefold()
    haystacks = (task.description, task.notes or "")
    return any(needle in text.casefold() for text in haystacks)


def filter_tasks(
    tasks: Iterable[TaskEntity], filters: TaskFilters, now: datetime
) -> list[TaskEntity]:
    """Apply a named view plus the assignee and search narrowing.

    Unknown view keys fall back to ``all``. Snapshot order is preserved.
    """
    predicate = _view_predicate(filters.filter_key)
    return [
        task
        for task in tasks
        if predicate(task, now)
        and _matches_assignee(task, filters.assignee)
        and _matches_search(task, filters.search)
    ]


def task_counts(tasks: Iterable[TaskEntity], now: datetime) -> dict[str, int]:
    statuses = Counter(classify(task, now) for task in tasks)
    total = sum(statuses.values())
    counts = {"total": total, "active": total - statuses[TaskStatus.COMPLETED]}
    counts.update({status.value: statuses[status] for status in TaskStatus})
    counts["reminders"] = sum(statuses[status] for status in REMINDER_STATUSES)
    return counts


def list_assignees(tasks: Iterable[TaskEntity]) -> list[str]:
    return sorted({task.assigned_to_id for task in tasks if task.assigned_to_id})
