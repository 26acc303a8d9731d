from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .classifier import classify
from .dates import comparable_instant, parse_instant
from .entities import TaskEntity
from .enums import REMINDER_STATUSES


def in_reminder_window(task: TaskEntity, now: datetime) -> bool:
    return classify(task, now) in REMINDER_STATUSES


def reminder_count(tasks: Iterable[TaskEntity], now: datetime) -> int:
    """Open tasks due tomorrow or earlier, however long ago they fell due."""
    return sum(1 for task in tasks if in_reminder_window(task, now))


def list_reminders(tasks: Iterable[TaskEntity], now: datetime) -> list[TaskEntity]:
    due = [task for task in tasks if in_reminder_window(task, now)]
    # classified tasks always carry a parseable due date
    return sorted(
        due, key=lambda task: comparable_instant(parse_instant(task.due_date), now.tzinfo)
    )
