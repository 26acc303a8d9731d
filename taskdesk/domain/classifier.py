from __future__ import annotations

from datetime import datetime, timedelta

from .dates import calendar_day, parse_instant
from .entities import TaskEntity
from .enums import TaskStatus


def classify(task: TaskEntity, now: datetime) -> TaskStatus:
    """Place ``task`` in its status bucket relative to ``now``.

    Completion wins over any due date. Day comparisons use the calendar day
    of both instants in the time zone of ``now``, so a task due at 23:59
    yesterday is overdue and one due at 00:01 today is due today.
    """
    if task.completed:
        return TaskStatus.COMPLETED

    due = parse_instant(task.due_date)
    if due is None:
        return TaskStatus.NO_DUE_DATE

    today = calendar_day(now)
    due_day = calendar_day(due, now.tzinfo)

    if due_day < today:
        return TaskStatus.OVERDUE
    if due_day == today:
        return TaskStatus.DUE_TODAY
    if due_day == today + timedelta(days=1):
        return TaskStatus.DUE_TOMORROW
    return TaskStatus.UPCOMING
