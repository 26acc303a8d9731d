from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from .dates import comparable_instant, parse_instant
from .entities import TaskEntity
from .enums import priority_rank


def _sort_key(task: TaskEntity, tz: tzinfo | None) -> tuple[bool, int, bool, datetime]:
    due = parse_instant(task.due_date)
    has_due = due is not None
    return (
        bool(task.completed),
        -priority_rank(task.priority),
        not has_due,
        comparable_instant(due, tz) if has_due else datetime.min,
    )


def sorted_view(tasks: Iterable[TaskEntity], tz: tzinfo | None = None) -> list[TaskEntity]:
    """Default list order: open first, then priority, then earliest due.

    Tasks with a due date precede those without. ``sorted`` is stable, so
    anything the keys cannot separate keeps its snapshot order. Naive due
    dates are read in ``tz`` when one is given.
    """
    return sorted(tasks, key=lambda task: _sort_key(task, tz))
