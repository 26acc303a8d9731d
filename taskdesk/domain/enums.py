from __future__ import annotations

from enum import StrEnum


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}
UNKNOWN_PRIORITY_RANK = 0


def priority_rank(value: object) -> int:
    try:
        return PRIORITY_RANK[Priority(value)]
    except ValueError:
        return UNKNOWN_PRIORITY_RANK


def coerce_priority(value: object) -> Priority | str:
    """Return the enum member for ``value``, or the raw text if it is not one."""
    try:
        return Priority(value)
    except ValueError:
        return str(value)


class TaskStatus(StrEnum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    DUE_TOMORROW = "due_tomorrow"
    UPCOMING = "upcoming"
    NO_DUE_DATE = "no_due_date"


REMINDER_STATUSES = frozenset(
    {TaskStatus.OVERDUE, TaskStatus.DUE_TODAY, TaskStatus.DUE_TOMORROW}
)


class TaskView(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    HIGH_PRIORITY = "high_priority"
    COMPLETED_TODAY = "completed_today"


class SlideType(StrEnum):
    TITLE = "title"
    CONTENT = "content"
    IMAGE = "image"
    BULLET_POINTS = "bullet-points"
    QUOTE = "quote"
    CONCLUSION = "conclusion"


class MoveDirection(StrEnum):
    UP = "up"
    DOWN = "down"
