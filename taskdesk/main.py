from __future__ import annotations

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from taskdesk.config import SETTINGS
from taskdesk.domain.clock import SystemClock
from taskdesk.domain.entities import TaskEntity
from taskdesk.domain.enums import Priority, TaskStatus
from taskdesk.infra.db import create_session_factory, init_db
from taskdesk.infra.logging import setup_logging
from taskdesk.infra.repository import TaskRepository
from taskdesk.services.task_service import TaskService

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    TaskStatus.COMPLETED: "done",
    TaskStatus.OVERDUE: "overdue",
    TaskStatus.DUE_TODAY: "today",
    TaskStatus.DUE_TOMORROW: "tomorrow",
    TaskStatus.UPCOMING: "upcoming",
    TaskStatus.NO_DUE_DATE: "-",
}

PRIORITY_LABELS = {
    Priority.HIGH: "high",
    Priority.MEDIUM: "medium",
    Priority.LOW: "low",
}


def priority_label(priority: Priority | str) -> str:
    # unknown values come through as raw text
    return PRIORITY_LABELS.get(priority, str(priority))


def format_task_line(task: TaskEntity, status: TaskStatus) -> str:
    return f"[{STATUS_LABELS[status]:>8}] ({priority_label(task.priority)}) {task.description}"


def render_digest(service: TaskService) -> list[str]:
    stats = service.get_stats()
    lines = [
        f"Reminders: {service.reminder_count()}",
        f"Tasks: {stats['total']} total, {stats['active']} active, {stats['overdue']} overdue",
    ]
    for task in service.list_reminders(limit=SETTINGS.reminder_preview_limit):
        lines.append(f"  ! {task.description}")
    lines.append("")
    lines.extend(format_task_line(task, service.classify(task)) for task in service.list_tasks())
    return lines


def main() -> int:
    setup_logging()
    try:
        session_factory = create_session_factory()
        init_db(session_factory)
    except (RuntimeError, SQLAlchemyError):
        logger.exception("Database is not available")
        return 1

    service = TaskService(TaskRepository(session_factory), SystemClock.for_zone(SETTINGS.timezone))
    print("\n".join(render_digest(service)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
