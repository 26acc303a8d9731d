from __future__ import annotations

from datetime import datetime

from taskdesk.domain.enums import Priority, TaskStatus
from taskdesk.main import format_task_line, render_digest
from taskdesk.services.task_service import TaskService


def test_render_digest(fake_repo, clock, make_task) -> None:
    fake_repo.tasks = [
        make_task("Renew domain", due=datetime(2024, 6, 9), priority=Priority.HIGH),
        make_task("Sketch logo", priority=Priority.LOW),
        make_task("Archive mail", completed=True),
    ]

    lines = render_digest(TaskService(fake_repo, clock))

    assert lines[0] == "Reminders: 1"
    assert lines[1] == "Tasks: 3 total, 2 active, 1 overdue"
    assert lines[2] == "  ! Renew domain"
    assert lines[-3:] == [
        "[ overdue] (high) Renew domain",
        "[       -] (low) Sketch logo",
        "[    done] (medium) Archive mail",
    ]


def test_format_task_line_labels_priority(make_task) -> None:
    known = make_task("Plan sprint", priority=Priority.MEDIUM)
    legacy = make_task("Old import", priority="urgent")

    assert format_task_line(known, TaskStatus.NO_DUE_DATE) == "[       -] (medium) Plan sprint"
    assert format_task_line(legacy, TaskStatus.UPCOMING) == "[upcoming] (urgent) Old import"
