from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from taskdesk.domain.clock import FixedClock
from taskdesk.domain.enums import Priority, TaskStatus
from taskdesk.domain.filters import TaskFilters
from taskdesk.infra.repository import TaskRepository
from taskdesk.services.task_service import TaskService


def test_list_tasks_filters_then_sorts(fake_repo, clock, make_task) -> None:
    fake_repo.tasks = [
        make_task("low", priority=Priority.LOW),
        make_task("done", completed=True, priority=Priority.HIGH),
        make_task("high", priority=Priority.HIGH, due=datetime(2024, 6, 20)),
    ]
    service = TaskService(fake_repo, clock)

    assert [t.description for t in service.list_tasks()] == ["high", "low", "done"]
    active = service.list_tasks(TaskFilters(filter_key="active"))
    assert [t.description for t in active] == ["high", "low"]


def test_mark_done_and_reopen(fake_repo, clock) -> None:
    service = TaskService(fake_repo, clock)
    task = service.create_task({"description": "Send invoice", "due_date": datetime(2024, 6, 1)})

    done = service.mark_done(task.id)
    assert done is not None
    assert service.classify(done) is TaskStatus.COMPLETED

    reopened = service.reopen(task.id)
    assert service.classify(reopened) is TaskStatus.OVERDUE


def test_mark_done_unknown_task_returns_none(fake_repo, clock) -> None:
    assert TaskService(fake_repo, clock).mark_done("missing") is None


def test_create_normalizes_priority_and_due_date(fake_repo, clock) -> None:
    service = TaskService(fake_repo, clock)
    plus_two = timezone(timedelta(hours=2))

    service.create_task({"description": "a", "priority": Priority.HIGH, "due_date": "2024-06-12T10:00:00+02:00"})
    service.create_task({"description": "b", "due_date": "whenever"})
    service.create_task({"description": "c", "due_date": datetime(2024, 6, 12, 1, 0, tzinfo=plus_two)})

    stored = [data for kind, data in fake_repo.writes if kind == "create"]
    assert stored[0]["priority"] == "high"
    assert stored[0]["due_date"] == datetime(2024, 6, 12, 8, 0)
    assert stored[1]["due_date"] is None
    assert stored[2]["due_date"] == datetime(2024, 6, 11, 23, 0)


def test_reminders_use_injected_clock(fake_repo, make_task) -> None:
    fake_repo.tasks = [
        make_task("b", due=datetime(2024, 6, 11)),
        make_task("a", due=datetime(2024, 6, 2)),
        make_task("c", due=datetime(2024, 6, 15)),
    ]

    early = TaskService(fake_repo, FixedClock(datetime(2024, 6, 10, 9, 0)))
    late = TaskService(fake_repo, FixedClock(datetime(2024, 6, 14, 9, 0)))

    assert early.reminder_count() == 2
    assert [t.description for t in early.list_reminders()] == ["a", "b"]
    assert [t.description for t in early.list_reminders(limit=1)] == ["a"]
    assert late.reminder_count() == 3


def test_stats_and_assignees(fake_repo, clock, make_task) -> None:
    fake_repo.tasks = [
        make_task(due=datetime(2024, 6, 1), assigned_to_id="u9"),
        make_task(completed=True),
    ]
    service = TaskService(fake_repo, clock)

    stats = service.get_stats()

    assert stats["total"] == 2
    assert stats["overdue"] == 1
    assert service.list_assignees() == ["u9"]


def test_delete_task(fake_repo, clock) -> None:
    service = TaskService(fake_repo, clock)
    task = service.create_task({"description": "temp"})

    service.delete_task(task.id)

    assert service.get_task(task.id) is None


@pytest.mark.parametrize(
    ("offset_hours", "due"),
    [
        (-4, "2024-06-10"),
        (-4, "2024-06-10T22:00"),
        (3, "2024-06-10T23:30"),
        (3, date(2024, 6, 10)),
    ],
)
def test_stored_due_dates_keep_their_local_day(session_factory, offset_hours, due) -> None:
    zone = timezone(timedelta(hours=offset_hours))
    clock = FixedClock(datetime(2024, 6, 10, 9, 0, tzinfo=zone))
    service = TaskService(TaskRepository(session_factory), clock)

    created = service.create_task({"description": "Pay rent", "due_date": due})
    stored = service.get_task(created.id)

    assert service.classify(stored) is TaskStatus.DUE_TODAY
    assert service.reminder_count() == 1


def test_stored_tasks_list_in_local_due_order(session_factory) -> None:
    kyiv = timezone(timedelta(hours=3))
    service = TaskService(
        TaskRepository(session_factory), FixedClock(datetime(2024, 6, 10, 9, 0, tzinfo=kyiv))
    )
    service.create_task({"description": "tomorrow", "due_date": "2024-06-11T00:30"})
    service.create_task({"description": "today", "due_date": "2024-06-10T23:30"})

    assert [t.description for t in service.list_tasks()] == ["today", "tomorrow"]
    assert [t.description for t in service.list_reminders()] == ["today", "tomorrow"]
