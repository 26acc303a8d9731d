from __future__ import annotations

import itertools
import uuid
from dataclasses import replace
from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taskdesk.domain.clock import FixedClock
from taskdesk.domain.entities import TaskEntity
from taskdesk.domain.enums import Priority, coerce_priority
from taskdesk.infra import models  # noqa: F401  registers tables on Base
from taskdesk.infra.db import Base

NOW = datetime(2024, 6, 10, 9, 0)


class FakeRepo:
    def __init__(self, tasks: list[TaskEntity] | None = None) -> None:
        self.tasks: list[TaskEntity] = list(tasks or [])
        self.writes: list[tuple[str, dict]] = []

    def list_tasks(self) -> list[TaskEntity]:
        return list(self.tasks)

    def get_task(self, task_id: str) -> TaskEntity | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def create_task(self, data: dict) -> TaskEntity:
        self.writes.append(("create", data))
        task = TaskEntity(
            id=str(uuid.uuid4()),
            description=data.get("description", ""),
            completed=data.get("completed", False),
            priority=coerce_priority(data.get("priority", "medium")),
            due_date=data.get("due_date"),
            created_at=data.get("created_at", NOW),
            assigned_to_id=data.get("assigned_to_id"),
        )
        self.tasks.append(task)
        return task

    def update_task(self, task_id: str, data: dict) -> TaskEntity | None:
        self.writes.append(("update", data))
        task = self.get_task(task_id)
        if not task:
            return None
        updated = replace(task, **data)
        self.tasks = [updated if t.id == task_id else t for t in self.tasks]
        return updated

    def delete_task(self, task_id: str) -> None:
        self.tasks = [t for t in self.tasks if t.id != task_id]


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def make_task():
    ids = itertools.count(1)

    def _make(
        description: str = "task",
        *,
        completed: bool = False,
        priority: Priority | str = Priority.MEDIUM,
        due=None,
        created_at: datetime = datetime(2024, 6, 1, 8, 0),
        **extra,
    ) -> TaskEntity:
        return TaskEntity(
            id=f"t{next(ids)}",
            description=description,
            completed=completed,
            priority=priority,
            due_date=due,
            created_at=created_at,
            **extra,
        )

    return _make


@pytest.fixture()
def fake_repo() -> FakeRepo:
    return FakeRepo()


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    engine.dispose()
