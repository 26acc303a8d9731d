from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .enums import Priority, SlideType

DueValue = datetime | date | str | None


@dataclass(frozen=True)
class TaskEntity:
    id: str
    description: str
    completed: bool
    priority: Priority | str
    due_date: DueValue
    created_at: datetime
    project_id: Optional[str] = None
    assigned_to_id: Optional[str] = None
    parent_task_id: Optional[str] = None
    created_by_id: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class SlideEntity:
    id: int
    title: str
    content: str
    slide_type: SlideType
    order: int


@dataclass(frozen=True)
class PresentationEntity:
    id: int | None
    title: str
    subtitle: str
    author: str
    company: str
    project_id: Optional[str]
    theme: str
    audience: str
    objective: str
    duration_min: int
    created_at: datetime
    slides: tuple[SlideEntity, ...] = ()
