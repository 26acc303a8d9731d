from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from taskdesk.domain.entities import PresentationEntity, SlideEntity, TaskEntity
from taskdesk.domain.enums import Priority, SlideType, coerce_priority

from .models import PresentationModel, SlideModel, TaskModel

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    # columns hold naive UTC
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _to_entity(model: TaskModel) -> TaskEntity:
    priority = coerce_priority(model.priority)
    if not isinstance(priority, Priority):
        logger.warning("Task %s has unknown priority %r", model.id, model.priority)
    return TaskEntity(
        id=model.id,
        description=model.description,
        completed=bool(model.completed),
        priority=priority,
        due_date=_as_utc(model.due_date),
        created_at=_as_utc(model.created_at),
        project_id=model.project_id,
        assigned_to_id=model.assigned_to_id,
        parent_task_id=model.parent_task_id,
        created_by_id=model.created_by_id,
        notes=model.notes,
    )


def _slide_to_entity(model: SlideModel) -> SlideEntity:
    try:
        slide_type = SlideType(model.slide_type)
    except ValueError:
        logger.warning("Slide %s has unknown type %r", model.slide_id, model.slide_type)
        slide_type = SlideType.CONTENT
    return SlideEntity(
        id=model.slide_id,
        title=model.title,
        content=model.content,
        slide_type=slide_type,
        order=model.sort_order,
    )


def _presentation_to_entity(model: PresentationModel) -> PresentationEntity:
    return PresentationEntity(
        id=model.id,
        title=model.title,
        subtitle=model.subtitle,
        author=model.author,
        company=model.company,
        project_id=model.project_id,
        theme=model.theme,
        audience=model.audience,
        objective=model.objective,
        duration_min=model.duration_min,
        created_at=_as_utc(model.created_at),
        slides=tuple(_slide_to_entity(slide) for slide in model.slides),
    )


class TaskRepository:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def list_tasks(self) -> list[TaskEntity]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(TaskModel.created_at.asc(), TaskModel.id.asc())
            return [_to_entity(task) for task in session.scalars(stmt)]

    def get_task(self, task_id: str) -> Optional[TaskEntity]:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            return _to_entity(task) if task else None

    def create_task(self, data: dict) -> TaskEntity:
        with self._session_factory() as session:
            task = TaskModel(**data)
            session.add(task)
            session.commit()
            session.refresh(task)
            return _to_entity(task)

    def update_task(self, task_id: str, data: dict) -> Optional[TaskEntity]:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return None
            for key, value in data.items():
                setattr(task, key, value)
            session.commit()
            session.refresh(task)
            return _to_entity(task)

    def delete_task(self, task_id: str) -> None:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return
            session.delete(task)
            session.commit()


class PresentationRepository:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def save_presentation(self, data: dict, slides: list[dict]) -> PresentationEntity:
        with self._session_factory() as session:
            presentation = PresentationModel(**data)
            presentation.slides = [
                SlideModel(
                    slide_id=record["id"],
                    title=record["title"],
                    content=record["content"],
                    slide_type=record["slide_type"],
                    sort_order=record["order"],
                )
                for record in slides
            ]
            session.add(presentation)
            session.commit()
            session.refresh(presentation)
            logger.info("Saved presentation %s with %d slides", presentation.id, len(slides))
            return _presentation_to_entity(presentation)

    def get_presentation(self, presentation_id: int) -> Optional[PresentationEntity]:
        with self._session_factory() as session:
            presentation = session.get(PresentationModel, presentation_id)
            return _presentation_to_entity(presentation) if presentation else None

    def list_presentations(self) -> list[PresentationEntity]:
        with self._session_factory() as session:
            stmt = select(PresentationModel).order_by(
                PresentationModel.created_at.desc(), PresentationModel.id.desc()
            )
            return [_presentation_to_entity(item) for item in session.scalars(stmt)]
