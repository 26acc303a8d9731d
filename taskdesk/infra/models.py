from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .db import Base


def utcnow() -> datetime:
    return datetime.utcnow()


def new_task_id() -> str:
    return str(uuid.uuid4())


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=new_task_id)
    description = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False, index=True)
    priority = Column(String(20), nullable=False, default="medium")
    due_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    project_id = Column(String(36), nullable=True, index=True)
    assigned_to_id = Column(String(36), nullable=True)
    created_by_id = Column(String(36), nullable=True)
    parent_task_id = Column(String(36), nullable=True)
    notes = Column(Text, nullable=True)


class PresentationModel(Base):
    __tablename__ = "presentations"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    subtitle = Column(String(200), nullable=False, default="")
    author = Column(String(200), nullable=False, default="")
    company = Column(String(200), nullable=False, default="")
    project_id = Column(String(36), nullable=True)
    theme = Column(String(40), nullable=False, default="modern")
    audience = Column(Text, nullable=False, default="")
    objective = Column(Text, nullable=False, default="")
    duration_min = Column(Integer, nullable=False, default=30)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    slides = relationship(
        "SlideModel",
        order_by="SlideModel.sort_order",
        cascade="all, delete-orphan",
    )


class SlideModel(Base):
    __tablename__ = "slides"

    id = Column(Integer, primary_key=True)
    presentation_id = Column(
        Integer, ForeignKey("presentations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    slide_id = Column(Integer, nullable=False)
    title = Column(String(200), nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    slide_type = Column(String(20), nullable=False, default="content")
    sort_order = Column(Integer, nullable=False, default=0)
