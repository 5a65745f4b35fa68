"""Kanban board models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bb_dashboard.models.agent import AgentId

HUMAN_ASSIGNEE = "lee"
ASSIGNEES = frozenset({HUMAN_ASSIGNEE} | {a.value for a in AgentId})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_assignee(value: str) -> str:
    if value not in ASSIGNEES:
        raise ValueError(f"unknown assignee: {value}")
    return value


class Priority(str, Enum):
    """Task priority."""

    LOW = "low"
    MED = "med"
    HIGH = "high"
    URGENT = "urgent"


class Column(str, Enum):
    """Board column a task sits in."""

    BACKLOG = "Backlog"
    IN_PROGRESS = "In Progress"
    REVIEW = "Review"
    DONE = "Done"


class TaskCreate(BaseModel):
    """Request to create a task."""

    title: str = Field(min_length=1)
    description: str = ""
    assignee: str = HUMAN_ASSIGNEE
    priority: Priority = Priority.LOW
    column: Column = Column.BACKLOG

    @field_validator("assignee")
    @classmethod
    def known_assignee(cls, value: str) -> str:
        return _check_assignee(value)


class TaskUpdate(BaseModel):
    """Partial update of a task. Unset fields are left alone."""

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    assignee: Optional[str] = None
    priority: Optional[Priority] = None
    column: Optional[Column] = None

    @field_validator("assignee")
    @classmethod
    def known_assignee(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _check_assignee(value)


class Task(BaseModel):
    """A card on the board."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str = ""
    assignee: str = HUMAN_ASSIGNEE
    priority: Priority = Priority.LOW
    column: Column = Column.BACKLOG
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")


class Board(BaseModel):
    """Persisted board document."""

    tasks: list[Task] = Field(default_factory=list)
