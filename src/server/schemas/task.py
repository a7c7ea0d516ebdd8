"""
Task Pydantic Schemas

``status`` is accepted as a plain string here and checked by the task
service, so an unknown value is a 400 rather than a request-shape 422.
Field names travel as camelCase (``dueDate``, ``categoryId``, ``ownerId``).
"""

from datetime import datetime, date
from typing import Optional, List
from pydantic import Field, ConfigDict

from schemas.common import CamelModel


class TaskBase(CamelModel):
    """Base task fields."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    due_date: Optional[date] = None
    category_id: Optional[str] = None


class CreateTaskRequest(TaskBase):
    """Request schema for creating a task."""

    completed: Optional[bool] = None
    status: Optional[str] = Field(None, description="pending, in-progress, completed or cancelled")


class UpdateTaskRequest(CamelModel):
    """Request schema for updating a task. All fields optional."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: Optional[bool] = None
    status: Optional[str] = Field(None, description="pending, in-progress, completed or cancelled")
    category_id: Optional[str] = None


class TaskResponse(TaskBase):
    """Response schema for a task."""

    id: str
    completed: bool
    status: str
    owner_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskListResponse(CamelModel):
    """Response schema for listing tasks; ``message`` is set when empty."""

    data: List[TaskResponse]
    message: Optional[str] = None


class TaskStatsResponse(CamelModel):
    total: int
    completed: int
    pending: int
