"""
Task Service

Owner-scoped CRUD for tasks, status validation and dashboard counts.
"""

from typing import Dict, Any

from sqlalchemy.orm import Session

from core.exceptions import ValidationException, NotFoundException
from models.enums import TaskStatus
from models.task import Task
from repositories.category_repository import CategoryRepository
from repositories.task_repository import TaskRepository
from services.base_service import OwnedResourceService


class TaskService(OwnedResourceService[Task]):
    """
    Task lifecycle for one owner.

    ``status`` must be one of :class:`TaskStatus` and defaults to pending.
    ``completed`` is stored as given; setting ``status`` to "completed" does
    not touch it and vice versa.
    """

    resource_name = "Task"
    empty_message = "No tasks found. Create one to get started!"
    nullable_fields = ("due_date", "category_id")

    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = TaskRepository(db)
        self.categories = CategoryRepository(db)

    @staticmethod
    def validate_status(status: Any) -> str:
        if isinstance(status, TaskStatus):
            return status.value
        if status not in TaskStatus.values():
            raise ValidationException(
                f"Invalid status: {status}",
                {"allowed": TaskStatus.values()},
            )
        return status

    def _check_category(self, data: Dict[str, Any], owner_id: str) -> None:
        category_id = data.get("category_id")
        if category_id is not None and not self.categories.exists_owned(category_id, owner_id):
            raise NotFoundException("Category", category_id)

    def _prepare_create(self, payload: Dict[str, Any], owner_id: str) -> Dict[str, Any]:
        data = dict(payload)
        if data.get("status") is None:
            data["status"] = TaskStatus.PENDING.value
        else:
            data["status"] = self.validate_status(data["status"])
        if data.get("completed") is None:
            data["completed"] = False
        self._check_category(data, owner_id)
        return data

    def _prepare_update(self, patch: Dict[str, Any], owner_id: str) -> Dict[str, Any]:
        data = super()._prepare_update(patch, owner_id)
        if "status" in data:
            data["status"] = self.validate_status(data["status"])
        self._check_category(data, owner_id)
        return data

    def stats(self, owner_id: str) -> Dict[str, int]:
        """Totals shown on the dashboard: all tasks and counts by status."""
        by_status = self.repository.count_by_status(owner_id)
        return {
            "total": sum(by_status.values()),
            "completed": by_status.get(TaskStatus.COMPLETED.value, 0),
            "pending": by_status.get(TaskStatus.PENDING.value, 0),
        }
