"""
Task Repository

Owner-scoped data access for tasks.
"""

from typing import Dict
from sqlalchemy import func
from sqlalchemy.orm import Session

from models.task import Task
from repositories.owned import OwnedRepository


class TaskRepository(OwnedRepository[Task]):
    """Repository for tasks."""

    def __init__(self, db: Session):
        super().__init__(Task, db)

    def count_by_status(self, owner_id: str) -> Dict[str, int]:
        rows = (
            self.db.query(Task.status, func.count(Task.id))
            .filter(Task.owner_id == owner_id)
            .group_by(Task.status)
            .all()
        )
        return {status: count for status, count in rows}
