"""
Repositories package.

This package contains all data access layer repositories following the Repository Pattern.
Task and category access goes through OwnedRepository, which requires the
caller's identity on every call.

Usage:
    from repositories import TaskRepository
    from core.database import get_db

    def list_tasks(db: Session = Depends(get_db)):
        repo = TaskRepository(db)
        return repo.list_for_owner(owner_id)
"""

from repositories.base import BaseRepository
from repositories.owned import OwnedRepository
from repositories.task_repository import TaskRepository
from repositories.category_repository import CategoryRepository
from repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "OwnedRepository",
    "TaskRepository",
    "CategoryRepository",
    "UserRepository",
]
