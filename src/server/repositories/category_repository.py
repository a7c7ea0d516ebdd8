"""
Category Repository

Owner-scoped data access for categories.
"""

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.category import Category
from models.task import Task
from repositories.owned import OwnedRepository
from core.exceptions import DatabaseException


class CategoryRepository(OwnedRepository[Category]):
    """Repository for categories."""

    def __init__(self, db: Session):
        super().__init__(Category, db)

    def delete_owned(self, id: str, owner_id: str) -> bool:
        """
        Delete a category and detach the owner's tasks that referenced it.

        Both statements commit together; nothing changes when the category
        is not found for ``owner_id``.
        """
        try:
            deleted_id = self._delete_statement(id, owner_id)
            if deleted_id is None:
                self.db.rollback()
                return False

            self.db.execute(
                update(Task)
                .where(Task.category_id == id, Task.owner_id == owner_id)
                .values(category_id=None)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException("Failed to delete Category") from e
