"""
Owner-scoped repository.

Every query for a Task or Category is filtered by the composite
``(id, owner_id)`` key. There is deliberately no method that looks a record
up by identifier alone: a record owned by someone else is indistinguishable
from one that does not exist.
"""

from typing import List, Optional, Dict, Any
from sqlalchemy import update, delete, asc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from repositories.base import BaseRepository, ModelType
from core.exceptions import DatabaseException


# Fields a caller can never set through a patch
PROTECTED_FIELDS = ("id", "owner_id", "created_at", "updated_at")


class OwnedRepository(BaseRepository[ModelType]):
    """
    Data access for models carrying an ``owner_id`` column.

    Update and delete are single statements (``UPDATE/DELETE ... WHERE id = ?
    AND owner_id = ? RETURNING``) so the ownership check and the mutation
    cannot be separated by a concurrent request.
    """

    def _scope(self, id: str, owner_id: str):
        return (self.model.id == id, self.model.owner_id == owner_id)

    def create_owned(self, data: Dict[str, Any], owner_id: str) -> ModelType:
        """Persist a new record stamped with ``owner_id``."""
        values = self._column_values(data, protected=PROTECTED_FIELDS)
        values["owner_id"] = owner_id
        try:
            return self.create(self.model(**values))
        except IntegrityError as e:
            raise DatabaseException(f"Failed to create {self.model.__name__}") from e

    def list_for_owner(self, owner_id: str) -> List[ModelType]:
        """All records of ``owner_id``, oldest first."""
        try:
            return (
                self.db.query(self.model)
                .filter(self.model.owner_id == owner_id)
                .order_by(asc(self.model.created_at))
                .all()
            )
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to list {self.model.__name__}") from e

    def get_owned(self, id: str, owner_id: str) -> Optional[ModelType]:
        """The record with ``id`` if ``owner_id`` owns it, else None."""
        try:
            return self.db.query(self.model).filter(*self._scope(id, owner_id)).first()
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to get {self.model.__name__} with id {id}") from e

    def exists_owned(self, id: str, owner_id: str) -> bool:
        try:
            return self.db.query(self.model.id).filter(*self._scope(id, owner_id)).first() is not None
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to check existence of {self.model.__name__}") from e

    def update_owned(self, id: str, data: Dict[str, Any], owner_id: str) -> Optional[ModelType]:
        """
        Apply a partial update in one find-and-modify statement.

        Args:
            id: Record identifier
            data: Fields to change; unknown and protected keys are ignored
            owner_id: Caller identity

        Returns:
            The updated record, or None when no record matched ``(id, owner_id)``
        """
        values = self._column_values(data, protected=PROTECTED_FIELDS)
        if not values:
            return self.get_owned(id, owner_id)

        stmt = (
            update(self.model)
            .where(*self._scope(id, owner_id))
            .values(**values)
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        try:
            obj = self.db.execute(stmt).scalars().first()
            self.db.commit()
            return obj
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to update {self.model.__name__}") from e

    def delete_owned(self, id: str, owner_id: str) -> bool:
        """
        Delete in one statement.

        Returns:
            True if a record matched ``(id, owner_id)`` and was removed
        """
        try:
            deleted_id = self._delete_statement(id, owner_id)
            self.db.commit()
            return deleted_id is not None
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to delete {self.model.__name__}") from e

    def _delete_statement(self, id: str, owner_id: str) -> Optional[str]:
        stmt = (
            delete(self.model)
            .where(*self._scope(id, owner_id))
            .returning(self.model.id)
        )
        return self.db.execute(stmt).scalar_one_or_none()
