"""
Base repository.

Holds the session and the model class, filters payloads down to real
columns, and inserts new rows. Lookups live in the subclasses: users are
fetched by id, tasks and categories only through OwnedRepository.
"""

from typing import Generic, TypeVar, Type, Dict, Any
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.base import Base
from core.exceptions import DatabaseException


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Persistence helpers shared by every repository.

    Type Parameters:
        ModelType: The SQLAlchemy model this repository stores

    Example:
        class TaskRepository(OwnedRepository[Task]):
            def __init__(self, db: Session):
                super().__init__(Task, db)
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _column_values(self, data: Dict[str, Any], protected: tuple = ()) -> Dict[str, Any]:
        """Drop keys that are not columns of the model or that are protected."""
        columns = set(self.model.__table__.columns.keys())
        return {
            key: value for key, value in data.items()
            if key in columns and key not in protected
        }

    def create(self, obj: ModelType) -> ModelType:
        """
        Insert ``obj`` and return it with server-side defaults loaded.

        Raises:
            IntegrityError: A unique or foreign key constraint failed; the
                session is rolled back and the caller decides what it means
            DatabaseException: Any other database failure
        """
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return obj
        except IntegrityError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to create {self.model.__name__}") from e
