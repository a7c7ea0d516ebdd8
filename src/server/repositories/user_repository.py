"""
User Repository

Data access layer for user records.
"""

from typing import Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models.user import User
from repositories.base import BaseRepository
from core.exceptions import DuplicateException, DatabaseException


class UserRepository(BaseRepository[User]):
    """
    Repository for user records.

    Users are the identity root: they are looked up by the id carried in the
    access token, so unlike tasks and categories they have a plain ``get``.
    """

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get(self, id: str) -> Optional[User]:
        try:
            return self.db.query(User).filter(User.id == id).first()
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to get User with id {id}") from e

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, user_data: dict) -> User:
        try:
            return self.create(User(**self._column_values(user_data, protected=("id",))))
        except IntegrityError as e:
            # Lost a race with a concurrent registration
            raise DuplicateException("User", "email", user_data.get("email")) from e

    def update_by_id(self, id: str, data: Dict[str, Any]) -> Optional[User]:
        """
        Update a user by ID with partial data.

        Returns:
            Updated user or None if not found
        """
        user = self.get(id)
        if user is None:
            return None

        for key, value in self._column_values(data, protected=("id", "created_at", "updated_at")).items():
            setattr(user, key, value)

        try:
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateException("User", "email or username", data) from e
