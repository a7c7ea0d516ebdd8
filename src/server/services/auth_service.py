"""
Authentication Service

Registration and login. Login issues a signed access token; there is no
refresh flow, an expired token means logging in again.
"""

from typing import Dict, Any

from sqlalchemy.orm import Session

from core.exceptions import DuplicateException, UnauthorizedException
from core.security import hash_password, verify_password, create_access_token
from models.user import User
from repositories.user_repository import UserRepository
from services.base_service import BaseService


def user_summary(user: User) -> Dict[str, Any]:
    return {"id": user.id, "email": user.email, "username": user.username}


class AuthService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.users = UserRepository(db)

    def register(self, email: str, username: str, password: str) -> Dict[str, Any]:
        """
        Create an account.

        Raises:
            DuplicateException: Email or username already in use
        """
        if self.users.get_by_email(email):
            raise DuplicateException("User", "email", email, "Email is already registered")
        if self.users.get_by_username(username):
            raise DuplicateException("User", "username", username, "Username is already taken")

        user = self.users.create_user({
            "email": email,
            "username": username,
            "password_hash": hash_password(password),
        })
        self.logger.info(f"Registered user {user.id}")
        return user_summary(user)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Exchange credentials for an access token.

        Raises:
            UnauthorizedException: Unknown email or wrong password (same message for both)
        """
        user = self.users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            self.logger.warning(f"Failed login for {email}")
            raise UnauthorizedException("Invalid credentials")

        token = create_access_token(user.id, email=user.email)
        return {"access_token": token, "user": user_summary(user)}
