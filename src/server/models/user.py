"""
User ORM model.

Stores identity, credentials and profile fields. Users own tasks and categories.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from models.base import Base, IdentifierMixin, TimestampMixin


class User(IdentifierMixin, TimestampMixin, Base):
    """User record with credentials and profile metadata."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    profile_image = Column(String, nullable=False, default="")
    linkedin_url = Column(String, nullable=False, default="")
    linkedin_name = Column(String, nullable=False, default="")
    linkedin_profile_url = Column(String, nullable=False, default="")
    linkedin_profile_image = Column(String, nullable=False, default="")

    categories = relationship("Category", back_populates="owner", passive_deletes=True)
    tasks = relationship("Task", back_populates="owner", passive_deletes=True)
