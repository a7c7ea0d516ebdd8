"""
Category ORM model.
"""

from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from models.base import Base, IdentifierMixin, TimestampMixin


class Category(IdentifierMixin, TimestampMixin, Base):
    """A named grouping of tasks, owned by exactly one user."""

    __tablename__ = "categories"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    owner = relationship("User", back_populates="categories")
