"""
Task ORM model.
"""

from sqlalchemy import Column, String, Text, Date, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from models.base import Base, IdentifierMixin, TimestampMixin
from models.enums import TaskStatus


class Task(IdentifierMixin, TimestampMixin, Base):
    """
    A unit of work owned by exactly one user.

    ``status`` is stored as its string value so the column stays a plain
    VARCHAR; ``completed`` is a separate flag and is never derived from it.
    """

    __tablename__ = "tasks"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    due_date = Column(Date, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    status = Column(String(32), nullable=False, default=TaskStatus.PENDING.value, index=True)
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    owner = relationship("User", back_populates="tasks")
    category = relationship("Category")
