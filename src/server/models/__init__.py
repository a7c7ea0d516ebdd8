"""
ORM Models package.

This package contains all SQLAlchemy ORM models organized by domain.
All models are imported here for easy access and to ensure proper
model registration with SQLAlchemy.

Usage:
    from models import Task, Category, User
    from models.base import Base
    from models.enums import TaskStatus
"""

# Import Base and enums
from models.base import Base, IdentifierMixin, TimestampMixin
from models.enums import TaskStatus

# Import all models
from models.user import User
from models.category import Category
from models.task import Task

# Export all models and utilities
__all__ = [
    # Base classes
    "Base",
    "IdentifierMixin",
    "TimestampMixin",

    # Enums
    "TaskStatus",

    # Models
    "User",
    "Category",
    "Task",
]
