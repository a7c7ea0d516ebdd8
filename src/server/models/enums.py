"""
Enumeration types used across ORM models.

This module centralizes all enum definitions to ensure consistency
across the application and make them easy to import.
"""

import enum


class TaskStatus(str, enum.Enum):
    """
    Workflow status of a task.

    Independent of the task's ``completed`` flag; the two are not kept in sync.

    Attributes:
        PENDING: Not started (default)
        IN_PROGRESS: Being worked on
        COMPLETED: Finished
        CANCELLED: Abandoned
    """
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]
