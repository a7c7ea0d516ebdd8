"""
Common/shared Pydantic schemas.

This module contains reusable schemas used across the application:
- CamelModel base for camelCase wire names
- Message responses
- Error responses
- Health check response
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Any, Dict
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """
    Base for resource schemas: camelCase on the wire (``dueDate``,
    ``ownerId``), snake_case attribute names in Python. Either spelling is
    accepted on input; responses are serialized by alias.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""
    message: str


class ErrorResponse(BaseModel):
    """Error response model (shape of FastAPI's HTTPException body)."""
    detail: str


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    database: Dict[str, Any]
    timestamp: datetime = Field(default_factory=_utcnow)
    detail: Optional[str] = None
