"""
Category Pydantic Schemas
"""

from datetime import datetime
from typing import Optional, List
from pydantic import Field, ConfigDict

from schemas.common import CamelModel


class CategoryBase(CamelModel):
    """Base category fields."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""


class CreateCategoryRequest(CategoryBase):
    """Request schema for creating a category."""


class UpdateCategoryRequest(CamelModel):
    """Request schema for updating a category. All fields optional."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class CategoryResponse(CategoryBase):
    """Response schema for a category."""

    id: str
    owner_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryListResponse(CamelModel):
    """Response schema for listing categories; ``message`` is set when empty."""

    data: List[CategoryResponse]
    message: Optional[str] = None
