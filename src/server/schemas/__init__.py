"""
Pydantic schemas package.

This package contains all Pydantic models for request/response validation,
organized by domain:
- auth: Registration and login
- user: Profile, image upload and LinkedIn enrichment
- category: Category CRUD
- task: Task CRUD and statistics
- common: Shared schemas (messages, errors, health)

Usage:
    from schemas import CreateTaskRequest, TaskResponse
    from schemas.common import MessageResponse
"""

# Common schemas
from schemas.common import MessageResponse, ErrorResponse, HealthCheckResponse

# Auth schemas
from schemas.auth import RegisterRequest, LoginRequest, LoginResponse, UserSummary

# User schemas
from schemas.user import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UserProfileResponse,
    ProfileImageResponse,
    LinkedInScrapeRequest,
)

# Category schemas
from schemas.category import (
    CreateCategoryRequest,
    UpdateCategoryRequest,
    CategoryResponse,
    CategoryListResponse,
)

# Task schemas
from schemas.task import (
    CreateTaskRequest,
    UpdateTaskRequest,
    TaskResponse,
    TaskListResponse,
    TaskStatsResponse,
)

__all__ = [
    "MessageResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "UserSummary",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UserProfileResponse",
    "ProfileImageResponse",
    "LinkedInScrapeRequest",
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "CategoryResponse",
    "CategoryListResponse",
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "TaskResponse",
    "TaskListResponse",
    "TaskStatsResponse",
]
