"""
API routers package for the FastAPI application.

This package contains all API endpoint routers organized by domain:
- auth_api: Registration and login
- users_api: Profile, profile image and LinkedIn enrichment
- categories_api: Category CRUD (owner-scoped)
- tasks_api: Task CRUD and statistics (owner-scoped)
- health_api: Health check endpoint
"""

from .auth_api import router as auth_api_router
from .users_api import router as users_api_router
from .categories_api import router as categories_api_router
from .tasks_api import router as tasks_api_router
from .health_api import health_api_router

__all__ = [
    "auth_api_router",
    "users_api_router",
    "categories_api_router",
    "tasks_api_router",
    "health_api_router",
]
