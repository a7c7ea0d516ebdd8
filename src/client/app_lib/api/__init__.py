"""HTTP gateway: the shared client and the per-resource request wrappers."""
from app_lib.api.client import APIClient, APIError
from app_lib.api.endpoints import AuthAPI, TasksAPI, CategoriesAPI, build_apis

__all__ = ["APIClient", "APIError", "AuthAPI", "TasksAPI", "CategoriesAPI", "build_apis"]
