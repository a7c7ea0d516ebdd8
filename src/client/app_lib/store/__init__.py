"""
State slices: auth, tasks and categories.

Each slice is a plain object over an injected API wrapper; there is no
global store.

Usage:
    from app_lib.api import build_apis
    from app_lib.store import AuthSlice, TasksSlice, CategoriesSlice

    apis = build_apis()
    auth = AuthSlice(apis["auth"])
    tasks = TasksSlice(apis["tasks"])
    if auth.login("a@x.com", "secret1"):
        tasks.load()
"""

from app_lib.store.resource import ResourceState, ResourceSlice
from app_lib.store.auth_slice import AuthState, AuthSlice
from app_lib.store.tasks_slice import TasksSlice
from app_lib.store.categories_slice import CategoriesSlice

__all__ = [
    "ResourceState",
    "ResourceSlice",
    "AuthState",
    "AuthSlice",
    "TasksSlice",
    "CategoriesSlice",
]
