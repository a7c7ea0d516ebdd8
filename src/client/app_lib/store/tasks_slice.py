from typing import Any, Dict, Optional

from app_lib.api.endpoints import TasksAPI
from app_lib.store.resource import ResourceSlice


class TasksSlice(ResourceSlice):
    name = "tasks"

    def __init__(self, api: TasksAPI):
        super().__init__(api)

    def create(
        self,
        title: str,
        description: str = "",
        due_date: Optional[str] = None,
        status: Optional[str] = None,
        category_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        payload = {"title": title, "description": description}
        optional = {"dueDate": due_date, "status": status, "categoryId": category_id}
        payload.update({key: value for key, value in optional.items() if value is not None})
        return self.mutate(lambda: self.api.create(payload), "Failed to create task", self.push)

    def update(self, id: str, **updates: Any) -> Optional[Dict[str, Any]]:
        return self.mutate(lambda: self.api.update(id, updates), "Failed to update task", self.replace_or_push)

    def set_completed(self, id: str, completed: bool) -> Optional[Dict[str, Any]]:
        """Toggle the ``completed`` flag only; ``status`` is left as it is."""
        return self.update(id, completed=completed)

    def delete(self, id: str) -> bool:
        result = self.mutate(lambda: self.api.delete(id), "Failed to delete task", lambda _: self.remove(id))
        return result is not None
