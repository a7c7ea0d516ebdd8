from typing import Any, Dict, Optional

from app_lib.api.endpoints import CategoriesAPI
from app_lib.store.resource import ResourceSlice


class CategoriesSlice(ResourceSlice):
    name = "categories"

    def __init__(self, api: CategoriesAPI):
        super().__init__(api)

    def create(self, name: str, description: str = "") -> Optional[Dict[str, Any]]:
        payload = {"name": name, "description": description}
        return self.mutate(lambda: self.api.create(payload), "Failed to create category", self.push)

    def update(
        self,
        id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        updates = {key: value for key, value in {"name": name, "description": description}.items() if value is not None}
        return self.mutate(lambda: self.api.update(id, updates), "Failed to update category", self.replace_or_push)

    def delete(self, id: str) -> bool:
        result = self.mutate(lambda: self.api.delete(id), "Failed to delete category", lambda _: self.remove(id))
        return result is not None
