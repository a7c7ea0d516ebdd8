"""
Client-side cache for one owned resource.

Mutations follow confirm-then-refetch: the write is sent and awaited first,
the confirmed record is merged into the local list, then the full list is
reloaded from the server and replaces the cache wholesale. Nothing is
written locally before the server confirms, so a failed write needs no
rollback; the previous list simply stays.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from app_lib.api.client import APIError
from app_lib.api.endpoints import ResourceAPI

logger = logging.getLogger(__name__)


@dataclass
class ResourceState:
    """``{data, loading, error}`` plus the server's informational message for empty lists."""
    data: List[Dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    message: Optional[str] = None


def user_facing_error(error: APIError, fallback: str) -> str:
    """The server's detail when it sent a readable one, else ``fallback``."""
    if isinstance(error.detail, str) and error.detail:
        return error.detail
    return fallback


class ResourceSlice:
    """
    State slice over a ResourceAPI.

    Subclasses add the typed create/update/delete actions; each one goes
    through :meth:`mutate`.
    """

    name: str = "resource"
    id_field: str = "id"

    def __init__(self, api: ResourceAPI):
        self.api = api
        self.state = ResourceState()

    @property
    def items(self) -> List[Dict[str, Any]]:
        return self.state.data

    def find(self, id: str) -> Optional[Dict[str, Any]]:
        for item in self.state.data:
            if item.get(self.id_field) == id:
                return item
        return None

    # Reload

    def load(self) -> bool:
        """Fetch the full list and replace the cache. Returns False on failure."""
        self.state.loading = True
        self.state.error = None
        try:
            response = self.api.get_all()
        except APIError as e:
            logger.error(f"Failed to fetch {self.name}: {e.message}")
            self.state.error = user_facing_error(e, f"Failed to fetch {self.name}")
            return False
        finally:
            self.state.loading = False

        self.state.data = list(response.get("data") or [])
        self.state.message = response.get("message")
        return True

    # Local list operations

    def push(self, item: Dict[str, Any]):
        self.state.data.append(item)

    def replace_or_push(self, item: Dict[str, Any]):
        """Replace the cached record with the same id; append if it is not cached."""
        item_id = item.get(self.id_field)
        for index, existing in enumerate(self.state.data):
            if existing.get(self.id_field) == item_id:
                self.state.data[index] = item
                return
        logger.warning(f"{self.name}: record {item_id} not in cache, appending")
        self.state.data.append(item)

    def remove(self, id: str):
        self.state.data = [item for item in self.state.data if item.get(self.id_field) != id]

    # Mutations

    def mutate(
        self,
        call: Callable[[], Any],
        fallback_error: str,
        reconcile: Optional[Callable[[Any], None]] = None,
    ) -> Optional[Any]:
        """
        Run ``call``, then reload.

        Args:
            call: The API request performing the write
            fallback_error: Message stored in ``state.error`` if the write fails
            reconcile: Applied to the confirmed result before the reload

        Returns:
            The API result, or None if the write failed (cache untouched).
            Callers must read the list from ``state`` afterwards, not from the result.
        """
        self.state.loading = True
        self.state.error = None
        try:
            result = call()
        except APIError as e:
            logger.error(f"{fallback_error}: {e.message}")
            self.state.error = user_facing_error(e, fallback_error)
            self.state.loading = False
            return None

        if reconcile is not None:
            reconcile(result)
        self.state.loading = False

        self.load()
        return result
