"""
Base Service Classes

Common plumbing for the resource services: a named logger and the
owner-scoped CRUD contract shared by tasks and categories.
"""

import logging
from typing import Optional, Dict, Any, List, Generic, TypeVar

from sqlalchemy.orm import Session

from core.exceptions import NotFoundException
from repositories.owned import OwnedRepository

T = TypeVar('T')


class BaseService:
    """
    Base class for all service implementations.

    Provides a database session and a logger named after the service.
    """

    def __init__(self, db: Session, service_name: Optional[str] = None):
        self.db = db
        self.service_name = service_name or self.__class__.__name__
        self.logger = logging.getLogger(self.service_name)


class OwnedResourceService(BaseService, Generic[T]):
    """
    create / list_all / get_by_id / update / delete for an owned entity.

    Every method takes the caller's ``owner_id``; a record owned by another
    user raises NotFoundException exactly like a missing one.

    Subclasses set ``resource_name`` and ``empty_message`` and build
    ``self.repository``.
    """

    resource_name: str = "Resource"
    empty_message: str = "Nothing found."
    # Fields a patch may explicitly clear with null
    nullable_fields: tuple = ()

    repository: OwnedRepository

    def _not_found(self, id: str) -> NotFoundException:
        return NotFoundException(self.resource_name, id)

    def _prepare_create(self, payload: Dict[str, Any], owner_id: str) -> Dict[str, Any]:
        return dict(payload)

    def _prepare_update(self, patch: Dict[str, Any], owner_id: str) -> Dict[str, Any]:
        return {
            key: value for key, value in patch.items()
            if value is not None or key in self.nullable_fields
        }

    def create(self, payload: Dict[str, Any], owner_id: str) -> T:
        data = self._prepare_create(payload, owner_id)
        obj = self.repository.create_owned(data, owner_id)
        self.logger.info(f"Created {self.resource_name.lower()} {obj.id} for owner {owner_id}")
        return obj

    def list_all(self, owner_id: str) -> Dict[str, Any]:
        """
        All records of ``owner_id``.

        Returns:
            ``{"data": [...]}``, plus a ``message`` when the list is empty.
            An empty list is a normal result, not an error.
        """
        items: List[T] = self.repository.list_for_owner(owner_id)
        if not items:
            return {"message": self.empty_message, "data": []}
        return {"data": items}

    def get_by_id(self, id: str, owner_id: str) -> T:
        obj = self.repository.get_owned(id, owner_id)
        if obj is None:
            self.logger.warning(f"{self.resource_name} {id} not found for owner {owner_id}")
            raise self._not_found(id)
        return obj

    def update(self, id: str, patch: Dict[str, Any], owner_id: str) -> T:
        data = self._prepare_update(patch, owner_id)
        obj = self.repository.update_owned(id, data, owner_id)
        if obj is None:
            self.logger.warning(f"{self.resource_name} {id} not found for owner {owner_id} on update")
            raise self._not_found(id)
        self.logger.info(f"Updated {self.resource_name.lower()} {id} fields={sorted(data)}")
        return obj

    def delete(self, id: str, owner_id: str) -> Dict[str, str]:
        if not self.repository.delete_owned(id, owner_id):
            self.logger.warning(f"{self.resource_name} {id} not found for owner {owner_id} on delete")
            raise self._not_found(id)
        self.logger.info(f"Deleted {self.resource_name.lower()} {id}")
        return {"message": f"{self.resource_name} deleted successfully"}
