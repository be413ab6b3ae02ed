"""
In-memory resource store.

Stand-in for the persistence layer processors talk to. Records are kept per
resource type and lost on restart; use only for tests and local development.
"""
from typing import Any, Optional
from uuid import uuid4

from scitrera_app_framework import get_logger, Variables

from .errors import ResourceConflictError, ResourceNotFoundError
from .resource import Resource


class MemoryResourceStore:
    """Dictionary-backed store keyed by resource type name, then id."""

    def __init__(self, v: Variables = None):
        self.logger = get_logger(v, name=self.__class__.__name__)
        self._records: dict[str, dict[str, Resource]] = {}  # type -> {id -> Resource}

    async def insert(self, resource: Resource) -> Resource:
        """Store a new record, assigning an id when it has none. Existing records are never replaced."""
        records = self._records.setdefault(resource.type, {})
        if resource.id is None:
            resource = resource.model_copy(update={"id": uuid4().hex})
        elif resource.id in records:
            raise ResourceConflictError(f"{resource.type}/{resource.id} already exists")
        records[resource.id] = resource
        self.logger.debug("Inserted %s/%s", resource.type, resource.id)
        return resource

    async def get(self, type_name: str, resource_id: str) -> Optional[Resource]:
        return self._records.get(type_name, {}).get(resource_id)

    async def find_by(self, type_name: str, attributes: dict[str, Any]) -> list[Resource]:
        """Return records whose attributes equal every given value."""
        return [
            record for record in self._records.get(type_name, {}).values()
            if all(record.attributes.get(k) == v for k, v in attributes.items())
        ]

    async def update(self, type_name: str, resource_id: str, attributes: dict[str, Any]) -> Resource:
        current = await self.get(type_name, resource_id)
        if current is None:
            raise ResourceNotFoundError(f"{type_name}/{resource_id} not found")
        updated = current.model_copy(update={"attributes": {**current.attributes, **attributes}})
        self._records[type_name][resource_id] = updated
        return updated

    async def delete(self, type_name: str, resource_id: str) -> bool:
        return self._records.get(type_name, {}).pop(resource_id, None) is not None
