"""Base operation processor: default handling of operations against the store."""
import logging
from typing import TYPE_CHECKING, Optional

from scitrera_app_framework import get_logger

from ..errors import ResourceNotFoundError, InvocationError
from ..operation import Operation, OperationKind
from ..resource import Resource, ResourceType

if TYPE_CHECKING:
    from ..application import Application


class OperationProcessor:
    """
    Handles operations for one resource type.

    Subclasses override the per-verb coroutines (``get``, ``add``, ``update``,
    ``remove``). Processors are created once at installation and shared by all
    requests, so they must not keep request state on ``self``.
    """

    def __init__(self, app: 'Application', resource_type: ResourceType, logger: Optional[logging.Logger] = None):
        self.app = app
        self.resource_type = resource_type
        self.logger = logger or get_logger(app.v, name=self.__class__.__name__)

    async def execute(self, op: Operation) -> Optional[Resource]:
        """Dispatch ``op`` to the coroutine for its verb."""
        self.logger.debug("Executing %s on %s", op.op.value, op.ref.type)
        if op.op == OperationKind.GET:
            return await self.get(op)
        if op.op == OperationKind.ADD:
            return await self.add(op)
        if op.op == OperationKind.UPDATE:
            return await self.update(op)
        if op.op == OperationKind.REMOVE:
            await self.remove(op)
            return None
        raise InvocationError(f"Unsupported operation: {op.op}")

    async def get(self, op: Operation) -> Resource:
        record = await self.app.store.get(self.resource_type.name, op.ref.id)
        if record is None:
            raise ResourceNotFoundError(f"{self.resource_type.name}/{op.ref.id} not found")
        return record

    async def add(self, op: Operation) -> Resource:
        return await self.app.store.insert(Resource(
            type=self.resource_type.name,
            id=op.data.id,
            attributes=dict(op.attributes),
            relationships=dict(op.data.relationships),
        ))

    async def update(self, op: Operation) -> Resource:
        return await self.app.store.update(self.resource_type.name, op.ref.id, dict(op.attributes))

    async def remove(self, op: Operation) -> None:
        if not await self.app.store.delete(self.resource_type.name, op.ref.id):
            raise ResourceNotFoundError(f"{self.resource_type.name}/{op.ref.id} not found")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} for {self.resource_type.name!r}>"
