"""
User processor.

Creating or updating a user runs two hooks:

- ``generate_id()``: identifier for a new user (``None`` lets the store assign one)
- ``encrypt_password(op)``: attributes that replace the request's plaintext password

Both delegate to an identity policy when one is given. A subclass that
implements its own policy overrides the hooks directly instead.
"""
import logging
from typing import TYPE_CHECKING, Optional

from .base import OperationProcessor
from ..errors import InvocationError
from ..operation import Operation, ResourceAttributes
from ..resource import Resource, ResourceType
from ..resources import User

if TYPE_CHECKING:
    from ..application import Application
    from ...addons.user_management.policies import UserIdentityPolicy


class UserProcessor(OperationProcessor):
    """Processor for user resources."""

    def __init__(
            self,
            app: 'Application',
            resource_type: ResourceType = User,
            identity_policy: Optional['UserIdentityPolicy'] = None,
            logger: Optional[logging.Logger] = None,
    ):
        super().__init__(app, resource_type, logger=logger)
        self.identity_policy = identity_policy

    async def generate_id(self) -> Optional[str]:
        if self.identity_policy is None:
            raise InvocationError(f"{self.__class__.__name__} does not implement generate_id")
        return await self.identity_policy.generate_id()

    async def encrypt_password(self, op: Operation) -> ResourceAttributes:
        if self.identity_policy is None:
            raise InvocationError(f"{self.__class__.__name__} does not implement encrypt_password")
        return await self.identity_policy.encrypt_password(op)

    async def add(self, op: Operation) -> Resource:
        resource_id = await self.generate_id() or op.data.id
        encrypted = await self.encrypt_password(op) or {}
        return await self.app.store.insert(Resource(
            type=self.resource_type.name,
            id=resource_id,
            attributes={**op.attributes, **encrypted},
            relationships=dict(op.data.relationships),
        ))

    async def update(self, op: Operation) -> Resource:
        attributes = dict(op.attributes)
        if self.resource_type.schema.sensitive_attributes() & attributes.keys():
            attributes.update(await self.encrypt_password(op) or {})
        return await self.app.store.update(self.resource_type.name, op.ref.id, attributes)
