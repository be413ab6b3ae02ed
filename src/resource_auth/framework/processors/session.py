"""
Session processor.

Creating a session is a login: the user record matching the request's
username is looked up, and ``login(op, user_attributes)`` decides whether the
session may be created. A denied login raises ``AuthenticationError``.

The token attached to a created session is an opaque random string. Nothing
here signs, stores or expires it.
"""
import logging
import secrets
from typing import TYPE_CHECKING, Optional

from .base import OperationProcessor
from ..errors import AuthenticationError, InvocationError
from ..operation import Operation, ResourceAttributes
from ..resource import Resource, ResourceType

if TYPE_CHECKING:
    from ..application import Application
    from ...addons.user_management.policies import LoginPolicy


class SessionProcessor(OperationProcessor):
    """Processor for session resources."""

    def __init__(
            self,
            app: 'Application',
            resource_type: ResourceType,
            login_policy: Optional['LoginPolicy'] = None,
            username_parameter: str = "username",
            logger: Optional[logging.Logger] = None,
    ):
        super().__init__(app, resource_type, logger=logger)
        self.login_policy = login_policy
        self.username_parameter = username_parameter

    @property
    def user_type(self) -> str:
        return self.resource_type.schema.relationships["user"].type

    async def login(self, op: Operation, user_attributes: ResourceAttributes) -> bool:
        if self.login_policy is None:
            raise InvocationError(f"{self.__class__.__name__} does not implement login")
        return await self.login_policy.login(op, user_attributes)

    async def issue_token(self, op: Operation, user: Resource) -> str:
        return secrets.token_urlsafe(32)

    async def add(self, op: Operation) -> Resource:
        username = op.attributes.get(self.username_parameter)
        if username is None:
            self.logger.debug("Login denied: request has no %s", self.username_parameter)
            raise AuthenticationError("Invalid credentials")
        matches = await self.app.store.find_by(self.user_type, {self.username_parameter: username})
        if not matches:
            self.logger.debug("Login denied: no %s with %s=%r", self.user_type, self.username_parameter, username)
            raise AuthenticationError("Invalid credentials")

        user = matches[0]
        user_attributes = {"id": user.id, **user.attributes}
        if not await self.login(op, user_attributes):
            self.logger.debug("Login denied for %s/%s", self.user_type, user.id)
            raise AuthenticationError("Invalid credentials")

        token = await self.issue_token(op, user)
        return Resource(
            type=self.resource_type.name,
            id=token,
            attributes={"token": token, self.username_parameter: username},
            relationships={"user": {"type": self.user_type, "id": user.id}},
        )
