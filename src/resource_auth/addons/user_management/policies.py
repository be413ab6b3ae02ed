"""
Identity and login policies.

Processors delegate their overridable steps to these strategy objects instead
of being subclassed per configuration:

- ``UserIdentityPolicy``: ``generate_id()`` and ``encrypt_password(op)``
- ``LoginPolicy``: ``login(op, user_attributes)``
"""
from typing import Optional, Protocol, runtime_checkable

from ...framework import InvocationError, Operation, ResourceAttributes


@runtime_checkable
class UserIdentityPolicy(Protocol):
    async def generate_id(self) -> Optional[str]:
        ...

    async def encrypt_password(self, op: Operation) -> ResourceAttributes:
        ...


@runtime_checkable
class LoginPolicy(Protocol):
    async def login(self, op: Operation, user_attributes: ResourceAttributes) -> bool:
        ...


async def _store_assigned_id() -> None:
    # None lets the store assign the id
    return None


async def _no_encrypted_attributes(op: Operation) -> ResourceAttributes:
    return {}


class CallbackIdentityPolicy:
    """Identity policy backed by deployer callbacks, with no-op fallbacks."""

    def __init__(self, generate_id_callback=None, encrypt_password_callback=None):
        self._generate_id = generate_id_callback or _store_assigned_id
        self._encrypt_password = encrypt_password_callback or _no_encrypted_attributes

    async def generate_id(self) -> Optional[str]:
        return await self._generate_id()

    async def encrypt_password(self, op: Operation) -> ResourceAttributes:
        return await self._encrypt_password(op)


class CallbackLoginPolicy:
    """Login policy that passes every call straight to one callback."""

    def __init__(self, login_callback):
        self._login = login_callback

    async def login(self, op: Operation, user_attributes: ResourceAttributes) -> bool:
        if self._login is None:
            raise InvocationError("No login callback configured")
        return await self._login(op, user_attributes)


class BorrowedIdentityPolicy:
    """Identity policy that borrows ``generate_id``/``encrypt_password`` from another object.

    Hooks are looked up when called, so a missing one fails with
    ``InvocationError`` at call time rather than when the policy is built.
    """

    def __init__(self, owner):
        self.owner = owner

    def _hook(self, name: str):
        hook = getattr(self.owner, name, None)
        if hook is None:
            raise InvocationError(f"{self.owner.__class__.__name__} does not implement {name}")
        return hook

    async def generate_id(self) -> Optional[str]:
        return await self._hook('generate_id')()

    async def encrypt_password(self, op: Operation) -> ResourceAttributes:
        return await self._hook('encrypt_password')(op)
