"""
Options for the user management addon.

``merge_options()`` overlays deployer-supplied options onto the default table.
The merge is shallow: a supplied key replaces the default entirely, even when
the supplied value is ``None``. Values are not validated.

Two defaults are unsafe by nature and wrapped in ``UnsafeDefault``:

- the login callback permits every login
- the password callback stores the plaintext password
"""
import logging
from dataclasses import dataclass, fields
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from scitrera_app_framework import Variables

from ...config import (
    RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER,
    DEFAULT_RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER,
    RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER,
    DEFAULT_RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER,
    DIAGNOSTIC_UNSAFE_DEFAULT,
)
from ...framework import Diagnostics, Operation, ResourceAttributes, ResourceType, User, UserProcessor

logger = logging.getLogger(__name__)

EncryptPasswordCallback = Callable[[Operation], Awaitable[ResourceAttributes]]
LoginCallback = Callable[[Operation, ResourceAttributes], Awaitable[bool]]
GenerateIdCallback = Callable[[], Awaitable[Optional[str]]]
RolesProvider = Callable[[Any], Awaitable[list[str]]]


class UnsafeDefault:
    """
    A built-in callback that must not reach production unnoticed.

    Calling it directly logs a warning on every call. ``bind()`` returns a
    callback that instead records a single diagnostic event, on first use.
    """

    def __init__(self, name: str, fn: Callable[..., Awaitable[Any]], message: str):
        self.name = name
        self.fn = fn
        self.message = message

    async def __call__(self, *args, **kwargs):
        logger.warning(self.message)
        return await self.fn(*args, **kwargs)

    def bind(self, diagnostics: Diagnostics, source: str = None) -> Callable[..., Awaitable[Any]]:
        emitted = False

        async def bound(*args, **kwargs):
            nonlocal emitted
            if not emitted:
                emitted = True
                diagnostics.emit(DIAGNOSTIC_UNSAFE_DEFAULT, self.message, source=source, callback=self.name)
            return await self.fn(*args, **kwargs)

        return bound

    def __repr__(self) -> str:
        return f"<UnsafeDefault {self.name}>"


def bind_unsafe_default(callback, diagnostics: Diagnostics, source: str = None):
    """Bind ``callback`` to ``diagnostics`` if it is an ``UnsafeDefault``; otherwise return it unchanged."""
    if isinstance(callback, UnsafeDefault):
        return callback.bind(diagnostics, source=source)
    return callback


async def _permit_any_login(op: Operation, user_attributes: ResourceAttributes) -> bool:
    return True


async def _plaintext_password(op: Operation) -> ResourceAttributes:
    return {"password": op.attributes.get("password")}


async def _no_roles(user) -> list[str]:
    return []


async def _no_permissions(user) -> list[str]:
    return []


default_login_callback = UnsafeDefault(
    "user_login_callback",
    _permit_any_login,
    "You're using the default login callback with UserManagementAddon. "
    "ANY LOGIN REQUEST WILL PASS. Implement this callback in your addon configuration.",
)

default_encrypt_password_callback = UnsafeDefault(
    "user_encrypt_password_callback",
    _plaintext_password,
    "You're using the default encrypt_password callback with UserManagementAddon. "
    "Your password is NOT being encrypted. Implement this callback in your addon configuration.",
)


@dataclass(frozen=True)
class UserManagementOptions:
    """Fully merged addon configuration."""
    user_resource: ResourceType = User
    user_processor: type = UserProcessor
    user_encrypt_password_callback: Optional[EncryptPasswordCallback] = default_encrypt_password_callback
    user_login_callback: Optional[LoginCallback] = default_login_callback
    user_generate_id_callback: Optional[GenerateIdCallback] = None
    user_roles_provider: Optional[RolesProvider] = _no_roles
    user_permissions_provider: Optional[RolesProvider] = _no_permissions
    username_request_parameter: str = DEFAULT_RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER
    password_request_parameter: str = DEFAULT_RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER


def default_options(v: Variables = None) -> dict[str, Any]:
    """The default table; request parameter names may come from ``Variables``."""
    defaults = {f.name: f.default for f in fields(UserManagementOptions)}
    if v is not None:
        defaults['username_request_parameter'] = v.environ(
            RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER,
            default=DEFAULT_RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER,
        )
        defaults['password_request_parameter'] = v.environ(
            RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER,
            default=DEFAULT_RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER,
        )
    return defaults


def merge_options(
        options: Union[Mapping[str, Any], UserManagementOptions, None] = None,
        v: Variables = None,
) -> UserManagementOptions:
    """Overlay ``options`` onto the defaults.

    Args:
        options: Partial options mapping, a complete ``UserManagementOptions``, or None
        v: Optional Variables instance used to resolve configurable defaults

    Returns:
        Merged, immutable options

    Raises:
        TypeError: If ``options`` names an unknown option
    """
    if isinstance(options, UserManagementOptions):
        supplied = {f.name: getattr(options, f.name) for f in fields(options)}
    else:
        supplied = dict(options or {})
    return UserManagementOptions(**{**default_options(v), **supplied})
