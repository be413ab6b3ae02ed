"""User management addon: users, login sessions, roles and permissions."""
from .addon import UserManagementAddon
from .composer import compose_user_processor, compose_session_processor
from .options import (
    UserManagementOptions,
    UnsafeDefault,
    merge_options,
    default_options,
    default_login_callback,
    default_encrypt_password_callback,
)
from .policies import (
    UserIdentityPolicy,
    LoginPolicy,
    CallbackIdentityPolicy,
    CallbackLoginPolicy,
    BorrowedIdentityPolicy,
)
from .session_resource import create_session_resource

__all__ = (
    'UserManagementAddon',
    'UserManagementOptions',
    'UnsafeDefault',
    'merge_options',
    'default_options',
    'default_login_callback',
    'default_encrypt_password_callback',
    'UserIdentityPolicy',
    'LoginPolicy',
    'CallbackIdentityPolicy',
    'CallbackLoginPolicy',
    'BorrowedIdentityPolicy',
    'compose_user_processor',
    'compose_session_processor',
    'create_session_resource',
)
