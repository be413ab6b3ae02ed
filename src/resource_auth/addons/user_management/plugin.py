"""Plugin that installs the user management addon on the application extension."""
from logging import Logger
from typing import Any, Iterable, Optional

from scitrera_app_framework import Plugin, Variables

from .addon import UserManagementAddon
from ...config import EXT_APPLICATION, EXT_USER_MANAGEMENT_ADDON

# Variables key holding deployer options (callbacks cannot come from the environment)
USER_MANAGEMENT_OPTIONS = 'resource-auth-user-management-options'


class UserManagementAddonPlugin(Plugin):
    """
    Queue ``UserManagementAddon`` on the application.

    Options are taken from ``v.get(USER_MANAGEMENT_OPTIONS)``; anything not set
    there falls back to the addon defaults (request parameter names may still
    come from the environment).
    """

    def extension_point_name(self, v: Variables) -> str:
        return EXT_USER_MANAGEMENT_ADDON

    def build_options(self, v: Variables) -> Optional[dict[str, Any]]:
        return v.get(USER_MANAGEMENT_OPTIONS, default=None)

    def initialize(self, v: Variables, logger: Logger) -> UserManagementAddon:
        app = self.get_extension(EXT_APPLICATION, v)
        addon = app.use(UserManagementAddon, self.build_options(v))
        logger.info('Queued user management addon for %s', addon.options.user_resource.name)
        return addon

    def get_dependencies(self, v: Variables) -> Iterable[str]:
        return (EXT_APPLICATION,)
