"""User management addon."""
from typing import Any, Mapping, Optional, Union

from scitrera_app_framework import get_logger

from .composer import compose_session_processor, compose_user_processor
from .options import UserManagementOptions, merge_options
from .session_resource import create_session_resource
from ...config import SERVICE_ROLES, SERVICE_PERMISSIONS
from ...framework import Addon, Application


class UserManagementAddon(Addon):
    """
    Adds user and session management to an application.

    Installs:
    - the user resource type and its processor
    - a ``session`` resource type whose creation is a login
    - ``roles`` and ``permissions`` services resolving a user's grants

    Installation is not transactional: if a registration fails, earlier
    registrations stay in place and the error propagates.
    """

    options: UserManagementOptions

    def __init__(
            self,
            app: Application,
            options: Union[Mapping[str, Any], UserManagementOptions, None] = None,
    ):
        super().__init__(app, merge_options(options, v=app.v))
        self.logger = get_logger(app.v, name=self.__class__.__name__)

    async def install(self) -> None:
        session_resource = create_session_resource(self.options)

        self.app.services[SERVICE_ROLES] = self.options.user_roles_provider
        self.app.services[SERVICE_PERMISSIONS] = self.options.user_permissions_provider

        self.app.register_types(self.options.user_resource, session_resource)
        self.app.register_processors(
            compose_user_processor(self.app, self.options),
            compose_session_processor(self.app, session_resource, self.options),
        )

        self.logger.info(
            "Installed user management for %s (processor=%s, username=%s)",
            self.options.user_resource.name,
            getattr(self.options.user_processor, '__name__', self.options.user_processor),
            self.options.username_request_parameter,
        )
