"""Session resource synthesis."""
from .options import UserManagementOptions
from ...config import SESSION_RESOURCE_TYPE
from ...framework import Password, Relationship, ResourceSchema, ResourceType


def create_session_resource(options: UserManagementOptions) -> ResourceType:
    """Build the session resource type from merged options.

    Attribute names are used verbatim. Colliding names are not rejected: later
    entries (username, then password) replace earlier ones.
    """
    return ResourceType(
        name=SESSION_RESOURCE_TYPE,
        schema=ResourceSchema(
            attributes={
                "token": str,
                options.username_request_parameter: str,
                options.password_request_parameter: Password,
            },
            relationships={
                "user": Relationship(type=options.user_resource.name, belongs_to=True),
            },
        ),
        description="Authenticated user session",
    )
