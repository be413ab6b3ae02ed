"""Built-in resource types."""
from .attribute_types import Password
from .resource import ResourceType, ResourceSchema
from ..config import USER_RESOURCE_TYPE

User = ResourceType(
    name=USER_RESOURCE_TYPE,
    schema=ResourceSchema(
        attributes={
            "username": str,
            "email": str,
            "password": Password,
        },
    ),
    description="Application user",
)
