"""Custom attribute types usable in a ``ResourceSchema``."""


class AttributeType:
    """Marker base for attribute types that need special handling.

    ``sensitive`` attributes are accepted on input and stored, but never
    included when a resource is serialized for output.
    """

    sensitive: bool = False


class Password(AttributeType):
    """A string attribute holding a (hopefully encrypted) password."""

    sensitive = True


def is_sensitive(attribute_type) -> bool:
    """Check whether values of ``attribute_type`` must be hidden from output."""
    return isinstance(attribute_type, type) and issubclass(attribute_type, AttributeType) and attribute_type.sensitive
