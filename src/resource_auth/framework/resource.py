"""
Resource descriptors and resource records.

A ``ResourceType`` is the schema declaration registered with the application:
a type name plus attribute and relationship declarations. Relationship targets
are type *names*; the application resolves them against its registry when the
types are registered, so a descriptor can be built before its target exists.

A ``Resource`` is one record of a given type as it travels through processors.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from .attribute_types import is_sensitive


@dataclass(frozen=True)
class Relationship:
    """Declaration of a relationship to another resource type."""
    type: str
    belongs_to: bool = False


@dataclass(frozen=True)
class ResourceSchema:
    """Attributes (name -> type) and relationships (name -> Relationship)."""
    attributes: Mapping[str, Any] = field(default_factory=dict)
    relationships: Mapping[str, Relationship] = field(default_factory=dict)

    def sensitive_attributes(self) -> set[str]:
        return {name for name, attribute_type in self.attributes.items() if is_sensitive(attribute_type)}


@dataclass(frozen=True)
class ResourceType:
    """A named resource schema registered with the application."""
    name: str
    schema: ResourceSchema = field(default_factory=ResourceSchema)
    description: Optional[str] = None

    def __str__(self) -> str:
        return self.name


class Resource(BaseModel):
    """A resource record."""

    type: str = Field(..., description="Resource type name")
    id: Optional[str] = Field(None, description="Resource identifier")
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Any] = Field(default_factory=dict)

    def public(self, resource_type: ResourceType) -> dict[str, Any]:
        """Serialize without the attributes the schema marks as sensitive."""
        hidden = resource_type.schema.sensitive_attributes()
        data = self.model_dump()
        data["attributes"] = {k: v for k, v in self.attributes.items() if k not in hidden}
        return data
