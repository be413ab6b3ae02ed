"""Operation models: the unit of work processors receive."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class OperationKind(str, Enum):
    """Operation verbs understood by processors."""
    GET = "get"
    ADD = "add"
    UPDATE = "update"
    REMOVE = "remove"


class ResourceRef(BaseModel):
    """Reference to the resource type (and optionally the record) an operation targets."""
    type: str
    id: Optional[str] = None


class OperationData(BaseModel):
    """Payload carried by ``add`` and ``update`` operations."""
    type: str
    id: Optional[str] = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Any] = Field(default_factory=dict)


class Operation(BaseModel):
    """A single request-scoped operation."""

    model_config = {"frozen": True}

    op: OperationKind
    ref: ResourceRef
    data: Optional[OperationData] = None

    @property
    def attributes(self) -> dict[str, Any]:
        """Request attributes, or an empty mapping for operations without data."""
        return self.data.attributes if self.data else {}


ResourceAttributes = dict[str, Any]
