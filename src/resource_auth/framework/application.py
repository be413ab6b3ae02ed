"""
Application: the registries addons install into.

- ``types``: registered resource types, in registration order
- ``processors``: registered processors; the last one for a type wins
- ``services``: named callables shared between components (e.g. ``roles``)
- ``diagnostics``: operator-facing events (see ``Diagnostics``)
"""
import logging
from typing import Any, Optional

from scitrera_app_framework import get_logger, Variables

from .addon import Addon
from .diagnostics import Diagnostics
from .errors import UnknownResourceTypeError
from .operation import Operation
from .processors.base import OperationProcessor
from .resource import Resource, ResourceType
from .store import MemoryResourceStore


class Application:
    """Host application for resource types, processors and addons."""

    def __init__(
            self,
            v: Variables = None,
            store: Optional[MemoryResourceStore] = None,
            logger: Optional[logging.Logger] = None,
    ):
        self.v = v
        self.logger = logger or get_logger(v, name=self.__class__.__name__)
        self.store = store or MemoryResourceStore(v)
        self.diagnostics = Diagnostics(v, logger=self.logger)

        self.types: list[ResourceType] = []
        self.processors: list[OperationProcessor] = []
        self.services: dict[str, Any] = {}

        self.addons: list[Addon] = []
        self._installed: set[int] = set()

    # ========== Addons ==========

    def use(self, addon_class: type[Addon], options: Any = None) -> Addon:
        """Queue an addon for installation."""
        addon = addon_class(self, options)
        self.addons.append(addon)
        return addon

    async def install_addons(self) -> None:
        """Install queued addons in order; addons already installed are skipped."""
        for addon in self.addons:
            if id(addon) in self._installed:
                continue
            self.logger.debug("Installing addon %s", addon.__class__.__name__)
            await addon.install()
            self._installed.add(id(addon))

    # ========== Registries ==========

    def register_types(self, *types: ResourceType) -> None:
        """Register resource types and resolve their relationship targets."""
        self.types.extend(types)
        for resource_type in types:
            self.logger.debug("Registered resource type %s", resource_type.name)
        for resource_type in types:
            for name, relationship in resource_type.schema.relationships.items():
                if self.find_type(relationship.type) is None:
                    raise UnknownResourceTypeError(
                        f"Relationship {resource_type.name}.{name} targets unknown type {relationship.type!r}"
                    )

    def register_processors(self, *processors: OperationProcessor) -> None:
        self.processors.extend(processors)
        for processor in processors:
            self.logger.debug("Registered processor %r", processor)

    def find_type(self, type_name: str) -> Optional[ResourceType]:
        for resource_type in reversed(self.types):
            if resource_type.name == type_name:
                return resource_type
        return None

    def resolve_type(self, type_name: str) -> ResourceType:
        resource_type = self.find_type(type_name)
        if resource_type is None:
            raise UnknownResourceTypeError(f"Unknown resource type {type_name!r}")
        return resource_type

    def processor_for(self, type_name: str) -> OperationProcessor:
        """Return the processor registered last for ``type_name``, or a generic one."""
        for processor in reversed(self.processors):
            if processor.resource_type.name == type_name:
                return processor
        return OperationProcessor(self, self.resolve_type(type_name))

    # ========== Execution ==========

    async def execute(self, op: Operation) -> Optional[Resource]:
        return await self.processor_for(op.ref.type).execute(op)
