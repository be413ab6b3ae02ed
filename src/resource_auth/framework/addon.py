"""Addon base class."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .application import Application


class Addon(ABC):
    """
    A unit of application configuration installed once at startup.

    Addons receive the application and their options at construction time;
    ``install()`` performs the registrations and is awaited exactly once by
    ``Application.install_addons()``.
    """

    def __init__(self, app: 'Application', options: Optional[Any] = None):
        self.app = app
        self.options = options

    @abstractmethod
    async def install(self) -> None:
        pass
