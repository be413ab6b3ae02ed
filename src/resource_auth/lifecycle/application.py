from logging import Logger

from scitrera_app_framework import Plugin, Variables

from ..config import EXT_APPLICATION
from ..framework import Application


class ApplicationPlugin(Plugin):
    """
    Provide the shared ``Application`` instance.
    """

    def extension_point_name(self, v: Variables) -> str:
        return EXT_APPLICATION

    def initialize(self, v: Variables, logger: Logger) -> Application:
        logger.info('Initializing Application')
        return Application(v=v, logger=logger)
