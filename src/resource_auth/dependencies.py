"""Framework bootstrap for resource-auth.

Registers the lifecycle and addon plugins with scitrera-app-framework. Plugins
are initialized lazily on first access via get_extension().
"""
from logging import Logger

from scitrera_app_framework import Variables, get_logger, init_framework_desktop


# noinspection PyTypeHints
def preconfigure(v: Variables = None, test_mode: bool = False, test_logger: Logger = None) -> Variables:
    """ Pre-configure the framework """
    from scitrera_app_framework import register_package_plugins
    from . import addons, lifecycle  # noqa: F401

    # handle test mode
    additional_kwargs = {} if not test_mode else {
        'fault_handler': False,
        'fixed_logger': test_logger,
        'pyroscope': False,
        'shutdown_hooks': False,
    }

    # init framework (has internal protection against multiple invocations)
    v: Variables = init_framework_desktop(
        'resource-auth',
        base_plugins=False,
        async_auto_enabled=False,
        v=v,
        **additional_kwargs
    )

    # avoid duplicate invocations of preconfigure()
    if v.get('__preconfigure_complete__', default=False):
        return v

    logger = get_logger(v)

    logger.debug('Registering lifecycle components')
    register_package_plugins(lifecycle.__package__, v, recursive=True)

    logger.debug('Registering addons')
    register_package_plugins(addons.__package__, v, recursive=True)

    v.set('__preconfigure_complete__', True)
    return v
