"""
Pytest configuration and fixtures for resource-auth tests.

Each test gets a fresh Variables instance and Application so registrations
never leak between tests.
"""
import logging

import pytest
from scitrera_app_framework import Variables

from resource_auth.framework import (
    Application,
    Operation,
    OperationData,
    OperationKind,
    ResourceRef,
)


# -----------------------------------------------------------------------------
# Logging Configuration (initialized by test harness, not framework)
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def test_logger() -> logging.Logger:
    """
    Create a root logger for tests.

    The test harness owns logging configuration, not the framework.
    """
    logger = logging.getLogger("resource-auth-test")
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s %(funcName)s() > %(message)s',
            datefmt='%Y/%m/%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


@pytest.fixture
def v() -> Variables:
    """Isolated Variables instance."""
    return Variables()


@pytest.fixture
def application(v, test_logger) -> Application:
    """Fresh application with an empty in-memory store."""
    return Application(v=v, logger=test_logger)


# -----------------------------------------------------------------------------
# Operation Factories
# -----------------------------------------------------------------------------

def make_add(type_name: str, **attributes) -> Operation:
    """Build an ``add`` operation for ``type_name``."""
    return Operation(
        op=OperationKind.ADD,
        ref=ResourceRef(type=type_name),
        data=OperationData(type=type_name, attributes=attributes),
    )


@pytest.fixture
def make_op():
    """Factory for ``add`` operations."""
    return make_add


@pytest.fixture
def add_user_op() -> Operation:
    return make_add("user", username="ada", email="ada@example.com", password="hunter2")


@pytest.fixture
def login_op() -> Operation:
    return make_add("session", username="ada", password="hunter2")
