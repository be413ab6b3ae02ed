"""Pytest fixtures for HTTP integration tests."""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from resource_auth.addons.user_management import UserManagementAddon
from resource_auth.lifecycle.fastapi import create_fastapi_app


async def _encrypt(op):
    return {"password": f"enc:{op.attributes['password']}"}


async def _login(op, user):
    return user["password"] == f"enc:{op.attributes['password']}"


@pytest.fixture
def test_client(application) -> Generator[TestClient, None, None]:
    """
    TestClient for an application with the user management addon installed.

    Addons are installed by the FastAPI lifespan when the client starts.
    """
    application.use(UserManagementAddon, {
        "user_encrypt_password_callback": _encrypt,
        "user_login_callback": _login,
    })
    with TestClient(create_fastapi_app(application)) as client:
        yield client
