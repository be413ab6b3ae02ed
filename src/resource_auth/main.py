"""
FastAPI application stub for resource-auth.

This provides compatibility with typical uvicorn/gunicorn deployment setups.
The user management addon runs with its defaults here; deployments supplying
callbacks build their app with ``create_fastapi_app()`` instead.
"""

from resource_auth.dependencies import preconfigure
from resource_auth.lifecycle.fastapi import fastapi_app_factory

app = fastapi_app_factory(v=preconfigure())

__all__ = (
    'app',
)
