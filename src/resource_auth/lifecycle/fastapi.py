"""
HTTP surface for an ``Application``.

Endpoints:
- POST /{type_name} - Run an ``add`` operation (for ``session``: log in)
- GET /{type_name}/{resource_id} - Run a ``get`` operation
- DELETE /{type_name}/{resource_id} - Run a ``remove`` operation

Addons are installed during the FastAPI lifespan. Errors raised by processors
are answered with the status code they carry.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from scitrera_app_framework import Plugin, Variables, get_variables as _saf_get_variables, get_extension as _saf_get_extension
from scitrera_app_framework.core.plugins import init_all_plugins as _saf_init_all_plugins

from .. import __version__
from ..config import EXT_APPLICATION, EXT_FASTAPI_SERVER
from ..framework import (
    Application,
    Operation,
    OperationData,
    OperationKind,
    ResourceAuthError,
    ResourceRef,
)


class ResourceDocument(BaseModel):
    """Request body: a single resource under ``data``."""
    data: OperationData


def create_fastapi_app(application: Application) -> FastAPI:
    """Create the FastAPI app serving ``application``."""

    # noinspection PyShadowingNames
    @asynccontextmanager
    async def lifespan_context(app: FastAPI) -> AsyncGenerator[None, None]:
        """Install addons before serving requests."""
        await application.install_addons()
        app.state.application = application
        yield

    app = FastAPI(
        title="resource-auth",
        description="Resource API with pluggable user management",
        version=__version__,
        lifespan=lifespan_context,
    )

    @app.exception_handler(ResourceAuthError)
    async def resource_auth_error_handler(request: Request, exc: ResourceAuthError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"errors": [{"status": str(exc.status_code), "detail": exc.message}]},
        )

    @app.post("/{type_name}", status_code=status.HTTP_201_CREATED)
    async def create_resource(type_name: str, document: ResourceDocument) -> dict:
        resource_type = application.resolve_type(type_name)
        op = Operation(op=OperationKind.ADD, ref=ResourceRef(type=type_name), data=document.data)
        resource = await application.execute(op)
        return {"data": resource.public(resource_type)}

    @app.get("/{type_name}/{resource_id}")
    async def get_resource(type_name: str, resource_id: str) -> dict:
        resource_type = application.resolve_type(type_name)
        op = Operation(op=OperationKind.GET, ref=ResourceRef(type=type_name, id=resource_id))
        resource = await application.execute(op)
        return {"data": resource.public(resource_type)}

    @app.delete("/{type_name}/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_resource(type_name: str, resource_id: str) -> Response:
        application.resolve_type(type_name)
        op = Operation(op=OperationKind.REMOVE, ref=ResourceRef(type=type_name, id=resource_id))
        await application.execute(op)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


class FastApiPlugin(Plugin):
    """
    Configure the FastAPI application for the shared ``Application``.
    """

    def extension_point_name(self, v: Variables) -> str:
        return EXT_FASTAPI_SERVER

    def initialize(self, v, logger) -> FastAPI:
        logger.info('Initializing FastAPI App')
        application: Application = self.get_extension(EXT_APPLICATION, v)
        return create_fastapi_app(application)

    def get_dependencies(self, v: Variables) -> Iterable[str]:
        return (EXT_APPLICATION,)


def fastapi_app_factory(v: Variables = None) -> FastAPI:
    """Factory function to create FastAPI app instance."""
    v: Variables = _saf_get_variables(v)

    # addon plugins queue their addons during initialization; installation happens in the lifespan
    _saf_init_all_plugins(v, async_enabled=False)

    app: FastAPI = _saf_get_extension(EXT_FASTAPI_SERVER, v)
    return app
