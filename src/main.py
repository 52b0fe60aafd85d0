"""
Main FastAPI application entry point.

Builds the application: trace middleware, RFC 9457 exception handlers,
system and v1 routers. The lifespan validates the permission catalog at
startup (a broken catalog stops the process before it serves traffic) and
flushes pending audit events on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import (
    get_audit_logger,
    get_authorization_policy,
    get_logger,
    get_permission_catalog,
)
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: build catalog, resolver and policy; log the catalog shape
    - Shutdown: drain the audit logger and stop its worker

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    catalog = get_permission_catalog()
    get_authorization_policy()
    logger.info(
        "permission_catalog_loaded",
        roles=len(catalog.roles()),
        permissions={
            role.value: len(catalog.permissions_for(role)) for role in catalog.roles()
        },
    )

    yield

    await get_audit_logger().shutdown()
    logger.info("audit_logger_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Role-based access control and resource ownership guards",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
