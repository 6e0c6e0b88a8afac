"""FastAPI application configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import Counter, make_asgi_app

from ..domain.errors import StorageError
from ..env import get_settings
from ..infrastructure.database import get_database_client
from ..logging_config import setup_logging
from .routers import tasks, users

logger = logging.getLogger(__name__)

settings = get_settings()

http_requests_total = Counter(
    "todorails_http_requests_total",
    "Total HTTP requests handled",
    ["method", "status"],
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    await get_database_client(settings).close()


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Storage failure while handling %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage unavailable"},
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="TodoRails task and user management API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def count_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        http_requests_total.labels(
            method=request.method, status=str(response.status_code)
        ).inc()
        return response

    app.add_exception_handler(StorageError, storage_error_handler)

    # Include routers
    app.include_router(tasks.router, prefix="/api/v1")
    app.include_router(users.router, prefix="/api/v1")
    app.mount("/metrics", make_asgi_app())

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "message": f"Welcome to {settings.app_name} API",
            "version": settings.app_version,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
        }

    return app


app = create_app()
