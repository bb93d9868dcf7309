"""
Application entry point.

Creates the FastAPI application and wires together:
- The users router
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The Container holding repositories and use cases

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from slowapi.errors import RateLimitExceeded
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import Settings, settings as default_settings
from app.core.container import Container
from app.infrastructure.users.database import build_engine
from app.infrastructure.users.memory_repository import InMemoryUserRepository
from app.infrastructure.users.postgres_repository import PostgresUserRepository
from app.infrastructure.users.schema import create_schema
from app.interfaces.users.router import router as users_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


async def build_container(
    settings: Settings,
) -> tuple[Container, Optional[AsyncEngine]]:
    """Build the Container for the configured storage backend.

    Returns:
        The Container and the engine backing it, or None when the
        backend owns no connection pool.
    """
    if settings.storage_backend == "memory":
        logger.warning("Using in-memory user storage. Data is lost on restart.")
        repo = InMemoryUserRepository()
        return Container(repo, repo), None

    engine = build_engine(settings)
    if settings.create_schema:
        await create_schema(engine)
    repo = PostgresUserRepository(engine)
    return Container(repo, repo), engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build the Container and release the pool."""
    engine = None
    if getattr(app.state, "container", None) is None:
        app.state.container, engine = await build_container(app.state.settings)

    yield

    if engine is not None:
        await engine.dispose()


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use. Defaults to the environment-loaded ones.
        container: Prebuilt Container. When omitted, one is built from
            settings during application startup.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(users_router, dependencies=[Depends(enforce_rate_limit)])

    return app


app = create_app()
