"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..core.config.config import Settings
from ..core.config.logging import setup_logging
from ..core.dependencies import get_settings
from ..domain.repositories.stock_repository import StockRepository
from ..infrastructure.logging.structured_logger import get_logger
from ..infrastructure.persistence.in_memory_stock_repository import InMemoryStockRepository
from .api import api_router
from .api.exception_handlers import register_exception_handlers
from .middleware import setup_middleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan events with startup and shutdown logic.

    Args:
        app: FastAPI application instance

    Yields:
        None during application lifetime
    """
    settings: Settings = app.state.settings

    logger.info(
        "Starting Stock Management API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT.value,
        auth_enabled=settings.auth_enabled,
    )

    yield

    logger.info("Shutting down Stock Management API")
    get_settings.cache_clear()
    logger.info("Application shutdown completed successfully")


def create_app(settings: Settings | None = None, repository: StockRepository | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Application settings (optional, will create default if None)
        repository: Stock repository (optional, defaults to an in-memory one)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings.logging_config)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Stock management CRUD API with CSV export",
        debug=settings.DEBUG,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.stock_repository = repository or InMemoryStockRepository()

    # Endpoints resolve settings through the dependency; keep it in sync
    app.dependency_overrides[get_settings] = lambda: settings

    setup_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT.value,
            "status": "online",
            "docs": "/docs",
        }

    return app
