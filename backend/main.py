"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)

    # Health-only deployment
    health_app = create_app(Settings(workout_routes_enabled=False, _env_file=None))
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from application.exceptions import StoreConnectionError, WorkoutStoreError
from backend.settings import Settings, get_settings
from infrastructure.db import close_mongo, connect_to_mongo

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Workout Store API",
        description="CRUD API over a MongoDB workouts collection",
        version="1.0.0",
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.mongo_client = None

    _register_exception_handlers(app)
    _include_routers(app, settings)

    return app


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Open the shared MongoDB client on startup and close it on shutdown."""
    settings: Settings = app.state.settings

    if settings.workout_routes_enabled:
        try:
            app.state.mongo_client = await connect_to_mongo(
                settings.mongodb_uri,
                server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
            )
        except StoreConnectionError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise
        logger.info("Successfully connected to MongoDB")
    else:
        logger.info("Workout routes disabled; serving /health only")

    try:
        yield
    finally:
        close_mongo(app.state.mongo_client)
        app.state.mongo_client = None


def _configure_logging(settings: Settings) -> None:
    """Configure root logging at the configured level.

    basicConfig leaves an already configured root logger alone, so only the
    level is forced in that case.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for workout-store-api")


def _register_exception_handlers(app: FastAPI) -> None:
    """Map the workout error hierarchy to JSON responses."""

    @app.exception_handler(WorkoutStoreError)
    async def workout_store_error_handler(request: Request, exc: WorkoutStoreError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "code": exc.code},
        )


def _include_routers(app: FastAPI, settings: Settings) -> None:
    """Include the API routers enabled by settings."""
    from api.routers import health_router, workouts_router

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    if settings.workout_routes_enabled:
        app.include_router(workouts_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
