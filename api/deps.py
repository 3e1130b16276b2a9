"""
FastAPI Dependency Providers for the Workout Store API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- The motor client is created once in the application lifespan and kept on
  app.state; it is never a module global
- Repository providers create new instances per-request

Usage in routers:
    from api.deps import get_workout_repo
    from application.ports import WorkoutRepository

    @router.get("/workouts")
    async def list_workouts(
        workout_repo: WorkoutRepository = Depends(get_workout_repo),
    ):
        return await workout_repo.list()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorClient

from application.exceptions import StoreUnavailableError
from application.ports import WorkoutRepository
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.db import MongoWorkoutRepository


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Returns the Settings the app was created with, falling back to the
    cached instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return getattr(request.app.state, "settings", None) or _get_settings()


# =============================================================================
# MongoDB Client Provider
# =============================================================================


def get_mongo_client(request: Request) -> AsyncIOMotorClient:
    """
    Get the shared motor client created at startup.

    Raises:
        StoreUnavailableError: 503 if the application started without a
            store connection
    """
    client = getattr(request.app.state, "mongo_client", None)
    if client is None:
        raise StoreUnavailableError("Database not available. MongoDB client not initialized.")
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: AsyncIOMotorClient = Depends(get_mongo_client),
    settings: Settings = Depends(get_settings),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns a MongoWorkoutRepository bound to the configured collection.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Motor client (injected)
        settings: Application settings (injected)

    Returns:
        WorkoutRepository: Repository for workout persistence
    """
    collection = client[settings.mongodb_database][settings.mongodb_collection]
    return MongoWorkoutRepository(collection)
