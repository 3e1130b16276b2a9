"""
API package for the Workout Store API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_mongo_client,
    get_settings,
    get_workout_repo,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_mongo_client",
    # Repositories
    "get_workout_repo",
]
