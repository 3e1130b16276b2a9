"""
Infrastructure Layer for the Workout Store API.

This package contains concrete implementations of repository interfaces:
- db/: MongoDB connector and repositories
"""

from infrastructure.db import (
    MongoWorkoutRepository,
    close_mongo,
    connect_to_mongo,
)

__all__ = [
    "MongoWorkoutRepository",
    "close_mongo",
    "connect_to_mongo",
]
