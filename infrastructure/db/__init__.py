"""
Infrastructure Database Layer.

This package provides the MongoDB connector and the motor-backed
implementation of the WorkoutRepository interface defined in
application.ports.

Usage:
    from infrastructure.db import connect_to_mongo, MongoWorkoutRepository

    client = await connect_to_mongo(uri)
    repo = MongoWorkoutRepository(client["test"]["workouts"])
    workouts = await repo.list()
"""

from infrastructure.db.connector import close_mongo, connect_to_mongo
from infrastructure.db.workout_repository import MongoWorkoutRepository

__all__ = [
    "MongoWorkoutRepository",
    "close_mongo",
    "connect_to_mongo",
]
