"""
Domain models.

Usage:
    from domain.models import Workout, WorkoutCreate, WorkoutUpdate
"""

from domain.models.workout import Workout, WorkoutCreate, WorkoutUpdate

__all__ = [
    "Workout",
    "WorkoutCreate",
    "WorkoutUpdate",
]
