"""
Router package for the Workout Store API.

- health: Liveness endpoint, always mounted
- workouts: Workout CRUD, mounted when WORKOUT_ROUTES_ENABLED is true
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "workouts_router",
]
