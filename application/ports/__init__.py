"""
Application Ports (Interfaces).

This package defines the abstract interfaces that the infrastructure layer
implements. Routers depend on these Protocols, never on a concrete store.

Usage:
    from application.ports import WorkoutRepository
"""

from application.ports.workout_repository import WorkoutRepository

__all__ = [
    "WorkoutRepository",
]
