"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed([{"title": "Squat", "reps": 5, "load": 100}])

    # Factory function with pre-populated data
    repo = create_workout_repo(num_workouts=5)
"""

from tests.fakes.workout_repository import FakeWorkoutRepository


def create_workout_repo(*, num_workouts: int = 0) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Args:
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    if num_workouts > 0:
        repo.seed([
            {"title": f"Test Workout {i + 1}", "reps": 5 + i, "load": 50 + 10 * i}
            for i in range(num_workouts)
        ])
    return repo


__all__ = [
    "FakeWorkoutRepository",
    "create_workout_repo",
]
