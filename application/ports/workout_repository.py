"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use MongoDB, in-memory storage, or other backends.
"""
from typing import List, Optional, Protocol

from domain.models import Workout, WorkoutCreate, WorkoutUpdate


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Every by-id method raises InvalidWorkoutIdError for a malformed id and
    returns None when the id is well formed but matches nothing. Store
    failures surface as StoreUnavailableError or WorkoutStoreError.
    """

    async def list(self) -> List[Workout]:
        """
        Get every workout in the collection.

        Returns:
            Workouts in the store's natural order; empty list if none
        """
        ...

    async def get(self, workout_id: str) -> Optional[Workout]:
        """
        Get a single workout by ID.

        Args:
            workout_id: ObjectId as a hex string

        Returns:
            The workout, or None if not found
        """
        ...

    async def create(self, workout: WorkoutCreate) -> Workout:
        """
        Insert a workout and return it as stored.

        Args:
            workout: Fields to persist; the store assigns the id

        Returns:
            The persisted workout including its id
        """
        ...

    async def update(self, workout_id: str, workout: WorkoutUpdate) -> Optional[Workout]:
        """
        Replace title, reps and load of an existing workout.

        The id is never changed.

        Returns:
            The workout after the update, or None if not found
        """
        ...

    async def delete(self, workout_id: str) -> Optional[Workout]:
        """
        Remove a workout.

        Returns:
            The deleted workout, or None if not found
        """
        ...
