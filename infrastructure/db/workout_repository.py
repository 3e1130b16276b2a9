"""
MongoDB implementation of WorkoutRepository.

This module provides the concrete motor-backed implementation for workout
persistence. The collection is injected via constructor for testability.
"""
import logging
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import (
    AutoReconnect,
    ConnectionFailure,
    NetworkTimeout,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from application.exceptions import StoreUnavailableError, WorkoutStoreError
from domain.converters import doc_to_workout, parse_object_id, workout_to_doc
from domain.models import Workout, WorkoutCreate, WorkoutUpdate

logger = logging.getLogger(__name__)

_UNAVAILABLE_ERRORS = (
    ServerSelectionTimeoutError,
    ConnectionFailure,
    NetworkTimeout,
    AutoReconnect,
)


def _store_error(action: str, e: PyMongoError) -> WorkoutStoreError:
    """Map a driver error to the application error hierarchy."""
    logger.error(f"Failed to {action}: {e}")
    if isinstance(e, _UNAVAILABLE_ERRORS):
        return StoreUnavailableError(f"Workout store unavailable while trying to {action}")
    return WorkoutStoreError(f"Failed to {action}")


class MongoWorkoutRepository:
    """
    MongoDB implementation of WorkoutRepository protocol.

    All query logic for workouts is encapsulated here. Update and delete use
    the store's atomic find-and-modify commands; there is no in-process
    locking.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize with a motor collection.

        Args:
            collection: Workouts collection (injected, not global)
        """
        self._collection = collection

    async def list(self) -> List[Workout]:
        """Get every workout in natural order."""
        try:
            docs = await self._collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise _store_error("list workouts", e) from e
        return [doc_to_workout(doc) for doc in docs]

    async def get(self, workout_id: str) -> Optional[Workout]:
        """Get a single workout by ID."""
        object_id = parse_object_id(workout_id)
        try:
            doc = await self._collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise _store_error(f"get workout {workout_id}", e) from e
        return doc_to_workout(doc) if doc else None

    async def create(self, workout: WorkoutCreate) -> Workout:
        """
        Insert a workout, then read it back by the assigned id.

        The re-fetch returns exactly what the store persisted rather than
        echoing the request.
        """
        try:
            result = await self._collection.insert_one(workout_to_doc(workout))
            doc = await self._collection.find_one({"_id": result.inserted_id})
        except PyMongoError as e:
            raise _store_error("create workout", e) from e

        if doc is None:
            logger.error(f"Workout {result.inserted_id} missing right after insert")
            raise WorkoutStoreError("Created workout could not be read back")

        logger.info(f"Workout created: {result.inserted_id}")
        return doc_to_workout(doc)

    async def update(self, workout_id: str, workout: WorkoutUpdate) -> Optional[Workout]:
        """Replace title, reps and load; return the document after the update."""
        object_id = parse_object_id(workout_id)
        try:
            doc = await self._collection.find_one_and_update(
                {"_id": object_id},
                {"$set": workout_to_doc(workout)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise _store_error(f"update workout {workout_id}", e) from e

        if doc is None:
            logger.warning(f"No workout found with id {workout_id} (0 documents updated)")
            return None
        logger.info(f"Workout {workout_id} updated")
        return doc_to_workout(doc)

    async def delete(self, workout_id: str) -> Optional[Workout]:
        """Remove a workout and return it as it was before deletion."""
        object_id = parse_object_id(workout_id)
        try:
            doc = await self._collection.find_one_and_delete({"_id": object_id})
        except PyMongoError as e:
            raise _store_error(f"delete workout {workout_id}", e) from e

        if doc is None:
            logger.warning(f"No workout found with id {workout_id} (0 documents deleted)")
            return None
        logger.info(f"Workout {workout_id} deleted")
        return doc_to_workout(doc)
