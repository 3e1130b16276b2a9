"""
Converters: MongoDB document <-> domain Workout.

Document layout (workouts collection):
- _id: ObjectId, assigned by the store on insert
- title: string
- reps: int
- load: int
"""

import logging
from typing import Any, Dict

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError

from application.exceptions import InvalidWorkoutIdError, WorkoutStoreError
from domain.models import Workout, WorkoutCreate, WorkoutUpdate

logger = logging.getLogger(__name__)


def parse_object_id(workout_id: str) -> ObjectId:
    """
    Parse a path id into an ObjectId.

    Raises:
        InvalidWorkoutIdError: if the id is not 24 hex characters
    """
    try:
        return ObjectId(workout_id)
    except (InvalidId, TypeError) as e:
        raise InvalidWorkoutIdError(workout_id) from e


def doc_to_workout(doc: Dict[str, Any]) -> Workout:
    """
    Convert a stored document to a Workout.

    The collection has no schema, so documents written by other clients may
    lack fields or carry the wrong types.

    Raises:
        WorkoutStoreError: if the document is not a valid workout
    """
    try:
        return Workout(
            id=str(doc["_id"]),
            title=doc["title"],
            reps=doc["reps"],
            load=doc["load"],
        )
    except (KeyError, ValidationError) as e:
        logger.error(f"Stored workout {doc.get('_id')} is malformed: {e}")
        raise WorkoutStoreError(f"Stored workout {doc.get('_id')} is malformed") from e


def workout_to_doc(workout: WorkoutCreate | WorkoutUpdate) -> Dict[str, Any]:
    """Fields written to the store. Never includes ``_id``."""
    return {
        "title": workout.title,
        "reps": workout.reps,
        "load": workout.load,
    }
