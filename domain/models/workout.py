"""
Workout document models.

The stored document carries ``_id`` (ObjectId), ``title``, ``reps`` and
``load``. The API exposes the id as a hex string under ``id``.
"""

from pydantic import BaseModel, ConfigDict, Field


class WorkoutCreate(BaseModel):
    """
    Request body for creating a workout.

    Any ``id`` supplied by the client is ignored; the store assigns it.

    Examples:
        >>> WorkoutCreate(title="Squat", reps=5, load=100).model_dump()
        {'title': 'Squat', 'reps': 5, 'load': 100}
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="Workout label")
    reps: int = Field(..., description="Repetition count")
    load: int = Field(..., description="Weight moved per rep")


class WorkoutUpdate(BaseModel):
    """Request body for updating a workout. Replaces all three fields."""

    model_config = ConfigDict(extra="ignore")

    title: str
    reps: int
    load: int


class Workout(BaseModel):
    """A persisted workout as returned by the API."""

    id: str = Field(..., description="Store-assigned ObjectId as a hex string")
    title: str
    reps: int
    load: int
