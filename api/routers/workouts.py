"""
Workouts router for workout CRUD.

This router contains endpoints for:
- /workouts - List and create workouts
- /workouts/{workout_id} - Get, update, delete a workout

Each handler performs exactly one repository call. Missing documents raise
WorkoutNotFoundError; malformed ids raise InvalidWorkoutIdError from the
repository. Both are mapped to JSON responses by the handler registered in
backend.main.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from api.deps import get_workout_repo
from application.exceptions import WorkoutNotFoundError
from application.ports import WorkoutRepository
from domain.models import Workout, WorkoutCreate, WorkoutUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


@router.get("/workouts", response_model=List[Workout])
async def list_workouts_endpoint(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """List every workout in the collection."""
    return await workout_repo.list()


@router.get("/workouts/{workout_id}", response_model=Workout)
async def get_workout_endpoint(
    workout_id: str,
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Get a single workout by ID."""
    workout = await workout_repo.get(workout_id)
    if workout is None:
        raise WorkoutNotFoundError(workout_id)
    return workout


@router.post("/workouts", response_model=Workout, status_code=status.HTTP_201_CREATED)
async def create_workout_endpoint(
    request: WorkoutCreate,
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """
    Create a workout.

    Returns the document as persisted, including the store-assigned id.
    """
    return await workout_repo.create(request)


@router.put("/workouts/{workout_id}", response_model=Workout)
async def update_workout_endpoint(
    workout_id: str,
    request: WorkoutUpdate,
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Replace title, reps and load of a workout. The id never changes."""
    workout = await workout_repo.update(workout_id, request)
    if workout is None:
        raise WorkoutNotFoundError(workout_id)
    return workout


@router.delete("/workouts/{workout_id}", response_model=Workout)
async def delete_workout_endpoint(
    workout_id: str,
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Delete a workout and return it as it was before removal."""
    workout = await workout_repo.delete(workout_id)
    if workout is None:
        logger.info(f"Delete requested for missing workout {workout_id}")
        raise WorkoutNotFoundError(workout_id)
    return workout
