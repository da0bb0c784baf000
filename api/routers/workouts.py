"""
Workouts router.

Per-resource routes for date-keyed workouts:
- GET /api/workouts/{date} - Get the day's entries
- POST /api/workouts - Replace the day's entries
- DELETE /api/workouts/{date} - Delete the day's entries
- GET /api/workout-dates - List dates that have a workout
"""

from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_workout_store
from api.schemas import (
    DeleteWorkoutResponse,
    SaveWorkoutRequest,
    SuccessResponse,
    parse_workout_date,
)
from application.ports import WorkoutStore
from domain.models import WorkoutEntry

router = APIRouter(
    prefix="/api",
    tags=["Workouts"],
)


@router.get("/workouts/{date}", response_model=List[WorkoutEntry])
def get_workout(date: str, store: WorkoutStore = Depends(get_workout_store)):
    """
    Get the workout for a date.

    Returns an empty list when nothing was recorded that day.
    """
    return store.get_workout_by_date(parse_workout_date(date))


@router.post("/workouts", response_model=SuccessResponse)
def save_workout(body: SaveWorkoutRequest, store: WorkoutStore = Depends(get_workout_store)):
    """
    Save the workout for a date.

    Replaces every existing entry for ``body.date`` with ``body.exercises``.
    """
    store.save_workout(body.date, body.exercises)
    return SuccessResponse()


@router.delete("/workouts/{date}", response_model=DeleteWorkoutResponse)
def delete_workout(date: str, store: WorkoutStore = Depends(get_workout_store)):
    """Delete the workout for a date, reporting how many entries were removed."""
    deleted_rows = store.delete_workout(parse_workout_date(date))
    return DeleteWorkoutResponse(deleted_rows=deleted_rows)


@router.get("/workout-dates", response_model=List[str])
def list_workout_dates(store: WorkoutStore = Depends(get_workout_store)):
    """List dates that have a workout, most recent first."""
    return store.list_workout_dates()
