"""
Exercises router.

Per-resource routes for exercise CRUD:
- GET /api/exercises - List exercises
- GET /api/exercises/{exercise_id} - Get one exercise
- POST /api/exercises - Create an exercise
- PUT /api/exercises/{exercise_id} - Replace an exercise's name and gif
- DELETE /api/exercises/{exercise_id} - Delete an exercise no workout uses
"""

from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, Path

from api.deps import get_workout_store
from api.schemas import DeleteExerciseResponse, ExerciseRequest, UpdateExerciseResponse
from application.ports import WorkoutStore
from domain.models import MAX_INT, Exercise

EXERCISE_NOT_FOUND = "Exercise not found"

router = APIRouter(
    prefix="/api/exercises",
    tags=["Exercises"],
)


@router.get("", response_model=List[Exercise])
def list_exercises(store: WorkoutStore = Depends(get_workout_store)):
    """List all exercises, ordered by id."""
    return store.list_exercises()


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(
    exercise_id: int = Path(..., ge=1, le=MAX_INT, description="Exercise ID"),
    store: WorkoutStore = Depends(get_workout_store),
):
    """Get an exercise by id."""
    exercise = store.get_exercise(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=EXERCISE_NOT_FOUND)
    return exercise


@router.post("", response_model=Exercise)
def add_exercise(body: ExerciseRequest, store: WorkoutStore = Depends(get_workout_store)):
    """
    Create an exercise.

    Returns:
        The created exercise with its assigned id
    """
    return store.add_exercise(body.name, body.gif)


@router.put("/{exercise_id}", response_model=UpdateExerciseResponse)
def update_exercise(
    exercise_id: int = Path(..., ge=1, le=MAX_INT, description="Exercise ID"),
    body: ExerciseRequest = Body(...),
    store: WorkoutStore = Depends(get_workout_store),
):
    """Replace an exercise's name and gif. 404 if it does not exist."""
    if not store.update_exercise(exercise_id, body.name, body.gif):
        raise HTTPException(status_code=404, detail=EXERCISE_NOT_FOUND)
    return UpdateExerciseResponse(updated=True)


@router.delete("/{exercise_id}", response_model=DeleteExerciseResponse)
def delete_exercise(
    exercise_id: int = Path(..., ge=1, le=MAX_INT, description="Exercise ID"),
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Delete an exercise.

    Fails with 400 while any workout still uses the exercise, and with 404
    if it does not exist.
    """
    if not store.delete_exercise(exercise_id):
        raise HTTPException(status_code=404, detail=EXERCISE_NOT_FOUND)
    return DeleteExerciseResponse(deleted=True)
