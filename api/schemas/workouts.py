"""
Request and response models for the exercise and workout endpoints.
"""

import re
from datetime import datetime
from typing import List

from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models import WorkoutExercise

DATE_FORMAT_MESSAGE = "Invalid date, expected YYYY-MM-DD"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def check_workout_date(value: str) -> str:
    """
    Validate a workout date.

    Accepts only real calendar dates written as YYYY-MM-DD.

    Raises:
        ValueError: If the value is not such a date
    """
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(DATE_FORMAT_MESSAGE)
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValueError(DATE_FORMAT_MESSAGE) from None
    return value


def parse_workout_date(value: str) -> str:
    """check_workout_date for route and query parameters: 400 on failure."""
    try:
        return check_workout_date(value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


class ExerciseRequest(BaseModel):
    """Body of exercise create and update requests."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Exercise name")
    gif: str = Field(..., min_length=1, description="Reference image URL")


class WorkoutExercisesRequest(BaseModel):
    """Body of a workout save when the date is given as a query parameter."""

    exercises: List[WorkoutExercise] = Field(
        ..., description="Entries replacing the day's workout"
    )


class SaveWorkoutRequest(WorkoutExercisesRequest):
    """Body of POST /api/workouts."""

    date: str = Field(..., description="Calendar date, YYYY-MM-DD")

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return check_workout_date(v)


class SuccessResponse(BaseModel):
    success: bool = True


class UpdateExerciseResponse(SuccessResponse):
    updated: bool


class DeleteExerciseResponse(SuccessResponse):
    deleted: bool


class DeleteWorkoutResponse(SuccessResponse):
    deleted_rows: int
