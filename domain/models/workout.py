"""
Workout entities.

A workout is not stored as a row of its own: it is the set of workout entries
sharing one calendar date. Each entry pairs an exercise with a duration.

The unit of ``duration`` is chosen by the client; the API stores and returns
the integer unchanged.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.exercise import MAX_INT


class WorkoutExercise(BaseModel):
    """One element of a workout being saved: which exercise, for how long."""

    id: int = Field(..., ge=1, le=MAX_INT, description="Referenced exercise ID")
    duration: int = Field(..., ge=0, le=MAX_INT, description="Duration of the exercise")


class WorkoutEntry(BaseModel):
    """
    A persisted workout row, enriched with the referenced exercise's
    name and gif for display.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    date: str = Field(..., description="Calendar date, YYYY-MM-DD")
    exercise_id: int
    duration: Optional[int] = None
    name: Optional[str] = None
    gif: Optional[str] = None
