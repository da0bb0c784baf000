"""
Exercise entity.

An exercise is a named activity definition, optionally illustrated by a
reference image (usually an animated GIF URL). Workout entries reference
exercises by id.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Largest value a Postgres INTEGER column holds
MAX_INT = 2_147_483_647


class Exercise(BaseModel):
    """
    A named activity definition.

    Examples:
        >>> exercise = Exercise(id=1, name="Pushups", gif="http://x/push.gif")
        >>> exercise.model_dump()
        {'id': 1, 'name': 'Pushups', 'gif': 'http://x/push.gif'}
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="System-assigned exercise ID")
    name: str = Field(..., min_length=1, description="Display name")
    gif: Optional[str] = Field(default=None, description="Reference image URL")
