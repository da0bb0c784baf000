"""
Tests for the WorkoutStore port.

Verifies that the Protocol names every store operation and that each
implementation provides all of them.
"""
import inspect

import pytest

from application.ports import WorkoutStore
from infrastructure.db import SqliteWorkoutStore, SupabaseWorkoutStore
from tests.fakes import FakeWorkoutStore

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit

REQUIRED_METHODS = [
    "list_exercises",
    "get_exercise",
    "add_exercise",
    "update_exercise",
    "is_exercise_in_use",
    "delete_exercise",
    "get_workout_by_date",
    "save_workout",
    "list_workout_dates",
    "delete_workout",
    "ping",
]

IMPLEMENTATIONS = [FakeWorkoutStore, SqliteWorkoutStore, SupabaseWorkoutStore]


def test_protocol_defines_required_methods():
    for method in REQUIRED_METHODS:
        assert hasattr(WorkoutStore, method), f"WorkoutStore missing {method}"


@pytest.mark.parametrize("implementation", IMPLEMENTATIONS, ids=lambda cls: cls.__name__)
def test_implementation_has_all_methods(implementation):
    for method in REQUIRED_METHODS:
        assert callable(getattr(implementation, method, None)), f"{implementation.__name__} missing {method}"


@pytest.mark.parametrize("implementation", IMPLEMENTATIONS, ids=lambda cls: cls.__name__)
def test_implementation_signatures_match(implementation):
    for method in REQUIRED_METHODS:
        expected = list(inspect.signature(getattr(WorkoutStore, method)).parameters)
        actual = list(inspect.signature(getattr(implementation, method)).parameters)
        assert actual == expected, f"{implementation.__name__}.{method}: {actual} != {expected}"


@pytest.mark.parametrize("implementation", IMPLEMENTATIONS, ids=lambda cls: cls.__name__)
def test_implementation_names_provider(implementation):
    assert isinstance(implementation.provider, str)
