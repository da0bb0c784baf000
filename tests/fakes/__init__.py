"""
Fake Store Implementations for Testing.

This package provides an in-memory fake implementation of the WorkoutStore
interface for fast, isolated testing. No database or external dependencies
required.

Usage:
    from tests.fakes import FakeWorkoutStore, create_workout_store

    # Direct instantiation
    store = FakeWorkoutStore()
    store.seed_exercises([{"name": "Pushups", "gif": "http://x/push.gif"}])

    # Factory function with pre-populated data
    store = create_workout_store(num_exercises=3)
"""
from tests.fakes.workout_store import FakeWorkoutStore


def create_workout_store(*, num_exercises: int = 0) -> FakeWorkoutStore:
    """
    Create a FakeWorkoutStore with optional pre-populated exercises.

    Args:
        num_exercises: Number of sample exercises to create (ids 1..n)

    Returns:
        Pre-populated FakeWorkoutStore
    """
    store = FakeWorkoutStore()
    store.seed_exercises([
        {"name": f"Exercise {i + 1}", "gif": f"http://x/exercise-{i + 1}.gif"}
        for i in range(num_exercises)
    ])
    return store


__all__ = [
    "FakeWorkoutStore",
    "create_workout_store",
]
